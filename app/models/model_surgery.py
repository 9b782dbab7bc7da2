from sqlalchemy import Column, Integer, Text
from app.models.model_base import Base


class SurgeryRow(Base):
    __tablename__ = "surgeries"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    date = Column(Text)
    surgeon = Column(Text)
