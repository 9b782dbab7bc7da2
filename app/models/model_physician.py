from sqlalchemy import Column, Integer, Text
from app.models.model_base import Base


class PhysicianRow(Base):
    __tablename__ = "physicians"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    specialty = Column(Text)
    phone = Column(Text)
    fax = Column(Text)
    email = Column(Text)
    address = Column(Text)
    notes = Column(Text)
