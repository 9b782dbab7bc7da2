from sqlalchemy import Column, Integer, Text
from app.models.model_base import Base


class CurrentMedicationRow(Base):
    __tablename__ = "current_meds"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    generic_name = Column(Text, nullable=False)
    brand_name = Column(Text)
    dosage = Column(Text)
    dose_form = Column(Text)
    instructions = Column(Text)
    reason = Column(Text)
    prescriber = Column(Text)
    notes = Column(Text)
    start_date = Column(Text)  # YYYY-MM-DD
    manufacturer = Column(Text)
