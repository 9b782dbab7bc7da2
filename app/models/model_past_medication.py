from sqlalchemy import Column, Integer, Text
from app.models.model_base import Base


class PastMedicationRow(Base):
    __tablename__ = "past_meds"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    generic_name = Column(Text, nullable=False)
    brand_name = Column(Text)
    dosage = Column(Text)
    dose_form = Column(Text)
    instructions = Column(Text)
    reason = Column(Text)
    prescriber = Column(Text)
    history_notes = Column(Text)
    reason_for_stopping = Column(Text)
    date_ranges = Column(Text)  # see app.helpers.date_ranges
    manufacturer = Column(Text)
