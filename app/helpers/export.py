"""
CSV and PDF renderings of the record tables.
"""
import csv
import io
import logging
from datetime import date
from typing import Callable, List, Optional, Sequence, Tuple
from xml.sax.saxutils import escape

from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.enums import TA_CENTER
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, HRFlowable

from app.core.config import settings
from app.helpers.date_ranges import encode_date_ranges, format_date_ranges, format_stored_date
from app.helpers.exception_handler import ValidationError
from app.schemas.sche_medication import Medication
from app.schemas.sche_past_medication import PastMedication
from app.schemas.sche_physician import Physician
from app.schemas.sche_surgery import Surgery

logger = logging.getLogger(__name__)

CURRENT_MEDICATION_COLUMNS: List[Tuple[str, Callable[[Medication], Optional[str]]]] = [
    ("Brand Name", lambda m: m.brand_name),
    ("Generic Name", lambda m: m.generic_name),
    ("Dosage", lambda m: m.dosage),
    ("Dose Form", lambda m: m.dose_form),
    ("Instructions", lambda m: m.instructions),
    ("Reason", lambda m: m.reason),
    ("Prescriber", lambda m: m.prescriber),
    ("Start Date", lambda m: format_stored_date(m.start_date)),
    ("Notes", lambda m: m.notes),
    ("Manufacturer", lambda m: m.manufacturer),
]

PAST_MEDICATION_COLUMNS: List[Tuple[str, Callable[[PastMedication], Optional[str]]]] = [
    ("Brand Name", lambda m: m.brand_name),
    ("Generic Name", lambda m: m.generic_name),
    ("Dosage", lambda m: m.dosage),
    ("Dose Form", lambda m: m.dose_form),
    ("Instructions", lambda m: m.instructions),
    ("Reason Taken", lambda m: m.reason),
    ("Prescriber", lambda m: m.prescriber),
    ("History Notes", lambda m: m.history_notes),
    ("Reason Stopped", lambda m: m.reason_for_stopping),
    ("Date Range(s)", lambda m: encode_date_ranges(m.date_ranges)),
    ("Manufacturer", lambda m: m.manufacturer),
]

PHYSICIAN_COLUMNS: List[Tuple[str, Callable[[Physician], Optional[str]]]] = [
    ("Name", lambda p: p.name),
    ("Specialty", lambda p: p.specialty),
    ("Phone", lambda p: p.phone),
    ("Fax", lambda p: p.fax),
    ("Email", lambda p: p.email),
    ("Address", lambda p: p.address),
    ("Notes", lambda p: p.notes),
]

SURGERY_COLUMNS: List[Tuple[str, Callable[[Surgery], Optional[str]]]] = [
    ("Name", lambda s: s.name),
    ("Date", lambda s: format_stored_date(s.date)),
    ("Surgeon", lambda s: s.surgeon),
]


def export_filename(table: str, extension: str, on: Optional[date] = None) -> str:
    """Default download name, e.g. ``current_medications_2024-01-15.csv``."""
    stamp = (on or date.today()).strftime(settings.EXPORT_DATE_FORMAT)
    return f"{table}_{stamp}.{extension}"


def _require_rows(records: Sequence, table: str) -> None:
    if not records:
        raise ValidationError(table, f"The {table} table is empty. Nothing was exported.")


def to_csv(records: Sequence, columns: List[Tuple[str, Callable]], table: str) -> str:
    """
    Render records as CSV text, header first.

    A field containing a comma, quote or line break is quoted with inner
    quotes doubled. Absent values are empty fields.
    """
    _require_rows(records, table)
    output = io.StringIO()
    writer = csv.writer(output, quoting=csv.QUOTE_MINIMAL, lineterminator='\n')
    writer.writerow([header for header, _ in columns])
    for record in records:
        writer.writerow(['' if value is None else value for value in (get(record) for _, get in columns)])
    logger.info(f"Exported {len(records)} {table} rows to CSV")
    return output.getvalue()


def current_medications_csv(medications: Sequence[Medication]) -> str:
    return to_csv(medications, CURRENT_MEDICATION_COLUMNS, 'current_medications')


def past_medications_csv(past_medications: Sequence[PastMedication]) -> str:
    return to_csv(past_medications, PAST_MEDICATION_COLUMNS, 'past_medications')


def physicians_csv(physicians: Sequence[Physician]) -> str:
    return to_csv(physicians, PHYSICIAN_COLUMNS, 'physicians')


def surgeries_csv(surgeries: Sequence[Surgery]) -> str:
    return to_csv(surgeries, SURGERY_COLUMNS, 'surgeries')


def _text(value: Optional[str]) -> str:
    return escape(value) if value else 'N/A'


def _pdf_styles():
    styles = getSampleStyleSheet()
    title = ParagraphStyle('ListTitle', parent=styles['Title'], fontSize=16, alignment=TA_CENTER, spaceAfter=25)
    body = ParagraphStyle('ListBody', parent=styles['Normal'], fontSize=10, spaceAfter=3)
    return title, body


def _medication_heading(record) -> str:
    heading = escape(record.generic_name)
    if record.brand_name:
        heading += f" <i>({escape(record.brand_name)})</i>"
    if record.dosage:
        heading += f" - {escape(record.dosage)}"
    if record.dose_form:
        heading += f" {escape(record.dose_form)}"
    return heading


def _build_pdf(title: str, entries: List[List[str]]) -> bytes:
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(buffer, pagesize=letter, title=title)
    title_style, body_style = _pdf_styles()

    elements = [Paragraph(title, title_style)]
    for index, lines in enumerate(entries):
        if index > 0:
            elements.append(HRFlowable(width='100%', thickness=0.5, spaceBefore=5, spaceAfter=5))
        for line in lines:
            elements.append(Paragraph(line, body_style))
        elements.append(Spacer(1, 5))

    doc.build(elements)
    content = buffer.getvalue()
    buffer.close()
    return content


def current_medications_pdf(medications: Sequence[Medication]) -> bytes:
    _require_rows(medications, 'current_medications')
    entries = [
        [
            _medication_heading(m),
            f"<b>Instructions:</b> {_text(m.instructions)}",
            f"<b>Reason taking:</b> {_text(m.reason)}",
        ]
        for m in medications
    ]
    content = _build_pdf("Current Medications List", entries)
    logger.info(f"Exported {len(medications)} current medications to PDF")
    return content


def past_medications_pdf(past_medications: Sequence[PastMedication]) -> bytes:
    _require_rows(past_medications, 'past_medications')
    entries = []
    for m in past_medications:
        ranges = format_date_ranges(m.date_ranges)
        taken = escape(ranges).replace('\n', '<br/>') if ranges else 'N/A'
        entries.append([
            _medication_heading(m),
            f"<b>Taken:</b> {taken}",
            f"<b>Reason taken:</b> {_text(m.reason)}",
            f"<b>Reason stopped:</b> {_text(m.reason_for_stopping)}",
            f"<b>History notes:</b> {_text(m.history_notes)}",
        ])
    content = _build_pdf("Past Medications List", entries)
    logger.info(f"Exported {len(past_medications)} past medications to PDF")
    return content
