import logging
from typing import Any, List

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from app.api.deps import get_past_medication_service
from app.helpers import export
from app.helpers.exception_handler import CustomException
from app.schemas.sche_base import DataResponse
from app.schemas.sche_medication import Medication, DateRange
from app.schemas.sche_past_medication import (
    PastMedication,
    PastMedicationCreateRequest,
    PastMedicationUpdateRequest,
)
from app.services.srv_past_medication import PastMedicationService

router = APIRouter()

logger = logging.getLogger(__name__)


@router.get('', response_model=DataResponse[List[PastMedication]])
def get_all_past_medications(
    past_medication_service: PastMedicationService = Depends(get_past_medication_service)
) -> Any:
    past_medications = past_medication_service.list_past_medications()
    logger.info(f"get_all_past_medications success: {len(past_medications)} entries retrieved")
    return DataResponse().success_response(data=past_medications)


@router.get('/export/csv')
def export_past_medications_csv(
    past_medication_service: PastMedicationService = Depends(get_past_medication_service)
) -> Any:
    content = export.past_medications_csv(past_medication_service.list_past_medications())
    filename = export.export_filename('past_medications', 'csv')
    return Response(
        content=content,
        media_type='text/csv',
        headers={'Content-Disposition': f'attachment; filename="{filename}"'}
    )


@router.get('/export/pdf')
def export_past_medications_pdf(
    past_medication_service: PastMedicationService = Depends(get_past_medication_service)
) -> Any:
    content = export.past_medications_pdf(past_medication_service.list_past_medications())
    filename = export.export_filename('past_medications', 'pdf')
    return Response(
        content=content,
        media_type='application/pdf',
        headers={'Content-Disposition': f'attachment; filename="{filename}"'}
    )


@router.get('/{past_medication_id}', response_model=DataResponse[PastMedication])
def get_past_medication(
    past_medication_id: int,
    past_medication_service: PastMedicationService = Depends(get_past_medication_service)
) -> Any:
    return DataResponse().success_response(data=past_medication_service.get_past_medication(past_medication_id))


@router.post('', response_model=DataResponse[PastMedication])
def create_past_medication(
    past_medication_data: PastMedicationCreateRequest,
    past_medication_service: PastMedicationService = Depends(get_past_medication_service)
) -> Any:
    """
    Record a medication directly in the history, with any number of date ranges.
    """
    logger.info(f"create_past_medication request: {past_medication_data.generic_name}")
    past_medication = past_medication_service.create_past_medication(past_medication_data)
    logger.info(f"create_past_medication success: past_medication_id={past_medication.id}")
    return DataResponse().success_response(data=past_medication)


@router.put('/{past_medication_id}', response_model=DataResponse[PastMedication])
def update_past_medication(
    past_medication_id: int,
    past_medication_data: PastMedicationUpdateRequest,
    past_medication_service: PastMedicationService = Depends(get_past_medication_service)
) -> Any:
    past_medication = past_medication_service.update_past_medication(past_medication_id, past_medication_data)
    if past_medication is None:
        logger.warning(f"update_past_medication not found: past_medication_id={past_medication_id}")
        raise CustomException(http_code=404, code='404', message="Past medication not found")
    return DataResponse().success_response(data=past_medication)


@router.delete('/{past_medication_id}', response_model=DataResponse[bool])
def delete_past_medication(
    past_medication_id: int,
    past_medication_service: PastMedicationService = Depends(get_past_medication_service)
) -> Any:
    """
    Permanently delete a history entry. It is not moved back to current medications.
    """
    if not past_medication_service.delete_past_medication(past_medication_id):
        logger.warning(f"delete_past_medication not found: past_medication_id={past_medication_id}")
        raise CustomException(http_code=404, code='404', message="Past medication not found")
    logger.info(f"delete_past_medication success: past_medication_id={past_medication_id}")
    return DataResponse().success_response(data=True)


@router.post('/{past_medication_id}/unarchive', response_model=DataResponse[Medication])
def unarchive_medication(
    past_medication_id: int,
    past_medication_service: PastMedicationService = Depends(get_past_medication_service)
) -> Any:
    """
    Move a history entry back to current medications with today as its start date.

    Date ranges and the reason for stopping are not kept.
    """
    logger.info(f"unarchive_medication request: past_medication_id={past_medication_id}")
    medication = past_medication_service.unarchive_medication(past_medication_id)
    logger.info(f"unarchive_medication success: medication_id={medication.id}")
    return DataResponse().success_response(data=medication)


@router.post('/{past_medication_id}/date-ranges', response_model=DataResponse[PastMedication])
def add_date_range(
    past_medication_id: int,
    date_range: DateRange,
    past_medication_service: PastMedicationService = Depends(get_past_medication_service)
) -> Any:
    return DataResponse().success_response(
        data=past_medication_service.add_date_range(past_medication_id, date_range)
    )


@router.put('/{past_medication_id}/date-ranges/{index}', response_model=DataResponse[PastMedication])
def replace_date_range(
    past_medication_id: int,
    index: int,
    date_range: DateRange,
    past_medication_service: PastMedicationService = Depends(get_past_medication_service)
) -> Any:
    return DataResponse().success_response(
        data=past_medication_service.replace_date_range(past_medication_id, index, date_range)
    )


@router.delete('/{past_medication_id}/date-ranges/{index}', response_model=DataResponse[PastMedication])
def remove_date_range(
    past_medication_id: int,
    index: int,
    past_medication_service: PastMedicationService = Depends(get_past_medication_service)
) -> Any:
    return DataResponse().success_response(
        data=past_medication_service.remove_date_range(past_medication_id, index)
    )
