import logging
from typing import Any, List

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from app.api.deps import get_medication_service
from app.helpers import export
from app.helpers.exception_handler import CustomException
from app.schemas.sche_base import DataResponse
from app.schemas.sche_medication import Medication, MedicationCreateRequest, MedicationUpdateRequest
from app.schemas.sche_past_medication import PastMedication
from app.services.srv_medication import MedicationService

router = APIRouter()

logger = logging.getLogger(__name__)


@router.get('', response_model=DataResponse[List[Medication]])
def get_all_medications(
    medication_service: MedicationService = Depends(get_medication_service)
) -> Any:
    """
    Retrieve every medication currently being taken.

    **Response**: List of current medications in insertion order.
    """
    medications = medication_service.list_medications()
    logger.info(f"get_all_medications success: {len(medications)} medications retrieved")
    return DataResponse().success_response(data=medications)


@router.get('/export/csv')
def export_medications_csv(
    medication_service: MedicationService = Depends(get_medication_service)
) -> Any:
    """
    Download the current medications table as CSV.
    """
    content = export.current_medications_csv(medication_service.list_medications())
    filename = export.export_filename('current_medications', 'csv')
    return Response(
        content=content,
        media_type='text/csv',
        headers={'Content-Disposition': f'attachment; filename="{filename}"'}
    )


@router.get('/export/pdf')
def export_medications_pdf(
    medication_service: MedicationService = Depends(get_medication_service)
) -> Any:
    """
    Download the current medications as a formatted PDF list.
    """
    content = export.current_medications_pdf(medication_service.list_medications())
    filename = export.export_filename('current_medications', 'pdf')
    return Response(
        content=content,
        media_type='application/pdf',
        headers={'Content-Disposition': f'attachment; filename="{filename}"'}
    )


@router.get('/{medication_id}', response_model=DataResponse[Medication])
def get_medication(
    medication_id: int,
    medication_service: MedicationService = Depends(get_medication_service)
) -> Any:
    return DataResponse().success_response(data=medication_service.get_medication(medication_id))


@router.post('', response_model=DataResponse[Medication])
def create_medication(
    medication_data: MedicationCreateRequest,
    medication_service: MedicationService = Depends(get_medication_service)
) -> Any:
    """
    Add a medication to the current list.

    **Process**:
    1. Reject a blank generic name
    2. Store blank optional fields as absent
    3. Return the stored medication with its new id
    """
    logger.info(f"create_medication request: {medication_data.generic_name}")
    medication = medication_service.create_medication(medication_data)
    logger.info(f"create_medication success: medication_id={medication.id}")
    return DataResponse().success_response(data=medication)


@router.put('/{medication_id}', response_model=DataResponse[Medication])
def update_medication(
    medication_id: int,
    medication_data: MedicationUpdateRequest,
    medication_service: MedicationService = Depends(get_medication_service)
) -> Any:
    """
    Replace every field of a current medication.
    """
    logger.info(f"update_medication request: medication_id={medication_id}")
    medication = medication_service.update_medication(medication_id, medication_data)
    if medication is None:
        logger.warning(f"update_medication not found: medication_id={medication_id}")
        raise CustomException(http_code=404, code='404', message="Medication not found")
    return DataResponse().success_response(data=medication)


@router.delete('/{medication_id}', response_model=DataResponse[bool])
def delete_medication(
    medication_id: int,
    medication_service: MedicationService = Depends(get_medication_service)
) -> Any:
    """
    Delete a current medication without keeping it in the history.
    """
    logger.info(f"delete_medication request: medication_id={medication_id}")
    if not medication_service.delete_medication(medication_id):
        logger.warning(f"delete_medication not found: medication_id={medication_id}")
        raise CustomException(http_code=404, code='404', message="Medication not found")
    logger.info(f"delete_medication success: medication_id={medication_id}")
    return DataResponse().success_response(data=True)


@router.post('/{medication_id}/archive', response_model=DataResponse[PastMedication])
def archive_medication(
    medication_id: int,
    medication_service: MedicationService = Depends(get_medication_service)
) -> Any:
    """
    Move a medication to the history.

    The history entry gets one date range from the medication's start date
    to today. The move is all-or-nothing.
    """
    logger.info(f"archive_medication request: medication_id={medication_id}")
    past_medication = medication_service.archive_medication(medication_id)
    logger.info(f"archive_medication success: past_medication_id={past_medication.id}")
    return DataResponse().success_response(data=past_medication)
