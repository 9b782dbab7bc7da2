import logging
from typing import Any, List

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from app.api.deps import get_surgery_service
from app.helpers import export
from app.helpers.exception_handler import CustomException
from app.schemas.sche_base import DataResponse
from app.schemas.sche_surgery import Surgery, SurgeryCreateRequest, SurgeryUpdateRequest
from app.services.srv_surgery import SurgeryService

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=DataResponse[List[Surgery]])
def get_all_surgeries(surgery_service: SurgeryService = Depends(get_surgery_service)) -> Any:
    """
    API Get list Surgery
    """
    return DataResponse().success_response(data=surgery_service.list_surgeries())


@router.get("/export/csv")
def export_surgeries_csv(surgery_service: SurgeryService = Depends(get_surgery_service)) -> Any:
    content = export.surgeries_csv(surgery_service.list_surgeries())
    filename = export.export_filename('surgeries', 'csv')
    return Response(
        content=content,
        media_type='text/csv',
        headers={'Content-Disposition': f'attachment; filename="{filename}"'}
    )


@router.get("/{surgery_id}", response_model=DataResponse[Surgery])
def get_surgery(surgery_id: int, surgery_service: SurgeryService = Depends(get_surgery_service)) -> Any:
    return DataResponse().success_response(data=surgery_service.get_surgery(surgery_id))


@router.post("", response_model=DataResponse[Surgery])
def create_surgery(surgery_data: SurgeryCreateRequest,
                   surgery_service: SurgeryService = Depends(get_surgery_service)) -> Any:
    """
    API Create Surgery
    """
    surgery = surgery_service.create_surgery(surgery_data)
    logger.info(f"create_surgery success: surgery_id={surgery.id}")
    return DataResponse().success_response(data=surgery)


@router.put("/{surgery_id}", response_model=DataResponse[Surgery])
def update_surgery(surgery_id: int,
                   surgery_data: SurgeryUpdateRequest,
                   surgery_service: SurgeryService = Depends(get_surgery_service)) -> Any:
    surgery = surgery_service.update_surgery(surgery_id, surgery_data)
    if surgery is None:
        raise CustomException(http_code=404, code='404', message="Surgery not found")
    return DataResponse().success_response(data=surgery)


@router.delete("/{surgery_id}", response_model=DataResponse[bool])
def delete_surgery(surgery_id: int, surgery_service: SurgeryService = Depends(get_surgery_service)) -> Any:
    if not surgery_service.delete_surgery(surgery_id):
        raise CustomException(http_code=404, code='404', message="Surgery not found")
    return DataResponse().success_response(data=True)
