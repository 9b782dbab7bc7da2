import logging
from typing import Any, List

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from app.api.deps import get_physician_service
from app.helpers import export
from app.helpers.exception_handler import CustomException
from app.schemas.sche_base import DataResponse
from app.schemas.sche_physician import Physician, PhysicianCreateRequest, PhysicianUpdateRequest
from app.services.srv_physician import PhysicianService

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=DataResponse[List[Physician]])
def get_all_physicians(physician_service: PhysicianService = Depends(get_physician_service)) -> Any:
    """
    API Get list Physician
    """
    return DataResponse().success_response(data=physician_service.list_physicians())


@router.get("/export/csv")
def export_physicians_csv(physician_service: PhysicianService = Depends(get_physician_service)) -> Any:
    content = export.physicians_csv(physician_service.list_physicians())
    filename = export.export_filename('physicians', 'csv')
    return Response(
        content=content,
        media_type='text/csv',
        headers={'Content-Disposition': f'attachment; filename="{filename}"'}
    )


@router.get("/{physician_id}", response_model=DataResponse[Physician])
def get_physician(physician_id: int, physician_service: PhysicianService = Depends(get_physician_service)) -> Any:
    """
    API get Detail Physician
    """
    return DataResponse().success_response(data=physician_service.get_physician(physician_id))


@router.post("", response_model=DataResponse[Physician])
def create_physician(physician_data: PhysicianCreateRequest,
                     physician_service: PhysicianService = Depends(get_physician_service)) -> Any:
    """
    API Create Physician
    """
    physician = physician_service.create_physician(physician_data)
    logger.info(f"create_physician success: physician_id={physician.id}")
    return DataResponse().success_response(data=physician)


@router.put("/{physician_id}", response_model=DataResponse[Physician])
def update_physician(physician_id: int,
                     physician_data: PhysicianUpdateRequest,
                     physician_service: PhysicianService = Depends(get_physician_service)) -> Any:
    """
    API Update Physician
    """
    physician = physician_service.update_physician(physician_id, physician_data)
    if physician is None:
        raise CustomException(http_code=404, code='404', message="Physician not found")
    return DataResponse().success_response(data=physician)


@router.delete("/{physician_id}", response_model=DataResponse[bool])
def delete_physician(physician_id: int,
                     physician_service: PhysicianService = Depends(get_physician_service)) -> Any:
    """
    API Delete Physician
    """
    if not physician_service.delete_physician(physician_id):
        raise CustomException(http_code=404, code='404', message="Physician not found")
    return DataResponse().success_response(data=True)
