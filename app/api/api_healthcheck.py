from fastapi import APIRouter, Depends

from app.db.base import Database, get_database
from app.helpers.exception_handler import CustomException
from app.schemas.sche_base import DataResponse

router = APIRouter()


@router.get("", response_model=DataResponse[dict])
def get(database: Database = Depends(get_database)):
    if not database.ping():
        raise CustomException(http_code=503, code='503', message="Database is unavailable")
    return DataResponse().success_response(data={"database": "connected"})
