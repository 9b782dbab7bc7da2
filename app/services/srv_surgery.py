from typing import List, Optional

from app.helpers.exception_handler import NotFoundError
from app.helpers.validators import clean_form
from app.repository.repo_surgery import SurgeryRepository
from app.schemas.sche_surgery import Surgery, SurgeryCreateRequest, SurgeryUpdateRequest


class SurgeryService:
    def __init__(self, surgery_repo: SurgeryRepository):
        self.surgery_repo = surgery_repo

    def list_surgeries(self) -> List[Surgery]:
        return self.surgery_repo.get_all()

    def get_surgery(self, surgery_id: int) -> Surgery:
        surgery = self.surgery_repo.get_by_id(surgery_id)
        if surgery is None:
            raise NotFoundError('Surgery', surgery_id)
        return surgery

    def create_surgery(self, data: SurgeryCreateRequest) -> Surgery:
        return self.surgery_repo.add(Surgery(**clean_form(data, 'name')))

    def update_surgery(self, surgery_id: int, data: SurgeryUpdateRequest) -> Optional[Surgery]:
        surgery = Surgery(id=surgery_id, **clean_form(data, 'name'))
        if not self.surgery_repo.update(surgery):
            return None
        return surgery

    def delete_surgery(self, surgery_id: int) -> bool:
        return self.surgery_repo.delete(surgery_id)
