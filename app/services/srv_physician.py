from typing import List, Optional

from app.helpers.exception_handler import NotFoundError
from app.helpers.validators import clean_form
from app.repository.repo_physician import PhysicianRepository
from app.schemas.sche_physician import Physician, PhysicianCreateRequest, PhysicianUpdateRequest


class PhysicianService:
    def __init__(self, physician_repo: PhysicianRepository):
        self.physician_repo = physician_repo

    def list_physicians(self) -> List[Physician]:
        return self.physician_repo.get_all()

    def get_physician(self, physician_id: int) -> Physician:
        physician = self.physician_repo.get_by_id(physician_id)
        if physician is None:
            raise NotFoundError('Physician', physician_id)
        return physician

    def create_physician(self, data: PhysicianCreateRequest) -> Physician:
        return self.physician_repo.add(Physician(**clean_form(data, 'name')))

    def update_physician(self, physician_id: int, data: PhysicianUpdateRequest) -> Optional[Physician]:
        physician = Physician(id=physician_id, **clean_form(data, 'name'))
        if not self.physician_repo.update(physician):
            return None
        return physician

    def delete_physician(self, physician_id: int) -> bool:
        return self.physician_repo.delete(physician_id)
