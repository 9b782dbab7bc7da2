import logging
from typing import List, Optional

from app.db.base import Database
from app.models.model_physician import PhysicianRow
from app.repository.mappers import PhysicianMapper
from app.schemas.sche_physician import Physician

logger = logging.getLogger(__name__)


class PhysicianRepository:
    def __init__(self, database: Database):
        self.database = database

    def add(self, physician: Physician) -> Physician:
        with self.database.session_scope() as session:
            row = PhysicianRow(**PhysicianMapper.to_columns(physician))
            session.add(row)
            session.flush()
            created = physician.model_copy(update={'id': row.id})
        logger.info(f"Created physician: {created.id}")
        return created

    def get_all(self) -> List[Physician]:
        with self.database.session_scope() as session:
            rows = session.query(PhysicianRow).order_by(PhysicianRow.id).all()
            physicians = [PhysicianMapper.to_record(row) for row in rows]
        logger.debug(f"Loaded {len(physicians)} physicians")
        return physicians

    def get_by_id(self, physician_id: int) -> Optional[Physician]:
        with self.database.session_scope() as session:
            row = session.get(PhysicianRow, physician_id)
            return PhysicianMapper.to_record(row) if row else None

    def update(self, physician: Physician) -> bool:
        with self.database.session_scope() as session:
            row = session.get(PhysicianRow, physician.id)
            if row is None:
                logger.info(f"No physician found with id {physician.id} to update")
                return False
            for column, value in PhysicianMapper.to_columns(physician).items():
                setattr(row, column, value)
        logger.info(f"Updated physician: {physician.id}")
        return True

    def delete(self, physician_id: int) -> bool:
        with self.database.session_scope() as session:
            row = session.get(PhysicianRow, physician_id)
            if row is None:
                logger.info(f"No physician found with id {physician_id} to delete")
                return False
            session.delete(row)
        logger.info(f"Deleted physician: {physician_id}")
        return True
