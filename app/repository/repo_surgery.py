import logging
from typing import List, Optional

from app.db.base import Database
from app.models.model_surgery import SurgeryRow
from app.repository.mappers import SurgeryMapper
from app.schemas.sche_surgery import Surgery

logger = logging.getLogger(__name__)


class SurgeryRepository:
    def __init__(self, database: Database):
        self.database = database

    def add(self, surgery: Surgery) -> Surgery:
        with self.database.session_scope() as session:
            row = SurgeryRow(**SurgeryMapper.to_columns(surgery))
            session.add(row)
            session.flush()
            created = surgery.model_copy(update={'id': row.id})
        logger.info(f"Created surgery: {created.id}")
        return created

    def get_all(self) -> List[Surgery]:
        with self.database.session_scope() as session:
            rows = session.query(SurgeryRow).order_by(SurgeryRow.id).all()
            return [SurgeryMapper.to_record(row) for row in rows]

    def get_by_id(self, surgery_id: int) -> Optional[Surgery]:
        with self.database.session_scope() as session:
            row = session.get(SurgeryRow, surgery_id)
            return SurgeryMapper.to_record(row) if row else None

    def update(self, surgery: Surgery) -> bool:
        with self.database.session_scope() as session:
            row = session.get(SurgeryRow, surgery.id)
            if row is None:
                logger.info(f"No surgery found with id {surgery.id} to update")
                return False
            for column, value in SurgeryMapper.to_columns(surgery).items():
                setattr(row, column, value)
        logger.info(f"Updated surgery: {surgery.id}")
        return True

    def delete(self, surgery_id: int) -> bool:
        with self.database.session_scope() as session:
            row = session.get(SurgeryRow, surgery_id)
            if row is None:
                logger.info(f"No surgery found with id {surgery_id} to delete")
                return False
            session.delete(row)
        logger.info(f"Deleted surgery: {surgery_id}")
        return True
