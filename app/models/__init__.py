from app.models.model_base import Base
from app.models.model_current_medication import CurrentMedicationRow
from app.models.model_past_medication import PastMedicationRow
from app.models.model_surgery import SurgeryRow
from app.models.model_physician import PhysicianRow
