from fastapi import APIRouter

from app.api import api_healthcheck, api_medication, api_past_medication, api_physician, api_surgery

router = APIRouter()

router.include_router(api_healthcheck.router, tags=["health-check"], prefix="/healthcheck")
router.include_router(api_medication.router, tags=["medication"], prefix="/medications")
router.include_router(api_past_medication.router, tags=["past-medication"], prefix="/past-medications")
router.include_router(api_physician.router, tags=["physician"], prefix="/physicians")
router.include_router(api_surgery.router, tags=["surgery"], prefix="/surgeries")
