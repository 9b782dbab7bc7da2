import logging
import logging.config
import os
from datetime import date
from typing import Callable, Optional

import uvicorn
from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from app.api.api_router import router
from app.core.config import settings
from app.db.base import Database
from app.helpers.exception_handler import (
    CustomException,
    MediChartError,
    http_exception_handler,
    medichart_exception_handler,
)

if os.path.exists(settings.LOGGING_CONFIG_FILE):
    logging.config.fileConfig(settings.LOGGING_CONFIG_FILE, disable_existing_loggers=False)

logger = logging.getLogger(__name__)


def get_application(database: Optional[Database] = None, today: Callable[[], date] = date.today) -> FastAPI:
    if database is None:
        database = Database(settings.DATABASE_URL, echo=settings.SQL_ECHO)
    database.create_tables()

    application = FastAPI(
        title=settings.PROJECT_NAME, docs_url="/docs", redoc_url='/re-docs',
        openapi_url=f"{settings.API_PREFIX}/openapi.json",
        description='''
        Personal medical records backed by a local SQLite file
            - Current medications, archive to history and back
            - Medication history with date ranges
            - Surgeries and physicians
            - CSV / PDF export
        '''
    )
    application.state.database = database
    application.state.today = today
    application.add_middleware(
        CORSMiddleware,
        allow_origins=[str(origin) for origin in settings.BACKEND_CORS_ORIGINS],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.include_router(router, prefix=settings.API_PREFIX)
    application.add_exception_handler(CustomException, http_exception_handler)
    application.add_exception_handler(MediChartError, medichart_exception_handler)

    logger.info(f"{settings.PROJECT_NAME} ready with database {database.url}")
    return application


app = get_application()
if __name__ == '__main__':
    uvicorn.run(app, host="127.0.0.1", port=8000)
