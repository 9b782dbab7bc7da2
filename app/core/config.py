import os
from typing import List

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '../../'))
load_dotenv(os.path.join(BASE_DIR, '.env'))


class Settings(BaseSettings):
    PROJECT_NAME: str = os.getenv('PROJECT_NAME', 'MediChart')
    API_PREFIX: str = '/api'
    BACKEND_CORS_ORIGINS: List[str] = ['*']
    DATABASE_URL: str = os.getenv(
        'SQL_DATABASE_URL',
        'sqlite:///' + os.path.join(BASE_DIR, 'medichart.db')
    )
    SQL_ECHO: bool = os.getenv('SQL_ECHO', 'false').lower() == 'true'
    LOGGING_CONFIG_FILE: str = os.path.join(BASE_DIR, 'logging.ini')
    ALEMBIC_CONFIG_FILE: str = os.path.join(BASE_DIR, 'alembic.ini')

    # Exports
    EXPORT_DATE_FORMAT: str = '%Y-%m-%d'
    ARCHIVE_REASON_FOR_STOPPING: str = 'Archived by user'


settings = Settings()
