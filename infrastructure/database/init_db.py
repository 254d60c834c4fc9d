"""
Initialisation de la base de données
"""

import logging
from infrastructure.database.session import engine, SessionLocal
from infrastructure.database.models import Base
from infrastructure.database.repositories import SQLAlchemyProjectRepository
from application.services.project_key_service import ProjectKeyService
from config import Config

config = Config()
logger = logging.getLogger(__name__)


def init_db(backfill_keys: bool = None):
    """Crée les tables, puis attribue les clés manquantes si demandé"""
    Base.metadata.create_all(bind=engine)
    logger.info("✅ Tables de base de données créées")

    if backfill_keys is None:
        backfill_keys = config.backfill_keys_on_startup
    if not backfill_keys:
        return []

    db = SessionLocal()
    try:
        key_service = ProjectKeyService(SQLAlchemyProjectRepository(db))
        return key_service.backfill_all_missing_keys()
    finally:
        db.close()
