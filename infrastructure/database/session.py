"""
Configuration de la session de base de données SQLAlchemy
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from config import Config

config = Config()


def build_engine(database_url: str):
    """Crée le moteur ; le pool n'est dimensionné que hors SQLite"""
    if database_url.startswith("sqlite"):
        return create_engine(database_url, connect_args={"check_same_thread": False})
    return create_engine(
        database_url,
        pool_pre_ping=True,
        pool_size=10,
        max_overflow=20
    )


# Créer le moteur de base de données
engine = build_engine(config.database_url)

# Créer la session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db_session():
    """Factory pour obtenir une session de base de données"""
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
