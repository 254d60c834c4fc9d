"""
project-registry-api/config.py
Configuration du service (variables d'environnement, fichier .env optionnel)
"""

import logging
import os

from dotenv import load_dotenv

ENV_FILE = ".env"
if os.path.exists(ENV_FILE):
    load_dotenv(ENV_FILE)


def _get_bool_env(name: str, default: bool) -> bool:
    """Lit un booléen d'environnement ("1", "true", "yes", "on")"""
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _get_list_env(name: str, default: str) -> list:
    raw = os.getenv(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


class Config:
    """Configuration lue depuis l'environnement à l'instanciation"""

    def __init__(self):
        # Base de données
        self.database_url = os.getenv("DATABASE_URL", "sqlite:///./project_registry.db")

        # Logging
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        if not hasattr(logging, self.log_level):
            self.log_level = "INFO"
        self.log_colored = _get_bool_env("LOG_COLORED", False)
        self.log_file_enabled = _get_bool_env("LOG_FILE_ENABLED", False)
        self.log_file_path = os.getenv("LOG_FILE_PATH", "logs/project-registry-api.log")

        # API
        self.cors_origins = _get_list_env("CORS_ORIGINS", "*")

        # Clés de projet
        self.backfill_keys_on_startup = _get_bool_env("BACKFILL_KEYS_ON_STARTUP", False)
