"""
project-registry-api/app.py
Point d'entrée principal de l'API des projets
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import Config
from api.endpoints import router as api_router, admin_router
from logging_config import setup_logging, setup_colored_logging

# Initialiser la configuration
config = Config()

# Configurer le logging
if config.log_colored:
    logger = setup_colored_logging(
        log_level=config.log_level,
        log_file=config.log_file_path if config.log_file_enabled else None
    )
else:
    logger = setup_logging(
        log_level=config.log_level,
        log_file=config.log_file_path if config.log_file_enabled else None
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Gestion du cycle de vie de l'application"""
    # --- Startup ---
    from infrastructure.database.init_db import init_db

    logger.info("🚀 Démarrage de Project Registry API")
    logger.info(f"📊 Database: {config.database_url.split('@')[-1]}")
    init_db()

    app.state.config = config

    yield

    # --- Shutdown ---
    logger.info("🛑 Arrêt de Project Registry API")

# Créer l'application FastAPI
app = FastAPI(
    title="Project Registry API",
    description="API de gestion des projets et de leurs clés courtes",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Inclure les routes API
app.include_router(api_router, prefix="/api")
# Inclure les routes de gestion admin
app.include_router(admin_router, prefix="/api")

@app.get("/", tags=["Root"])
def root():
    """Page d'accueil de l'API"""
    return {
        "service": "project-registry-api",
        "version": "1.0.0",
        "status": "operational",
        "documentation": "/docs"
    }

@app.get("/health", tags=["System"])
def health_check():
    """Endpoint de santé pour les orchestrateurs (Kubernetes, Docker, etc.)"""
    return {
        "status": "healthy",
        "service": "project-registry-api"
    }

if __name__ == "__main__":
    import uvicorn
    from logging_config import get_uvicorn_log_config

    log_config = get_uvicorn_log_config(log_level=config.log_level)

    uvicorn.run(
        "app:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_config=log_config
    )
