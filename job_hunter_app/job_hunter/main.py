from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from .api import application, health
from .models.db.database import engine, Base
from .models.db import application as application_model  # noqa: F401
from .utils.logging_config import setup_logging, get_logger
from .config.settings import get_settings

settings = get_settings()

setup_logging(
    level=settings.log_level,
    log_file=settings.log_file,
    sql_echo=settings.database_echo
)
logger = get_logger(__name__)

# Validate configuration on startup
missing_settings = settings.validate_required_settings()
if missing_settings:
    for setting in missing_settings:
        logger.error("Configuration error: %s", setting)
    if settings.is_production():
        raise RuntimeError("Invalid configuration for production environment")

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    docs_url="/docs" if settings.api_docs_enabled else None,
    redoc_url="/redoc" if settings.api_docs_enabled else None,
)

if settings.cors_enabled:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

# Routers
app.include_router(health.router, prefix="/api", tags=["Health Check"])
app.include_router(application.router, prefix="/api/jobs", tags=["Job Applications"])
app.include_router(application.status_router, prefix="/api", tags=["Job Applications"])

@app.on_event("startup")
def on_startup():
    """Initialize database tables and log application startup."""
    logger.info("Starting %s...", settings.app_name)
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables initialized successfully")

@app.get("/")
def read_root():
    return {"message": f"Welcome to the {settings.app_name} API"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
