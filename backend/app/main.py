from datetime import datetime, timezone
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from .core.database import init_db
from .core.logging_config import setup_logging
from .core.telemetry import setup_telemetry
from .api.routes import auth, users, projects
from .api.exceptions import (
    studio_exception_handler,
    validation_exception_handler,
    general_exception_handler
)
from .exceptions import StudioException
from .config import settings

SERVICE_NAME = "studio-api"
SERVICE_VERSION = "1.0.0"

# Setup logging first
setup_logging()

app = FastAPI(title="Studio API", version=SERVICE_VERSION)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register exception handlers
app.add_exception_handler(StudioException, studio_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

# Initialize database
init_db()

if settings.telemetry_enabled:
    setup_telemetry(app)

# Include routers
app.include_router(auth.router, prefix="/api/v1")
app.include_router(users.router, prefix="/api/v1")
app.include_router(projects.router, prefix="/api/v1")


@app.get("/")
def root():
    return {"message": "Studio API v1", "docs": "/docs", "health": "/health"}


@app.get("/health")
def health():
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
    }
