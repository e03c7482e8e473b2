"""
FastAPI Main Application

Real Estate Directory REST API.
"""
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import Session

from config.settings import settings
from src.realestate_directory.api.dependencies import get_db, get_gazetteer
from src.realestate_directory.api.schemas import HealthCheck
from src.realestate_directory.api.routers import admin, auth, profiles, register, reviews, search, suburbs
from src.realestate_directory.db.session import create_all_tables, health_check as database_health
from src.realestate_directory.geo.gazetteer import SuburbGazetteer
from src.realestate_directory.utils.logger import get_logger, setup_logging

API_VERSION = "0.1.0"

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    create_all_tables()
    logger.info("api_started", environment=settings.environment, suburbs=len(get_gazetteer()))
    yield


# Create FastAPI app
app = FastAPI(
    title="Real Estate Directory API",
    description="Search Australian properties, agencies, agents, service and tool providers by suburb",
    version=API_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# Configure CORS for the directory frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(auth.router)
app.include_router(suburbs.router)
app.include_router(search.router)
app.include_router(register.router)
app.include_router(reviews.router)
app.include_router(profiles.router)
app.include_router(admin.router)


@app.get("/health", response_model=HealthCheck, tags=["health"])
def health_check(db: Session = Depends(get_db),
                 gazetteer: SuburbGazetteer = Depends(get_gazetteer)):
    """
    Health check endpoint.

    Returns:
        Health status with database connectivity check
    """
    database_status = "connected" if database_health(db) else "error"

    return HealthCheck(
        status="healthy" if database_status == "connected" else "degraded",
        version=API_VERSION,
        database=database_status,
        suburbs=len(gazetteer),
        timestamp=datetime.now(timezone.utc),
    )


@app.get("/", tags=["root"])
def root():
    """
    Root endpoint.

    Returns:
        API information
    """
    return {
        "name": "Real Estate Directory API",
        "version": API_VERSION,
        "docs": "/docs",
        "health": "/health",
        "features": [
            "Suburb and postcode search",
            "Surrounding suburbs by radius",
            "Profile registration and approval",
            "Agency and agent reviews",
            "Profile pages and dashboard edits",
        ]
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.realestate_directory.api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
    )
