"""
Candidate Dashboard Service - Main Application

FastAPI backend with:
- MongoDB (shared with the recruitment platform) as the record store
- JWT bearer authentication
- Dashboard summary: alerts, quick stats, recent activity

Run: uvicorn app.main:app --reload
"""

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.concurrency import run_in_threadpool
from pymongo.errors import PyMongoError

from app import __version__
from app.api.routes import api_router
from app.core.config import get_settings
from app.core.errors import setup_exception_handlers
from app.core.logging import LoggingMiddleware, configure_logging
from app.db.mongodb import init_mongo_indexes, test_mongo_connection

settings = get_settings()

configure_logging()
logger = structlog.get_logger()

# Create FastAPI app
app = FastAPI(
    title="Candidate Dashboard Service",
    description="""
    Dashboard aggregation for the recruitment platform's candidate area.

    ## Features
    - **Alerts**: documents, interviews, simulations, profile and applications
    - **Quick stats**: counts by status and profile completion
    - **Recent activity**: latest document/interview/application events
    """,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc"
)

setup_exception_handlers(app)

app.add_middleware(LoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_router, prefix="/api")


# Startup event
@app.on_event("startup")
async def startup_event():
    """Initialize MongoDB indexes on startup."""
    logger.info("Starting Candidate Dashboard Service", version=__version__, debug=settings.debug)
    try:
        await run_in_threadpool(init_mongo_indexes)
    except PyMongoError as e:
        logger.warning("MongoDB index initialization failed", error=str(e))


@app.get("/", tags=["Health"])
async def root():
    return {"status": "healthy", "app": "Candidate Dashboard Service"}


@app.get("/health", tags=["Health"])
async def health_check():
    """Detailed health check."""
    mongo_ok = await run_in_threadpool(test_mongo_connection)
    return {
        "status": "healthy" if mongo_ok else "degraded",
        "mongodb": "connected" if mongo_ok else "disconnected"
    }
