"""
FastAPI application entry point for the job application tracker.

This is the main app that:
- Initializes FastAPI with CORS
- Registers all API routers
- Maps domain errors and store failures to {"detail": ...} responses
- Creates tables on startup and disposes the engine on shutdown
"""
import logging
import uvicorn
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from jobtracker import database
from jobtracker.config import settings
from jobtracker.errors import TrackerError, InternalError
# Register models on Base.metadata before create_all
import jobtracker.models  # noqa: F401
# Import API routers
from jobtracker.api import auth, companies, applications, interviews

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    
    On startup: Create any missing tables
    On shutdown: Close database connections gracefully
    """
    # Startup
    logger.info("🚀 Starting Job Tracker API...")
    logger.info(f"📊 Database: {settings.database_url.split('@')[1] if '@' in settings.database_url else 'configured'}")
    logger.info(f"🔧 Debug mode: {settings.debug}")
    
    async with database.engine.begin() as conn:
        await conn.run_sync(database.Base.metadata.create_all)
    
    yield
    
    # Shutdown
    logger.info("👋 Shutting down Job Tracker API...")
    await database.engine.dispose()


# Initialize FastAPI app
app = FastAPI(
    title="Job Tracker API",
    description="API for tracking companies, job applications and interviews",
    version="1.0.0",
    debug=settings.debug,
    lifespan=lifespan,
)

# Configure CORS
# Set ALLOWED_ORIGINS environment variable with comma-separated domains
allowed_origins = [
    "http://localhost:3000",  # Local development
]

if settings.allowed_origins:
    allowed_origins.extend(
        origin.strip() for origin in settings.allowed_origins.split(',') if origin.strip()
    )

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(TrackerError)
async def tracker_error_handler(request: Request, exc: TrackerError):
    """Expected failures: auth, not found, conflict, validation."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message},
        headers=exc.headers,
    )


@app.exception_handler(SQLAlchemyError)
async def store_error_handler(request: Request, exc: SQLAlchemyError):
    """Store failures are logged in full and reported without detail."""
    logger.error(
        f"Store failure on {request.method} {request.url.path}: {str(exc)}",
        exc_info=exc
    )
    error = InternalError()
    return JSONResponse(status_code=error.status_code, content={"detail": error.message})


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    """Anything unhandled still answers with a structured 500."""
    logger.error(
        f"Unhandled error on {request.method} {request.url.path}: {str(exc)}",
        exc_info=exc
    )
    error = InternalError()
    return JSONResponse(status_code=error.status_code, content={"detail": error.message})


# Health check endpoint
@app.get("/health")
async def health_check():
    """Simple health check endpoint."""
    return {
        "status": "healthy",
        "service": "Job Tracker API",
        "version": "1.0.0",
    }


# Root endpoint
@app.get("/")
async def root():
    """API root with basic info."""
    return {
        "message": "Job Tracker API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/health",
    }


# Register API routers
app.include_router(auth.router, prefix="/api/auth", tags=["auth"])
app.include_router(companies.router, prefix="/api/companies", tags=["companies"])
app.include_router(applications.router, prefix="/api/jobs", tags=["jobs"])
app.include_router(interviews.router, prefix="/api/interviews", tags=["interviews"])


def run():
    """Serve the API with uvicorn (`jobtracker` console script)."""
    uvicorn.run("jobtracker.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
