# ============================================================================
# FILE: mjplayer/main.py
# ============================================================================
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi.responses import FileResponse, JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from mjplayer.api.v1.router import api_router
from mjplayer.core.logging import setup_logging
from mjplayer.core.exceptions import PolicyViolation, InvalidInput, FeatureUnavailable
from mjplayer.core.state_store import RedisStateStore
from mjplayer.player.registry import PlayerRegistry
from mjplayer.config import settings
import logging
import os

# Setup logging
setup_logging()
logger = logging.getLogger(__name__)

# Create FastAPI app instance
app = FastAPI(
    title="MJ Player API",
    description="Music streaming with playlists, an admin panel and a user dashboard",
    version="1.0.0"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API v1 router
app.include_router(api_router, prefix="/api/v1")

# Player state lives here, one state machine per listener
app.state.players = PlayerRegistry()

# Serve static files (if frontend directory exists)
frontend_path = os.path.join(os.path.dirname(__file__), "../frontend")
if os.path.exists(frontend_path):
    app.mount("/static", StaticFiles(directory=frontend_path), name="static")

# ----------------------------------------------------------------------------
# Error mapping
# ----------------------------------------------------------------------------

@app.exception_handler(PolicyViolation)
async def policy_violation_handler(request: Request, exc: PolicyViolation):
    # Shown to the user as-is; never retried
    return JSONResponse(status_code=403, content={"detail": str(exc)})

@app.exception_handler(InvalidInput)
async def invalid_input_handler(request: Request, exc: InvalidInput):
    return JSONResponse(status_code=400, content={"detail": str(exc)})

@app.exception_handler(FeatureUnavailable)
async def feature_unavailable_handler(request: Request, exc: FeatureUnavailable):
    return JSONResponse(status_code=501, content={"detail": str(exc)})

@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    logger.warning(f"Integrity error on {request.url.path}: {exc.orig}")
    return JSONResponse(status_code=409, content={"detail": "Conflicts with existing data"})

@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"Database error on {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"detail": "Something went wrong, please try again"})

# ----------------------------------------------------------------------------

@app.on_event("startup")
async def startup_event():
    """Initialize services on startup"""
    logger.info("Starting MJ Player API")
    from mjplayer.db.init_db import init_db
    from mjplayer.db.session import engine, SessionLocal
    init_db(engine, SessionLocal, seed=settings.SEED_DEFAULT_CATEGORIES)
    app.state.state_store = RedisStateStore()

@app.on_event("shutdown")
async def shutdown_event():
    """Cleanup on shutdown"""
    logger.info("Shutting down MJ Player API")

@app.get("/health")
async def health_check():
    return {"status": "healthy"}

@app.get("/")
async def serve_frontend():
    """Serve the frontend HTML file"""
    frontend_file = os.path.join(os.path.dirname(__file__), "../frontend/index.html")
    if os.path.exists(frontend_file):
        return FileResponse(frontend_file)
    return {"message": "MJ Player API", "version": "1.0.0", "docs": "/docs"}
