"""
Main FastAPI application for the Pitch Scheduler.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pitch_scheduler.api import routes
from pitch_scheduler.core.config import CORS_ORIGINS
from pitch_scheduler.core.logging_config import setup_logging

setup_logging()

app = FastAPI(
    title="Pitch Scheduler API",
    description="API for generating tournament match schedules across parallel pitches",
    version="1.0.0"
)

# Enable CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(routes.router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Pitch Scheduler API",
        "version": "1.0.0",
        "endpoints": {
            "generate": "/api/schedule",
            "conflicts": "/api/schedule/conflicts",
            "validate": "/api/schedule/validate",
            "export": "/api/schedule/export",
            "info": "/api/info",
            "health": "/api/health"
        }
    }
