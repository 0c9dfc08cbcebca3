"""
Configuration constants for the Pitch Scheduler.
All configurable settings are defined here.
"""

import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Orchestrator thresholds
LARGE_TOURNAMENT_THRESHOLD = int(os.getenv("LARGE_TOURNAMENT_THRESHOLD", "100"))

# Limited-matches pairing gives up after target * multiplier attempts
ATTEMPT_BUDGET_MULTIPLIER = int(os.getenv("ATTEMPT_BUDGET_MULTIPLIER", "10"))

# Label used for pitches that have no custom name ("Pitch 1", "Pitch 2", ...)
DEFAULT_PITCH_LABEL = os.getenv("DEFAULT_PITCH_LABEL", "Pitch")

# Match duration fallbacks (minutes) when optional settings are missing
DEFAULT_MATCH_DURATION_MINUTES = 30
DEFAULT_HALF_DURATION_MINUTES = 15
DEFAULT_HALFTIME_BREAK_MINUTES = 5

# Lower bounds enforced on incoming settings
MIN_MATCH_DURATION_MINUTES = 5
MIN_HALF_DURATION_MINUTES = 3

# Limited-matches fallback when max_matches_per_team is not supplied
DEFAULT_MAX_MATCHES_PER_TEAM = 3

# Upper bounds on request size accepted by the API and CLI
MAX_TEAMS = int(os.getenv("MAX_TEAMS", "200"))
MAX_MATCHES_PER_TEAM = int(os.getenv("MAX_MATCHES_PER_TEAM", "50"))
MAX_TOTAL_MATCHES = int(os.getenv("MAX_TOTAL_MATCHES", "20000"))

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# API server
API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "8000"))
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]
