"""
API routes for schedule generation, checking and export.
"""

import traceback
from datetime import datetime
from typing import List, Literal

from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import PlainTextResponse

from pitch_scheduler.models.schemas import (
    ScheduleRequest, ScheduleResponse, GeneratedScheduleSchema,
    ScheduleConflictSchema, MatchListRequest, ExportRequest
)
from pitch_scheduler.services.schedule_builder import ScheduleBuilder
from pitch_scheduler.services.conflict_detector import ConflictDetector
from pitch_scheduler.services.validator import ScheduleValidator
from pitch_scheduler.services.exporter import export_to_csv, export_to_text
from pitch_scheduler.core.exceptions import ScheduleConfigurationError
from pitch_scheduler.core.config import (
    LARGE_TOURNAMENT_THRESHOLD, DEFAULT_PITCH_LABEL,
    DEFAULT_MATCH_DURATION_MINUTES, DEFAULT_HALF_DURATION_MINUTES,
    DEFAULT_HALFTIME_BREAK_MINUTES, DEFAULT_MAX_MATCHES_PER_TEAM,
    MIN_MATCH_DURATION_MINUTES, MIN_HALF_DURATION_MINUTES,
    MAX_TEAMS, MAX_MATCHES_PER_TEAM, MAX_TOTAL_MATCHES
)
from pitch_scheduler.core.logging_config import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["schedule"])


@router.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "timestamp": datetime.now().isoformat()}


@router.get("/info")
async def get_scheduling_info():
    """Defaults and limits applied when generating schedules."""
    return {
        "match_modes": ["full-time", "two-halves"],
        "scheduling_modes": ["round-robin", "limited-matches"],
        "defaults": {
            "match_duration_minutes": DEFAULT_MATCH_DURATION_MINUTES,
            "half_duration_minutes": DEFAULT_HALF_DURATION_MINUTES,
            "halftime_break_minutes": DEFAULT_HALFTIME_BREAK_MINUTES,
            "max_matches_per_team": DEFAULT_MAX_MATCHES_PER_TEAM,
            "pitch_label": DEFAULT_PITCH_LABEL
        },
        "limits": {
            "min_match_duration_minutes": MIN_MATCH_DURATION_MINUTES,
            "min_half_duration_minutes": MIN_HALF_DURATION_MINUTES,
            "large_tournament_threshold": LARGE_TOURNAMENT_THRESHOLD,
            "max_teams": MAX_TEAMS,
            "max_matches_per_team": MAX_MATCHES_PER_TEAM,
            "max_total_matches": MAX_TOTAL_MATCHES
        }
    }


@router.post("/schedule", response_model=ScheduleResponse)
async def generate_schedule(request: ScheduleRequest):
    """
    Generate a new tournament schedule.

    This endpoint:
    1. Pairs the teams according to the scheduling mode
    2. Assigns every match a pitch and kick-off time
    3. Checks the result for double-booked teams
    4. Returns the schedule with any warnings
    """
    try:
        start_time = datetime.now()

        settings = request.settings.to_domain()
        teams = [team.to_domain() for team in request.teams]
        config = request.config.to_domain()

        logger.info(f"Generating {config.mode.value} schedule for {len(teams)} teams "
                    f"on {settings.num_pitches} pitch(es)")
        schedule = ScheduleBuilder().generate(settings, teams, config)

        generation_time = (datetime.now() - start_time).total_seconds()

        return ScheduleResponse(
            success=True,
            message=f"Schedule generated successfully with {len(schedule.matches)} matches",
            total_matches=len(schedule.matches),
            schedule=GeneratedScheduleSchema.from_domain(schedule),
            generation_time=generation_time
        )

    except ScheduleConfigurationError as e:
        logger.info(f"Rejected schedule request: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(traceback.format_exc())
        raise HTTPException(status_code=500, detail=f"Schedule generation failed: {str(e)}")


@router.post("/schedule/conflicts", response_model=List[ScheduleConflictSchema])
async def detect_conflicts(request: MatchListRequest):
    """Report teams that are booked into more than one match at the same start time."""
    matches = [match.to_domain() for match in request.matches]
    conflicts = ConflictDetector().detect_conflicts(matches)
    return [ScheduleConflictSchema.from_domain(conflict) for conflict in conflicts]


@router.post("/schedule/validate")
async def validate_schedule(request: MatchListRequest):
    """Check a schedule for pitch overlaps, team overlaps and repeated matchups."""
    matches = [match.to_domain() for match in request.matches]
    result = ScheduleValidator().validate_schedule(matches)

    return {
        "is_valid": result.is_valid,
        "hard_violations": len(result.hard_constraint_violations),
        "soft_violations": len(result.soft_constraint_violations),
        "violations": [
            {
                "type": violation.constraint_type,
                "severity": violation.severity,
                "description": violation.description,
                "match_ids": [match.id for match in violation.affected_matches]
            }
            for violation in result.hard_constraint_violations + result.soft_constraint_violations
        ]
    }


@router.post("/schedule/export", response_class=PlainTextResponse)
async def export_schedule(request: ExportRequest,
                          format: Literal["csv", "text"] = Query("csv")):
    """Render a schedule as CSV or as a printable text listing."""
    settings = request.settings.to_domain()
    matches = [match.to_domain() for match in request.matches]

    if format == "csv":
        return PlainTextResponse(export_to_csv(matches, settings), media_type="text/csv")
    return PlainTextResponse(export_to_text(matches, settings))
