"""
Small pure helpers shared by the core and the presentation/export layers.
"""

from pitch_scheduler.models import TournamentSettings
from pitch_scheduler.core.config import DEFAULT_PITCH_LABEL


def get_pitch_name(pitch_number: int, settings: TournamentSettings) -> str:
    """Custom name of a 1-indexed pitch, or a default label such as 'Pitch 3'."""
    pitch_names = settings.pitch_names or []
    if 1 <= pitch_number <= len(pitch_names) and pitch_names[pitch_number - 1]:
        return pitch_names[pitch_number - 1]
    return f"{DEFAULT_PITCH_LABEL} {pitch_number}"


def calculate_match_duration(settings: TournamentSettings) -> int:
    """Match length in minutes: full time, or two halves plus the halftime break."""
    return settings.match_duration
