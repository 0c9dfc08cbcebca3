"""
Services for pairing, slot assignment, conflict detection, validation and export.
"""

from .pair_generator import PairGenerator
from .slot_assigner import SlotAssigner
from .conflict_detector import ConflictDetector
from .schedule_builder import ScheduleBuilder, generate_schedule
from .validator import ScheduleValidator
from .helpers import get_pitch_name, calculate_match_duration
from .exporter import escape_csv_field, export_to_csv, export_to_text

__all__ = [
    "PairGenerator",
    "SlotAssigner",
    "ConflictDetector",
    "ScheduleBuilder",
    "generate_schedule",
    "ScheduleValidator",
    "get_pitch_name",
    "calculate_match_duration",
    "escape_csv_field",
    "export_to_csv",
    "export_to_text"
]
