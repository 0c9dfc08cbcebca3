"""
Main entry point for the Pitch Scheduler (CLI).
Reads a tournament description from JSON and prints the generated schedule.
"""

import sys
import json
import argparse
import logging
from datetime import datetime

from pydantic import ValidationError

from pitch_scheduler.models.schemas import ScheduleRequest, GeneratedScheduleSchema
from pitch_scheduler.services.schedule_builder import ScheduleBuilder
from pitch_scheduler.services.validator import ScheduleValidator
from pitch_scheduler.services.exporter import export_to_csv, export_to_text
from pitch_scheduler.core.exceptions import ScheduleConfigurationError
from pitch_scheduler.core.logging_config import setup_logging


def render(schedule, settings, output_format: str) -> str:
    """Render a generated schedule in the requested output format."""
    if output_format == 'csv':
        return export_to_csv(schedule.matches, settings)
    if output_format == 'json':
        return GeneratedScheduleSchema.from_domain(schedule).model_dump_json(indent=2)
    if output_format == 'report':
        return ScheduleValidator().generate_schedule_report(schedule, settings)
    return export_to_text(schedule.matches, settings)


def main():
    """
    Main function to run the scheduler.
    Coordinates input loading, schedule generation and output.
    """
    parser = argparse.ArgumentParser(
        description='Pitch Scheduler - Generate tournament match schedules'
    )
    parser.add_argument(
        'input',
        help='JSON file with "settings", "teams" and "config"'
    )
    parser.add_argument(
        '--format',
        choices=['text', 'csv', 'json', 'report'],
        default='text',
        help='Output format (default: text)'
    )
    parser.add_argument(
        '--output',
        help='Write the schedule to this file instead of stdout'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose output'
    )

    args = parser.parse_args()
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        with open(args.input, encoding='utf-8') as f:
            request = ScheduleRequest.model_validate(json.load(f))
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        print(f"ERROR: Could not read tournament input: {e}", file=sys.stderr)
        return 1

    settings = request.settings.to_domain()
    teams = [team.to_domain() for team in request.teams]
    config = request.config.to_domain()

    start = datetime.now()
    try:
        schedule = ScheduleBuilder().generate(settings, teams, config)
    except ScheduleConfigurationError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    if args.verbose:
        elapsed = (datetime.now() - start).total_seconds()
        print(f"Generated {len(schedule.matches)} matches in {elapsed:.3f}s", file=sys.stderr)

    for warning in schedule.warnings:
        print(f"WARNING: {warning}", file=sys.stderr)

    output = render(schedule, settings, args.format)
    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(output)
        print(f"Schedule written to {args.output}", file=sys.stderr)
    else:
        print(output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
