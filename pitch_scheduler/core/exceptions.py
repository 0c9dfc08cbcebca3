"""
Exceptions raised by the scheduling core.

Only configuration problems that make a schedule meaningless are raised;
everything else is reported as a warning on the generated schedule.
"""


class SchedulerError(Exception):
    """Base exception for scheduling errors"""

    pass


class ScheduleConfigurationError(SchedulerError, ValueError):
    """Tournament settings cannot be turned into a schedule (e.g. bad start date)"""

    pass
