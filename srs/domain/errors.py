class SchedulerError(Exception):
    """Base class for scheduling errors."""


class ContractViolation(SchedulerError, ValueError):
    """
    Raised when a caller hands the scheduler input it must have validated
    already (unknown rating, negative interval, ease below the floor, ...).
    """
