class ConfigurationError(ValueError):
    """
    Raised when a schedule is constructed with parameters it cannot be evaluated with.

    Schedules validate their parameters eagerly, so this error is only ever raised at
    construction time and never while evaluating a schedule.
    """
