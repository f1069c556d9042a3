class InvalidInputError(ValueError):
    """Raised when planner input violates a precondition.

    Covers waypoint lists that are too short and query values the
    request models cannot constrain on their own.
    """
