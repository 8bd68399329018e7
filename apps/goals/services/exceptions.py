"""Domain exceptions for goals app."""


class GoalsServiceError(Exception):
    """Base exception for all goals service errors."""
    pass


class GoalNotFoundError(GoalsServiceError):
    """Goal does not exist or is not visible to the user."""
    pass


class InvalidStatusError(GoalsServiceError):
    """Reflection status is not done / partly done / not done."""
    pass


class AlreadyReflectedError(GoalsServiceError):
    """User already reflected on this goal."""
    pass


class InvalidPledgeError(GoalsServiceError):
    """Pledge amount is below the minimum."""
    pass
