"""
Goals services - Business logic layer.

- Goal management (default goals, pledged custom goals, listing)
- Reflection settlement (done / partly done / not done)
"""

from .goal_management import (
    create_custom_goal,
    create_default_goal,
    get_default_goals,
    get_visible_goals,
)

from .settlement import (
    Settlement,
    compute_settlement,
)

from .reflection import (
    reflect_on_goal,
    complete_goal,
)

from .exceptions import (
    GoalsServiceError,
    GoalNotFoundError,
    InvalidStatusError,
    AlreadyReflectedError,
    InvalidPledgeError,
)

__all__ = [
    # Goal Management Services
    'create_custom_goal',
    'create_default_goal',
    'get_default_goals',
    'get_visible_goals',
    # Settlement
    'Settlement',
    'compute_settlement',
    # Reflection Services
    'reflect_on_goal',
    'complete_goal',
    # Exceptions
    'GoalsServiceError',
    'GoalNotFoundError',
    'InvalidStatusError',
    'AlreadyReflectedError',
    'InvalidPledgeError',
]
