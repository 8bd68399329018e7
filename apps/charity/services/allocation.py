"""
Charity allocation arithmetic.

Everything here is integer or Decimal math with no database access, so the
rounding rules can be tested on their own.
"""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation, ROUND_FLOOR
from typing import List

from .exceptions import InvalidAmountError


@dataclass(frozen=True)
class Allocation:
    organization: object
    allocated_amount: int


@dataclass(frozen=True)
class AllocationPlan:
    """Proportional split of a charity purse balance."""

    balance: int
    allocations: List[Allocation] = field(default_factory=list)

    @property
    def total_allocated(self):
        return sum(a.allocated_amount for a in self.allocations)

    @property
    def remainder(self):
        return self.balance - self.total_allocated


def allocate(balance: int, percentage) -> int:
    """floor(balance * percentage / 100) without touching floats."""
    return int((Decimal(balance) * Decimal(percentage)) // Decimal(100))


def plan_allocations(balance: int, organizations) -> AllocationPlan:
    """Allocate ``balance`` across organizations by allocation_percentage."""
    return AllocationPlan(
        balance=balance,
        allocations=[
            Allocation(organization=org, allocated_amount=allocate(balance, org.allocation_percentage))
            for org in organizations
        ],
    )


def floor_amount(value) -> int:
    """
    Parse a client-supplied token amount and floor it to a whole number.

    Accepts ints, floats and numeric strings ("12.7" -> 12).

    Raises:
        InvalidAmountError: If the value is not a finite, non-negative number
    """
    if isinstance(value, bool) or value is None:
        raise InvalidAmountError("Invalid donation amount")
    try:
        amount = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise InvalidAmountError("Invalid donation amount")
    if not amount.is_finite() or amount < 0:
        raise InvalidAmountError("Invalid donation amount")
    return int(amount.to_integral_value(rounding=ROUND_FLOOR))
