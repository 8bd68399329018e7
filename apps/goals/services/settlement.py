"""
Goal reflection settlement.

Pure integer arithmetic deciding how a goal's pledge and bonus are split
between the reward and remorse purses for a reflection outcome.
"""

from dataclasses import dataclass

from apps.goals.models import ReflectionStatus
from apps.wallets.models import Purse
from .exceptions import InvalidStatusError


@dataclass(frozen=True)
class Settlement:
    """Outcome of settling one reflection."""

    status: str
    pledge_amount: int
    associated_tokens: int
    reward_delta: int
    remorse_delta: int
    message: str

    @property
    def wallet_delta(self):
        return {
            Purse.REWARD: self.reward_delta,
            Purse.REMORSE: self.remorse_delta,
        }


def resolve_status(status) -> ReflectionStatus:
    try:
        return ReflectionStatus(status)
    except ValueError:
        raise InvalidStatusError(
            "Invalid reflection status. Must be: done, partly done, or not done"
        )


def compute_settlement(*, status, pledge_amount, associated_tokens) -> Settlement:
    """
    Split pledge P and bonus B for a reflection outcome.

    - done:        reward += P + B
    - partly done: reward += P // 2 + B, remorse += P - P // 2
    - not done:    remorse += P (bonus forfeited)

    Raises:
        InvalidStatusError: If status is not a recognized outcome
    """
    status = resolve_status(status)
    pledge = int(pledge_amount or 0)
    bonus = int(associated_tokens or 0)

    if status == ReflectionStatus.DONE:
        reward, remorse = pledge + bonus, 0
        message = f"Excellent! {reward} RDM moved to your Reward Purse."
    elif status == ReflectionStatus.PARTLY_DONE:
        half = pledge // 2
        reward, remorse = half + bonus, pledge - half
        message = (
            f"{half} RDM to Reward Purse, {remorse} RDM to Remorse Purse, "
            f"plus {bonus} bonus RDM to Reward Purse."
        )
    else:
        reward, remorse = 0, pledge
        message = f"{pledge} RDM moved to your Remorse Purse. Try again tomorrow!"

    return Settlement(
        status=status.value,
        pledge_amount=pledge,
        associated_tokens=bonus,
        reward_delta=reward,
        remorse_delta=remorse,
        message=message,
    )
