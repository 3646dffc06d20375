"""Transfer engine - moves funds between two registry accounts"""

import logging
import math

from minibank.domain.models import TransferOutcome
from minibank.domain.registry import AccountRegistry

logger = logging.getLogger(__name__)


def execute_transfer(
    registry: AccountRegistry,
    from_id: int | None,
    to_id: int | None,
    amount: float,
) -> TransferOutcome:
    """
    Debit from_id and credit to_id by amount as one atomic step.

    Checks run in order and stop at the first failure:
    1. amount must be finite and not negative
    2. source account exists
    3. target account exists
    4. source balance covers the amount

    Steps 2-4 and both balance updates run inside the registry lock (see
    AccountRegistry.apply_transfer). A rejected transfer leaves the
    registry untouched.
    """
    if not math.isfinite(amount) or amount < 0:
        return TransferOutcome.INVALID_AMOUNT

    outcome = registry.apply_transfer(from_id, to_id, amount)
    if outcome.succeeded:
        logger.debug("Transferred %s from %s to %s", amount, from_id, to_id)
    return outcome


def transfer(registry: AccountRegistry, from_id: int | None, to_id: int | None, amount: float) -> bool:
    """Boolean form of execute_transfer; never raises on business failure"""
    return execute_transfer(registry, from_id, to_id, amount).succeeded
