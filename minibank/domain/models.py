"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class Account:
    """Bank account held in the registry.

    Frozen so that values handed out by the registry are snapshots; balance
    changes replace the stored record instead of mutating it.
    """

    id: int
    owner: Optional[str]
    balance: float
    currency: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[str] = None
    account_type: Optional[str] = None

    def owned_by(self, owner: str) -> bool:
        """Case-insensitive owner comparison"""
        if self.owner is None or owner is None:
            return False
        return self.owner.casefold() == owner.casefold()


class TransferOutcome(str, Enum):
    """Why a transfer succeeded or was rejected"""

    SUCCESS = "success"
    INVALID_AMOUNT = "invalid_amount"
    SOURCE_NOT_FOUND = "source_not_found"
    TARGET_NOT_FOUND = "target_not_found"
    INSUFFICIENT_FUNDS = "insufficient_funds"

    @property
    def succeeded(self) -> bool:
        return self is TransferOutcome.SUCCESS
