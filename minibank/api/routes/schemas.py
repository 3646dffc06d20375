"""Pydantic schemas for API request/response validation"""

from typing import Annotated, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from minibank.domain.models import Account

# Account ids are signed 64-bit integers
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

AccountId = Annotated[int, Field(ge=INT64_MIN, le=INT64_MAX)]


class CamelModel(BaseModel):
    """Accepts and emits camelCase keys (createdAt, fromId, ...)"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AccountSchema(CamelModel):
    """Account as exchanged over HTTP; missing fields default to null/zero"""

    id: AccountId = 0
    owner: Optional[str] = None
    balance: float = Field(0.0, allow_inf_nan=False)
    currency: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[str] = None
    account_type: Optional[str] = None

    @classmethod
    def from_domain(cls, account: Account) -> "AccountSchema":
        return cls(
            id=account.id,
            owner=account.owner,
            balance=account.balance,
            currency=account.currency,
            status=account.status,
            created_at=account.created_at,
            account_type=account.account_type,
        )

    def to_domain(self) -> Account:
        return Account(
            id=self.id,
            owner=self.owner,
            balance=self.balance,
            currency=self.currency,
            status=self.status,
            created_at=self.created_at,
            account_type=self.account_type,
        )


class TransferRequest(CamelModel):
    """Request body for POST /accounts/transfer"""

    from_id: Optional[AccountId] = None
    to_id: Optional[AccountId] = None
    amount: float = Field(0.0, allow_inf_nan=False)
