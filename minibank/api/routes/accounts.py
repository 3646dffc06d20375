"""/accounts - account registry and transfer endpoints"""

from typing import Annotated, List
from fastapi import APIRouter, Depends, Path
from fastapi.responses import PlainTextResponse

from minibank.api.routes.schemas import AccountSchema, TransferRequest, INT64_MIN, INT64_MAX
from minibank.api.dependencies import get_registry, get_request_id
from minibank.domain.registry import AccountRegistry
from minibank.domain.transfers import execute_transfer
from minibank.domain.exceptions import DuplicateAccountError
from minibank.infrastructure.observability.metrics import record_transfer, record_account_operation
from minibank.infrastructure.observability.logging import log_transfer, log_account_event

router = APIRouter()

AccountIdPath = Annotated[int, Path(ge=INT64_MIN, le=INT64_MAX)]


@router.get("/accounts", response_model=List[AccountSchema])
def get_all_accounts(registry: AccountRegistry = Depends(get_registry)):
    """List every account in the registry"""
    return [AccountSchema.from_domain(a) for a in registry.list_accounts()]


# Registered before /accounts/{account_id} so the literal segment wins
@router.get("/accounts/totalBalance", response_model=float)
def get_total_balance(registry: AccountRegistry = Depends(get_registry)):
    """Sum of balances across all accounts"""
    return registry.total_balance()


@router.get("/accounts/owner/{owner}", response_model=List[AccountSchema])
def get_accounts_by_owner(owner: str, registry: AccountRegistry = Depends(get_registry)):
    """Accounts held by owner, matched case-insensitively"""
    return [AccountSchema.from_domain(a) for a in registry.get_by_owner(owner)]


@router.get("/accounts/balance/greater/{amount}", response_model=List[AccountSchema])
def get_accounts_with_balance_greater_than(amount: float, registry: AccountRegistry = Depends(get_registry)):
    """Accounts whose balance is strictly greater than amount"""
    return [AccountSchema.from_domain(a) for a in registry.get_with_balance_greater_than(amount)]


@router.get("/accounts/{account_id}", response_model=AccountSchema)
def get_account(account_id: AccountIdPath, registry: AccountRegistry = Depends(get_registry)):
    """
    Fetch a single account.

    Raises:
        AccountNotFoundError: rendered as 404 plain text by the app
    """
    return AccountSchema.from_domain(registry.get_by_id(account_id))


@router.post("/accounts", response_class=PlainTextResponse)
def add_account(
    account: AccountSchema,
    registry: AccountRegistry = Depends(get_registry),
    request_id: str = Depends(get_request_id),
):
    """Register a new account; duplicate ids are rejected with 400"""
    try:
        registry.add(account.to_domain())
    except DuplicateAccountError:
        record_account_operation("add", "duplicate", len(registry))
        raise

    record_account_operation("add", "ok", len(registry))
    log_account_event(request_id, account.id, "add", "ok")
    return "Account added"


@router.post("/accounts/transfer", response_class=PlainTextResponse)
def transfer(
    request_body: TransferRequest,
    registry: AccountRegistry = Depends(get_registry),
    request_id: str = Depends(get_request_id),
):
    """
    Move funds between two accounts.

    Business rejections (unknown account, insufficient funds, negative
    amount) are not errors: the response is still 200 with "Transfer failed".
    """
    outcome = execute_transfer(registry, request_body.from_id, request_body.to_id, request_body.amount)

    record_transfer(outcome.value, request_body.amount)
    log_transfer(request_id, request_body.from_id, request_body.to_id, request_body.amount, outcome.value)

    return "Transfer successful" if outcome.succeeded else "Transfer failed"


@router.delete("/accounts/{account_id}", response_class=PlainTextResponse)
def delete_account(
    account_id: AccountIdPath,
    registry: AccountRegistry = Depends(get_registry),
    request_id: str = Depends(get_request_id),
):
    """Remove an account; a missing id is reported, not treated as an error"""
    removed = registry.delete(account_id)
    outcome = "ok" if removed else "missing"

    record_account_operation("delete", outcome, len(registry))
    log_account_event(request_id, account_id, "delete", outcome)
    return "Account deleted" if removed else "Account not found"
