"""In-memory account registry - the single shared store of the service"""

import threading
from dataclasses import replace
from typing import Dict, Iterable, List, Optional

from minibank.domain.models import Account, TransferOutcome
from minibank.domain.exceptions import AccountNotFoundError, DuplicateAccountError


class AccountRegistry:
    """
    Thread-safe collection of accounts keyed by id.

    Every operation runs under one registry-wide lock. Readers get back
    immutable Account records or fresh lists, so results stay valid after
    the lock is released.
    """

    def __init__(self, accounts: Optional[Iterable[Account]] = None):
        self._accounts: Dict[int, Account] = {}
        self._lock = threading.RLock()
        if accounts:
            self.seed(accounts)

    def __len__(self) -> int:
        with self._lock:
            return len(self._accounts)

    def __contains__(self, account_id: int) -> bool:
        with self._lock:
            return account_id in self._accounts

    def add(self, account: Account) -> None:
        """
        Register a new account.

        Raises:
            DuplicateAccountError: An account with the same id exists
        """
        with self._lock:
            if account.id in self._accounts:
                raise DuplicateAccountError(account.id)
            self._accounts[account.id] = account

    def seed(self, accounts: Iterable[Account]) -> None:
        """Bulk add, used for demo data and test fixtures"""
        with self._lock:
            for account in accounts:
                self.add(account)

    def find(self, account_id: int) -> Optional[Account]:
        """Return the account or None when absent"""
        with self._lock:
            return self._accounts.get(account_id)

    def get_by_id(self, account_id: int) -> Account:
        """
        Return the account registered under account_id.

        Raises:
            AccountNotFoundError: No such account
        """
        account = self.find(account_id)
        if account is None:
            raise AccountNotFoundError(account_id)
        return account

    def list_accounts(self) -> List[Account]:
        with self._lock:
            return list(self._accounts.values())

    def get_by_owner(self, owner: str) -> List[Account]:
        """Accounts whose owner matches case-insensitively"""
        with self._lock:
            return [a for a in self._accounts.values() if a.owned_by(owner)]

    def get_with_balance_greater_than(self, threshold: float) -> List[Account]:
        """Accounts with balance strictly above threshold"""
        with self._lock:
            return [a for a in self._accounts.values() if a.balance > threshold]

    def total_balance(self) -> float:
        with self._lock:
            total = 0.0
            for account in self._accounts.values():
                total += account.balance
            return total

    def apply_transfer(self, from_id: Optional[int], to_id: Optional[int], amount: float) -> TransferOutcome:
        """
        Move amount from one account to another under the registry lock.

        No reader can observe a debit without its matching credit. The
        amount is assumed already validated as finite and non-negative.
        """
        with self._lock:
            source = self._accounts.get(from_id)
            if source is None:
                return TransferOutcome.SOURCE_NOT_FOUND

            target = self._accounts.get(to_id)
            if target is None:
                return TransferOutcome.TARGET_NOT_FOUND

            if not source.balance >= amount:
                return TransferOutcome.INSUFFICIENT_FUNDS

            self._accounts[source.id] = replace(source, balance=source.balance - amount)
            # Re-read so a self-transfer credits the debited record
            target = self._accounts[target.id]
            self._accounts[target.id] = replace(target, balance=target.balance + amount)
            return TransferOutcome.SUCCESS

    def delete(self, account_id: int) -> bool:
        """Remove an account, returning whether it existed"""
        with self._lock:
            return self._accounts.pop(account_id, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._accounts.clear()
