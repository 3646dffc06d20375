"""Demo accounts for local runs and tests"""

from typing import List

from minibank.domain.models import Account
from minibank.domain.registry import AccountRegistry

DEMO_ACCOUNTS: List[Account] = [
    Account(id=1, owner="Alice", balance=1000.0),
    Account(id=2, owner="Bob", balance=500.0),
]


def seed_demo_accounts(registry: AccountRegistry) -> AccountRegistry:
    """Load the Alice/Bob demo accounts into registry"""
    registry.seed(DEMO_ACCOUNTS)
    return registry
