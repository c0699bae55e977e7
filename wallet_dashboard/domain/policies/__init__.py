"""Domain policies package."""

from .balance_filters import is_eligible_balance

__all__ = ["is_eligible_balance"]
