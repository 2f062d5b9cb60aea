"""
Drivers domain package.

Public API:
- Domain models: DriverRecord, DriverDirectory
- Matching: select_driver, rank_drivers, filter_eligible_drivers, MatchResult
- Policy: MatchingPolicy, default_matching_policy
"""
from .models import DriverRecord
from .directory import DriverDirectory
from .policy import MatchingPolicy, default_matching_policy
from .selection import MatchResult, filter_eligible_drivers, rank_drivers, select_driver

__all__ = [
    "DriverRecord",
    "DriverDirectory",
    "MatchingPolicy",
    "default_matching_policy",
    "MatchResult",
    "filter_eligible_drivers",
    "rank_drivers",
    "select_driver",
]
