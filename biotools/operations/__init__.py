"""
Operation dispatch for sequence tools.

Every operation takes a raw sequence string and returns either an
OperationResult (transforms) or a StatsResult ("stats").
"""

from biotools.operations.dispatcher import (
    Operation,
    dispatch,
    available_operations,
    REMOTE_OPERATIONS,
)

__all__ = [
    "Operation",
    "dispatch",
    "available_operations",
    "REMOTE_OPERATIONS",
]
