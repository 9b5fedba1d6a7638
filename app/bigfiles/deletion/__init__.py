"""Deletion of selected scan results.

This module provides the system-volume policy gate and the sequential
deletion pipeline with its native-command fallback.
"""

from bigfiles.deletion.models import (
    DeletionOutcome,
    DeletionProgress,
    DeletionStatus,
    DeletionSummary,
)
from bigfiles.deletion.pipeline import (
    DeletionPipeline,
    DeletionSession,
    native_delete_command,
)
from bigfiles.deletion.policy import PolicyGate

__all__ = [
    "DeletionOutcome",
    "DeletionPipeline",
    "DeletionProgress",
    "DeletionSession",
    "DeletionStatus",
    "DeletionSummary",
    "PolicyGate",
    "native_delete_command",
]
