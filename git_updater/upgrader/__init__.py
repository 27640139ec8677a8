"""Archive reconciliation after an update download."""

from .feedback import ConsoleFeedback, FeedbackSink, RecordingFeedback
from .filesystem import Filesystem, LocalFilesystem
from .reconciler import (
    UPDATE_ACTIONS,
    ArchiveReconciler,
    MatchPolicy,
    ReconcileOutcome,
    ReconcileResult,
)

__all__ = [
    "ConsoleFeedback",
    "FeedbackSink",
    "RecordingFeedback",
    "Filesystem",
    "LocalFilesystem",
    "UPDATE_ACTIONS",
    "ArchiveReconciler",
    "MatchPolicy",
    "ReconcileOutcome",
    "ReconcileResult",
]
