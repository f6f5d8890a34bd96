"""Issue triage for authors using the default avatar."""

from .config import DEFAULT_CLOSE_COMMENT, DEFAULT_LABEL, TriageConfiguration
from .controller import IssueTriager, TriageOutcome
from .event import TriggerEvent, load_event

__all__ = [
    "DEFAULT_CLOSE_COMMENT",
    "DEFAULT_LABEL",
    "IssueTriager",
    "TriageConfiguration",
    "TriageOutcome",
    "TriggerEvent",
    "load_event",
]
