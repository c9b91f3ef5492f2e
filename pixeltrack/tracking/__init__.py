"""Page view recording."""

from .counter import UNKNOWN_DOMAIN, UNKNOWN_PAGE, RecordOutcome, ViewCounter

__all__ = ["ViewCounter", "RecordOutcome", "UNKNOWN_DOMAIN", "UNKNOWN_PAGE"]
