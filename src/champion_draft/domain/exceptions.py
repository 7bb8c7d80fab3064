"""
Domain Exceptions

Faults raised for programmer errors and malformed external input.
Rule violations during drafting are reported as DraftRejection values instead.
"""


class DraftError(Exception):
    """Base exception for all draft-related errors"""
    pass


class InvalidSlotError(DraftError):
    """Raised when addressing a pick role or ban index that does not exist"""
    pass


class SnapshotError(DraftError):
    """Raised when a draft snapshot cannot be decoded or breaks draft invariants"""
    pass


class DraftNotFoundError(DraftError):
    """Raised when looking up a draft session that doesn't exist"""
    pass
