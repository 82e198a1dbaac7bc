"""
Exception hierarchy for the draft board.

Rule violations never corrupt a session: the operation that raised them
leaves all state untouched, and the API turns them into 409 responses.
"""


class DraftBoardError(Exception):
    """Base exception for draft board errors."""
    pass


class DraftRuleViolation(DraftBoardError):
    """Raised when an action is not legal for the current draft state."""
    pass


class OrderAssignmentError(DraftRuleViolation):
    """Raised when a draft-order slot cannot be filled."""
    pass


class PickRejected(DraftRuleViolation):
    """Raised when a board cell refuses content."""
    pass


class PhaseError(DraftRuleViolation):
    """Raised when an action is attempted in the wrong session phase."""
    pass


class InvalidImageError(DraftBoardError):
    """Raised when a pasted image reference cannot be used."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"Invalid image URL {url!r}: {reason}")
        self.url = url
        self.reason = reason


class SessionNotFound(DraftBoardError):
    """Raised when a draft session id is unknown."""

    def __init__(self, session_id: str):
        super().__init__(f"Draft session {session_id} not found")
        self.session_id = session_id
