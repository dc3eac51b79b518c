from __future__ import annotations


class HolderValidationError(ValueError):
    """Raised when a holder operation is rejected by a business rule."""


class HolderNotFoundError(HolderValidationError):
    """Raised when the requested holder id is not stored."""

    def __init__(self, holder_id: int, message: str = "Holder does not exist") -> None:
        super().__init__(message)
        self.holder_id = holder_id
