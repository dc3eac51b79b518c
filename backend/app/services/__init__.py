from app.services.errors import HolderNotFoundError, HolderValidationError
from app.services.holder import HolderService

__all__ = [
    "HolderNotFoundError",
    "HolderService",
    "HolderValidationError",
]
