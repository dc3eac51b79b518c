# noqa: F401 to ensure models are imported for metadata
from app.models.holder import Holder

__all__ = [
    "Holder",
]
