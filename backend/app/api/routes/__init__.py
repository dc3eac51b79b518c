from . import health, holders

__all__ = [
    "health",
    "holders",
]
