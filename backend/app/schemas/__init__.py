from app.schemas import common, holder

__all__ = [
    "common",
    "holder",
]
