from app.repositories.holder import HolderRepository, SQLModelHolderRepository

__all__ = [
    "HolderRepository",
    "SQLModelHolderRepository",
]
