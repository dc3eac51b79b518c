from typing import Annotated

from fastapi import Depends
from sqlmodel import Session

from app.db.session import get_session
from app.repositories.holder import SQLModelHolderRepository
from app.services.holder import HolderService


def get_db() -> Session:
    yield from get_session()


def get_holder_service(session: Annotated[Session, Depends(get_db)]) -> HolderService:
    return HolderService(SQLModelHolderRepository(session))
