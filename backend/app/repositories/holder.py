"""Storage gateway for :class:`~app.models.holder.Holder` records.

Services depend on the :class:`HolderRepository` protocol only. The SQLModel
adapter is the implementation used by the API; tests are free to plug any
object exposing the same three methods.
"""

from __future__ import annotations

from typing import Protocol

from sqlmodel import Session, select

from app.models.holder import Holder


class HolderRepository(Protocol):
    def find_by_id(self, holder_id: int) -> Holder | None: ...

    def find_all(self) -> list[Holder]: ...

    def save(self, holder: Holder) -> Holder:
        """Insert when ``holder.id`` is ``None``, otherwise update by id."""
        ...


class SQLModelHolderRepository:
    """Lightweight repository wrapper over a SQLModel session."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def find_by_id(self, holder_id: int) -> Holder | None:
        return self.session.get(Holder, holder_id)

    def find_all(self) -> list[Holder]:
        statement = select(Holder).order_by(Holder.id)
        return list(self.session.exec(statement).all())

    def save(self, holder: Holder) -> Holder:
        if holder.id is not None:
            holder = self.session.merge(holder)
        self.session.add(holder)
        self.session.commit()
        self.session.refresh(holder)
        return holder
