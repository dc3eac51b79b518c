from __future__ import annotations

from datetime import datetime, timezone
from typing import NoReturn, Protocol

from app.core.logging_setup import logger
from app.models.holder import Holder
from app.repositories.holder import HolderRepository
from app.services.errors import HolderNotFoundError, HolderValidationError

# Fields copied from the payload on update; cpf_cnpj and name stay fixed.
UPDATABLE_FIELDS = (
    "phone",
    "email",
    "address",
    "address_number",
    "city",
    "complement",
)


class HolderChanges(Protocol):
    phone: str | None
    email: str | None
    address: str | None
    address_number: str | None
    city: str | None
    complement: str | None


class HolderService:
    def __init__(self, repository: HolderRepository) -> None:
        self.repository = repository

    def get_holder(self, holder_id: int, include_deleted: bool = True) -> Holder | None:
        holder = self.repository.find_by_id(holder_id)
        if holder is not None and holder.deleted and not include_deleted:
            return None
        return holder

    def list_holders(self, include_deleted: bool = True) -> list[Holder]:
        holders = self.repository.find_all()
        if include_deleted:
            return holders
        return [holder for holder in holders if not holder.deleted]

    def save_holder(self, holder: Holder) -> Holder:
        if not holder.cpf_cnpj:
            self._reject("CPF/CNPJ is required")
        if not holder.name:
            self._reject("Name is required")

        saved = self.repository.save(holder)
        logger.info("Holder %s saved", saved.id)
        return saved

    def delete_holder(self, holder_id: int) -> None:
        holder = self._require_holder(holder_id)
        holder.deleted = True
        holder.updated_at = datetime.now(timezone.utc)
        self.repository.save(holder)
        logger.info("Holder %s marked as deleted", holder_id)

    def update_holder(self, holder_id: int, changes: HolderChanges) -> Holder:
        holder = self._require_holder(holder_id)
        for field in UPDATABLE_FIELDS:
            setattr(holder, field, getattr(changes, field))
        holder.updated_at = datetime.now(timezone.utc)
        updated = self.repository.save(holder)
        logger.info("Holder %s updated", holder_id)
        return updated

    def _require_holder(self, holder_id: int) -> Holder:
        holder = self.repository.find_by_id(holder_id)
        if holder is None:
            logger.warning("Holder %s not found", holder_id)
            raise HolderNotFoundError(holder_id)
        return holder

    @staticmethod
    def _reject(message: str) -> NoReturn:
        logger.warning("Holder rejected: %s", message)
        raise HolderValidationError(message)
