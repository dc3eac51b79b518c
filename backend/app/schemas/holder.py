from __future__ import annotations

from app.schemas.common import CamelModel, IDModel, Timestamped


class HolderContact(CamelModel):
    phone: str | None = None
    email: str | None = None
    address: str | None = None
    address_number: str | None = None
    city: str | None = None
    complement: str | None = None


class HolderCreate(HolderContact):
    cpf_cnpj: str
    name: str


class HolderUpdate(HolderContact):
    """Full replacement of the contact and address fields.

    Omitted fields are cleared. ``cpfCnpj`` and ``name`` cannot be changed
    after creation and are ignored if sent.
    """


class HolderRead(IDModel, Timestamped, HolderCreate):
    deleted: bool
