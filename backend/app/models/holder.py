from __future__ import annotations

from sqlmodel import Field

from app.models.base import IntegerIDModel, TimestampedModel


class Holder(IntegerIDModel, TimestampedModel, table=True):
    __tablename__ = "holders"

    cpf_cnpj: str = Field(index=True, max_length=18)
    name: str = Field(max_length=255)

    phone: str | None = Field(default=None, max_length=32)
    email: str | None = Field(default=None, max_length=255)

    address: str | None = Field(default=None, max_length=255)
    address_number: str | None = Field(default=None, max_length=16)
    city: str | None = Field(default=None, max_length=128)
    complement: str | None = Field(default=None, max_length=255)

    deleted: bool = Field(default=False)
