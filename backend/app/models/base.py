from datetime import datetime, timezone

from sqlmodel import Field, SQLModel


class TimestampedModel(SQLModel):
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), nullable=False)
    updated_at: datetime | None = Field(default=None, nullable=True)


class IntegerIDModel(SQLModel):
    id: int | None = Field(default=None, primary_key=True, index=True)
