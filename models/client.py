"""Client model - a customer that owns projects."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from db import Base
from errors import EntityValidationError
from models.common import EntityMixin, Status, check_status, default_status, require, trim_fields
from models.query import ListResponse, QueryParams
from validators import EmailValidationError, validate_email


class Client(EntityMixin, Base):
    """Client ORM model."""

    __tablename__ = "clients"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    address: Mapped[str] = mapped_column(Text, nullable=False, default="")
    contact_person: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    notes: Mapped[str] = mapped_column(Text, nullable=False, default="")
    status: Mapped[int] = mapped_column(Integer, nullable=False, default=Status.ACTIVE)

    @property
    def is_active(self) -> bool:
        return self.status == Status.ACTIVE

    def normalize_defaults(self) -> None:
        self.status = default_status(self.status)

    def validate(self) -> None:
        trim_fields(self, "name", "email", "phone", "address", "contact_person", "notes")

        require(self.name, "client name is required")
        require(self.email, "client email is required")
        try:
            validate_email(self.email)
        except EmailValidationError as e:
            raise EntityValidationError(f"invalid email address: {e}") from e

        check_status(self.status, "client status must be 1 (inactive) or 2 (active)")


# Pydantic schemas
class ClientBase(BaseModel):
    """Base client schema."""

    name: str
    email: str
    phone: str = ""
    address: str = ""
    contact_person: str = ""
    notes: str = ""
    status: int = Status.ACTIVE


class ClientCreate(ClientBase):
    """Schema for creating a client."""


class ClientUpdate(ClientBase):
    """Schema for updating a client. The whole row is replaced."""


class ClientResponse(ClientBase):
    """Schema for client response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: datetime
    updated_at: datetime


class ClientQueryParams(QueryParams):
    """Filters for listing clients. The *_like fields form the search box."""

    id_in: list[int] = []
    name: str = ""
    name_like: str = ""
    email: str = ""
    email_like: str = ""
    phone: str = ""
    phone_like: str = ""
    address_like: str = ""
    contact_person_like: str = ""
    notes_like: str = ""
    status: int = 0
    status_in: list[int] = []
    created_at_gte: datetime | None = None
    created_at_lte: datetime | None = None
    updated_at_gte: datetime | None = None
    updated_at_lte: datetime | None = None


ClientListResponse = ListResponse[ClientResponse]
