from datetime import datetime
from decimal import Decimal
from uuid import uuid4

from sqlalchemy import Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database.base import Base, created_at_column


class User(Base):
    """
    Registered user, created once at signup.

    Rows are never updated or deleted by the API. `email` carries a unique
    constraint, which is the authoritative guard against duplicate signups.
    """

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid4()),
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    latitude: Mapped[Decimal] = mapped_column(Numeric(10, 8), nullable=False)
    longitude: Mapped[Decimal] = mapped_column(Numeric(11, 8), nullable=False)
    city: Mapped[str] = mapped_column(String(255), nullable=False)

    created_at: Mapped[datetime] = created_at_column()
