"""User model for registered candidates."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from mockinterview.models.base import Base, generate_uuid


class User(Base):
    """Represents a registered user practising interviews."""

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    email: Mapped[str] = mapped_column(String(320), unique=True, nullable=False)
    password: Mapped[str] = mapped_column(Text, nullable=False)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    college: Mapped[str | None] = mapped_column(Text)
    year: Mapped[str | None] = mapped_column(Text)
    target_role: Mapped[str | None] = mapped_column(Text)
