"""Declarative base shared by all ORM models."""

import uuid

from sqlalchemy.orm import DeclarativeBase


def generate_uuid() -> str:
    """Return a fresh string identifier for a new row."""
    return str(uuid.uuid4())


class Base(DeclarativeBase):
    """Base class for all database models."""
