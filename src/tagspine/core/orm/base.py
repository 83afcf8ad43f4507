"""Declarative base and type-map for tag-spine ORM models.

Uses SQLAlchemy 2.0 ``DeclarativeBase`` with a ``type_annotation_map``
that maps Python built-in types to portable SA column types.
"""

from __future__ import annotations

from sqlalchemy import Integer, Text
from sqlalchemy.orm import DeclarativeBase


class TagBase(DeclarativeBase):
    """Shared declarative base for every table the SQL provider reads.

    * ``str`` → ``Text``
    * ``int`` → ``Integer``
    """

    type_annotation_map = {
        str: Text,
        int: Integer,
    }
