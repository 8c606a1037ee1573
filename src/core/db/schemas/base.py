"""
SQLAlchemy declarative base for the SmartTrip tables.

Import Base from here when defining new models; Alembic's env.py reads
Base.metadata for autogenerate.
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass
