"""SQLAlchemy Declarative Base — metadata shared by the Northwind ORM models.

Invariants:
    - All models inherit from Base
    - Index and constraint names are deterministic, so migrations diff cleanly
      against both SQLite and PostgreSQL
"""

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

NAMING_CONVENTION = {
    "ix": "ix_%(table_name)s_%(column_0_N_name)s",
    "uq": "uq_%(table_name)s_%(column_0_N_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    metadata = MetaData(naming_convention=NAMING_CONVENTION)
