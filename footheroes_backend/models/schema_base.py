# schema_base.py
# Base class for API schemas (snake_case in Python, camelCase on the wire)
# and the column helper shared by every table timestamp.

from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from sqlalchemy import DateTime
from sqlmodel import Field


def timestamp_field(**kwargs):
    """
    Timestamp column holding naive UTC (see core/clock.py).
    The column type is explicit so SQLModel never infers a timezone-aware one.
    """
    return Field(sa_type=DateTime(timezone=False), **kwargs)


class CamelModel(BaseModel):
    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True
