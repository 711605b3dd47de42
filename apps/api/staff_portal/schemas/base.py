from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel
from pydantic.alias_generators import to_camel

from ..core.clock import as_utc

# SQLite returns naive datetimes; pin everything to UTC so the wire always carries an offset.
UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python; either is accepted on input."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True
