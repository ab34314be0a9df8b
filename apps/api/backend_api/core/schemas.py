from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# integer columns are 32-bit signed
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class CamelModel(BaseModel):
    # camelCase on the wire; snake_case still accepted on input
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def is_blank_id(value: Optional[uuid.UUID]) -> bool:
    # the all-zero uuid counts as "no id"
    return value is None or value.int == 0


def as_utc(value: datetime) -> datetime:
    # naive datetimes (client input or sqlite reads) are taken as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
