from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from backend_api.core.schemas import INT32_MAX, INT32_MIN, CamelModel, as_utc


class EmployeeDTO(CamelModel):
    id: Optional[uuid.UUID] = None
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    job_title: str
    salary: int = Field(ge=INT32_MIN, le=INT32_MAX)
    # always UTC: "2024-01-15T09:00:00" and "2024-01-15T09:00:00Z" are the same instant
    hire_date: datetime
    is_active: bool = False

    @field_validator("hire_date")
    @classmethod
    def _hire_date_utc(cls, v: datetime) -> datetime:
        return as_utc(v)
