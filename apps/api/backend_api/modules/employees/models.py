from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import Column, DateTime, Uuid
from sqlmodel import SQLModel, Field


class Employee(SQLModel, table=True):
    __tablename__ = "employee"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        sa_column=Column("employee_id", Uuid, primary_key=True),
    )
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = Field(default=None)
    job_title: str
    salary: int
    # written as UTC; sqlite hands them back naive, the DTO re-attaches UTC
    hire_date: datetime = Field(sa_column=Column("hire_date", DateTime(timezone=True), nullable=False))
    is_active: bool = Field(default=False)

    # server-set, never taken from the request body
    created_at: datetime = Field(sa_column=Column("created_at", DateTime(timezone=True), nullable=False))
    updated_at: datetime = Field(sa_column=Column("updated_at", DateTime(timezone=True), nullable=False))
