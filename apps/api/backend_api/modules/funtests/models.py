from __future__ import annotations

import uuid

from sqlalchemy import Column, String
from sqlmodel import SQLModel, Field


# demo table
class Funtest(SQLModel, table=True):
    __tablename__ = "funtest"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    name: str = Field(default="")
    info: str = Field(default="", sa_column=Column("data", String, nullable=False, default=""))
