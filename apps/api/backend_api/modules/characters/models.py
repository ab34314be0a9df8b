from __future__ import annotations

import uuid

from sqlalchemy import Column, Integer, String
from sqlmodel import SQLModel, Field


# name is indexed but not unique: case-insensitive uniqueness is checked by the service (read-then-write)
class Character(SQLModel, table=True):
    __tablename__ = "character"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    name: str = Field(sa_column=Column("name", String, nullable=False, index=True))
    character_class: str = Field(sa_column=Column("class", String, nullable=False))  # Warrior|Mage|Rogue|Archer
    level: int = Field(sa_column=Column("level", Integer, nullable=False))
    # stands in for gold: 0..10000
    health: int = Field(sa_column=Column("health", Integer, nullable=False))
    mana: int = Field(sa_column=Column("mana", Integer, nullable=False))
