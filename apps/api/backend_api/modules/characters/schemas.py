from __future__ import annotations

import uuid
from typing import Literal, Optional

from pydantic import Field

from backend_api.core.schemas import CamelModel

CharacterClass = Literal["Warrior", "Mage", "Rogue", "Archer"]


class CharacterDTO(CamelModel):
    """
    External shape of a character.

    class is free text on input (it is normalized and checked by the
    service), so it is typed as str here rather than CharacterClass.
    """
    id: Optional[uuid.UUID] = None
    name: str
    character_class: str = Field(alias="class")
    level: int
    health: int
    mana: int
