from __future__ import annotations

import uuid
from typing import Any, List, Mapping, Optional

from sqlalchemy import func

from backend_api.core.errors import ValidationError
from backend_api.core.observability import emit
from backend_api.core.schemas import is_blank_id
from backend_api.core.store import EntityStore

from . import validation
from .models import Character
from .schemas import CharacterDTO

# same projection as the ORM listing, issued as plain SQL
_LIST_SQL = 'SELECT id, name, class, level, health, mana FROM "character"'


def _to_dto(entity: Character) -> CharacterDTO:
    return CharacterDTO(
        id=entity.id,
        name=entity.name,
        character_class=entity.character_class,
        level=entity.level,
        health=entity.health,
        mana=entity.mana,
    )


def _row_to_dto(row: Mapping[str, Any]) -> CharacterDTO:
    raw_id = row["id"]
    return CharacterDTO(
        id=raw_id if isinstance(raw_id, uuid.UUID) else uuid.UUID(str(raw_id)),
        name=str(row["name"]),
        character_class=str(row["class"]),
        level=int(row["level"]),
        health=int(row["health"]),
        mana=int(row["mana"]),
    )


class CharacterService:
    def __init__(self, store: EntityStore[Character]):
        self.store = store

    # --- reads ---
    def list_characters(self) -> List[CharacterDTO]:
        return [_to_dto(e) for e in self.store.list_all()]

    def list_characters_sql(self) -> List[CharacterDTO]:
        return [_row_to_dto(r) for r in self.store.rows(_LIST_SQL)]

    def get_character(self, character_id: uuid.UUID) -> Optional[CharacterDTO]:
        entity = self.store.get(character_id)
        if entity is None:
            return None
        return _to_dto(entity)

    # --- validation ---
    def _validated(self, dto: CharacterDTO, *, exclude_id: Optional[uuid.UUID], request_id: Optional[str]) -> CharacterDTO:
        clean = validation.normalize(dto)
        try:
            validation.validate_structure(clean)
            if self._name_taken(clean.name, exclude_id=exclude_id):
                raise validation.duplicate_name_error(clean.name)
            validation.validate_business_rules(clean)
        except ValidationError as e:
            emit("info", "character.rejected", e.message, request_id, __name__, **e.details)
            raise
        return clean

    def _name_taken(self, name: str, *, exclude_id: Optional[uuid.UUID]) -> bool:
        where = [func.lower(Character.name) == name.lower()]
        if exclude_id is not None:
            where.append(Character.id != exclude_id)
        return self.store.find_first(*where) is not None

    # --- writes ---
    def create_character(self, dto: CharacterDTO, *, request_id: Optional[str] = None) -> CharacterDTO:
        if not is_blank_id(dto.id):
            raise ValidationError("Id must be empty when creating a character.", field="id")

        clean = self._validated(dto, exclude_id=None, request_id=request_id)
        entity = Character(
            name=clean.name,
            character_class=clean.character_class,
            level=clean.level,
            health=clean.health,
            mana=clean.mana,
        )
        entity = self.store.add(entity)
        emit("info", "character.created", f"character {entity.id} created", request_id, __name__, character_id=str(entity.id))
        return _to_dto(entity)

    def update_character(self, dto: CharacterDTO, *, request_id: Optional[str] = None) -> Optional[CharacterDTO]:
        """
        Full replace of the row identified by dto.id.

        Returns None when no row has that id; validation runs first, so an
        invalid body for a missing id still raises ValidationError.
        """
        if is_blank_id(dto.id):
            raise ValidationError("Id is required to update a character.", field="id")

        clean = self._validated(dto, exclude_id=dto.id, request_id=request_id)
        entity = self.store.get(dto.id)
        if entity is None:
            return None

        entity.name = clean.name
        entity.character_class = clean.character_class
        entity.level = clean.level
        entity.health = clean.health
        entity.mana = clean.mana
        entity = self.store.save(entity)
        emit("info", "character.updated", f"character {entity.id} updated", request_id, __name__, character_id=str(entity.id))
        return _to_dto(entity)

    def delete_character(self, character_id: uuid.UUID, *, request_id: Optional[str] = None) -> bool:
        entity = self.store.get(character_id)
        if entity is None:
            return False
        self.store.delete(entity)
        emit("info", "character.deleted", f"character {character_id} deleted", request_id, __name__, character_id=str(character_id))
        return True
