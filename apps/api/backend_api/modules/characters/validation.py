"""
Character field rules.

Each check raises ValidationError with the user-facing message. The service
runs them in two groups around the name-uniqueness lookup:

    normalize -> validate_structure -> (unique name) -> validate_business_rules
"""
from __future__ import annotations

import re
from typing import Tuple, get_args

from backend_api.core.errors import ValidationError
from backend_api.core.schemas import INT32_MAX

from .schemas import CharacterClass, CharacterDTO

VALID_CLASSES: Tuple[str, ...] = get_args(CharacterClass)

NAME_MAX_LENGTH = 20
LEVEL_MIN = 1
LEVEL_MAX = 50
ROGUE_LEVEL_MAX = 40
HEALTH_MIN = 0
HEALTH_MAX = 10000
MANA_MIN = 1
MANA_MAX = INT32_MAX

_WORD_START = re.compile(r"\b\w")
_NAME_CHARS = re.compile(r"[a-zA-Z0-9\s]+")


def normalize_name(raw: str) -> str:
    # only the first letter of each word changes: "mcdonald jr" -> "Mcdonald Jr", "mcDonald" -> "McDonald"
    return _WORD_START.sub(lambda m: m.group(0).upper(), (raw or "").strip())


def normalize_class(raw: str) -> str:
    c = (raw or "").strip()
    if not c:
        return c
    return c[0].upper() + c[1:].lower()


def normalize(dto: CharacterDTO) -> CharacterDTO:
    return dto.model_copy(
        update={
            "name": normalize_name(dto.name),
            "character_class": normalize_class(dto.character_class),
        }
    )


def check_name_required(name: str) -> None:
    if not name:
        raise ValidationError("Name is required.", field="name")


def check_name_length(name: str) -> None:
    if len(name) > NAME_MAX_LENGTH:
        raise ValidationError(f"Name cannot be longer than {NAME_MAX_LENGTH} characters.", field="name")


def check_class_required(character_class: str) -> None:
    if not character_class:
        raise ValidationError("Class is required.", field="class")


def check_mana(mana: int) -> None:
    if mana < MANA_MIN or mana > MANA_MAX:
        raise ValidationError(f"Mana must be between {MANA_MIN} and {MANA_MAX}.", field="mana")


def check_name_charset(name: str) -> None:
    if not _NAME_CHARS.fullmatch(name):
        raise ValidationError("Name must only contain letters, numbers, and spaces.", field="name")


def check_class(character_class: str) -> None:
    if character_class not in VALID_CLASSES:
        raise ValidationError(f"{character_class} is not a valid class", field="class")


def check_rogue_level(character_class: str, level: int) -> None:
    if character_class == "Rogue" and level > ROGUE_LEVEL_MAX:
        raise ValidationError(f"Rogues cannot be above level {ROGUE_LEVEL_MAX}.", field="level")


def check_level(level: int) -> None:
    if level < LEVEL_MIN or level > LEVEL_MAX:
        raise ValidationError(f"Level must be between {LEVEL_MIN} and {LEVEL_MAX}.", field="level")


def check_health(health: int) -> None:
    if health < HEALTH_MIN or health > HEALTH_MAX:
        raise ValidationError(f"Health must be between {HEALTH_MIN} and {HEALTH_MAX}.", field="health")


def validate_structure(dto: CharacterDTO) -> None:
    """Rules that only look at the (already normalized) body."""
    check_name_required(dto.name)
    check_name_length(dto.name)
    check_class_required(dto.character_class)
    check_mana(dto.mana)
    check_name_charset(dto.name)
    check_class(dto.character_class)


def validate_business_rules(dto: CharacterDTO) -> None:
    check_rogue_level(dto.character_class, dto.level)
    check_level(dto.level)
    check_health(dto.health)


def duplicate_name_error(name: str) -> ValidationError:
    return ValidationError(f"A character with the name '{name}' already exists.", field="name")
