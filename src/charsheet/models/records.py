"""Conversion between API character records and ``Character`` models.

The character API stores skills, weapons, coins, items, spell slots, class
actions, spells and details as JSON strings embedded in the character
record. This module is the one place those strings are decoded (and
re-encoded), so the rules engine only ever sees structured models.

Species, background and class arrive as nested ``{"id", "name"}`` objects
when a character is read, but the update endpoint takes a flat string map
keyed by ``speciesId``, ``backgroundId`` and ``classId``. Both shapes decode.

Example:
    >>> record = {"name": "Tamsin", "level": "3", "strength": 14,
    ...           "coins": '{"gold": 12}', "skills": "[]"}
    >>> character_from_record(record).coins.gold
    12
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from charsheet.core.exceptions import RecordDecodeError
from charsheet.core.logging import get_logger, log_context
from charsheet.models.character import Character, default_spell_slots
from charsheet.models.enums import Ability


logger = get_logger(__name__)

# Placeholder strings the web client writes for a field it never populated
_EMPTY_MARKERS = frozenset({"", "null", "undefined"})

_EMBEDDED_FIELDS = (
    "skills",
    "weapons",
    "coins",
    "items",
    "spellSlots",
    "classActions",
    "spells",
    "details",
)

# (record key of the nested object, flat id key, model field prefix)
_REFERENCES = (
    ("species", "speciesId", "species"),
    ("background", "backgroundId", "background"),
    ("characterClass", "classId", "class"),
)


def _decode_embedded(record: Mapping[str, Any], key: str, default: Any) -> Any:
    """Decode a possibly string-encoded JSON field of a record.

    Args:
        record: The raw API record.
        key: Record key to decode.
        default: Value used when the field is missing or empty.

    Returns:
        The decoded value, or ``default``.

    Raises:
        RecordDecodeError: If the string is not valid JSON.
    """
    value = record.get(key)
    if value is None:
        return default
    if isinstance(value, str):
        if value.strip() in _EMPTY_MARKERS:
            return default
        try:
            return json.loads(value)
        except json.JSONDecodeError as exc:
            raise RecordDecodeError(
                f"Field {key!r} is not valid JSON: {exc.msg}",
                field_name=key,
            ) from exc
    return value


def _expect_list(value: Any, key: str) -> list[Any]:
    if not isinstance(value, list):
        raise RecordDecodeError(
            f"Field {key!r} must be a JSON array, got {type(value).__name__}",
            field_name=key,
        )
    return value


def _expect_object(value: Any, key: str) -> dict[str, Any]:
    if not isinstance(value, Mapping):
        raise RecordDecodeError(
            f"Field {key!r} must be a JSON object, got {type(value).__name__}",
            field_name=key,
        )
    return dict(value)


def _reference(record: Mapping[str, Any], key: str, id_key: str) -> tuple[str | None, str]:
    """Read the id and name of a species, background or class reference."""
    value = record.get(key)
    ref_id = record.get(id_key)
    if isinstance(value, Mapping):
        name = str(value.get("name") or "")
        if value.get("id") is not None:
            ref_id = value["id"]
    elif value is None:
        name = ""
    else:
        name = str(value)
    if ref_id is None or ref_id == "":
        return None, name
    return str(ref_id), name


def character_from_record(record: Mapping[str, Any]) -> Character:
    """Build a Character from an API character record.

    Empty embedded fields fall back to defaults: no skills, weapons, items,
    class actions or spells, an empty purse, blank details, and nine empty
    spell slot rows. Stored ability modifiers are ignored because they are
    always derived.

    Args:
        record: The raw record as returned by the character API.

    Returns:
        The validated Character.

    Raises:
        RecordDecodeError: If an embedded field is malformed or the record
            fails validation.
    """
    with log_context(character_id=record.get("id")):
        skills = _expect_list(_decode_embedded(record, "skills", []), "skills")
        weapons = _expect_list(_decode_embedded(record, "weapons", []), "weapons")
        items = _expect_list(_decode_embedded(record, "items", []), "items")
        spell_slots = _expect_list(_decode_embedded(record, "spellSlots", []), "spellSlots")
        class_actions = _expect_list(
            _decode_embedded(record, "classActions", []), "classActions"
        )
        spells = _expect_list(_decode_embedded(record, "spells", []), "spells")
        coins = _expect_object(_decode_embedded(record, "coins", {}), "coins")
        details = _expect_object(_decode_embedded(record, "details", {}), "details")

        data: dict[str, Any] = {
            "id": record.get("id"),
            "name": record.get("name") or "",
            "abilities": {
                ability.value: record[ability.value]
                for ability in Ability
                if record.get(ability.value) is not None
            },
            "skills": skills,
            "weapons": weapons,
            "coins": coins,
            "items": items,
            "spell_slots": spell_slots or default_spell_slots(),
            "class_actions": class_actions,
            "spells": spells,
            "details": details,
        }
        for key, id_key, prefix in _REFERENCES:
            ref_id, name = _reference(record, key, id_key)
            data[f"{prefix}_id"] = ref_id
            data["class_name" if prefix == "class" else prefix] = name
        for key, field in (
            ("level", "level"),
            ("temporaryHp", "temporary_hp"),
            ("currentHp", "current_hp"),
            ("maxHp", "max_hp"),
            ("speed", "speed"),
        ):
            if record.get(key) is not None:
                data[field] = record[key]

        try:
            character = Character.model_validate(data)
        except ValidationError as exc:
            raise RecordDecodeError(
                "Character record failed validation",
                details={"character_id": record.get("id"), "errors": exc.errors(include_url=False)},
            ) from exc

        logger.debug(
            "Character record decoded",
            skills=len(character.skills),
            weapons=len(character.weapons),
            items=len(character.items),
            class_actions=len(character.class_actions),
            spells=len(character.spells),
        )
    return character


def character_to_record(character: Character) -> dict[str, Any]:
    """Encode a Character as an API record update.

    Embedded structures are serialized back to JSON strings under their
    camelCase keys. Species, background and class are written as flat
    ``speciesId``/``backgroundId``/``classId`` strings (plus their names),
    which is what the update endpoint requires. Derived values (modifiers,
    totals) are not included.

    Args:
        character: The character to encode.

    Returns:
        A dict ready to send to the character API.
    """
    dumped = character.model_dump(by_alias=True, mode="json")
    record: dict[str, Any] = {
        "id": dumped["id"],
        "name": dumped["name"],
        "speciesId": character.species_id,
        "species": character.species,
        "backgroundId": character.background_id,
        "background": character.background,
        "classId": character.class_id,
        "characterClass": character.class_name,
        "level": dumped["level"],
        "temporaryHp": dumped["temporaryHp"],
        "currentHp": dumped["currentHp"],
        "maxHp": dumped["maxHp"],
        "speed": dumped["speed"],
        **dumped["abilities"],
    }
    for key in _EMBEDDED_FIELDS:
        record[key] = json.dumps(dumped[key])
    return record


__all__ = [
    "character_from_record",
    "character_to_record",
]
