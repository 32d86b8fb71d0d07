"""Pytest configuration and shared fixtures.

Provides settings-cache isolation, scripted random sources for
deterministic rolls, and sample characters.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

import pytest

from charsheet.models import (
    AbilityScores,
    AttackType,
    Character,
    CharacterDetails,
    ClassAction,
    Coins,
    Item,
    ProficiencyLevel,
    Skill,
    SkillName,
    SpellSlot,
    Weapon,
    WeaponStat,
)


if TYPE_CHECKING:
    from collections.abc import Callable, Generator


class ScriptedRandomSource:
    """RandomSource that returns a fixed sequence of values.

    Each draw is checked against the requested range so a test fails loudly
    if the engine asks for a different die than expected.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)
        self.calls: list[tuple[int, int]] = []

    def randint(self, low: int, high: int) -> int:
        self.calls.append((low, high))
        if not self._values:
            raise AssertionError(f"Unexpected extra draw randint({low}, {high})")
        value = self._values.pop(0)
        if not low <= value <= high:
            raise AssertionError(f"Scripted value {value} outside [{low}, {high}]")
        return value

    @property
    def exhausted(self) -> bool:
        return not self._values


class MaxRandomSource:
    """RandomSource that always rolls the highest face."""

    def randint(self, low: int, high: int) -> int:
        return high


class MinRandomSource:
    """RandomSource that always rolls a 1."""

    def randint(self, low: int, high: int) -> int:
        return low


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from charsheet.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def mock_env_vars(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set up environment variables for settings tests."""
    env_vars = {
        "CHARSHEET_APP_NAME": "tavern-sheet",
        "CHARSHEET_LOG_LEVEL": "DEBUG",
        "CHARSHEET_JSON_LOGS": "true",
        "CHARSHEET_DICE__SEED": "1234",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


# =============================================================================
# Random Source Fixtures
# =============================================================================


@pytest.fixture
def scripted_rng() -> Callable[..., ScriptedRandomSource]:
    """Factory for scripted random sources: ``scripted_rng(20, 6, 3)``."""

    def _make(*values: int) -> ScriptedRandomSource:
        return ScriptedRandomSource(values)

    return _make


@pytest.fixture
def max_rng() -> MaxRandomSource:
    return MaxRandomSource()


@pytest.fixture
def min_rng() -> MinRandomSource:
    return MinRandomSource()


# =============================================================================
# Model Fixtures
# =============================================================================


@pytest.fixture
def sample_abilities() -> AbilityScores:
    """Ability scores: STR 14 (+2), DEX 16 (+3), CON 12, INT 10, WIS 13, CHA 8."""
    return AbilityScores(
        strength=14,
        dexterity=16,
        constitution=12,
        intelligence=10,
        wisdom=13,
        charisma=8,
    )


@pytest.fixture
def longsword() -> Weapon:
    return Weapon(
        name="Longsword",
        attack_type=AttackType.MELEE,
        stat=WeaponStat.STR,
        proficient=True,
        magic_bonus=1,
        damage_dice="1d8",
        plus_stat=True,
        damage_type="slashing",
    )


@pytest.fixture
def rapier() -> Weapon:
    return Weapon(
        name="Rapier",
        attack_type=AttackType.MELEE,
        stat=WeaponStat.FINESSE,
        proficient=True,
        damage_dice="1d8",
        damage_type="piercing",
        crit_on=19,
    )


@pytest.fixture
def sample_character(
    sample_abilities: AbilityScores,
    longsword: Weapon,
    rapier: Weapon,
) -> Character:
    """A level 5 fighter with a few trained skills, weapons and gear."""
    return Character(
        id=7,
        name="Tamsin Vell",
        species_id="sp-human",
        species="Human",
        background_id="bg-soldier",
        background="Soldier",
        class_id="cl-fighter",
        class_name="Fighter",
        level=5,
        abilities=sample_abilities,
        current_hp=44,
        max_hp=44,
        speed=30,
        skills=[
            Skill(name=SkillName.ATHLETICS, proficiency=ProficiencyLevel.PROFICIENT, other=1),
            Skill(name=SkillName.PERCEPTION, proficiency=ProficiencyLevel.EXPERTISE),
        ],
        weapons=[longsword, rapier],
        coins=Coins(gold=50, silver=30, copper=20),
        items=[
            Item(id="pack", name="Explorer's Pack", quantity=1, weight=59.0),
            Item(id="rope", name="Hempen Rope", quantity=2, weight=10.0),
        ],
        spell_slots=[SpellSlot(level=1, used=1, maximum=2), SpellSlot(level=2, maximum=0)],
        class_actions=[
            ClassAction(id="second-wind", name="Second Wind", gained_from="Fighter", max_uses=1),
            ClassAction(
                id="action-surge",
                name="Action Surge",
                gained_from="Fighter",
                currently_used=1,
                max_uses=1,
            ),
        ],
        details=CharacterDetails(notes="Owes the quartermaster 5 gp"),
    )


@pytest.fixture
def sample_record() -> dict[str, Any]:
    """A character record as the API returns it, with string-encoded fields."""
    return {
        "id": 12,
        "name": "Orrin Thistle",
        "species": {"id": "s1", "name": "Halfling", "traits": []},
        "background": {"id": "b1", "name": "Sage", "features": []},
        "characterClass": {"id": "c1", "name": "Wizard", "hitDie": "d6", "features": []},
        "level": 3,
        "temporaryHp": 0,
        "currentHp": 14,
        "maxHp": 16,
        "speed": 25,
        "strength": 8,
        "dexterity": 14,
        "constitution": 13,
        "intelligence": 17,
        "wisdom": 12,
        "charisma": 10,
        "strengthModifier": -1,
        "coins": '{"platinum":0,"gold":15,"electrum":0,"silver":8,"copper":2}',
        "items": '[{"id":"1","name":"Spellbook","quantity":1,"weight":3}]',
        "details": '{"notes":"Keeps a pressed flower in the spellbook","connections":null}',
        "classActions": (
            '[{"id":"arcane-recovery","name":"Arcane Recovery","description":"",'
            '"gainedFrom":"Wizard","currentlyUsed":"0","maxUses":1}]'
        ),
        "spells": (
            '[{"id":"mm","name":"Magic Missile","spellLevel":"1","school":"Evocation",'
            '"range":"120 feet","verbal":true,"somatic":true,"prepared":"Yes"}]'
        ),
        "skills": '[{"name":"Arcana","ability":"Intelligence","proficiency":"expertise","other":0}]',
        "weapons": (
            '[{"name":"Dagger","attackType":"thrown","stat":"Finesse","proficient":true,'
            '"magicBonus":0,"damageDice":"1d4","plusStat":true,"damageType":"piercing",'
            '"critDamage":"","critOn":20}]'
        ),
        "spellSlots": "",
        "createdAt": "2024-05-01T10:00:00",
    }
