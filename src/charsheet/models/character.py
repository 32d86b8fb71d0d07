"""Pydantic V2 schemas for character sheet data.

These records are the inputs of the rules engine. They hold raw, user-edited
values only: every derived number (modifiers, skill totals, to-hit, weight)
is computed by ``charsheet.engine`` on demand and never stored here.

Field aliases follow the API's camelCase keys, so a decoded record can be
validated directly while Python code keeps snake_case names.

Example:
    >>> abilities = AbilityScores(strength=14, dexterity=12)
    >>> hero = Character(name="Tamsin", level=5, abilities=abilities)
    >>> hero.get_skill(SkillName.ATHLETICS).proficiency
    <ProficiencyLevel.NONE: 'none'>
"""

from __future__ import annotations

from typing import Annotated, Any
from uuid import uuid4

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

from charsheet.core.constants import (
    DEFAULT_CRIT_ON,
    MAX_ABILITY_SCORE,
    MAX_CHARACTER_LEVEL,
    MAX_COIN_COUNT,
    MAX_SPELL_LEVEL,
    MIN_ABILITY_SCORE,
    MIN_CHARACTER_LEVEL,
    MIN_SPELL_LEVEL,
)
from charsheet.models.enums import (
    Ability,
    AttackType,
    ProficiencyLevel,
    SkillName,
    WeaponStat,
)


# Type alias for validated ability scores
AbilityScore = Annotated[
    int,
    Field(
        ge=MIN_ABILITY_SCORE,
        le=MAX_ABILITY_SCORE,
        description=f"Ability score ({MIN_ABILITY_SCORE}-{MAX_ABILITY_SCORE})",
    ),
]

Level = Annotated[
    int,
    Field(
        ge=MIN_CHARACTER_LEVEL,
        le=MAX_CHARACTER_LEVEL,
        description=f"Character level ({MIN_CHARACTER_LEVEL}-{MAX_CHARACTER_LEVEL})",
    ),
]


class SheetModel(BaseModel):
    """Base for sheet records: immutable, camelCase aliases, snake_case access."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )


def _clamp_non_negative(value: Any) -> Any:
    """Clamp numeric input at zero; leave anything else for pydantic."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return max(0, value)
    return value


def _clamp_count(value: Any, upper: int | None = None) -> Any:
    """Coerce a count to an integer and clamp it into [0, upper].

    Counts arrive from form fields as ints, floats or numeric strings;
    fractional input is truncated. Input that is not numeric is returned
    unchanged so pydantic reports it.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, (str, float)):
        try:
            value = int(float(value))
        except (ValueError, OverflowError):
            return value
    if not isinstance(value, int):
        return value
    value = max(0, value)
    return value if upper is None else min(upper, value)


# =============================================================================
# Ability Scores
# =============================================================================


class AbilityScores(SheetModel):
    """The six ability scores of a character.

    Modifiers are not stored; use ``charsheet.engine.abilities.modifier``
    or ``ability_modifier`` to derive them.

    Attributes:
        strength: Physical power and athletic ability.
        dexterity: Agility, reflexes and balance.
        constitution: Health, stamina and vital force.
        intelligence: Reasoning and memory.
        wisdom: Awareness, intuition and insight.
        charisma: Force of personality.
    """

    strength: AbilityScore = 10
    dexterity: AbilityScore = 10
    constitution: AbilityScore = 10
    intelligence: AbilityScore = 10
    wisdom: AbilityScore = 10
    charisma: AbilityScore = 10

    def get_score(self, ability: Ability) -> int:
        """Get the score for a specific ability.

        Args:
            ability: The ability to look up.

        Returns:
            The ability score value.
        """
        return getattr(self, ability.value)


# =============================================================================
# Skills
# =============================================================================


class Skill(SheetModel):
    """A character's training in one skill.

    The governing ability is fixed by the skill name and is not stored.

    Attributes:
        name: One of the 18 skill names.
        proficiency: Proficiency level applied to the skill.
        other: Flat miscellaneous bonus (items, feats, etc.).
    """

    name: SkillName
    proficiency: ProficiencyLevel = ProficiencyLevel.NONE
    other: int = 0

    @property
    def ability(self) -> Ability:
        """The ability this skill is checked with."""
        return self.name.ability


# =============================================================================
# Weapons
# =============================================================================


class Weapon(SheetModel):
    """A weapon entry on the sheet.

    Attributes:
        name: Display name.
        attack_type: Melee, ranged or thrown.
        stat: Governing stat for attack and damage modifiers.
        proficient: Whether the proficiency bonus applies to the attack.
        magic_bonus: Enhancement bonus added to attack and damage.
        damage_dice: Damage dice in ``NdM`` notation; empty for none.
        plus_stat: Whether the stat modifier is added to damage.
        damage_type: Free-form damage type label (e.g. 'slashing').
        crit_damage: Extra dice rolled on a critical hit. When absent the
            damage dice are doubled instead.
        crit_on: Natural roll at or above which the attack is a critical.
    """

    name: str = ""
    attack_type: AttackType = AttackType.MELEE
    stat: WeaponStat = WeaponStat.STR
    proficient: bool = False
    magic_bonus: int = 0
    damage_dice: str = ""
    plus_stat: bool = True
    damage_type: str = ""
    crit_damage: str | None = None
    crit_on: int = Field(default=DEFAULT_CRIT_ON, ge=1, le=20)

    @field_validator("damage_dice", mode="before")
    @classmethod
    def strip_damage_dice(cls, value: Any) -> Any:
        """Normalize surrounding whitespace and treat None as no dice."""
        if value is None:
            return ""
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("crit_damage", mode="before")
    @classmethod
    def blank_crit_damage_is_absent(cls, value: Any) -> Any:
        """An empty critical damage field means 'double the damage dice'."""
        if isinstance(value, str) and not value.strip():
            return None
        if isinstance(value, str):
            return value.strip()
        return value


# =============================================================================
# Inventory
# =============================================================================


class Coins(SheetModel):
    """Coin purse. Every count is clamped to [0, MAX_COIN_COUNT]."""

    platinum: int = Field(default=0, ge=0, le=MAX_COIN_COUNT)
    gold: int = Field(default=0, ge=0, le=MAX_COIN_COUNT)
    electrum: int = Field(default=0, ge=0, le=MAX_COIN_COUNT)
    silver: int = Field(default=0, ge=0, le=MAX_COIN_COUNT)
    copper: int = Field(default=0, ge=0, le=MAX_COIN_COUNT)

    @field_validator("platinum", "gold", "electrum", "silver", "copper", mode="before")
    @classmethod
    def clamp_count(cls, value: Any) -> Any:
        return _clamp_count(value, MAX_COIN_COUNT)

    @property
    def total_count(self) -> int:
        """Number of coins across all denominations."""
        return self.platinum + self.gold + self.electrum + self.silver + self.copper


class Item(SheetModel):
    """An inventory line: a quantity of identical items.

    Attributes:
        id: Stable identifier for the line.
        name: Item name.
        quantity: Number carried (negative input clamps to 0).
        weight: Weight of one item in pounds (negative input clamps to 0).
    """

    id: str = Field(default_factory=lambda: uuid4().hex)
    name: str = ""
    quantity: int = Field(default=1, ge=0)
    weight: float = Field(default=0.0, ge=0.0)

    @field_validator("quantity", mode="before")
    @classmethod
    def clamp_quantity(cls, value: Any) -> Any:
        return _clamp_count(value)

    @field_validator("weight", mode="before")
    @classmethod
    def clamp_non_negative(cls, value: Any) -> Any:
        return _clamp_non_negative(value)


# =============================================================================
# Spell Slots
# =============================================================================


class SpellSlot(SheetModel):
    """Spell slots of a single spell level.

    Attributes:
        level: Spell level (1-9).
        used: Slots expended since the last long rest.
        maximum: Slots available at this level (API key ``max``).
    """

    level: int = Field(ge=MIN_SPELL_LEVEL, le=MAX_SPELL_LEVEL)
    used: int = Field(default=0, ge=0)
    maximum: int = Field(default=0, ge=0, alias="max")

    @field_validator("used", "maximum", mode="before")
    @classmethod
    def clamp_count(cls, value: Any) -> Any:
        return _clamp_count(value)


def default_spell_slots() -> list[SpellSlot]:
    """Nine empty spell slot rows, one per spell level."""
    return [
        SpellSlot(level=level, used=0, maximum=0)
        for level in range(MIN_SPELL_LEVEL, MAX_SPELL_LEVEL + 1)
    ]


# =============================================================================
# Spells, Class Actions and Details
# =============================================================================


class Spell(SheetModel):
    """A known or prepared spell.

    Spell entries are descriptive: the engine tracks slots, not individual
    casts. ``prepared`` and ``spell_level`` are free text as entered
    (e.g. 'Always', 'Cantrip').
    """

    id: str = Field(default_factory=lambda: uuid4().hex)
    name: str = ""
    cast_time: str = ""
    gained_from: str = ""
    target_area: str = ""
    range: str = ""
    duration: str = ""
    description: str = ""
    material_components: str = ""
    school: str = ""
    prepared: str = ""
    spell_level: str = ""
    concentration: bool = False
    ritual: bool = False
    verbal: bool = False
    somatic: bool = False
    material: bool = False

    @field_validator(
        "name",
        "cast_time",
        "gained_from",
        "target_area",
        "range",
        "duration",
        "description",
        "material_components",
        "school",
        "prepared",
        "spell_level",
        mode="before",
    )
    @classmethod
    def null_is_blank(cls, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @property
    def components(self) -> str:
        """Component letters, e.g. 'V, S, M'."""
        letters = [
            letter
            for letter, present in (("V", self.verbal), ("S", self.somatic), ("M", self.material))
            if present
        ]
        return ", ".join(letters)


class ClassAction(SheetModel):
    """A limited-use class feature such as Second Wind or Channel Divinity.

    Attributes:
        id: Stable identifier for the action.
        name: Action name.
        description: Rules text.
        gained_from: Source of the feature (class, subclass, feat).
        currently_used: Uses expended since the last rest.
        max_uses: Uses available per rest.
    """

    id: str = Field(default_factory=lambda: uuid4().hex)
    name: str = ""
    description: str = ""
    gained_from: str = ""
    currently_used: int = Field(default=0, ge=0)
    max_uses: int = Field(default=0, ge=0)

    @field_validator("currently_used", "max_uses", mode="before")
    @classmethod
    def clamp_count(cls, value: Any) -> Any:
        if value is None or value == "":
            return 0
        return _clamp_count(value)


class CharacterDetails(SheetModel):
    """Free-text notes shown on the details tab."""

    background: str = ""
    class_features: str = ""
    species_features: str = ""
    other_features: str = ""
    notes: str = ""
    connections: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def null_is_blank(cls, value: Any) -> Any:
        return "" if value is None else value


# =============================================================================
# Character Aggregate
# =============================================================================


class Character(SheetModel):
    """A character as the rules engine sees it.

    Descriptive fields (species, background, class, hit points) are carried
    for the sheet but never computed on, except the class name which picks
    the hit die.

    Attributes:
        id: API identifier, if the character has been saved.
        name: Character name.
        species_id: API identifier of the species.
        species: Species name.
        background_id: API identifier of the background.
        background: Background name.
        class_id: API identifier of the class.
        class_name: Class name (e.g. 'Fighter').
        level: Character level (1-20).
        abilities: Ability scores.
        temporary_hp: Temporary hit points.
        current_hp: Current hit points.
        max_hp: Maximum hit points.
        speed: Walking speed in feet.
        skills: Skills the user has edited; the rest default on lookup.
        weapons: Weapon entries.
        coins: Coin purse.
        items: Inventory lines.
        spell_slots: Spell slot rows by level.
        class_actions: Limited-use class features.
        spells: Spell list.
        details: Free-text notes.
    """

    id: int | None = None
    name: str = Field(min_length=1)
    species_id: str | None = None
    species: str = ""
    background_id: str | None = None
    background: str = ""
    class_id: str | None = None
    class_name: str = ""
    level: Level = 1
    abilities: AbilityScores = Field(default_factory=AbilityScores)
    temporary_hp: int = 0
    current_hp: int = 0
    max_hp: int = 0
    speed: int = 0
    skills: list[Skill] = Field(default_factory=list)
    weapons: list[Weapon] = Field(default_factory=list)
    coins: Coins = Field(default_factory=Coins)
    items: list[Item] = Field(default_factory=list)
    spell_slots: list[SpellSlot] = Field(default_factory=default_spell_slots)
    class_actions: list[ClassAction] = Field(default_factory=list)
    spells: list[Spell] = Field(default_factory=list)
    details: CharacterDetails = Field(default_factory=CharacterDetails)

    @field_validator("species_id", "background_id", "class_id", mode="before")
    @classmethod
    def id_as_text(cls, value: Any) -> Any:
        """Reference ids are strings on the wire; numeric ids are accepted."""
        if value == "":
            return None
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @model_validator(mode="after")
    def validate_unique_skills(self) -> "Character":
        """Skills are identified by name, so each may appear once."""
        seen: set[SkillName] = set()
        for skill in self.skills:
            if skill.name in seen:
                msg = f"Duplicate skill entry: {skill.name}"
                raise ValueError(msg)
            seen.add(skill.name)
        return self

    def get_skill(self, name: SkillName) -> Skill:
        """Get a skill, creating the untrained default if never edited.

        Args:
            name: The skill to look up.

        Returns:
            The stored Skill, or ``Skill(name=name)`` with no proficiency
            and no other bonus.
        """
        for skill in self.skills:
            if skill.name == name:
                return skill
        return Skill(name=name)

    def with_skill(self, skill: Skill) -> "Character":
        """Return a copy with ``skill`` added or replacing the same-named one."""
        skills = [s for s in self.skills if s.name != skill.name]
        skills.append(skill)
        return self.model_copy(update={"skills": skills})


__all__ = [
    "AbilityScore",
    "Level",
    "SheetModel",
    "AbilityScores",
    "Skill",
    "Weapon",
    "Coins",
    "Item",
    "SpellSlot",
    "default_spell_slots",
    "Spell",
    "ClassAction",
    "CharacterDetails",
    "Character",
]
