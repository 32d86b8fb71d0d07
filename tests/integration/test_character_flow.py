"""Integration tests for the character sheet lifecycle.

Tests the complete flow: decode an API record, resolve the sheet, edit,
roll, and encode the record for saving.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from charsheet import (
    LoadState,
    ProficiencyLevel,
    SeededRandomSource,
    Skill,
    SkillName,
    build_sheet,
    character_from_record,
    character_to_record,
    resolve_attack,
    roll_skill_check,
)
from charsheet.core.exceptions import ClassActionError, SpellSlotError
from charsheet.engine.class_actions import expend_class_action, reset_class_actions
from charsheet.engine.spellcasting import expend_spell_slot, reset_spell_slots, set_spell_slot


if TYPE_CHECKING:
    from collections.abc import Callable

    from tests.conftest import ScriptedRandomSource


class TestCharacterFlow:
    """Test loading, resolving, editing and saving a character."""

    def test_load_and_resolve(self, sample_record: dict[str, Any]) -> None:
        """Decode a record and resolve every derived value."""
        sheet = build_sheet(character_from_record(sample_record))

        assert sheet.hit_die == "d6"
        assert sheet.proficiency_bonus == 2
        assert sheet.skill(SkillName.ARCANA).total == 7
        assert sheet.passive_perception == 11
        assert sheet.weapons[0].to_hit_display == "+4"
        assert sheet.weapons[0].damage_display == "1d4+2 piercing"
        assert sheet.load.total_weight == pytest.approx(3.5)
        assert sheet.load.carrying_capacity == 120
        assert sheet.load.state == LoadState.NORMAL

    def test_edit_skill_and_roll(
        self,
        sample_record: dict[str, Any],
        scripted_rng: Callable[..., ScriptedRandomSource],
    ) -> None:
        """Train a skill, then roll a check against the new total."""
        character = character_from_record(sample_record).with_skill(
            Skill(name=SkillName.INVESTIGATION, proficiency=ProficiencyLevel.PROFICIENT, other=1)
        )
        sheet = build_sheet(character)

        result = roll_skill_check(sheet.skill(SkillName.INVESTIGATION).total, scripted_rng(9))

        assert sheet.skill(SkillName.INVESTIGATION).total == 6
        assert result.total == 15

    def test_critical_dagger_attack(
        self,
        sample_record: dict[str, Any],
        scripted_rng: Callable[..., ScriptedRandomSource],
    ) -> None:
        character = character_from_record(sample_record)
        rng = scripted_rng(20, 3, 2, 4)

        result = resolve_attack(character.weapons[0], character.level, character.abilities, rng)

        assert result.total == 24
        assert result.is_critical
        assert result.damage.total == 3 + 6 + 2
        assert rng.exhausted

    def test_spell_slots_through_a_day(self, sample_record: dict[str, Any]) -> None:
        """Configure slots, cast until empty, then rest."""
        character = character_from_record(sample_record)
        slots = set_spell_slot(character.spell_slots, 1, maximum=2)

        slots = expend_spell_slot(slots, 1)
        slots = expend_spell_slot(slots, 1)
        with pytest.raises(SpellSlotError):
            expend_spell_slot(slots, 1)

        rested = reset_spell_slots(slots)
        assert rested[0].used == 0
        assert rested[0].maximum == 2

    def test_save_and_reload(self, sample_record: dict[str, Any]) -> None:
        """Edits survive encoding to an API record and decoding again."""
        character = character_from_record(sample_record)
        edited = character.model_copy(
            update={
                "level": 4,
                "spell_slots": expend_spell_slot(
                    set_spell_slot(character.spell_slots, 2, maximum=2), 2
                ),
            }
        )

        record = character_to_record(edited)
        reloaded = character_from_record(record)

        assert reloaded == edited
        assert record["classId"] == "c1"
        sheet = build_sheet(reloaded)
        assert sheet.level == 4
        assert sheet.hit_die == "d6"
        assert [(s.level, s.remaining) for s in sheet.spell_slots[:2]] == [(1, 0), (2, 1)]

    def test_class_action_through_a_day(self, sample_record: dict[str, Any]) -> None:
        """Use Arcane Recovery, save, reload, then rest."""
        character = character_from_record(sample_record)

        used = character.model_copy(
            update={"class_actions": expend_class_action(character.class_actions, "arcane-recovery")}
        )
        reloaded = character_from_record(character_to_record(used))

        assert build_sheet(reloaded).class_actions[0].remaining == 0
        with pytest.raises(ClassActionError):
            expend_class_action(reloaded.class_actions, "arcane-recovery")
        assert reset_class_actions(reloaded.class_actions)[0].currently_used == 0
        assert reloaded.spells[0].name == "Magic Missile"

    def test_seeded_play_is_reproducible(self, sample_record: dict[str, Any]) -> None:
        character = character_from_record(sample_record)
        dagger = character.weapons[0]

        first = [
            resolve_attack(dagger, character.level, character.abilities, rng)
            for rng in [SeededRandomSource(seed=77)] * 5
        ]
        second = [
            resolve_attack(dagger, character.level, character.abilities, rng)
            for rng in [SeededRandomSource(seed=77)] * 5
        ]

        assert first == second
