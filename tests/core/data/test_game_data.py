"""
Unit tests for enums and balance tables.
"""

from skirmish.core.data import (
    ACTION_KIND_NAMES,
    ACTION_PRIORITIES,
    ActionKind,
    ComponentType,
    COMPONENT_TYPE_NAMES,
    POTION_EFFECTS,
    PotionType,
)
from skirmish.core.data import game_info


class TestGameData:

    def test_every_action_kind_has_name_and_priority(self):
        for kind in ActionKind:
            assert kind in ACTION_KIND_NAMES
            assert kind in ACTION_PRIORITIES

    def test_priorities_are_distinct(self):
        assert len(set(ACTION_PRIORITIES.values())) == len(ActionKind)

    def test_every_potion_type_has_effect_text(self):
        for potion_type in PotionType:
            assert POTION_EFFECTS[potion_type]

    def test_every_component_type_has_name(self):
        for component_type in ComponentType:
            assert component_type in COMPONENT_TYPE_NAMES

    def test_balance_constants(self):
        assert game_info.MAX_ARMOR_REDUCTION == 0.75
        assert game_info.FLEE_BASE_CHANCE == 0.30
        assert game_info.FLEE_CHANCE_PER_LEVEL == 0.05
        assert game_info.POLICY_DEFEND_BELOW < game_info.POLICY_SPECIAL_BELOW <= game_info.POLICY_ROLL_MAX
        assert game_info.DEFAULT_INVENTORY_SIZE == 20
