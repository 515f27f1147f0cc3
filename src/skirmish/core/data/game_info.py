"""Static game data, balance constants and lookup tables.

Numbers in this module are balance-sensitive: the engine formulas in
``game.combat.battle_calculator`` and the opponent policies read them from
here rather than hard-coding them.
"""

from .game_enums import ActionKind


# Mitigation
MAX_ARMOR_REDUCTION = 0.75

# Flee
FLEE_BASE_CHANCE = 0.30
FLEE_CHANCE_PER_LEVEL = 0.05

# Opponent policy bands over an integer draw in [0, POLICY_ROLL_MAX]
POLICY_ROLL_MAX = 100
POLICY_DEFEND_BELOW = 25
POLICY_SPECIAL_BELOW = 60

# Progression
EXPERIENCE_PER_LEVEL = 100
VICTORY_EXPERIENCE_PER_LEVEL = 50

# Inventory
DEFAULT_INVENTORY_SIZE = 20

# Warrior shield block
SHIELD_BLOCK_MANA_COST = 20
SHIELD_BLOCK_DAMAGE_FRACTION = 0.25

ACTION_PRIORITIES = {
    ActionKind.FLEE: 5,
    ActionKind.DEFEND: 4,
    ActionKind.USE_ITEM: 3,
    ActionKind.SPECIAL: 2,
    ActionKind.ATTACK: 1,
}

