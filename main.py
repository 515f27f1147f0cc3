#!/usr/bin/env python3

import argparse
from typing import Optional

from skirmish.core.data import ActionKind, PotionType
from skirmish.game.entities import Potion
from skirmish.game.scenarios import EncounterLoader

# Drink a potion once health drops below this fraction
LOW_HEALTH_FRACTION = 0.35
MAX_ROUNDS = 100


def choose_player_action(battle) -> tuple[ActionKind, Optional[str]]:
    """Attack, unless hurt and carrying a health potion."""
    player = battle.player
    if player.current_health < player.max_health * LOW_HEALTH_FRACTION:
        for potion in player.find_items_by_type(Potion):
            if potion.potion_type == PotionType.HEALTH and potion.can_use(player):
                return ActionKind.USE_ITEM, potion.name
    return ActionKind.ATTACK, None


def main():
    parser = argparse.ArgumentParser(description="Play a bundled encounter to the end")
    parser.add_argument(
        "encounter",
        nargs="?",
        default="goblin_ambush",
        help=f"Bundled encounter name ({', '.join(EncounterLoader.list_bundled())})"
    )
    parser.add_argument("--debug", action="store_true", help="Include debug log entries")
    args = parser.parse_args()

    encounter = EncounterLoader.load_bundled(args.encounter)
    battle = encounter.create_battle()
    if args.debug:
        battle.log.toggle_debug()

    print(f"== {encounter.name} ==")
    if encounter.description:
        print(encounter.description)
    print(battle.player)
    print(battle.opponent)
    print()

    rounds = 0
    while not battle.is_ended and rounds < MAX_ROUNDS:
        kind, item_name = choose_player_action(battle)
        battle.play_round(kind, item_name)
        rounds += 1

    for entry in battle.log.get_messages():
        print(entry.format())

    print()
    print(battle.player)
    print(battle.opponent)


if __name__ == "__main__":
    main()
