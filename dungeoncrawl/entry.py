from __future__ import annotations

import random
from enum import Enum

from typing_extensions import assert_never

from .combat import fight
from .rooms import Empty, Item, Monster, Player, Room, Treasure


class Outcome(Enum):
    CONTINUE = "continue"
    WIN = "win"
    DEATH = "death"
    SAVE_AND_EXIT = "save_and_exit"


def enter_room(
    room: Room, player: Player, rng: random.Random, print_all: bool = False
) -> Outcome:
    content = room.content
    match content:
        case Treasure():
            # absorbing; the room is left exactly as it was
            print("You found the treasure! You win!")
            return Outcome.WIN
        case Empty():
            pass
        case Monster() if not room.visited:
            print(f"A {content.name} attacks! (hp {content.hp}, damage {content.damage})")
            if not fight(player, content, rng, print_all=print_all):
                print(f"You were slain by the {content.name}.")
                return Outcome.DEATH
            print(f"You defeated the {content.name}! (hp {player.hp})")
            room.content = Empty()
        case Item() if not room.visited:
            player.hp += content.hp_restore
            player.damage += content.damage_boost
            print(
                f"You picked up a {content.name}. (hp {player.hp}, damage {player.damage})"
            )
            room.content = Empty()
        case Monster() | Item():
            # already dealt with on an earlier visit
            pass
        case _:
            assert_never(content)
    room.visited = True
    return Outcome.CONTINUE
