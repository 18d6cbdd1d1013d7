from __future__ import annotations

import random

from .rooms import Monster, Player

BIT_ROUND_BITS = 16


def play_round(player: Player, monster: Monster, bits: int) -> int:
    """Run one round of combat, returning the number of turns taken.

    Bits are read from least significant upward: a 1 means the player
    strikes, a 0 means the monster does. The round stops as soon as
    either side is down.
    """
    for turn in range(BIT_ROUND_BITS):
        if (bits >> turn) & 1:
            monster.hp -= player.damage
        else:
            player.hp -= monster.damage
        if player.hp <= 0 or monster.hp <= 0:
            return turn + 1
    return BIT_ROUND_BITS


def fight(
    player: Player, monster: Monster, rng: random.Random, print_all: bool = False
) -> bool:
    """Fight until someone drops. Returns True if the player survived."""
    rounds = 0
    while player.alive and monster.hp > 0:
        bits = rng.getrandbits(BIT_ROUND_BITS)
        turns = play_round(player, monster, bits)
        rounds += 1
        if print_all:
            print(
                f"--- round {rounds}: bits {bits:016b}, {turns} turns, "
                f"player hp {player.hp}, {monster.name} hp {monster.hp}"
            )
    return player.alive
