from __future__ import annotations

import random

from .rooms import Empty, Item, ItemKind, Monster, MonsterKind, RoomGraph, Treasure

CONTENT_ROLLS = 3


def spawn_monster(rng: random.Random) -> Monster:
    return Monster.spawn(MonsterKind(rng.randrange(len(MonsterKind))))


def spawn_item(rng: random.Random) -> Item:
    return Item(ItemKind(rng.randrange(len(ItemKind))))


def assign_content(
    graph: RoomGraph, rng: random.Random, print_all: bool = False
) -> int:
    """Fill the dungeon's rooms, returning the id of the treasure room.

    Room 0 is where the player starts, so it always stays empty.
    """
    treasure_room = rng.randrange(1, len(graph))
    graph[treasure_room].content = Treasure()

    for room in graph.rooms[1:]:
        if room.id == treasure_room:
            continue
        match rng.randrange(CONTENT_ROLLS):
            case 0:
                room.content = Empty()
            case 1:
                room.content = spawn_monster(rng)
            case _:
                room.content = spawn_item(rng)
        if print_all:
            print(f"--- room {room.id}: {room.content}")

    if print_all:
        print(f"Treasure is in room {treasure_room}")
    return treasure_room
