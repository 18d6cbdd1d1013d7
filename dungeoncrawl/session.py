from __future__ import annotations

import random
from dataclasses import dataclass, field

from .content import assign_content
from .entry import Outcome, enter_room
from .errors import InvalidChoice, ValidationError
from .generator import generate_dungeon
from .rooms import MAX_NEIGHBORS, Empty, Item, Monster, Player, RoomGraph, Treasure


@dataclass
class Session:
    graph: RoomGraph
    player: Player = field(default_factory=Player)
    outcome: Outcome = Outcome.CONTINUE

    @property
    def finished(self) -> bool:
        return self.outcome != Outcome.CONTINUE


@dataclass
class RoomView:
    id: int
    neighbor_ids: list[int]
    content_summary: str


def validate_session(session: Session) -> None:
    graph = session.graph
    n = len(graph)
    if n <= 1:
        raise ValidationError(f"Dungeon has {n} rooms, needs at least 2")
    if session.player.location not in range(n):
        raise ValidationError(f"Player is in room {session.player.location}, outside 0..{n - 1}")

    treasure = [room.id for room in graph if isinstance(room.content, Treasure)]
    if len(treasure) != 1:
        raise ValidationError(f"Expected exactly one treasure room, found {treasure}")
    if treasure[0] == 0:
        raise ValidationError("Treasure can't be in the starting room")
    if session.player.location == treasure[0]:
        raise ValidationError("Player is already standing on the treasure")
    if not isinstance(graph[0].content, Empty):
        raise ValidationError(f"Starting room holds {graph[0].content}")

    player = session.player
    if player.hp <= 0 or player.damage <= 0:
        raise ValidationError(f"Player can't fight (hp {player.hp}, damage {player.damage})")

    for i, room in enumerate(graph):
        if room.id != i:
            raise ValidationError(f"Room {room.id} is stored out of order")
        if len(room.neighbors) > MAX_NEIGHBORS:
            raise ValidationError(
                f"Room {room.id} has {len(room.neighbors)} doors, limit is {MAX_NEIGHBORS}"
            )
        for dest in room.neighbors:
            if dest not in range(n):
                raise ValidationError(f"Room {room.id} links to missing room {dest}")
            if room.id not in graph[dest].neighbors:
                raise ValidationError(f"Door {room.id} -> {dest} has no way back")
        if room.visited and isinstance(room.content, (Monster, Item)):
            raise ValidationError(
                f"Room {room.id} was visited but still holds {room.content}"
            )
        if isinstance(room.content, Monster) and room.content.damage <= 0:
            # a harmless monster against a harmless player never finishes a fight
            raise ValidationError(f"Room {room.id} holds a monster that can't fight")

    unreachable = set(range(n)) - graph.reachable_from(0)
    if unreachable:
        raise ValidationError(f"Rooms {sorted(unreachable)} can't be reached from room 0")


def new_session(
    room_count: int, rng: random.Random, print_all: bool = False
) -> Session:
    if room_count <= 1:
        raise ValueError(f"Room count must be greater than 1, not {room_count}")
    graph = generate_dungeon(room_count, rng, print_all=print_all)
    assign_content(graph, rng, print_all=print_all)
    session = Session(graph)
    validate_session(session)
    # the starting room is always empty; this just marks it as seen
    enter_room(graph[0], session.player, rng)
    return session


def current_room(session: Session) -> RoomView:
    room = session.graph[session.player.location]
    return RoomView(room.id, session.graph.neighbor_ids(room.id), str(room.content))


def choose_door(session: Session, target_id: int) -> None:
    if session.finished:
        raise InvalidChoice(f"The game is over ({session.outcome.value})")
    location = session.player.location
    if not session.graph.find_neighbor(location, target_id):
        raise InvalidChoice(f"Room {target_id} is not connected to room {location}")
    session.player.location = target_id


def enter_current_room(
    session: Session, rng: random.Random, print_all: bool = False
) -> Outcome:
    if session.finished:
        raise InvalidChoice(f"The game is over ({session.outcome.value})")
    session.outcome = enter_room(
        session.graph[session.player.location], session.player, rng, print_all=print_all
    )
    return session.outcome
