from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

MAX_NEIGHBORS = 4

PLAYER_START_HP = 20
PLAYER_START_DAMAGE = 5


class ContentType(IntEnum):
    NONE = 0
    MONSTER = 1
    ITEM = 2
    TREASURE = 3


class MonsterKind(IntEnum):
    GOBLIN = 0
    TROLL = 1


class ItemKind(IntEnum):
    POTION = 0
    SWORD = 1


# kind: (name, hp, damage)
MONSTER_TABLE: dict[MonsterKind, tuple[str, int, int]] = {
    MonsterKind.GOBLIN: ("Goblin", 8, 5),
    MonsterKind.TROLL: ("Troll", 12, 3),
}

# kind: (name, hp_restore, damage_boost)
ITEM_TABLE: dict[ItemKind, tuple[str, int, int]] = {
    ItemKind.POTION: ("Potion", 10, 0),
    ItemKind.SWORD: ("Sword", 0, 2),
}


@dataclass
class Empty:
    tag = ContentType.NONE

    def __str__(self):
        return "empty"


@dataclass
class Monster:
    kind: MonsterKind
    hp: int
    damage: int

    tag = ContentType.MONSTER

    @classmethod
    def spawn(cls, kind: MonsterKind) -> Monster:
        _, hp, damage = MONSTER_TABLE[kind]
        return cls(kind, hp, damage)

    @property
    def name(self) -> str:
        return MONSTER_TABLE[self.kind][0]

    def __str__(self):
        return f"{self.name} (hp {self.hp}, damage {self.damage})"


@dataclass
class Item:
    kind: ItemKind

    tag = ContentType.ITEM

    @property
    def name(self) -> str:
        return ITEM_TABLE[self.kind][0]

    @property
    def hp_restore(self) -> int:
        return ITEM_TABLE[self.kind][1]

    @property
    def damage_boost(self) -> int:
        return ITEM_TABLE[self.kind][2]

    def __str__(self):
        return self.name


@dataclass
class Treasure:
    tag = ContentType.TREASURE

    def __str__(self):
        return "treasure"


RoomContent = Empty | Monster | Item | Treasure


@dataclass
class Room:
    id: int
    neighbors: list[int] = field(default_factory=list)
    content: RoomContent = field(default_factory=Empty)
    visited: bool = False


@dataclass
class Player:
    location: int = 0
    hp: int = PLAYER_START_HP
    damage: int = PLAYER_START_DAMAGE

    @property
    def alive(self) -> bool:
        return self.hp > 0


class RoomGraph:
    """Rooms indexed 0..n-1, joined by undirected doors.

    Each room keeps its own neighbor list in the order the doors were added.
    """

    def __init__(self, rooms: list[Room] | None = None):
        self.rooms: list[Room] = rooms if rooms is not None else []

    @classmethod
    def create(cls, n: int) -> RoomGraph:
        return cls([Room(i) for i in range(n)])

    def __len__(self) -> int:
        return len(self.rooms)

    def __getitem__(self, room_id: int) -> Room:
        return self.rooms[room_id]

    def __iter__(self):
        return iter(self.rooms)

    def connect(self, a: int, b: int) -> bool:
        # self-links and duplicate doors are quietly ignored
        if a == b or b in self.rooms[a].neighbors:
            return False
        self.rooms[a].neighbors.append(b)
        self.rooms[b].neighbors.append(a)
        return True

    def degree(self, room_id: int) -> int:
        return len(self.rooms[room_id].neighbors)

    def neighbor_ids(self, room_id: int) -> list[int]:
        return list(self.rooms[room_id].neighbors)

    def find_neighbor(self, room_id: int, target_id: int) -> bool:
        return target_id in self.rooms[room_id].neighbors

    def reachable_from(self, start: int = 0) -> set[int]:
        result = {start}
        nodes_to_test = [start]
        while nodes_to_test:
            node = nodes_to_test.pop()
            for dest in self.rooms[node].neighbors:
                if dest not in result:
                    result.add(dest)
                    nodes_to_test.append(dest)
        return result

    def edges(self) -> set[tuple[int, int]]:
        return {
            (min(room.id, n), max(room.id, n)) for room in self.rooms for n in room.neighbors
        }
