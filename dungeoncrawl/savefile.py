from __future__ import annotations

import hashlib
import pathlib
from io import BytesIO, IOBase
from typing import TypeVar

from mrcrowbar import utils

from .errors import FormatError
from .rooms import (
    ContentType,
    Empty,
    Item,
    ItemKind,
    Monster,
    MonsterKind,
    Player,
    Room,
    RoomContent,
    RoomGraph,
    Treasure,
)
from .session import Session, validate_session

# Save file layout. All ints are signed 32-bit little endian, tags are uint8.
#
#   magic        b"DCSV"
#   version      uint8
#   room_count   int
#   player_room  int
#   player_hp    int
#   player_dmg   int
#   room_count x:
#     visited    int (0 or 1)
#     content    uint8 (ContentType)
#     MONSTER:   kind uint8 (MonsterKind), hp int, damage int
#     ITEM:      kind uint8 (ItemKind)
#     degree     int
#     neighbor   int x degree
#
# Item stats come from ITEM_TABLE on load; monster stats are stored as-is
# so a wounded monster stays wounded.

SAVE_MAGIC = b"DCSV"
SAVE_VERSION = 1

KindType = TypeVar("KindType", MonsterKind, ItemKind)


def put_int(value: int) -> bytes:
    return utils.to_int32_le(value)


def put_tag(value: int) -> bytes:
    return utils.to_uint8(value)


def encode_content(content: RoomContent) -> bytes:
    result = put_tag(content.tag)
    match content:
        case Monster():
            result += put_tag(content.kind) + put_int(content.hp) + put_int(content.damage)
        case Item():
            result += put_tag(content.kind)
    return result


def encode_session(session: Session) -> bytes:
    graph = session.graph
    player = session.player
    result = bytearray(SAVE_MAGIC)
    result += put_tag(SAVE_VERSION)
    result += put_int(len(graph))
    result += put_int(player.location)
    result += put_int(player.hp)
    result += put_int(player.damage)
    for room in graph:
        result += put_int(1 if room.visited else 0)
        result += encode_content(room.content)
        result += put_int(len(room.neighbors))
        for dest in room.neighbors:
            result += put_int(dest)
    return bytes(result)


def get_bytes(stream: IOBase, size: int, what: str) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise FormatError(
            f"Save data ended early reading {what} (needed {size} bytes, got {len(data)})"
        )
    return data


def get_int(stream: IOBase, what: str) -> int:
    return utils.from_int32_le(get_bytes(stream, 4, what))


def get_tag(stream: IOBase, what: str) -> int:
    return utils.from_uint8(get_bytes(stream, 1, what))


def get_kind(kind_type: type[KindType], value: int) -> KindType:
    try:
        return kind_type(value)
    except ValueError:
        raise FormatError(f"Unknown {kind_type.__name__} {value}") from None


def get_content(stream: IOBase, room_id: int) -> RoomContent:
    tag = get_tag(stream, f"room {room_id} content")
    match tag:
        case ContentType.NONE:
            return Empty()
        case ContentType.TREASURE:
            return Treasure()
        case ContentType.MONSTER:
            kind = get_kind(MonsterKind, get_tag(stream, f"room {room_id} monster kind"))
            hp = get_int(stream, f"room {room_id} monster hp")
            damage = get_int(stream, f"room {room_id} monster damage")
            return Monster(kind, hp, damage)
        case ContentType.ITEM:
            return Item(get_kind(ItemKind, get_tag(stream, f"room {room_id} item kind")))
    raise FormatError(f"Room {room_id} has unknown content type {tag}")


def get_room(stream: IOBase, room_id: int, room_count: int) -> Room:
    visited = get_int(stream, f"room {room_id} visited flag")
    if visited not in (0, 1):
        raise FormatError(f"Room {room_id} has bad visited flag {visited}")
    content = get_content(stream, room_id)
    degree = get_int(stream, f"room {room_id} degree")
    if degree < 0 or degree > room_count:
        raise FormatError(f"Room {room_id} has bad degree {degree}")
    neighbors = []
    for _ in range(degree):
        dest = get_int(stream, f"room {room_id} neighbors")
        if dest not in range(room_count):
            raise FormatError(f"Room {room_id} links to room {dest}, outside 0..{room_count - 1}")
        neighbors.append(dest)
    return Room(room_id, neighbors, content, bool(visited))


def decode_session(data: bytes) -> Session:
    stream = BytesIO(data)
    magic = get_bytes(stream, len(SAVE_MAGIC), "magic")
    if magic != SAVE_MAGIC:
        raise FormatError(f"Not a save file (magic {magic!r})")
    version = get_tag(stream, "version")
    if version != SAVE_VERSION:
        raise FormatError(f"Unsupported save version {version}")

    room_count = get_int(stream, "room count")
    if room_count < 0:
        raise FormatError(f"Bad room count {room_count}")
    location = get_int(stream, "player room")
    if location not in range(room_count):
        raise FormatError(f"Player room {location} outside 0..{room_count - 1}")
    player = Player(location, get_int(stream, "player hp"), get_int(stream, "player damage"))

    graph = RoomGraph([get_room(stream, i, room_count) for i in range(room_count)])
    leftover = len(data) - stream.tell()
    if leftover:
        raise FormatError(f"{leftover} unexpected bytes after the last room")
    return Session(graph, player)


def save_session(session: Session, print_all: bool = False) -> bytes:
    data = encode_session(session)
    if print_all:
        print(f"Saved session ({len(data)} bytes, md5 {hashlib.md5(data).hexdigest()})")
    return data


def load_session(data: bytes, print_all: bool = False) -> Session:
    if print_all:
        print(f"Parsing save ({len(data)} bytes, md5 {hashlib.md5(data).hexdigest()})...")
    session = decode_session(data)
    validate_session(session)
    return session


def save_session_file(session: Session, path: pathlib.Path, print_all: bool = False) -> None:
    data = save_session(session, print_all=print_all)
    with open(path, "wb") as f:
        f.write(data)


def load_session_file(path: pathlib.Path, print_all: bool = False) -> Session:
    with open(path, "rb") as file:
        data = file.read()
    return load_session(data, print_all=print_all)
