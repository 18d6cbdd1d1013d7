import random

import pytest

from conftest import ScriptedRandom
from dungeoncrawl.generator import generate_dungeon, link_extra_doors, link_spanning_tree
from dungeoncrawl.rooms import MAX_NEIGHBORS, RoomGraph


def test_generated_dungeons_are_connected() -> None:
    for n in range(2, 201):
        graph = generate_dungeon(n, random.Random(n))
        assert graph.reachable_from(0) == set(range(n)), f"disconnected at n={n}"


@pytest.mark.parametrize("seed", range(20))
def test_generated_dungeons_respect_door_limit(seed: int) -> None:
    graph = generate_dungeon(100, random.Random(seed))
    for room in graph:
        # both ends are checked before linking, so no room ever goes over
        assert graph.degree(room.id) <= MAX_NEIGHBORS
        assert room.id not in room.neighbors
        assert len(set(room.neighbors)) == len(room.neighbors)
        for dest in room.neighbors:
            assert graph.find_neighbor(dest, room.id)


def test_spanning_tree_follows_rng() -> None:
    graph = RoomGraph.create(5)
    link_spanning_tree(graph, ScriptedRandom(randrange=[0, 1, 0, 2]))
    assert graph.edges() == {(0, 1), (1, 2), (0, 3), (2, 4)}
    assert graph.reachable_from(0) == {0, 1, 2, 3, 4}


def test_spanning_tree_skips_full_rooms() -> None:
    graph = RoomGraph.create(7)
    link_spanning_tree(graph, ScriptedRandom(randrange=[0] * 6))
    assert graph.neighbor_ids(0) == [1, 2, 3, 4]
    # room 0 is full by the time rooms 5 and 6 arrive
    assert graph.neighbor_ids(5) == [1]
    assert graph.neighbor_ids(6) == [1]


def test_extra_doors_get_one_attempt_each() -> None:
    graph = RoomGraph.create(2)
    graph.connect(0, 1)
    # room 0 asks for two extras, and the only other room is already linked
    link_extra_doors(graph, ScriptedRandom(randrange=[0, 0], randint=[2, 0]))
    assert graph.neighbor_ids(0) == [1]
    assert graph.neighbor_ids(1) == [0]


def test_extra_doors_add_links() -> None:
    graph = RoomGraph.create(4)
    graph.connect(1, 0)
    graph.connect(2, 1)
    graph.connect(3, 2)
    link_extra_doors(graph, ScriptedRandom(randrange=[2], randint=[1, 0, 0, 0]))
    assert graph.find_neighbor(0, 3)
    assert graph.neighbor_ids(3) == [2, 0]


def test_extra_doors_respect_target_limit() -> None:
    graph = RoomGraph.create(6)
    for i in range(1, 5):
        graph.connect(0, i)
    graph.connect(4, 5)
    # room 5 wants a door to room 0, which is already full
    link_extra_doors(graph, ScriptedRandom(randrange=[0], randint=[0, 0, 0, 0, 1]))
    assert graph.degree(0) == MAX_NEIGHBORS
    assert graph.neighbor_ids(5) == [4]


@pytest.mark.parametrize("n", [-1, 0, 1])
def test_generate_rejects_tiny_dungeons(n: int) -> None:
    with pytest.raises(ValueError):
        generate_dungeon(n, random.Random(0))


def test_extra_doors_never_draw_the_room_itself() -> None:
    graph = RoomGraph.create(3)
    graph.connect(1, 0)
    graph.connect(2, 1)
    rng = ScriptedRandom(randrange=[1], randint=[1, 0, 0])
    link_extra_doors(graph, rng)
    # room 0 picks among the two other rooms; draw 1 skips over itself to room 2
    assert rng.randrange_calls == [(2, None)]
    assert graph.find_neighbor(0, 2)
    assert graph.neighbor_ids(2) == [1, 0]


@pytest.mark.parametrize("seed", range(20))
def test_extra_door_targets_exclude_source(seed: int) -> None:
    graph = RoomGraph.create(10)
    link_spanning_tree(graph, random.Random(seed))
    rng = ScriptedRandom(randint=[1] * 10, seed=seed)
    link_extra_doors(graph, rng)
    assert rng.randrange_calls
    assert all(call == (9, None) for call in rng.randrange_calls)
