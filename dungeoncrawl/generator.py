from __future__ import annotations

import random

from .rooms import MAX_NEIGHBORS, RoomGraph


def link_spanning_tree(
    graph: RoomGraph, rng: random.Random, print_all: bool = False
) -> None:
    # every room past the first gets a door back to an earlier room,
    # so everything hangs off room 0.
    # rooms that have already used up their doors are passed over, so once an
    # earlier room is full this is no longer a plain pick from [0, i). the most
    # recent room only has its parent link, so there is always a candidate.
    for i in range(1, len(graph)):
        candidates = [j for j in range(i) if graph.degree(j) < MAX_NEIGHBORS]
        j = candidates[rng.randrange(len(candidates))]
        graph.connect(i, j)
        if print_all:
            print(f"--- tree: {i} <-> {j}")


def link_extra_doors(
    graph: RoomGraph, rng: random.Random, print_all: bool = False
) -> None:
    n = len(graph)
    for i in range(n):
        budget = max(0, MAX_NEIGHBORS - graph.degree(i))
        extras = rng.randint(0, budget) if budget else 0
        for _ in range(extras):
            # one shot per slot, no retries; draw from every room but i
            j = rng.randrange(n - 1)
            if j >= i:
                j += 1
            if graph.find_neighbor(i, j):
                continue
            if graph.degree(i) >= MAX_NEIGHBORS or graph.degree(j) >= MAX_NEIGHBORS:
                continue
            graph.connect(i, j)
            if print_all:
                print(f"--- extra: {i} <-> {j}")


def generate_dungeon(
    n: int, rng: random.Random, print_all: bool = False
) -> RoomGraph:
    """Build a connected dungeon of n rooms, each with at most MAX_NEIGHBORS doors."""
    if n <= 1:
        raise ValueError(f"Dungeon needs at least 2 rooms, not {n}")
    graph = RoomGraph.create(n)
    link_spanning_tree(graph, rng, print_all=print_all)
    link_extra_doors(graph, rng, print_all=print_all)
    if print_all:
        print(f"Generated {n} rooms with {len(graph.edges())} doors")
    return graph
