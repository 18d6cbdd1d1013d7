from __future__ import annotations

import random

import pytest

from dungeoncrawl.rooms import RoomGraph, Treasure
from dungeoncrawl.session import Session


class ScriptedRandom:
    """Hands out queued values first, then falls back to a seeded generator."""

    def __init__(self, randrange=(), randint=(), bits=(), seed: int = 0):
        self.randrange_values = list(randrange)
        self.randint_values = list(randint)
        self.bits_values = list(bits)
        self.fallback = random.Random(seed)
        self.randrange_calls = []

    def randrange(self, start, stop=None, step=1):
        self.randrange_calls.append((start, stop))
        if self.randrange_values:
            return self.randrange_values.pop(0)
        return self.fallback.randrange(start, stop, step)

    def randint(self, a, b):
        if self.randint_values:
            return self.randint_values.pop(0)
        return self.fallback.randint(a, b)

    def getrandbits(self, k):
        if self.bits_values:
            return self.bits_values.pop(0)
        return self.fallback.getrandbits(k)


class NoRandom:
    """Fails the test if anything tries to roll dice."""

    def randrange(self, *args):
        raise AssertionError("unexpected randrange")

    def randint(self, *args):
        raise AssertionError("unexpected randint")

    def getrandbits(self, *args):
        raise AssertionError("unexpected getrandbits")


@pytest.fixture
def corridor() -> Session:
    # 0 - 1 - 2, treasure at the far end
    graph = RoomGraph.create(3)
    graph.connect(0, 1)
    graph.connect(1, 2)
    graph[2].content = Treasure()
    return Session(graph)
