from __future__ import annotations

import pathlib

import graphviz

from .rooms import Empty, Item, Monster, Treasure
from .session import Session

CONTENT_COLOURS = {
    Empty: "white",
    Monster: "lightcoral",
    Item: "lightblue",
    Treasure: "gold",
}


def build_map(session: Session) -> graphviz.Graph:
    g = graphviz.Graph(
        edge_attr={"fontsize": "12"}, graph_attr={"layout": "neato", "overlap": "false"}
    )
    for room in session.graph:
        label = f"[room {room.id}] {room.content}"
        if room.visited:
            label += " (visited)"
        g.node(
            f"room_{room.id}",
            label=label,
            shape="rectangle",
            style="filled, rounded",
            fillcolor=CONTENT_COLOURS[type(room.content)],
            penwidth="3" if room.id == session.player.location else "1",
        )
    for a, b in sorted(session.graph.edges()):
        g.edge(f"room_{a}", f"room_{b}")
    return g


def draw_map(session: Session, filename: pathlib.Path) -> graphviz.Graph:
    # needs the graphviz binaries installed
    g = build_map(session)
    g.render(format="dot", engine="neato", filename=str(filename))
    return g
