#!/usr/bin/env python3

from __future__ import annotations

import argparse
import pathlib
import random
import sys

from .entry import Outcome
from .errors import FormatError, InvalidChoice, ValidationError
from .maps import draw_map
from .savefile import load_session_file, save_session_file
from .session import (
    Session,
    choose_door,
    current_room,
    enter_current_room,
    new_session,
)
from .version import __version__


def play(session: Session, rng: random.Random, print_all: bool = False) -> Outcome:
    while not session.finished:
        view = current_room(session)
        player = session.player
        print(f"\nYou are in room {view.id}. (hp {player.hp}, damage {player.damage})")
        print(f"Doors lead to rooms: {', '.join(str(x) for x in view.neighbor_ids)}")
        choice = input("Pick a room, or 's' to save and quit: ").strip()
        if choice.lower() == "s":
            filename = pathlib.Path(input("Save as: ").strip())
            try:
                save_session_file(session, filename, print_all=print_all)
            except OSError as e:
                print(f"Couldn't save to {filename}: {e}")
                continue
            print(f"Game saved to {filename}.")
            session.outcome = Outcome.SAVE_AND_EXIT
            break
        try:
            choose_door(session, int(choice))
        except (ValueError, InvalidChoice):
            print("You can't go that way.")
            continue
        enter_current_room(session, rng, print_all=print_all)
    return session.outcome


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(description="Dungeon crawler")
    parser.add_argument(
        "TARGET",
        help="Number of rooms to start a new game with, or the path of a save file to load.",
    )
    parser.add_argument(
        "--random-seed",
        type=int,
        help="Number to use for initializing the random number generator.",
    )
    parser.add_argument(
        "--output-map",
        type=pathlib.Path,
        help="Export the dungeon map in DOT format (requires graphviz)",
    )
    parser.add_argument(
        "--version",
        "-V",
        action="version",
        version=f"%(prog)s {__version__}",
        help="Show program's version number and exit.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Show verbose logging output."
    )
    args = parser.parse_args(argv or sys.argv[1:])

    random_seed = args.random_seed
    if not random_seed:
        random_seed = random.randint(0, 2**32)
    if args.verbose:
        print(f"Using random seed {random_seed}")
    rng = random.Random(random_seed)

    try:
        room_count = int(args.TARGET)
    except ValueError:
        room_count = None

    if room_count is not None:
        if room_count <= 1:
            parser.exit(1, "Number of rooms must be greater than 1\n")
        session = new_session(room_count, rng, print_all=args.verbose)
    else:
        try:
            session = load_session_file(pathlib.Path(args.TARGET), print_all=args.verbose)
        except (OSError, FormatError, ValidationError) as e:
            parser.exit(1, f"Couldn't load {args.TARGET}: {e}\n")
        print(f"Loaded game from {args.TARGET}.")

    if args.output_map:
        draw_map(session, args.output_map)

    outcome = play(session, rng, print_all=args.verbose)
    if outcome == Outcome.DEATH:
        print("Game over.")


if __name__ == "__main__":
    main()
