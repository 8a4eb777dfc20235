"""Console front end: set up a game and play it from the terminal."""

from __future__ import annotations

import argparse
import random
from collections.abc import Callable, Sequence
from typing import Protocol

from coupgame.game import Game
from coupgame.roles import create_player
from coupgame.session import CoupSession, role_ability, role_emoji, role_name

ROLE_POOL = ("Governor", "Spy", "Baron", "General", "Judge", "Merchant")
MIN_PLAYERS = 2
MAX_PLAYERS = 6

HELP = (
    "Commands: gather, tax, coup, sanction, arrest, bribe, spy, invest, "
    "next, status, help, quit"
)

ReadLine = Callable[[str], str]


class _Chooser(Protocol):
    def choice(self, seq: Sequence[str]) -> str: ...


class ConsoleDecider:
    """Asks the players' questions on the console."""

    def __init__(
        self,
        read_line: ReadLine | None = None,
        write: Callable[[str], None] | None = None,
    ) -> None:
        self._read_line = read_line
        self._write = write

    def _read(self, prompt: str) -> str:
        reader = self._read_line if self._read_line is not None else input
        return reader(prompt)

    def _say(self, text: str) -> None:
        writer = self._write if self._write is not None else print
        writer(text)

    def confirm(self, title: str, question: str) -> bool:
        """Ask a yes/no question; anything but yes counts as no."""
        self._say(f"[{title}] {question}")
        try:
            answer = self._read("[y/N] ")
        except EOFError:
            return False
        return answer.strip().lower() in ("y", "yes")

    def choose(self, title: str, options: Sequence[str]) -> str | None:
        """Pick one option by number or name; an empty answer cancels."""
        if not options:
            return None
        self._say(f"[{title}] Choose a player:")
        for number, option in enumerate(options, start=1):
            self._say(f"  {number}. {option}")
        while True:
            try:
                answer = self._read("> ").strip()
            except EOFError:
                return None
            if not answer:
                return None
            if answer.isdigit() and 1 <= int(answer) <= len(options):
                return options[int(answer) - 1]
            if answer in options:
                return answer
            self._say(f"Invalid choice: {answer}")


def _ask_player_count(read_line: ReadLine) -> int:
    prompt = f"Enter number of players ({MIN_PLAYERS}-{MAX_PLAYERS}): "
    while True:
        answer = read_line(prompt).strip()
        if not answer:
            return MIN_PLAYERS
        try:
            count = int(answer)
        except ValueError:
            continue
        if MIN_PLAYERS <= count <= MAX_PLAYERS:
            return count


def setup_session(decider, read_line: ReadLine, rng: _Chooser) -> CoupSession:
    """Ask for the players, give each a random role and start a session.

    Raises ``ValueError`` if a player name is left empty; ``EOFError`` from
    ``read_line`` is passed on.
    """
    count = _ask_player_count(read_line)
    game = Game()
    for number in range(1, count + 1):
        name = read_line(f"Enter name for player {number}: ").strip()
        if not name:
            raise ValueError("Player name must not be empty")
        create_player(game, rng.choice(ROLE_POOL), name)
    return CoupSession(game, decider)


def main(argv: Sequence[str] | None = None) -> int:
    """Play a game of Coup on the console."""
    parser = argparse.ArgumentParser(prog="coupgame", description="Play Coup.")
    parser.add_argument("--seed", type=int, default=None, help="seed for role assignment")
    args = parser.parse_args(argv)

    decider = ConsoleDecider()
    try:
        session = setup_session(decider, input, random.Random(args.seed))
    except (EOFError, KeyboardInterrupt):
        print("Setup cancelled.")
        return 1
    except ValueError as exc:
        print(exc)
        return 1

    for player in session.players:
        role = role_name(player)
        print(f"{role_emoji(role)} {player.name} ({role}): {role_ability(role)}")

    actions = {
        "gather": session.gather,
        "tax": session.tax,
        "coup": session.coup,
        "sanction": session.sanction,
        "arrest": session.arrest,
        "bribe": session.bribe,
        "spy": session.spy,
        "invest": session.invest,
        "next": session.next_turn,
    }
    shown = 0

    def flush() -> None:
        nonlocal shown
        for line in session.log[shown:]:
            print(line)
        shown = len(session.log)

    def show_status() -> None:
        for line in session.status_lines():
            print(f"  {line}")

    print(HELP)
    while not session.finished:
        flush()
        show_status()
        try:
            command = input("> ").strip().lower()
        except (EOFError, KeyboardInterrupt):
            break
        if command in ("quit", "exit"):
            break
        if command == "help":
            print(HELP)
            continue
        if command == "status":
            continue
        action = actions.get(command)
        if action is None:
            print(f"Unknown command: {command}")
            continue
        action()
    flush()
    if session.finished:
        show_status()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())