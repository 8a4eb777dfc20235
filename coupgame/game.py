"""Game state: players, turn order and the winner."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from coupgame.player import Player


class CoupError(RuntimeError):
    """Raised when a game rule forbids an action."""


class Game:
    """Holds the players, tracks whose turn it is and decides the winner."""

    def __init__(self) -> None:
        self._players: list[Player] = []
        self._current = 0
        self.last_arrested_target: Player | None = None

    def add_player(self, player: Player) -> None:
        """Register a player at the end of the turn order."""
        self._players.append(player)

    def players(self) -> list[str]:
        """Names of the players still in the game, in turn order."""
        return [p.name for p in self._players if p.alive]

    def turn(self) -> str:
        """Name of the player whose turn it is."""
        if not self._players:
            raise CoupError("No players in the game")
        current = self._players[self._current]
        if not current.alive:
            raise CoupError("Current player has been eliminated - call nextTurn()")
        return current.name

    def next_turn(self) -> None:
        """Pass the turn to the next living player and apply turn-start effects."""
        if not self._players:
            return
        just_finished = self._players[self._current]
        count = len(self._players)
        for step in range(1, count + 1):
            index = (self._current + step) % count
            if self._players[index].alive:
                self._current = index
                break
        else:
            raise CoupError("No players alive")

        just_finished.under_sanction = False

        now_playing = self._players[self._current]
        now_playing.reset_bribe()
        now_playing.arrest_disabled = False
        now_playing.on_start_turn()

    def winner(self) -> str:
        """Name of the last player standing."""
        alive = self.players()
        if len(alive) == 1:
            return alive[0]
        raise CoupError("Game is still ongoing")

    def get_players(self) -> list[Player]:
        """All players, eliminated ones included, in turn order."""
        return list(self._players)