"""The six roles and their special abilities."""

from __future__ import annotations

from coupgame.game import CoupError, Game
from coupgame.player import Player


class Governor(Player):
    """Takes 3 coins on tax instead of 2; may block the tax of others."""

    def tax(self) -> None:
        """Take 3 coins from the bank and end the turn."""
        self._enforce_coup_rule()
        self._require_turn()
        if self.under_sanction:
            raise CoupError("You are under sanction and cannot tax.")
        self.earn_coins(3)
        self.game.next_turn()


class Spy(Player):
    """Watches a player and can block that player's next arrest."""

    def __init__(self, game: Game, name: str) -> None:
        super().__init__(game, name)
        self._watched: Player | None = None

    @property
    def blocked_target(self) -> Player | None:
        """The player whose next arrest will be blocked, if any."""
        return self._watched

    def watch(self, target: Player) -> None:
        """Mark ``target`` so that their next arrest is blocked."""
        self._watched = target

    def prevent_next_arrest(self, target: Player) -> None:
        """Block ``target``'s arrest if they are being watched, consuming the watch."""
        if self._watched is target:
            self._watched = None
            raise CoupError(f"{target.name}'s arrest was blocked by Spy!")

    def clear_watch(self) -> None:
        """Forget the watched player."""
        self._watched = None

    def _intercept_arrest(self, actor: Player) -> None:
        self.prevent_next_arrest(actor)


class Baron(Player):
    """Can invest 3 coins to get 6; is paid 1 coin when sanctioned."""

    def invest(self) -> None:
        """Pay 3 coins and receive 6."""
        self._enforce_coup_rule()
        if self.coins < 3:
            raise CoupError("Not enough coins to invest.")
        self.lose_coins(3)
        self.earn_coins(6)

    def on_sanction(self) -> None:
        """Compensation of 1 coin for being sanctioned."""
        self.earn_coins(1)

    def _on_sanctioned(self, attacker: Player) -> None:
        self.on_sanction()


class General(Player):
    """Can pay 5 coins to block a coup; gets the coin back when arrested."""

    def block_coup(self) -> None:
        """Pay 5 coins to block a coup."""
        if self.coins < 5:
            raise CoupError("Not enough coins to block a coup")
        self.lose_coins(5)

    def on_arrest(self) -> None:
        """Regain 1 coin after being arrested."""
        self.earn_coins(1)

    def _on_arrested(self, attacker: Player) -> None:
        super()._on_arrested(attacker)
        self.on_arrest()


class Judge(Player):
    """Can cancel a bribe; whoever sanctions a judge loses an extra coin."""

    def undo_bribe(self, target: Player) -> None:
        """Take away the extra action ``target`` bought with a bribe."""
        target.reset_actions()

    def on_sanctioned_by(self, attacker: Player) -> None:
        """Penalise ``attacker`` 1 coin for sanctioning this judge."""
        attacker.lose_coins(1)

    def _on_sanctioned(self, attacker: Player) -> None:
        self.on_sanctioned_by(attacker)


class Merchant(Player):
    """Earns a bonus coin when starting a turn with 3 or more coins."""

    def on_start_turn(self) -> None:
        """Grant 1 bonus coin when holding at least 3."""
        if self.coins >= 3:
            self.earn_coins(1)

    def on_arrest(self) -> None:
        """Pay 2 coins to the bank instead of giving 1 to the attacker."""
        if self.coins < 2:
            raise CoupError("Merchant has less than 2 coins to lose")
        self.lose_coins(2)

    def _on_arrested(self, attacker: Player) -> None:
        self.on_arrest()


ROLES: dict[str, type[Player]] = {
    "Governor": Governor,
    "Spy": Spy,
    "Baron": Baron,
    "General": General,
    "Judge": Judge,
    "Merchant": Merchant,
}


def create_player(game: Game, role: str, name: str) -> Player:
    """Create a player of the named role and register them in ``game``."""
    try:
        cls = ROLES[role]
    except KeyError:
        raise ValueError(f"Unknown role: {role}") from None
    return cls(game, name)