"""The base player and the actions every role shares."""

from __future__ import annotations

from coupgame.game import CoupError, Game


class Player:
    """A player in a game; roles refine behaviour through the hook methods."""

    def __init__(self, game: Game, name: str) -> None:
        self.game = game
        self.name = name
        self._coins = 0
        self.alive = True
        self.under_sanction = False
        self.bribe_used = False
        self.arrest_disabled = False
        self._actions_left = 1
        game.add_player(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, coins={self._coins})"

    @property
    def coins(self) -> int:
        return self._coins

    @property
    def actions_left(self) -> int:
        return self._actions_left

    @property
    def has_more_actions(self) -> bool:
        return self._actions_left > 1

    def _enforce_coup_rule(self) -> None:
        if self._coins >= 10:
            raise CoupError(
                f"{self.name} has 10 or more coins and must perform a coup."
            )

    def _require_turn(self) -> None:
        if self.game.turn() != self.name:
            raise CoupError("Not your turn!")

    # Hooks that roles override.

    def _intercept_arrest(self, actor: Player) -> None:
        """Called on every living player before ``actor`` arrests someone."""

    def _on_arrested(self, attacker: Player) -> None:
        """Apply the effect of being arrested by ``attacker``."""
        self.lose_coins(1)
        attacker.earn_coins(1)

    def _on_sanctioned(self, attacker: Player) -> None:
        """React to being sanctioned by ``attacker``."""

    def on_start_turn(self) -> None:
        """Called when this player's turn begins."""

    # Actions.

    def gather(self) -> None:
        """Take 1 coin from the bank."""
        self._enforce_coup_rule()
        self._require_turn()
        if self.under_sanction:
            raise CoupError("You are under sanction and cannot gather.")
        self.earn_coins(1)

    def tax(self) -> None:
        """Take 2 coins from the bank."""
        self._enforce_coup_rule()
        self._require_turn()
        if self.under_sanction:
            raise CoupError("You are under sanction and cannot tax.")
        self.earn_coins(2)

    def bribe(self) -> None:
        """Pay 4 coins for an extra action this turn."""
        self._require_turn()
        if self._coins < 4:
            raise CoupError("Not enough coins to bribe")
        if self.bribe_used:
            raise CoupError("You already used bribe this turn")
        self.lose_coins(4)
        self.bribe_used = True
        self.add_action()

    def coup(self, target: Player) -> None:
        """Pay 7 coins to eliminate ``target``."""
        self._require_turn()
        if not target.alive:
            raise CoupError("Target already eliminated.")
        if self._coins < 7:
            raise CoupError("Not enough coins for coup.")
        self.lose_coins(7)
        target.eliminate()

    def arrest(self, target: Player) -> None:
        """Take a coin from ``target`` unless something blocks the arrest."""
        self._enforce_coup_rule()
        for player in self.game.get_players():
            if player.alive:
                player._intercept_arrest(self)
        if self.game.last_arrested_target is target:
            raise CoupError(
                f"{target.name} was already arrested 🔒 last turn and cannot be "
                "arrested again until someone else is."
            )
        if self.arrest_disabled:
            raise CoupError(
                "You are blocked from using arrest this turn (Spy effect)."
            )
        if not target.alive:
            raise CoupError("Cannot arrest a dead player")
        if target.coins < 1:
            raise CoupError("Target has no coins to steal")
        target._on_arrested(self)
        self.game.last_arrested_target = target

    def sanction(self, target: Player, cost: int) -> None:
        """Pay ``cost`` coins to stop ``target`` from gathering or taxing."""
        self._enforce_coup_rule()
        self._require_turn()
        if self._coins < cost:
            raise CoupError("Not enough coins for sanction")
        if not target.alive:
            raise CoupError("Cannot sanction a dead player")
        self.lose_coins(cost)
        target._on_sanctioned(self)
        target.under_sanction = True

    # Coins and state.

    def earn_coins(self, amount: int) -> None:
        if amount < 0:
            raise CoupError("Cannot earn negative coins")
        self._coins += amount

    def lose_coins(self, amount: int) -> None:
        if amount > self._coins:
            raise CoupError("Not enough coins to lose")
        self._coins -= amount

    def eliminate(self) -> None:
        self.alive = False

    def reset_bribe(self) -> None:
        self.bribe_used = False

    def reset_actions(self) -> None:
        self._actions_left = 1

    def add_action(self) -> None:
        self._actions_left += 1

    def use_action(self) -> None:
        if self._actions_left > 0:
            self._actions_left -= 1