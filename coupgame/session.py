"""An interactive game session: actions, role prompts and the event log."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence

from coupgame.game import CoupError, Game
from coupgame.player import Player
from coupgame.roles import Baron, General, Governor, Judge, Merchant, Spy

_ROLE_CLASSES: tuple[tuple[type[Player], str], ...] = (
    (Governor, "Governor"),
    (Spy, "Spy"),
    (Baron, "Baron"),
    (General, "General"),
    (Judge, "Judge"),
    (Merchant, "Merchant"),
)

_ROLE_EMOJIS = {
    "Governor": "🏛️",
    "Spy": "🕵️",
    "Baron": "💰",
    "General": "🛡️",
    "Judge": "⚖️",
    "Merchant": "📦",
}

_ROLE_ABILITIES = {
    "Governor": "Tax = 3 coins, can block other's tax",
    "Spy": "See coins of others, can block arrest",
    "Baron": "Invest 3 to get 6. Gains 1 if sanctioned",
    "General": "Pay 5 to block coup on self/others",
    "Judge": "Can block bribe. Sanction costs +1",
    "Merchant": "Gets extra coin if starts turn with 3+",
}

SANCTION_COST = 3


def role_name(player: Player) -> str:
    """The role of ``player`` as a word, or ``"Unknown"``."""
    return next(
        (name for cls, name in _ROLE_CLASSES if isinstance(player, cls)), "Unknown"
    )


def role_emoji(role: str) -> str:
    """The emoji shown for ``role``; empty for an unknown role."""
    return _ROLE_EMOJIS.get(role, "")


def role_ability(role: str) -> str:
    """A one-line description of what ``role`` can do; empty if unknown."""
    return _ROLE_ABILITIES.get(role, "")


class Decider:
    """Answers the yes/no questions and target choices a session asks.

    This one answers from scripted sequences: once the confirmations run
    out it says no, and once the choices run out it picks the first option
    offered (or nothing, if none is offered).
    """

    def __init__(
        self,
        confirmations: Iterable[bool] = (),
        choices: Iterable[str | None] = (),
    ) -> None:
        self._confirmations = deque(confirmations)
        self._choices = deque(choices)
        self.asked: list[tuple[str, str]] = []
        self.offered: list[tuple[str, list[str]]] = []

    def confirm(self, title: str, question: str) -> bool:
        """Answer a yes/no question."""
        self.asked.append((title, question))
        return self._confirmations.popleft() if self._confirmations else False

    def choose(self, title: str, options: Sequence[str]) -> str | None:
        """Pick one of ``options``; ``None`` means the choice was cancelled."""
        self.offered.append((title, list(options)))
        if self._choices:
            return self._choices.popleft()
        return options[0] if options else None


class CoupSession:
    """Runs the actions of the player whose turn it is and logs what happens."""

    def __init__(self, game: Game, decider: Decider) -> None:
        self.game = game
        self.decider = decider
        self.log: list[str] = []
        self.finished = False
        self._refresh()

    @property
    def players(self) -> list[Player]:
        return self.game.get_players()

    # Helpers.

    def _player_named(self, name: str) -> Player | None:
        return next((p for p in self.players if p.name == name), None)

    def _actor(self) -> Player | None:
        return self._player_named(self.game.turn())

    def _others(self, cls: type[Player], actor: Player) -> Iterator[Player]:
        """Living players of role ``cls`` other than ``actor``."""
        return (
            p
            for p in self.players
            if isinstance(p, cls) and p.alive and p is not actor
        )

    def _show_error(self, message: str) -> None:
        self.log.append(f"❌ {message}")

    def _refresh(self) -> None:
        self.log.append(f"🟢 It's {self.game.turn()}'s turn.")

    def _select_target(self, actor: Player, title: str) -> Player | None:
        options = [p.name for p in self.players if p.alive and p.name != actor.name]
        choice = self.decider.choose(title, options)
        return self._player_named(choice) if choice else None

    def _complete(self, actor: Player, message: str, check_winner: bool = False) -> None:
        """Spend the actor's action, log it, and end the turn if none remain."""
        actor.use_action()
        self.log.append(message)
        self._refresh()
        if check_winner:
            self.check_for_winner()
        if actor.actions_left == 0:
            self.next_turn()

    # Actions.

    def gather(self) -> None:
        """The current player takes 1 coin."""
        actor = self._actor()
        if actor is None:
            return
        if actor.under_sanction:
            self._show_error("You are under sanction and cannot gather.")
            return
        try:
            actor.gather()
        except CoupError as exc:
            self._show_error(str(exc))
            self._refresh()
            return
        self._complete(actor, f"{actor.name} gathered 1 coin.")

    def tax(self) -> None:
        """The current player taxes; any other Governor may block it."""
        actor = self._actor()
        if actor is None:
            return
        if actor.under_sanction:
            self._show_error("You are under sanction and cannot tax.")
            return
        for gov in self._others(Governor, actor):
            if self.decider.confirm(
                "Governor Tax Block",
                f"{gov.name}: Do you want to block the Tax action of {actor.name}?",
            ):
                self.log.append(f"🏛️ {gov.name} blocked the Tax action of {actor.name}")
                self._refresh()
                self.check_for_winner()
                return
        try:
            actor.tax()
        except CoupError as exc:
            self._show_error(str(exc))
            self.log.append(f"🚫 {actor.name} couldn't use tax.")
            self._refresh()
            return
        self._complete(actor, f"🏛️ {actor.name} used tax.")

    def coup(self) -> None:
        """The current player pays 7 to eliminate a target; a General may block."""
        actor = self._actor()
        if actor is None:
            return
        if actor.coins < 7:
            self._show_error("You need at least 7 coins to perform a coup.")
            return
        target = self._select_target(actor, "Coup")
        if target is None:
            return

        for general in self._others(General, actor):
            if general.coins < 5:
                continue
            if self.decider.confirm(
                "General Coup Block",
                f"{general.name}: Do you want to pay 5 coins to block the coup "
                f"on {target.name}?",
            ):
                try:
                    actor.lose_coins(7)
                    general.lose_coins(5)
                except CoupError as exc:
                    self._show_error(str(exc))
                    self._refresh()
                    return
                self._complete(
                    actor,
                    f"🛡️ {general.name} blocked the coup on {target.name}",
                    check_winner=True,
                )
                return

        try:
            actor.coup(target)
        except CoupError as exc:
            self._show_error(str(exc))
            return
        self._complete(
            actor,
            f"💥 {actor.name} performed a coup on {target.name}",
            check_winner=True,
        )

    def sanction(self) -> None:
        """The current player pays to stop a target from gathering or taxing."""
        actor = self._actor()
        if actor is None:
            return
        target = self._select_target(actor, "Sanction")
        if target is None:
            return
        cost = SANCTION_COST
        self.log.append(f"🧮 {actor.name} has {actor.coins} coins. Sanction cost: {cost}")
        try:
            if actor.coins < cost:
                raise CoupError("Not enough coins for sanction")
            actor.sanction(target, cost)
        except CoupError as exc:
            self._show_error(str(exc))
            return
        self._complete(actor, f"🚫 {actor.name} sanctioned {target.name}")

    def arrest(self) -> None:
        """The current player takes a coin from a target; a watching Spy may block."""
        actor = self._actor()
        if actor is None:
            return
        target = self._select_target(actor, "Arrest")
        if target is None:
            return

        for spy in self.players:
            if not (isinstance(spy, Spy) and spy.alive and spy.blocked_target is actor):
                continue
            blocked = self.decider.confirm(
                "Spy Arrest Block",
                f"{spy.name}: Do you want to block {actor.name}'s arrest action?",
            )
            spy.clear_watch()
            if blocked:
                actor.arrest_disabled = True
                self.log.append(f"🕵️ {spy.name} blocked {actor.name}'s arrest.")
                return
            self.log.append(f"🕵️ {spy.name} chose not to block {actor.name}'s arrest.")

        try:
            actor.arrest(target)
        except CoupError as exc:
            self._show_error(str(exc))
            return
        self._complete(actor, f"{actor.name} arrested {target.name}")

    def bribe(self) -> None:
        """The current player pays 4 for an extra action; a Judge may cancel it."""
        actor = self._actor()
        if actor is None:
            return
        try:
            actor.bribe()
            self.log.append(f"💸 {actor.name} used a bribe.")
            for judge in self._others(Judge, actor):
                if self.decider.confirm(
                    "Judge Bribe Block",
                    f"{judge.name}: Do you want to block {actor.name}'s bribe?",
                ):
                    self.log.append(
                        f"⚖️ {judge.name} blocked the bribe! {actor.name} lost 4 coins."
                    )
                    judge.undo_bribe(actor)
                    self.game.next_turn()
                    self._refresh()
                    self.check_for_winner()
                    return
            self.log.append(f"🔁 {actor.name} may take another action this turn.")
            self._refresh()
        except CoupError as exc:
            self._show_error(str(exc))

    def spy(self) -> None:
        """A Spy sees a target's coins and watches the target's next arrest."""
        actor = self._actor()
        if not isinstance(actor, Spy):
            self._show_error("Only a Spy can use this action.")
            return
        target = self._select_target(actor, "Spy")
        if target is None:
            return
        self.log.append(f"{target.name} has {target.coins} coins.")
        actor.watch(target)
        self.log.append(f"{actor.name} spied on {target.name}")

    def invest(self) -> None:
        """A Baron pays 3 coins and receives 6."""
        actor = self._actor()
        if not isinstance(actor, Baron):
            self._show_error("Only a Baron can use Invest.")
            return
        try:
            actor.invest()
        except CoupError as exc:
            self._show_error(str(exc))
            return
        self._complete(actor, f"{actor.name} invested and gained 6 coins.")

    def next_turn(self) -> None:
        """End the current turn, asking first if actions remain."""
        try:
            current = self._actor()
            if current is None:
                return
            if current.actions_left > 0 and not self.decider.confirm(
                "Skip Turn", "You still have actions left. Do you want to skip them?"
            ):
                return
            for spy in self.players:
                if isinstance(spy, Spy) and spy.blocked_target is current:
                    spy.clear_watch()
            self.game.next_turn()
            now_playing = self._actor()
            if now_playing is not None:
                now_playing.reset_actions()
                now_playing.reset_bribe()
            self._refresh()
            self.check_for_winner()
        except CoupError as exc:
            self._show_error(str(exc))

    # State.

    def status_lines(self) -> list[str]:
        """One line per player: name, turn marker or elimination, and coins."""
        try:
            turn = self.game.turn()
        except CoupError:
            turn = None
        lines = []
        for player in self.players:
            display = player.name
            if not player.alive:
                display = f"❌ {display}"
            elif player.name == turn:
                display += " ← (TURN)"
            lines.append(f"{display}: {player.coins} coins")
        return lines

    def check_for_winner(self) -> str | None:
        """Return the winner and end the session if only one player is left."""
        try:
            winner = self.game.winner()
        except CoupError:
            return None
        self.log.append(f"🏆 The winner is: {winner}!")
        self.finished = True
        return winner