# coupgame

A playable version of the Coup game for 2 to 6 players. Each player is given a random role, and each role has its own abilities. You can play in the terminal or drive the game from your own code.

## Installing

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Playing in the terminal

    coupgame
    coupgame --seed 42

The game first asks how many players there are. The answer must be from 2 to 6, and an empty answer means 2. It then asks for each player's name. An empty name cancels the setup. Each player is given a random role. `--seed` fixes the random role assignment so that it is the same every time.

On your turn, type one of these commands:

    gather, tax, coup, sanction, arrest, bribe, spy, invest, next, status, help, quit

When an action needs a target, you pick a player by number or by name. An empty answer cancels the action. Some actions can be blocked by another player's role:

- a Governor can block tax;
- a General with 5 coins or more can block a coup;
- a Judge can cancel a bribe;
- a Spy who is watching the acting player can block an arrest.

In each of these cases the game asks that player a yes/no question. If you type `next` while you still have actions left, the game asks you to confirm before the turn passes. The game ends when only one player is left.

## Roles

| Role     | Ability |
|----------|---------|
| Governor | Tax gives 3 coins and ends the turn; can block other players' tax |
| Spy      | Sees a player's coins and watches them; can block that player's next arrest |
| Baron    | Invests 3 coins to get 6; gains 1 coin when sanctioned |
| General  | Pays 5 coins to block a coup; gets back the coin taken by an arrest |
| Judge    | Can cancel a bribe; whoever sanctions a Judge loses 1 more coin |
| Merchant | Gets an extra coin when starting a turn with 3 or more; when arrested, pays 2 coins to the bank instead of giving 1 |

The shared actions are:

- **gather**: +1 coin.
- **tax**: +2 coins.
- **bribe**: pay 4 coins for an extra action.
- **coup**: pay 7 coins to eliminate a player.
- **arrest**: take 1 coin from a player. You cannot arrest the same player who was arrested last.
- **sanction**: pay 3 coins so that a player cannot gather or tax until their turn ends.

A player who holds 10 or more coins must perform a coup.

## Using it from code

```python
from coupgame.game import Game
from coupgame.roles import Governor, Baron

game = Game()
alice = Governor(game, "Alice")
bob = Baron(game, "Bob")

alice.tax()          # Alice gains 3 coins and her turn ends
print(game.turn())   # "Bob"
bob.gather()
print(game.players())  # ['Alice', 'Bob']
```

If a rule is broken, for example acting out of turn or not having enough coins, a `coupgame.game.CoupError` is raised. `coupgame.roles.create_player(game, role, name)` builds a player from a role name such as `"Spy"`. It raises `ValueError` for an unknown role.

`coupgame.session.CoupSession(game, decider)` runs a whole game. It provides these methods:

- `gather()`, `tax()`, `coup()`, `sanction()`, `arrest()`, `bribe()`, `spy()`, `invest()` and `next_turn()` carry out the actions;
- `status_lines()` returns one line per player;
- `check_for_winner()` returns the winner's name, or `None` while the game goes on.

Events are collected in `session.log`, and `session.finished` is set once there is a winner.

The session asks its questions through a decider. A decider is any object with two methods:

- `confirm(title, question)`, which returns a bool;
- `choose(title, options)`, which returns one of the options, or `None` to cancel.

`coupgame.session.Decider` answers from scripted sequences, which is handy for tests. `coupgame.cli.ConsoleDecider` asks on the terminal. `coupgame.cli.setup_session(decider, read_line, rng)` asks for the players and returns a ready session.

## What it does not do

There is no graphical window. The game is played in the terminal or driven from code. Games are not saved, and there is no computer opponent. Every decision is made by the people at the keyboard.