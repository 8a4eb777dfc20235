import pytest

from coupgame.game import CoupError, Game
from coupgame.player import Player


@pytest.fixture
def pair():
    game = Game()
    return game, Player(game, "A"), Player(game, "B")


def test_basic_coin_management_and_gather():
    game = Game()
    alice = Player(game, "Alice")
    assert alice.coins == 0
    alice.gather()
    assert alice.coins == 1


def test_tax_gives_two_coins(pair):
    _, a, _ = pair
    a.tax()
    assert a.coins == 2


def test_gather_not_your_turn(pair):
    _, _, b = pair
    with pytest.raises(CoupError, match="Not your turn!"):
        b.gather()


def test_coup_must_be_done_when_over_limit(pair):
    _, a, b = pair
    a.earn_coins(10)
    with pytest.raises(CoupError) as info:
        a.gather()
    assert str(info.value) == "A has 10 or more coins and must perform a coup."
    a.coup(b)
    assert not b.alive
    assert a.coins == 3


def test_sanctioned_player_cannot_gather_or_tax(pair):
    game, a, b = pair
    b.earn_coins(3)
    game.next_turn()
    b.sanction(a, 3)
    assert b.coins == 0
    game.next_turn()
    for action, verb in ((a.gather, "gather"), (a.tax, "tax")):
        with pytest.raises(CoupError) as info:
            action()
        assert str(info.value) == f"You are under sanction and cannot {verb}."


def test_sanction_sets_flag_and_costs(pair):
    _, a, b = pair
    a.earn_coins(5)
    a.sanction(b, 4)
    assert a.coins == 1
    assert b.under_sanction is True


@pytest.mark.parametrize(
    "coins, action, message",
    [
        (2, lambda a, b: a.sanction(b, 3), "Not enough coins for sanction"),
        (3, lambda a, b: a.bribe(), "Not enough coins to bribe"),
        (6, lambda a, b: a.coup(b), "Not enough coins for coup."),
        (0, lambda a, b: a.arrest(b), "Target has no coins to steal"),
    ],
)
def test_actions_without_enough_coins(pair, coins, action, message):
    _, a, b = pair
    a.earn_coins(coins)
    with pytest.raises(CoupError, match=message):
        action(a, b)
    assert a.coins == coins
    assert b.alive


def test_sanction_dead_player(pair):
    _, a, b = pair
    a.earn_coins(3)
    b.eliminate()
    with pytest.raises(CoupError, match="Cannot sanction a dead player"):
        a.sanction(b, 3)


def test_bribe_and_action_usage():
    game = Game()
    g = Player(game, "G")
    g.earn_coins(5)
    g.bribe()
    assert g.coins == 1
    assert g.bribe_used is True
    assert g.has_more_actions is True
    g.use_action()
    g.use_action()
    assert g.actions_left == 0


def test_bribe_twice_raises(pair):
    _, a, _ = pair
    a.earn_coins(8)
    a.bribe()
    with pytest.raises(CoupError, match="already used bribe"):
        a.bribe()
    assert a.coins == 4


def test_use_action_never_goes_negative(pair):
    _, a, _ = pair
    a.use_action()
    a.use_action()
    assert a.actions_left == 0
    a.reset_actions()
    assert a.actions_left == 1


def test_cannot_coup_or_arrest_dead_player(pair):
    game, a, b = pair
    a.earn_coins(10)
    a.coup(b)
    c = Player(game, "C")
    c.earn_coins(10)
    for action in (c.coup, c.arrest):
        with pytest.raises(CoupError):
            action(b)


def test_coup_target_already_eliminated(pair):
    _, a, b = pair
    a.earn_coins(14)
    a.coup(b)
    with pytest.raises(CoupError, match="Target already eliminated."):
        a.coup(b)


def test_invalid_coin_operations(pair):
    _, a, _ = pair
    with pytest.raises(CoupError):
        a.earn_coins(-1)
    with pytest.raises(CoupError):
        a.lose_coins(1)
    a.earn_coins(3)
    with pytest.raises(CoupError):
        a.lose_coins(4)
    assert a.coins == 3


def test_arrest_transfers_one_coin(pair):
    _, a, b = pair
    b.earn_coins(2)
    a.arrest(b)
    assert (a.coins, b.coins) == (1, 1)


def test_arrest_same_target_twice_raises(pair):
    _, a, b = pair
    b.earn_coins(2)
    a.arrest(b)
    with pytest.raises(CoupError, match="already arrested"):
        a.arrest(b)


def test_arrest_when_disabled(pair):
    _, a, b = pair
    b.earn_coins(1)
    a.arrest_disabled = True
    with pytest.raises(CoupError, match="blocked from using arrest"):
        a.arrest(b)
    assert b.coins == 1


def test_eliminate(pair):
    _, a, _ = pair
    assert a.alive is True
    a.eliminate()
    assert a.alive is False


def test_reset_bribe(pair):
    _, a, _ = pair
    a.earn_coins(4)
    a.bribe()
    a.reset_bribe()
    assert a.bribe_used is False