import random

from oca.dice import Die
from oca.player import Player, Token


def test_token_defaults():
    token = Token()
    assert (token.position, token.can_play, token.color) == (0, True, 1)


def test_token_with_color_starts_at_origin():
    token = Token(color=4)
    assert token.color == 4
    assert token.position == 0
    assert token.can_play is True


def test_player_defaults():
    player = Player()
    assert player.name == ""
    assert player.can_play is True
    assert player.token == Token()


def test_player_keeps_given_token():
    token = Token(color=3)
    player = Player("Ana", token)
    assert player.token is token


def test_move_token_accumulates(capsys):
    player = Player("Ana")
    player.move_token(4)
    player.move_token(5)
    assert player.token.position == 9
    out = capsys.readouterr().out.splitlines()
    assert out == ["Ana se mueve 4 casillas.", "Ana se mueve 5 casillas."]


def test_move_token_without_token_is_silent(capsys):
    player = Player("Luis")
    player.token = None
    player.move_token(3)
    assert player.token is None
    assert capsys.readouterr().out == ""


def test_roll_die_without_die_returns_zero():
    assert Player("Ana").roll_die(None) == 0


def test_roll_die_uses_the_die():
    die = Die(random.Random(5))
    player = Player("Ana")
    rolled = player.roll_die(die)
    assert rolled == die.value
    assert 1 <= rolled <= 6


def test_roll_die_matches_independent_die_with_same_seed():
    reference = Die(random.Random(11))
    die = Die(random.Random(11))
    player = Player("Luis")
    assert [player.roll_die(die) for _ in range(10)] == [reference.roll() for _ in range(10)]


def test_can_play_is_mutable():
    player = Player("Ana")
    player.can_play = False
    assert player.can_play is False