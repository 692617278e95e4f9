import pytest

from connectfour.game.rules import ConnectFourGame
from connectfour.utils import Player


@pytest.fixture
def alice() -> Player:
    return Player("Alice", "red")


@pytest.fixture
def bob() -> Player:
    return Player("Bob", "yellow")


@pytest.fixture
def game(alice: Player, bob: Player) -> ConnectFourGame:
    return ConnectFourGame(alice, bob)

