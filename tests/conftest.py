import pytest

from controllers.bot import FoodOrderingBot
from models.user import User


@pytest.fixture
def alice():
    return User(id=1, first_name="Alice")


@pytest.fixture
def bob():
    return User(id=2, first_name="Bob")


@pytest.fixture
def carol():
    return User(id=3, first_name="Carol")


@pytest.fixture
def bot():
    return FoodOrderingBot()
