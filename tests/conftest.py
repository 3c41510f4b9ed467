import pytest

from groupledger.app import app as flask_app
from groupledger.models import Expense, ExpenseParticipant, Member


@pytest.fixture
def members():
    """Alice, Bob and Carol."""
    return [Member("alice", "Alice"), Member("bob", "Bob"), Member("carol", "Carol")]


@pytest.fixture
def dinner():
    """Alice pays 90 split equally three ways."""
    return Expense(90, "alice", [
        ExpenseParticipant("alice", 30),
        ExpenseParticipant("bob", 30),
        ExpenseParticipant("carol", 30),
    ])


@pytest.fixture
def app():
    original = dict(flask_app.config)
    flask_app.config.update(TESTING=True)
    yield flask_app
    flask_app.config.clear()
    flask_app.config.update(original)


@pytest.fixture
def client(app):
    return app.test_client()
