import random

import pytest

from models.session_models import Message
from services.intent.dispatcher import IntentDispatcher
from services.session_store import InMemorySessionStore


@pytest.fixture
def dispatcher():
    """Dispatcher with a fixed greeting seed."""
    return IntentDispatcher(rng=random.Random(1234))


@pytest.fixture
def memory_store():
    return InMemorySessionStore()


@pytest.fixture
def short_history():
    """Four prior messages, enough for continuation handling to apply."""
    return [
        Message(role="user", content="I want to make a video about our cast"),
        Message(role="assistant", content="Sounds good."),
        Message(role="user", content="It should cover the first three episodes"),
        Message(role="assistant", content="Noted."),
    ]
