import pytest

from nameseek.models.user import UserName
from nameseek.services.search import name_index


@pytest.fixture
def sample_users():
    return [
        UserName("Anna", "Anderson"),
        UserName("John", "Smith"),
        UserName("John", "Doe"),
        UserName("maria", "de la Cruz"),
    ]


@pytest.fixture
def sample_post():
    return {
        "id": "post-1",
        "challenge_name": "30 Day Running Challenge",
        "post_text": "<p>Don't stop running!</p><script>track()</script><p>Day 3 done.</p>",
    }


@pytest.fixture(autouse=True)
def clean_name_index():
    name_index.reset_name_index()
    yield
    name_index.reset_name_index()
