import os
import sys
import pytest

# Ensure the backend root (containing the `promptguess` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from promptguess import create_app
from promptguess.models import Round
from promptguess.services.provider import ProviderError


TARGET_PROMPT = 'a red apple on a table'
TARGET_IMAGE = 'data:image/png;base64,QUlJTUFHRQ=='


class TestConfig:
    TESTING = True
    GEMINI_API_KEY = ''
    LEADERBOARD_PATH = 'leaderboard.json'
    MIN_GROUP_PLAYERS = 2
    MAX_GROUP_PLAYERS = 5
    CORS_ORIGINS = '*'
    PORT = 4000


class FakeProvider:
    """Stands in for Gemini; records the prompts it was asked to render."""

    def __init__(self, prompt=TARGET_PROMPT, image=TARGET_IMAGE):
        self.prompt = prompt
        self.image = image
        self.fail_round = False
        self.fail_render = False
        self.rendered = []

    def generate_round(self):
        if self.fail_round:
            raise ProviderError('Gemini API error: 503 Service Unavailable')
        return Round(prompt=self.prompt, image=self.image)

    def generate_image_for(self, prompt):
        self.rendered.append(prompt)
        if self.fail_render:
            raise ProviderError('Gemini did not return an image')
        return f'data:image/png;base64,{prompt.replace(" ", "_")}'


@pytest.fixture()
def leaderboard_path(tmp_path):
    return str(tmp_path / 'leaderboard.json')


@pytest.fixture()
def fake_provider():
    return FakeProvider()


@pytest.fixture()
def flask_app(leaderboard_path, fake_provider):
    class _Config(TestConfig):
        LEADERBOARD_PATH = leaderboard_path

    application = create_app(_Config, provider=fake_provider)
    yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()
