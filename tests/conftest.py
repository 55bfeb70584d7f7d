import os
import random
import sys

import pytest

# Ensure the project root (containing the `guess_the_flag` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from guess_the_flag.config import AppConfig
from guess_the_flag.session import QuizSession


@pytest.fixture()
def rng():
    return random.Random(1234)


@pytest.fixture()
def app_config():
    return AppConfig()


@pytest.fixture()
def session(app_config, rng):
    return QuizSession(config=app_config, rng=rng)
