import os
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from mazeforge import create_app  # noqa: E402
from mazeforge.maze import LevelConfig, get_level_config  # noqa: E402
from mazeforge.routes.levels_api import clear_level_cache  # noqa: E402


@pytest.fixture(scope="session")
def test_app():
    app = create_app()
    app.config.update({"TESTING": True})
    return app


@pytest.fixture(autouse=True)
def _push_app_context(test_app):
    ctx = test_app.app_context()
    ctx.push()
    try:
        yield
    finally:
        ctx.pop()


@pytest.fixture()
def client(test_app):
    return test_app.test_client()


@pytest.fixture(autouse=True)
def _fresh_level_cache():
    """Generated levels must not leak between tests through the API cache."""
    clear_level_cache()
    yield
    clear_level_cache()


@pytest.fixture()
def level_one():
    """Catalog level 1 (Ember Keep): 19x19 grid, accepted quickly."""
    return get_level_config(1)


@pytest.fixture()
def small_config():
    """9x9 grid with no difficulty thresholds; nearly always accepted on attempt 0."""
    return LevelConfig.from_dict(
        {
            "size": 180,
            "seed": 11,
            "loopCount": 3,
            "minPathLength": 0,
            "minTurns": 0,
            "profile": "citadel",
        }
    )


def pytest_configure(config):  # register custom marker
    config.addinivalue_line("markers", "performance: generation runtime guardrails")
