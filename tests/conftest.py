"""Pytest fixtures for Duel tests."""
import pytest
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def project_root():
    """Return the project root path."""
    return PROJECT_ROOT


@pytest.fixture
def player():
    """Create a default Player."""
    from duel.core.player import Player
    return Player()


@pytest.fixture
def level():
    """Create a default Level."""
    from duel.core.level import Level
    return Level()


@pytest.fixture
def clean_bus():
    """Give a test an event bus with no leftover subscribers."""
    from duel.core.events import event_bus
    event_bus.clear()
    yield event_bus
    event_bus.clear()
