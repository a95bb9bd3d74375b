# =============================================================================
# Pytest Configuration and Fixtures
# =============================================================================
# Shared fixtures for the Login-TUI test suite.
# =============================================================================

import pytest
import tempfile
from pathlib import Path

from login_tui.config import Config
from login_tui.core import FILL_BOTH_FIELDS, FormState


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def xdg_dirs(temp_dir, monkeypatch):
    """Point the XDG config and state directories at a temp dir."""
    dirs = {
        "config": temp_dir / "config",
        "state": temp_dir / "state",
    }
    monkeypatch.setenv("XDG_CONFIG_HOME", str(dirs["config"]))
    monkeypatch.setenv("XDG_STATE_HOME", str(dirs["state"]))
    return dirs


@pytest.fixture
def default_config():
    """A Config with every setting at its default."""
    return Config()


@pytest.fixture
def empty_state():
    """The form as it looks when the login screen first mounts."""
    return FormState()


@pytest.fixture
def filled_state():
    """A form that passes validation."""
    return FormState(username="alice", password="secret1")


@pytest.fixture
def failed_state():
    """A form right after submitting with both fields empty."""
    return FormState(error_message=FILL_BOTH_FIELDS)
