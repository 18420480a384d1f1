import pytest
import shutil
import sys
import tempfile
import os
import stat
from pathlib import Path
from unittest.mock import patch

from core import FileRegistry, SharedStateHandle

# Helper for Windows permission removal
def remove_readonly(func, path, _):
    os.chmod(path, stat.S_IWRITE)
    func(path)

@pytest.fixture
def temp_cwd():
    """Create a temporary directory and change CWD to it."""
    orig_cwd = os.getcwd()
    temp_dir = tempfile.mkdtemp()
    os.chdir(temp_dir)
    yield Path(temp_dir)
    os.chdir(orig_cwd)
    shutil.rmtree(temp_dir, onerror=remove_readonly)

@pytest.fixture(autouse=True)
def mock_app_data(tmp_path):
    """Redirect all AppData writes to a temp directory."""
    temp_app_data = tmp_path / "pdfer_test_appdata"
    temp_app_data.mkdir(parents=True, exist_ok=True)
    # core.config the attribute is the settings object, patch the module itself
    config_module = sys.modules["core.config"]

    with patch("core.APP_DATA_DIR", temp_app_data), \
         patch.object(config_module, "SETTINGS_PATH", temp_app_data / "settings.json"), \
         patch.object(config_module, "_settings", {}), \
         patch("application_state.APP_DATA_DIR", temp_app_data):
         yield temp_app_data

class FakeClock:
    """Deterministic clock for registry timestamps."""
    def __init__(self, start: int = 1_700_000_000):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: int = 1):
        self.now += seconds

@pytest.fixture
def clock():
    return FakeClock()

@pytest.fixture
def registry(clock):
    return FileRegistry(clock=clock)

@pytest.fixture
def library(registry, tmp_path):
    return SharedStateHandle(registry, tmp_path / "database.json")
