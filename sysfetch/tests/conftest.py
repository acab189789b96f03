import sys
from pathlib import Path

import pytest

# Ensure the sysfetch package is importable when running tests from a checkout
_REPO_DIR = Path(__file__).resolve().parents[2]
if str(_REPO_DIR) not in sys.path:
    sys.path.insert(0, str(_REPO_DIR))

from sysfetch import debug_utils


class DummySys:
    """Stands in for SystemUtils: canned command output, no processes spawned."""

    def __init__(self, os_name: str = "linux", outputs=None, commands=(), hostname="testhost"):
        self.os_name = os_name
        self.outputs = dict(outputs or {})
        self.available = set(commands)
        self.calls = []
        self._hostname = hostname

    def is_windows(self) -> bool:
        return self.os_name == "windows"

    def is_linux(self) -> bool:
        return self.os_name == "linux"

    def is_mac(self) -> bool:
        return self.os_name == "darwin"

    def is_bsd(self) -> bool:
        return self.os_name.endswith("bsd") or self.os_name == "dragonfly"

    def describe(self) -> str:
        return f"{self.os_name}-1.0"

    def hostname(self) -> str:
        return self._hostname

    def command_exists(self, name: str) -> bool:
        return name in self.available

    def run_command(self, command: str) -> str:
        self.calls.append(command)
        return self.outputs.get(command, "")


@pytest.fixture
def dummy_sys():
    return DummySys


@pytest.fixture(autouse=True)
def quiet_debug_output():
    debug_utils.set_console_verbosity("Critical")
    debug_utils.disable_file_logging()
    yield
    debug_utils.set_console_verbosity("Warning")
    debug_utils.disable_file_logging()
