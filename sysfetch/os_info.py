from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Iterable

from .debug_utils import write_debug

UNKNOWN = "Unknown"

OS_RELEASE_PATH = "/etc/os-release"
RELEASE_FALLBACK_FILES = ("/etc/lsb-release", "/etc/debian_version", "/etc/redhat-release")


def _read_file(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        write_debug(f"Could not read {path}: {e}", channel="Warning")
        return ""


def _unquote(value: str) -> str:
    """Drop one matching pair of surrounding quotes; inner quotes belong to the value."""
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    return value


def get_os_pretty_name(os_release_path: str | Path = OS_RELEASE_PATH,
                       fallback_files: Iterable[str | Path] = RELEASE_FALLBACK_FILES) -> str:
    """
    Distribution name, e.g. "Ubuntu 24.04.1 LTS".

    PRETTY_NAME from os-release wins; otherwise the whole content of the first
    existing fallback release file; otherwise "Unknown".
    """
    os_release = Path(os_release_path)
    if os_release.is_file():
        for line in _read_file(os_release).splitlines():
            if line.startswith("PRETTY_NAME="):
                value = _unquote(line.split("=", 1)[1].strip())
                if value:
                    return value
                write_debug(f"Empty PRETTY_NAME in {os_release}", channel="Debug")
                break

    for candidate in map(Path, fallback_files):
        if candidate.is_file():
            content = _read_file(candidate).strip()
            if content:
                write_debug(f"Using release file {candidate}", channel="Debug")
                return content

    return UNKNOWN


def get_kernel_version() -> str:
    """`uname -r`, or "Unknown" when it cannot be run."""
    try:
        result = subprocess.run(["uname", "-r"], capture_output=True, text=True, check=True)
    except (OSError, subprocess.SubprocessError) as e:
        write_debug(f"uname -r failed: {e}", channel="Warning")
        return UNKNOWN
    return result.stdout.strip() or UNKNOWN
