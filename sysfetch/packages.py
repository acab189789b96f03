"""
Installed-package counting across package managers.

Each manager is a PackageManager record; get_package_count() walks the table once,
skipping managers that are not on PATH or not meant for this platform.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Tuple

from .system_utils import SystemUtils
from .debug_utils import write_debug

NO_PACKAGES = "No packages found"


def _choco_lib() -> str:
    return os.path.join(os.environ.get("ChocolateyInstall", r"C:\ProgramData\chocolatey"), "lib")


def _scoop_apps() -> str:
    return os.path.join(os.environ.get("SCOOP", os.path.join(Path.home(), "scoop")), "apps")


@dataclass(frozen=True)
class PackageManager:
    """
    name: executable looked up on PATH, also the label in the summary.
    command: shell command printing one line per package.
    directory: callable returning a directory holding one entry per package.
    header_lines: lines/entries that are not packages (column headers, the manager itself).
    windows: True for Windows-only managers, False for POSIX-only ones.
    """
    name: str
    command: Optional[str] = None
    directory: Optional[Callable[[], str]] = None
    header_lines: int = 0
    windows: bool = False


PACKAGE_MANAGERS: Tuple[PackageManager, ...] = (
    PackageManager("pacman", command="pacman -Qq --color never"),
    PackageManager("dpkg", command="dpkg-query -f '.\\n' -W"),
    PackageManager("rpm", command="rpm -qa"),
    PackageManager("apk", command="apk info"),
    PackageManager("flatpak", command="flatpak list"),
    PackageManager("snap", command="snap list", header_lines=1),
    PackageManager("brew", command="brew list --formula -1"),
    PackageManager("choco", directory=_choco_lib, windows=True),
    PackageManager("scoop", directory=_scoop_apps, header_lines=1, windows=True),
)


def _count_lines(sys_utils: SystemUtils, command: str) -> int:
    output = sys_utils.run_command(command)
    return sum(1 for line in output.splitlines() if line.strip())


def _count_entries(directory: str) -> int:
    try:
        with os.scandir(directory) as it:
            return sum(1 for _ in it)
    except OSError as e:
        write_debug(f"Cannot list {directory}: {e}", channel="Debug")
        return 0


def count_packages(manager: PackageManager, sys_utils: SystemUtils) -> int:
    """Number of packages installed through `manager`, header lines excluded."""
    if manager.command is not None:
        raw = _count_lines(sys_utils, manager.command)
    elif manager.directory is not None:
        raw = _count_entries(manager.directory())
    else:
        raw = 0
    return max(raw - manager.header_lines, 0)


def collect_package_counts(sys_utils: SystemUtils,
                           managers: Iterable[PackageManager] = PACKAGE_MANAGERS) -> List[Tuple[str, int]]:
    """(name, count) for every available manager with at least one package, in table order."""
    counts = []
    on_windows = sys_utils.is_windows()
    for manager in managers:
        if manager.windows != on_windows:
            continue
        if not sys_utils.command_exists(manager.name):
            continue
        count = count_packages(manager, sys_utils)
        write_debug(f"{manager.name}: {count} packages", channel="Debug")
        if count > 0:
            counts.append((manager.name, count))
    return counts


def get_package_count(sys_utils: Optional[SystemUtils] = None,
                      managers: Iterable[PackageManager] = PACKAGE_MANAGERS) -> str:
    """e.g. "1843 (dpkg, flatpak)", or "No packages found"."""
    counts = collect_package_counts(sys_utils or SystemUtils(), managers)
    total = sum(count for _, count in counts)
    if total == 0:
        return NO_PACKAGES
    return f"{total} ({', '.join(name for name, _ in counts)})"
