# __init__.py
"""
sysfetch: machine model, OS, kernel and package-count lookups for fetch-style tools.
"""

from .system_utils import SystemUtils, run_shell_command
from .machine_model import (
    ModelProber,
    LinuxProber,
    MacProber,
    BsdProber,
    WindowsProber,
    UnknownProber,
    select_prober,
    normalize_model_string,
    classify_virtualization,
    resolve_machine_model,
)
from .os_info import get_os_pretty_name, get_kernel_version
from .packages import PackageManager, PACKAGE_MANAGERS, get_package_count
from .summary import SystemSummary, collect_summary
from . import debug_utils

__all__ = [
    "SystemUtils",
    "run_shell_command",
    "ModelProber",
    "LinuxProber",
    "MacProber",
    "BsdProber",
    "WindowsProber",
    "UnknownProber",
    "select_prober",
    "normalize_model_string",
    "classify_virtualization",
    "resolve_machine_model",
    "get_os_pretty_name",
    "get_kernel_version",
    "PackageManager",
    "PACKAGE_MANAGERS",
    "get_package_count",
    "SystemSummary",
    "collect_summary",
    "debug_utils",
]
