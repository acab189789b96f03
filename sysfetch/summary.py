from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Dict, Iterable, Optional

from .system_utils import SystemUtils
from .debug_utils import write_debug
from .machine_model import resolve_machine_model
from .os_info import get_os_pretty_name, get_kernel_version
from .packages import get_package_count

FIELDS = ("model", "os_name", "kernel", "packages")

FIELD_LABELS = {
    "model": "Host",
    "os_name": "OS",
    "kernel": "Kernel",
    "packages": "Packages",
}


@dataclass(frozen=True)
class SystemSummary:
    """Host summary; a field left as None was not requested."""
    model: Optional[str] = None
    os_name: Optional[str] = None
    kernel: Optional[str] = None
    packages: Optional[str] = None

    def as_dict(self) -> Dict[str, str]:
        return {name: value for name, value in asdict(self).items() if value is not None}


def collect_summary(sys_utils: Optional[SystemUtils] = None,
                    fields: Iterable[str] = FIELDS) -> SystemSummary:
    """Compute `fields` (all by default) once against the current host."""
    sys_utils = sys_utils or SystemUtils()
    lookups = {
        "model": lambda: resolve_machine_model(sys_utils),
        "os_name": get_os_pretty_name,
        "kernel": get_kernel_version,
        "packages": lambda: get_package_count(sys_utils),
    }
    values = {}
    for name in fields:
        write_debug(f"Reading {FIELD_LABELS[name].lower()}...", channel="Information")
        values[name] = lookups[name]()
    return SystemSummary(**values)
