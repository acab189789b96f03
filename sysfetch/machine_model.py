"""
Hardware model resolution.

    probe (per OS family) -> normalize_model_string -> classify_virtualization

Adapted from Neofetch's get_model(). Neofetch is licensed under the MIT License,
Copyright (c) 2015-2021 Dylan Araps.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Optional

from .system_utils import SystemUtils
from .debug_utils import write_debug

UNKNOWN_DEVICE = "Unknown Device"

DMI_ID_DIR = "sys/devices/virtual/dmi/id"
DEVICETREE_MODEL = "sys/firmware/devicetree/base/model"
SYSINFO_MODEL = "tmp/sysinfo/model"
ANDROID_APP_DIRS = ("system/app", "system/priv-app")

JUNK_STRINGS = (
    "To be filled by O.E.M.",
    "To Be Filled",
    "OEM",
    "Not Applicable",
    "System Product Name",
    "System Version",
    "Undefined",
    "Default string",
    "Not Specified",
    "Type1ProductConfigId",
    "INVALID",
    "All Series",
    "\ufffd",  # replacement character left by undecodable firmware bytes
)

_WHITESPACE = re.compile(r"\s+")


def normalize_model_string(value: str) -> str:
    """
    Strip firmware placeholder strings and collapse whitespace.

    Repeats until stable: removing "OEM" from "OEOEMM" or collapsing "All  Series"
    can form a new placeholder.
    """
    previous = None
    while value != previous:
        previous = value
        for junk in JUNK_STRINGS:
            value = value.replace(junk, "")
        value = _WHITESPACE.sub(" ", value).strip()
    return value


def classify_virtualization(model: str) -> str:
    """Tag well-known hypervisor models and fall back to UNKNOWN_DEVICE."""
    if "Standard PC" in model and "QEMU" in model:
        model = f"KVM/QEMU ({model})"
    elif model.startswith("OpenBSD"):
        model = f"vmm ({model})"
    elif "VirtualBox" in model or "VMware" in model:
        pass  # already names the hypervisor

    if not model.strip():
        return UNKNOWN_DEVICE
    return model


def _read_trimmed(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8", errors="replace").replace("\x00", "").strip()
    except OSError as e:
        write_debug(f"Could not read {path}: {e}", channel="Warning")
        return ""


class ModelProber:
    """Produces the raw model string for one OS family."""

    family = "unknown"

    def __init__(self, sys_utils: SystemUtils):
        self.sys_utils = sys_utils

    def probe(self) -> str:
        raise NotImplementedError


class LinuxProber(ModelProber):
    """
    Existence-driven chain: the first source whose files exist wins,
    even if what it yields is empty.
    """

    family = "linux"

    def __init__(self, sys_utils: SystemUtils, root: str | Path = "/"):
        super().__init__(sys_utils)
        self.root = Path(root)

    def _path(self, relative: str) -> Path:
        return self.root / relative

    def _dmi_pair(self, first: str, second: str) -> Optional[str]:
        dmi = self._path(DMI_ID_DIR)
        a, b = dmi / first, dmi / second
        if a.is_file() and b.is_file():
            write_debug(f"Using DMI {first}/{second}", channel="Debug")
            return f"{_read_trimmed(a)} {_read_trimmed(b)}"
        return None

    def probe(self) -> str:
        if all(self._path(d).is_dir() for d in ANDROID_APP_DIRS):
            write_debug("Android system detected; using getprop", channel="Debug")
            brand = self.sys_utils.run_command("getprop ro.product.brand")
            model = self.sys_utils.run_command("getprop ro.product.model")
            return f"{brand} {model}"

        for first, second in (("board_vendor", "board_name"), ("product_name", "product_version")):
            found = self._dmi_pair(first, second)
            if found is not None:
                return found

        for relative in (DEVICETREE_MODEL, SYSINFO_MODEL):
            path = self._path(relative)
            if path.is_file():
                write_debug(f"Using model file {path}", channel="Debug")
                return _read_trimmed(path)

        write_debug("No model files found; falling back to lshw", channel="Debug")
        output = self.sys_utils.run_command("lshw -c system | grep product | head -1")
        return output.replace("product:", "").strip()


class MacProber(ModelProber):
    family = "darwin"

    def probe(self) -> str:
        hw_model = self.sys_utils.run_command("sysctl -n hw.model").strip()
        kexts = self.sys_utils.run_command('kextstat | grep -F -e "FakeSMC" -e "VirtualSMC"').strip()
        if kexts:
            write_debug(f"SMC emulation kext loaded: {kexts}", channel="Debug")
            return f"Hackintosh (SMBIOS: {hw_model})"
        return hw_model


class BsdProber(ModelProber):
    family = "bsd"

    def probe(self) -> str:
        return self.sys_utils.run_command("sysctl -n hw.vendor hw.product").strip()


class WindowsProber(ModelProber):
    family = "windows"

    QUERY = ('powershell -NoProfile -Command "Get-CimInstance -ClassName Win32_ComputerSystem | '
             'ForEach-Object { $_.Manufacturer + \' \' + $_.Model }"')

    def probe(self) -> str:
        model = self.sys_utils.run_command(self.QUERY).strip()
        if not model:
            write_debug("Win32_ComputerSystem query returned nothing", channel="Warning")
            return f"Windows PC ({self.sys_utils.hostname()})"
        return model


class UnknownProber(ModelProber):
    def probe(self) -> str:
        return f"Unknown OS ({self.sys_utils.describe()})"


def select_prober(sys_utils: SystemUtils) -> ModelProber:
    """Pick the prober for the host's OS family."""
    if sys_utils.is_linux():
        return LinuxProber(sys_utils)
    if sys_utils.is_mac():
        return MacProber(sys_utils)
    if sys_utils.is_bsd():
        return BsdProber(sys_utils)
    if sys_utils.is_windows():
        return WindowsProber(sys_utils)
    write_debug(f"No model prober for OS '{sys_utils.os_name}'", channel="Information")
    return UnknownProber(sys_utils)


def resolve_machine_model(sys_utils: Optional[SystemUtils] = None, prober: Optional[ModelProber] = None) -> str:
    """
    Return a human-readable hardware model, e.g. "LENOVO 20XW" or
    "KVM/QEMU (Standard PC (Q35 + ICH9, 2009) pc-q35-8.2)". Never raises and
    never returns an empty string.
    """
    if prober is None:
        prober = select_prober(sys_utils or SystemUtils())
    try:
        raw = prober.probe()
    except Exception as e:
        write_debug(f"{type(prober).__name__} failed: {e}", channel="Error")
        raw = ""
    write_debug(f"Raw model ({prober.family}): {raw!r}", channel="Debug")
    return classify_virtualization(normalize_model_string(raw))
