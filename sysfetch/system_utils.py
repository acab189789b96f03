# sysfetch/system_utils.py
import platform
import shutil
import subprocess

from .debug_utils import write_debug

_BSD_NAMES = ("freebsd", "openbsd", "netbsd", "dragonfly")


def run_shell_command(command: str) -> str:
    """
    Run `command` through the platform shell and return its stdout.

    shell=True means cmd.exe on Windows and /bin/sh everywhere else.
    Any failure (spawn error, non-zero exit, undecodable output) yields "".
    """
    try:
        result = subprocess.run(command, shell=True, text=True, capture_output=True, errors="replace")
    except Exception as e:
        write_debug(f"Command '{command}' could not be executed: {e}", channel="Warning")
        return ""
    if result.returncode != 0:
        write_debug(f"Command '{command}' exited with {result.returncode}: {result.stderr.strip()}",
                    channel="Debug")
        return ""
    return result.stdout


class SystemUtils:
    """
    OS detection plus the single command-execution boundary used by the lookups.
    """
    def __init__(self):
        self.os_name = platform.system().lower()
        write_debug(f"Detected OS: {self.os_name}", channel="Verbose")

    def is_windows(self) -> bool:
        return self.os_name == "windows"

    def is_linux(self) -> bool:
        return self.os_name == "linux"

    def is_mac(self) -> bool:
        return self.os_name == "darwin"

    def is_bsd(self) -> bool:
        return self.os_name.startswith(_BSD_NAMES)

    def describe(self) -> str:
        """Free-form OS description, used when no prober knows the OS."""
        return platform.platform()

    def hostname(self) -> str:
        return platform.node()

    def command_exists(self, name: str) -> bool:
        return shutil.which(name) is not None

    def run_command(self, command: str) -> str:
        write_debug(f"Running: {command}", channel="Verbose")
        return run_shell_command(command)
