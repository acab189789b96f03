import inspect
import sys
import platform
import os
import datetime

# --- Configuration ---
VERBOSITY_LEVELS = ["Verbose", "Debug", "Information", "Warning", "Error", "Critical"]
FALLBACK_VERBOSITY = "Warning"


def _env_verbosity(name: str) -> str:
    """Verbosity level from environment variable `name`; an invalid value falls back to Warning."""
    value = os.environ.get(name, FALLBACK_VERBOSITY)
    if value.capitalize() in VERBOSITY_LEVELS:
        return value.capitalize()
    print(f"[Warning] Ignoring {name}={value!r}; using {FALLBACK_VERBOSITY}", file=sys.stderr)
    return FALLBACK_VERBOSITY


DEFAULT_CONSOLE_VERBOSITY = _env_verbosity("SYSFETCH_CONSOLE_VERBOSITY")
DEFAULT_LOG_VERBOSITY = _env_verbosity("SYSFETCH_LOG_VERBOSITY")
DEFAULT_LOG_DIR = os.path.expanduser(os.environ.get("SYSFETCH_LOG_DIR", "~/logs"))
LOG_FILE_PREFIX = "sysfetch"
MAX_LOG_FILE_SIZE_KB = 128         # Max size per log file in KB
MAX_LOG_FILES = 20                 # Maximum number of log files to keep
LOG_FILE_EXTENSION = ".log"

# --- Global Variables ---
_console_verbosity_level = DEFAULT_CONSOLE_VERBOSITY
_log_verbosity_level = DEFAULT_LOG_VERBOSITY
_log_dir = DEFAULT_LOG_DIR
_log_file_enabled = False
_current_log_filepath = None


def set_console_verbosity(level: str = DEFAULT_CONSOLE_VERBOSITY) -> None:
    """Set the global verbosity level for console output."""
    global _console_verbosity_level
    _console_verbosity_level = _validate_verbosity_level(level, "console")


def set_log_verbosity(level: str = DEFAULT_LOG_VERBOSITY) -> None:
    """Set the global verbosity level for file logging."""
    global _log_verbosity_level
    _log_verbosity_level = _validate_verbosity_level(level, "log")


def set_log_directory(filepath: str = DEFAULT_LOG_DIR) -> None:
    """Set the directory where log files will be stored."""
    global _log_dir, _current_log_filepath
    _log_dir = os.path.expanduser(filepath)
    _current_log_filepath = None


def enable_file_logging() -> str:
    """Enable logging to file and return the active log file path."""
    global _log_file_enabled, _current_log_filepath
    _log_file_enabled = True
    _current_log_filepath = _initialize_log_file()
    return _current_log_filepath


def disable_file_logging() -> None:
    """Disable logging to file."""
    global _log_file_enabled, _current_log_filepath
    _log_file_enabled = False
    _current_log_filepath = None


def _validate_verbosity_level(level: str, target_type: str) -> str:
    """Validate verbosity level and raise ValueError if invalid."""
    level_capitalized = level.capitalize()
    if level_capitalized not in VERBOSITY_LEVELS:
        raise ValueError(f"Invalid {target_type} verbosity level: '{level}'. Must be one of {VERBOSITY_LEVELS}")
    return level_capitalized


def _is_at_verbosity_level(channel: str, verbosity_level: str) -> bool:
    return VERBOSITY_LEVELS.index(channel.capitalize()) >= VERBOSITY_LEVELS.index(verbosity_level)


def _initialize_log_file() -> str:
    """Return today's log file path, rotating it if too large and pruning old files."""
    date_str = datetime.date.today().isoformat()
    log_filename = f"{LOG_FILE_PREFIX}_{date_str}{LOG_FILE_EXTENSION}"

    os.makedirs(_log_dir, exist_ok=True)
    log_filepath = os.path.join(_log_dir, log_filename)

    if os.path.exists(log_filepath) and os.path.getsize(log_filepath) > MAX_LOG_FILE_SIZE_KB * 1024:
        _rotate_logs(_log_dir, log_filename)

    _cleanup_old_logs(_log_dir)
    return log_filepath


def _rotate_logs(log_dir: str, current_log_filename: str) -> None:
    base, ext = os.path.splitext(current_log_filename)
    timestamp = datetime.datetime.now().strftime("%H%M%S")
    current_filepath = os.path.join(log_dir, current_log_filename)
    rotated_filepath = os.path.join(log_dir, f"{base}_{timestamp}{ext}")
    try:
        os.rename(current_filepath, rotated_filepath)
    except OSError as e:
        print(f"[Warning] Log rotation failed: {e}", file=sys.stderr)


def _cleanup_old_logs(log_dir: str) -> None:
    """Keep at most MAX_LOG_FILES of our own log files, oldest deleted first."""
    log_files = sorted(
        [entry for entry in os.scandir(log_dir)
         if entry.is_file() and entry.name.startswith(LOG_FILE_PREFIX) and entry.name.endswith(LOG_FILE_EXTENSION)],
        key=lambda entry: entry.stat().st_mtime
    )
    excess = len(log_files) - MAX_LOG_FILES
    for entry in log_files[:max(excess, 0)]:
        try:
            os.remove(entry.path)
        except OSError as e:
            print(f"[Warning] Failed to delete old log file {entry.name}: {e}", file=sys.stderr)


def write_debug(message: str = "", channel: str = "Debug", condition: bool = True,
                output_stream: str = "stderr", location_channels=None) -> None:
    """
    Write a debug message to the console and, if enabled, to the log file.
    Parameters:
      - message: The debug message.
      - channel: One of ("Verbose", "Debug", "Information", "Warning", "Error", "Critical").
      - condition: If False, the message will not be processed.
      - output_stream: "stdout" or "stderr". Defaults to stderr so results own stdout.
      - location_channels: If True, always show caller location; if list, only for specified channels.
    """
    if not condition:
        return

    channel_cap = channel.capitalize()
    global _current_log_filepath

    output_message = message

    show_location = False
    if isinstance(location_channels, bool):
        show_location = location_channels
    elif isinstance(location_channels, list):
        show_location = channel_cap in location_channels

    if show_location:
        caller = inspect.stack()[1]
        output_message = f"[{caller.filename}:{caller.lineno}] {message}"

    color_map = {
        "Error": "\033[91m", "Warning": "\033[93m", "Verbose": "\033[90m",
        "Information": "\033[96m", "Debug": "\033[92m", "Critical": "\033[95m"
    }
    reset_color = "\033[0m"
    stream = sys.stdout if output_stream.lower() == "stdout" else sys.stderr
    supports_color = stream.isatty() and platform.system() != "Windows"
    color = color_map.get(channel_cap, "") if supports_color else ""
    formatted_message = f"{color}[{channel_cap}]{reset_color} {output_message}" if color else f"[{channel_cap}] {output_message}"

    if _is_at_verbosity_level(channel_cap, _console_verbosity_level):
        print(formatted_message, file=stream)

    if _log_file_enabled and _is_at_verbosity_level(channel_cap, _log_verbosity_level):
        if not _current_log_filepath:
            _current_log_filepath = _initialize_log_file()
        try:
            with open(_current_log_filepath, "a", encoding="utf-8") as log_file:
                stamp = datetime.datetime.now().isoformat(timespec="seconds")
                log_file.write(f"{stamp} [{channel_cap}] {output_message}\n")
        except OSError as e:
            print(f"[Error] Failed to write to log file {_current_log_filepath}: {e}", file=sys.stderr)
