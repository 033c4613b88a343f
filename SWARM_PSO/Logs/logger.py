# logger.py
# Console logger shared by every SWARM_PSO module.
# Usage: from SWARM_PSO.Logs.logger import log_info, log_debug, ...

import sys
import datetime
import os

# --- Configuration ---
# Colour is skipped when NO_COLOR is set or stdout is not a terminal (pipes, CI logs)
ENABLE_COLOR = "NO_COLOR" not in os.environ and sys.stdout.isatty()

DEBUG = os.environ.get("SWARM_PSO_DEBUG") == "1"

MODULE_PAD = 25

# Levels written to stderr; everything else goes to stdout
STDERR_LEVELS = {"error", "warning"}


# --- ANSI Escape Codes ---
class Colors:
    RESET = "\033[0m"
    PURPLE = "\033[0;35m"
    CYAN = "\033[0;36m"
    WHITE = "\033[0;37m"
    BOLD_RED = "\033[1;31m"
    BOLD_GREEN = "\033[1;32m"
    BOLD_YELLOW = "\033[1;33m"
    BOLD_BLUE = "\033[1;34m"


# --- Semantic Color Mapping ---
COLOR_MAP = {
    "default": Colors.RESET,
    "error": Colors.BOLD_RED,
    "warning": Colors.BOLD_YELLOW,
    "info": Colors.CYAN,
    "success": Colors.BOLD_GREEN,
    "debug": Colors.PURPLE,
    "header": Colors.BOLD_BLUE,
    "detail": Colors.WHITE,
}


def set_debug(enabled: bool):
    """Turns debug output on or off at runtime."""
    global DEBUG
    DEBUG = bool(enabled)


def set_color(enabled: bool):
    """Turns ANSI colouring on or off at runtime."""
    global ENABLE_COLOR
    ENABLE_COLOR = bool(enabled)


def log(message: str, module_name: str = "INFO", color_name: str = "default"):
    """
    Prints a timestamped, module-tagged line. Errors and warnings go to stderr.

    Args:
        message (str): The message to print.
        module_name (str): Tag of the calling module, usually Path(__file__).stem.
        color_name (str): Semantic colour key from COLOR_MAP (e.g. "info", "warning").
    """
    timestamp = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")

    if ENABLE_COLOR:
        color_code = COLOR_MAP.get(color_name.lower(), Colors.RESET)
        reset_code = Colors.RESET
    else:
        color_code = ""
        reset_code = ""

    stream = sys.stderr if color_name.lower() in STDERR_LEVELS else sys.stdout
    padded_module = f"[{module_name:<{MODULE_PAD}}]"
    print(f"{timestamp} {padded_module} {color_code}{message}{reset_code}", file=stream)
    stream.flush()


# --- Helper Functions for Common Levels ---

def log_error(message: str, module_name: str = "ERROR"):
    log(message, module_name, "error")


def log_warning(message: str, module_name: str = "WARNING"):
    log(message, module_name, "warning")


def log_info(message: str, module_name: str = "INFO"):
    log(message, module_name, "info")


def log_success(message: str, module_name: str = "SUCCESS"):
    log(message, module_name, "success")


def log_debug(message: str, module_name: str = "DEBUG"):
    """Logs a debug message. Silent unless DEBUG is enabled."""
    if DEBUG:
        log(message, module_name, "debug")


def log_header(message: str, module_name: str = "HEADER"):
    """Logs a header/section title message."""
    log(message, module_name, "header")
