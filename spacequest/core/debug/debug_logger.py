"""
debug_logger.py
---------------
Colored console logger for Spacequest.

Every message belongs to a category (scene, input, joystick, ...) that can
be switched on or off in LoggerConfig, and to a level that is compared
against LoggerConfig.LOG_LEVEL. The caller's class name is detected
automatically and printed in front of each line.
"""

import sys
from datetime import datetime


# ===========================================================
# Logger Configuration
# ===========================================================

class LoggerConfig:
    """Which categories print, and how much."""

    ENABLE_LOGGING = True
    LOG_LEVEL = "INFO"  # NONE, ERROR, WARN, INFO, VERBOSE
    SHOW_TIMESTAMP = True

    CATEGORIES = {
        # Runtime
        "system": True,
        "display": True,
        "scene": True,
        "loading": False,
        "timing": False,
        "input": False,

        # Controls & menu
        "joystick": False,
        "menu": True,
        "animation": False,

        # Rendering
        "drawing": False,
    }


# ===========================================================
# ANSI Colors
# ===========================================================

class Colors:
    RESET = "\033[0m"
    WHITE = "\033[97m"
    GREEN = "\033[92m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    BLUE = "\033[94m"
    YELLOW = "\033[93m"
    RED = "\033[91m"


# ===========================================================
# Debug Logger
# ===========================================================

class DebugLogger:
    """
    Static logger. No instances, no handlers: everything goes to stdout.

    Usage:
        DebugLogger.state("Joystick released", category="joystick")
        DebugLogger.warn(f"Missing image '{name}'", category="loading")
    """

    WIDTH = 59
    ENTRY_COLUMN = 30

    # tag -> (color, level)
    TAGS = {
        "INIT": (Colors.WHITE, "INFO"),
        "SYSTEM": (Colors.MAGENTA, "INFO"),
        "STATE": (Colors.CYAN, "INFO"),
        "ACTION": (Colors.GREEN, "INFO"),
        "TRACE": (Colors.BLUE, "VERBOSE"),
        "WARN": (Colors.YELLOW, "WARN"),
        "FAIL": (Colors.RED, "ERROR"),
    }

    LEVELS = ("NONE", "ERROR", "WARN", "INFO", "VERBOSE")

    STATUS_COLORS = {
        "OK": Colors.GREEN,
        "LOADING": Colors.CYAN,
        "FAIL": Colors.RED,
    }

    # ===========================================================
    # Internals
    # ===========================================================

    @staticmethod
    def _caller_name() -> str:
        """Class of the object that called the public log method, or its module."""
        try:
            frame = sys._getframe(3)
        except ValueError:
            return "Unknown"

        local_vars = frame.f_locals
        if "self" in local_vars:
            return type(local_vars["self"]).__name__
        if "cls" in local_vars:
            return local_vars["cls"].__name__

        module = frame.f_code.co_filename.replace("\\", "/").rsplit("/", 1)[-1][:-3]
        return "".join(part.capitalize() for part in module.split("_"))

    @staticmethod
    def _level_index(level: str) -> int:
        if level in DebugLogger.LEVELS:
            return DebugLogger.LEVELS.index(level)
        return DebugLogger.LEVELS.index("INFO")

    @staticmethod
    def enabled(category: str, level: str = "INFO") -> bool:
        """True if a message of this category/level would be printed."""
        if not LoggerConfig.ENABLE_LOGGING:
            return False
        if not LoggerConfig.CATEGORIES.get(category, False):
            return False
        return DebugLogger._level_index(level) <= DebugLogger._level_index(LoggerConfig.LOG_LEVEL)

    @staticmethod
    def _emit(tag: str, message: str, category: str):
        color, level = DebugLogger.TAGS[tag]
        if not DebugLogger.enabled(category, level):
            return

        prefix = f"[{DebugLogger._caller_name()}][{tag}]"
        if LoggerConfig.SHOW_TIMESTAMP:
            prefix = f"[{datetime.now():%H:%M:%S}] {prefix}"

        print(f"{color}{prefix} {message}{Colors.RESET}")

    # ===========================================================
    # Public Log Methods
    # ===========================================================

    @staticmethod
    def init(msg: str = "", category: str = "system"):
        """Startup message. An empty message prints a blank line."""
        if not msg.strip():
            if LoggerConfig.ENABLE_LOGGING:
                print()
            return
        DebugLogger._emit("INIT", msg, category)

    @staticmethod
    def system(msg: str, category: str = "system"):
        DebugLogger._emit("SYSTEM", msg, category)

    @staticmethod
    def state(msg: str, category: str = "system"):
        DebugLogger._emit("STATE", msg, category)

    @staticmethod
    def action(msg: str, category: str = "system"):
        DebugLogger._emit("ACTION", msg, category)

    @staticmethod
    def trace(msg: str, category: str = "input"):
        """Per-frame or per-touch detail. Only printed at VERBOSE."""
        DebugLogger._emit("TRACE", msg, category)

    @staticmethod
    def warn(msg: str, category: str = "system"):
        DebugLogger._emit("WARN", msg, category)

    @staticmethod
    def fail(msg: str, category: str = "system"):
        DebugLogger._emit("FAIL", msg, category)

    # ===========================================================
    # Startup Report
    # ===========================================================

    @staticmethod
    def section(title: str):
        """Boxed section title, e.g. when a scene becomes active."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        rule = "─" * DebugLogger.WIDTH
        print(f"\n{Colors.WHITE}{rule}\n{f'[{title}]'.center(DebugLogger.WIDTH)}{Colors.RESET}\n")

    @staticmethod
    def init_entry(module: str, status: str = "OK"):
        """One dotted line per subsystem brought up at startup."""
        if LoggerConfig.ENABLE_LOGGING:
            print(DebugLogger.format_entry(module, status))

    @staticmethod
    def init_sub(detail: str, level: int = 1):
        if LoggerConfig.ENABLE_LOGGING:
            print(f"{'    ' * level}• {Colors.WHITE}{detail}{Colors.RESET}")

    @staticmethod
    def format_entry(module: str, status: str) -> str:
        """'> Module        ......... [OK]' padded to WIDTH columns."""
        label = f"> {module}"
        badge = f"[{status}]"
        pad = max(DebugLogger.ENTRY_COLUMN - len(label), 1)
        dots = max(DebugLogger.WIDTH - len(label) - pad - 1 - len(badge), 1)
        color = DebugLogger.STATUS_COLORS.get(status.upper(), Colors.WHITE)
        return f"{Colors.WHITE}{label}{' ' * pad}{'.' * dots} {color}{badge}{Colors.RESET}"
