# -*- coding: utf-8 -*-
"""
Terminal output: timestamped log lines, banner, headers and the task table.
"""

import os
import re
import shutil
from datetime import datetime

import pytz
from colorama import Fore, Style, init

init(autoreset=True)

WIB = pytz.timezone('Asia/Jakarta')

ANSI_RE = re.compile(r'\x1b\[[0-9;]*m')

LEVELS = {
    "INFO": Fore.GREEN,
    "WARN": Fore.YELLOW,
    "ERROR": Fore.RED,
}


def clear_terminal():
    """Clear the terminal screen."""
    os.system('cls' if os.name == 'nt' else 'clear')


def timestamp():
    return datetime.now().astimezone(WIB).strftime('%Y-%m-%d %H:%M:%S')


def log(message):
    """
    Log a message with a timestamp.
    Format: [YYYY-MM-DD HH:MM:SS] >> message
    """
    print(f"{Fore.LIGHTCYAN_EX}[{timestamp()}]{Style.RESET_ALL} >> {message}")


def format_line(level, message, context=None):
    color = LEVELS[level]
    ctx = f"[{context}] " if context else ""
    return (
        f"{color}{level:<5}{Style.RESET_ALL} "
        f"{Fore.WHITE}{ctx:<20}{Style.RESET_ALL}"
        f"{message}"
    )


def info(message, context=None):
    log(format_line("INFO", message, context))


def warn(message, context=None):
    log(format_line("WARN", message, context))


def error(message, context=None):
    log(format_line("ERROR", message, context))


def strip_ansi(text):
    return ANSI_RE.sub('', text)


def center_text(text, width):
    padding = max(0, width - len(strip_ansi(text)))
    left = padding // 2
    return f"{' ' * left}{text}{' ' * (padding - left)}"


def welcome():
    """Print the start-up banner."""
    width = shutil.get_terminal_size((80, 20)).columns
    banner = r"""
  ____       _    _    ___
 / ___| __ _(_)  / \  |_ _|
| |  _ / _` | | / _ \  | |
| |_| | (_| | |/ ___ \ | |
 \____|\__,_|_/_/   \_\___|
"""
    print(f"{Fore.CYAN}{banner}{Style.RESET_ALL}")
    print(f"{Fore.MAGENTA}{center_text('GAIAI AUTO DAILY BOT', width)}{Style.RESET_ALL}")
    print("=" * min(width, 94))


def print_header(title, width=80):
    print(f"{Fore.MAGENTA}┬{'─' * (width - 2)}┬")
    print(f"{Fore.MAGENTA}│ {title:<{width - 4}} │")
    print(f"{Fore.MAGENTA}┴{'─' * (width - 2)}┴")


def print_info(label, value, context=None):
    info(f"{label:<15}: {Fore.CYAN}{value}{Style.RESET_ALL}", context)


def format_task_table(tasks):
    """
    Render the per-account task list as a fixed-width table.
    Each task is a dict with name, type, credit and completed keys.
    """
    border = "+----------------------+----------+-------+----------+"
    lines = [
        border,
        "| Task Name            | Category | Point | Status   |",
        border,
    ]
    for task in tasks:
        name = task.get("name")
        if not isinstance(name, str) or not name:
            name = "Unknown Task"
        elif len(name) > 20:
            name = name[:17] + "..."
        category = str(task.get("type") or "N/A")[:8]
        points = str(task.get("credit") or 0)[:5]
        status = "Complete" if task.get("completed") else "Pending"
        lines.append(f"| {name:<20} | {category:<8} | {points:<5} | {status:<8} |")
    lines.append(border)
    return "\n".join(lines)


def print_task_table(tasks, context=None):
    info("Task List:", context)
    print(f"{Fore.LIGHTCYAN_EX}{format_task_table(tasks)}{Style.RESET_ALL}")


def format_seconds(seconds):
    """Convert seconds to HH:MM:SS."""
    h, rem = divmod(seconds, 3600)
    m, s = divmod(rem, 60)
    return f"{int(h):02}:{int(m):02}:{int(s):02}"
