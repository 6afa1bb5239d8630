"""
logger.py - console (colored) + rotating file log
==================================================
Every period of a run is written both to the console and to the log file,
so long runs can be reviewed afterwards.
"""

import logging
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler

from colorama import Fore, Style, init

import config.config as cfg

init(autoreset=True)

_file_logger = logging.getLogger("simulator")
_file_logger.setLevel(logging.DEBUG)


def _attach_file_handler():
    if any(isinstance(h, RotatingFileHandler) for h in _file_logger.handlers):
        return
    # 5MB per file, keep 3
    handler = RotatingFileHandler(
        cfg.LOG_FILE, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8", delay=True
    )
    handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)-7s | %(message)s",
                          datefmt="%Y-%m-%d %H:%M:%S")
    )
    _file_logger.addHandler(handler)


_attach_file_handler()


def _console(color: str, tag: str, msg: str):
    if not cfg.LOG_CONSOLE:
        return
    ts = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")
    print(f"{color}[{ts}] {tag} {msg}{Style.RESET_ALL}")


def info(msg: str):
    _console(Fore.CYAN, "(i)", msg)
    _file_logger.info(msg)


def success(msg: str):
    _console(Fore.GREEN, "[OK]", msg)
    _file_logger.info(msg)


def warning(msg: str):
    _console(Fore.YELLOW, "(!)", msg)
    _file_logger.warning(msg)


def error(msg: str):
    _console(Fore.RED, "[X]", msg)
    _file_logger.error(msg)


def outcome(o) -> str:
    msg = (f"Month {o.period_index} | Units: {o.units_held} | Extras: {o.extra_units} | "
           f"Capital: {o.capital_at_start:.2f} | Gross: {o.gross_profit:.2f} | "
           f"Net: {o.net_profit:.2f} | Cumulative: {o.cumulative_net_profit:.2f}")
    _console(Fore.WHITE, ">>", msg)
    _file_logger.info(msg)
    return msg


def target_reached(o) -> str:
    msg = (f"Target reached in month {o.period_index} | Net: {o.net_profit:.2f} | "
           f"Cumulative: {o.cumulative_net_profit:.2f}")
    success(msg)
    return msg
