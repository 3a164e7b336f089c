"""Coloured console output for report runs."""
from __future__ import annotations

import sys
from typing import Iterable, Optional, TextIO

from colorama import Fore, Style, init as colorama_init

colorama_init()
RED = Fore.RED
GREEN = Fore.GREEN
YELLOW = Fore.YELLOW
RESET = Style.RESET_ALL


class Console:
    def __init__(self, verbose: bool = True, out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> None:
        self.verbose = verbose
        self.out = out
        self.err = err

    def _log(self, message: str, color: str = RESET, stream: Optional[TextIO] = None) -> None:
        if not self.verbose:
            return
        print(f"{color}{message}{RESET}", file=stream or self.out or sys.stdout)

    def info(self, message: str) -> None:
        self._log(message)

    def success(self, message: str) -> None:
        self._log(message, GREEN)

    def heading(self, message: str) -> None:
        self._log(message, YELLOW)

    def error(self, message: str) -> None:
        self._log(message, RED, self.err or sys.stderr)

    def fatal(self, message: str) -> None:
        # Fatal errors are shown even when quiet.
        print(f"{RED}{message}{RESET}", file=self.err or sys.stderr)

    def errors(self, title: str, messages: Iterable[str]) -> None:
        messages = list(messages)
        if not messages:
            return
        self.heading(title)
        for message in messages:
            self.error(message)
