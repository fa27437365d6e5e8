# Copyright 2025 iGenius S.p.A
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler


def _resolve_level(level: int | str) -> int:
    if isinstance(level, str):
        value = logging.getLevelName(level.strip().upper())
        # unknown names come back as "Level <name>"
        return value if isinstance(value, int) else logging.INFO
    return level


def _rich_handler(console: Console, level: int, *, tracebacks: bool) -> RichHandler:
    return RichHandler(
        level=level,
        console=console,
        rich_tracebacks=tracebacks,
        markup=False,
        show_time=True,
        show_level=True,
        show_path=False,
    )


def setup_logger(
    name: str = "dependency_gate",
    level: int | str = logging.INFO,
    console: Console | None = None,
    to_stderr: bool = False,
) -> logging.Logger:
    """Return a logger writing through rich handlers.

    Info and below go to stdout, warnings and above to stderr. When stdout is
    not a terminal (containers, CI) everything is sent to stderr so that the
    stdout stream stays clean for the caller.

    *level* may be a number or a level name such as ``"debug"``.
    """
    machine_mode = not sys.stdout.isatty()
    to_stderr = to_stderr or machine_mode
    resolved = _resolve_level(level)

    logger = logging.getLogger(name)
    logger.setLevel(resolved)
    logger.propagate = False  # Avoid duplicate logs

    if logger.handlers:
        return logger

    stderr_console = Console(stderr=True)

    if to_stderr:
        logger.addHandler(_rich_handler(stderr_console, resolved, tracebacks=True))
        return logger

    stdout_handler = _rich_handler(console or Console(), logging.DEBUG, tracebacks=False)
    stdout_handler.addFilter(lambda record: record.levelno <= logging.INFO)

    logger.addHandler(stdout_handler)
    logger.addHandler(_rich_handler(stderr_console, logging.WARNING, tracebacks=True))

    return logger
