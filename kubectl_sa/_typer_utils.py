# SPDX-FileCopyrightText: Copyright (c) 2024-2025, Kr8s Developers (See LICENSE for list)
# SPDX-License-Identifier: BSD 3-Clause License

import asyncio
import logging
from contextlib import suppress
from functools import wraps

import typer
from rich.console import Console

from ._exceptions import CreateSecretError

logger = logging.getLogger(__name__)
err_console = Console(stderr=True)

VERBOSITY_LEVELS = {
    0: logging.WARNING,
    1: logging.INFO,
    2: logging.INFO,
    3: logging.INFO,
}


def check_err(err: CreateSecretError) -> None:
    """Print a command error the way kubectl does and exit non-zero."""
    logger.debug("Command failed", exc_info=err)
    err_console.print(f"error: {err}", markup=False, highlight=False, soft_wrap=True)
    raise typer.Exit(code=1)


def _typer_async(f):
    @wraps(f)
    def wrapper(*args, **kwargs):
        with suppress(asyncio.CancelledError, KeyboardInterrupt):
            try:
                return asyncio.run(f(*args, **kwargs))
            except CreateSecretError as e:
                check_err(e)

    return wrapper


def configure_logging(verbosity: int) -> None:
    """Map kubectl style ``-v`` levels onto the standard library logging levels."""
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger().setLevel(VERBOSITY_LEVELS.get(verbosity, logging.DEBUG))


def register(app, func, alias=None):
    if asyncio.iscoroutinefunction(func):
        func = _typer_async(func)
    if isinstance(func, typer.Typer):
        assert alias, "Typer subcommand must have an alias."
        app.add_typer(func, name=alias)
    else:
        if alias is not None:
            app.command(alias)(func)
        else:
            app.command()(func)
