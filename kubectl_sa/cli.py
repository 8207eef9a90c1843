# SPDX-FileCopyrightText: Copyright (c) 2024-2025, Kr8s Developers (See LICENSE for list)
# SPDX-License-Identifier: BSD 3-Clause License
from typing import Optional

import typer

from ._create import create
from ._factory import Factory
from ._typer_utils import configure_logging, register
from ._version import version

app = typer.Typer(no_args_is_help=True)


@app.callback()
def main(
    ctx: typer.Context,
    kubeconfig: Optional[str] = typer.Option(
        None,
        "--kubeconfig",
        help="Path to the kubeconfig file to use for CLI requests.",
    ),
    context: Optional[str] = typer.Option(
        None,
        "--context",
        help="The name of the kubeconfig context to use.",
    ),
    namespace: Optional[str] = typer.Option(
        None,
        "-n",
        "--namespace",
        help="If present, the namespace scope for this CLI request.",
    ),
    verbosity: int = typer.Option(
        0,
        "-v",
        "--v",
        help="Number for the log level verbosity.",
    ),
):
    """Create service account token secrets."""
    configure_logging(verbosity)
    ctx.obj = Factory(kubeconfig=kubeconfig, context=context, namespace=namespace)


register(app, create, "create")
register(app, version)


def go():
    app()


if __name__ == "__main__":
    go()
