# SPDX-FileCopyrightText: Copyright (c) 2024-2025, Kr8s Developers (See LICENSE for list)
# SPDX-License-Identifier: BSD 3-Clause License
import json
import sys

import typer
import yaml
from rich.console import Console
from rich.syntax import Syntax

import kr8s

from . import __version__
from ._exceptions import ClientConstructionError
from ._factory import Factory

console = Console()


async def version(
    ctx: typer.Context,
    client: bool = typer.Option(
        False,
        "--client",
        help="If true, shows client version only (no server required).",
    ),
    output: str = typer.Option(
        "",
        "-o",
        "--output",
        help="One of 'yaml' or 'json'.",
    ),
):
    """Print the client and server version information for the current context.

    Examples:
        # Print the client and server versions for the current context
        kubectl-sa version
    """
    if output not in ("", "yaml", "json"):
        console.print("error: --output must be 'yaml' or 'json'")
        raise typer.Exit(code=1)

    versions = {}
    versions["clientVersion"] = {
        "client": "kubectl-sa",
        "gitVersion": __version__,
        "kr8sVersion": kr8s.__version__,
        "pythonVersion": sys.version,
    }
    if not client:
        factory = ctx.find_object(Factory) or Factory()
        try:
            api = await factory.client()
            versions["serverVersion"] = await api.version()
        except Exception as e:
            raise ClientConstructionError(
                f"unable to retrieve the server version: {e}"
            ) from e

    if output == "":
        style = "[magenta][bold]"
        console.print(f"Client Version: {style}v{__version__}")
        if "serverVersion" in versions:
            server_version = versions["serverVersion"]["gitVersion"]
            console.print(f"Server Version: {style}{server_version}")

    elif output == "yaml":
        console.print(
            Syntax(
                yaml.dump(versions),
                "yaml",
                background_color="default",
            )
        )

    else:
        console.print(
            Syntax(
                json.dumps(versions, indent=2),
                "json",
                background_color="default",
            )
        )
