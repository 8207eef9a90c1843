# SPDX-FileCopyrightText: Copyright (c) 2024-2025, Kr8s Developers (See LICENSE for list)
# SPDX-License-Identifier: BSD 3-Clause License
from typing import List, Optional

import typer
from rich.console import Console

from . import _secret_sa
from ._factory import Factory
from ._options import DEFAULT_FIELD_MANAGER
from ._printers import PrintFlags
from ._typer_utils import register

console = Console()

create = typer.Typer(
    no_args_is_help=True,
    name="create",
    help="Create a resource.",
)

secret = typer.Typer(
    no_args_is_help=True,
    name="secret",
    help="Create a secret.",
)


async def token_sa(
    ctx: typer.Context,
    names: Optional[List[str]] = typer.Argument(
        None, help="NAME", metavar="NAME", show_default=False
    ),
    serviceaccount: str = typer.Option(
        "",
        "--serviceaccount",
        help="ServiceAccount that will create token",
    ),
    field_manager: str = typer.Option(
        DEFAULT_FIELD_MANAGER,
        "--field-manager",
        help="Name of the manager used to track field ownership.",
    ),
    save_config: bool = typer.Option(
        False,
        "--save-config",
        help="If true, the configuration of current object will be saved in its annotation.",
    ),
    dry_run: str = typer.Option(
        "none",
        "--dry-run",
        help='Must be "none", "server", or "client". If client strategy, only print the object '
        "that would be sent, without sending it. If server strategy, submit server-side request "
        "without persisting the resource.",
    ),
    validate: str = typer.Option(
        "strict",
        "--validate",
        help='Must be one of: strict (or true), warn, ignore (or false). "strict" will reject '
        'unknown or duplicate fields, "warn" will warn about them, "ignore" drops them silently.',
    ),
    output: str = typer.Option(
        "",
        "-o",
        "--output",
        help="Output format. One of: json, yaml, name, jsonpath=..., jsonpath-as-json=...",
    ),
    show_managed_fields: bool = typer.Option(
        False,
        "--show-managed-fields",
        help="If true, keep the managedFields when printing objects in JSON or YAML format.",
    ),
):
    """Create a new secret for use in Service Accounts as a token.

    Examples:
        # Create a token secret for the service account "serviceaccount"
        kubectl-sa create secret token-sa my-secret --serviceaccount=serviceaccount
    """
    factory = ctx.find_object(Factory) or Factory()
    options = await _secret_sa.complete(
        factory,
        names or [],
        service_account=serviceaccount,
        field_manager=field_manager,
        save_config=save_config,
        dry_run=dry_run,
        validate=validate,
        print_flags=PrintFlags(
            output=output, show_managed_fields=show_managed_fields
        ),
        out=console,
    )
    _secret_sa.validate(options)
    await _secret_sa.run(options)


register(secret, token_sa, "token-sa")
register(create, secret, "secret")
