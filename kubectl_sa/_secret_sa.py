# SPDX-FileCopyrightText: Copyright (c) 2024-2025, Kr8s Developers (See LICENSE for list)
# SPDX-License-Identifier: BSD 3-Clause License
"""Create a secret for use in service accounts as a token.

The command runs in three phases. :func:`complete` resolves the command line
and the execution context into a :class:`CreateSecretTokenSaOptions`,
:func:`validate` checks it and :func:`run` builds the Secret, submits it (or
simulates the submission) and prints the result.
"""
from __future__ import annotations

import json
import logging
from typing import Awaitable, Callable, Optional, Sequence

import httpx
from rich.console import Console

from kr8s import APITimeoutError, ServerError
from kr8s.asyncio.objects import Secret

from ._annotations import create_or_update_annotation
from ._exceptions import (
    ClientConstructionError,
    CreateFailed,
    CreateSecretError,
    DryRunUnsupported,
    EmitFailure,
    EmptyName,
    EmptyOwningReference,
    MissingArgument,
    ValidationError,
)
from ._factory import Factory
from ._options import (
    DEFAULT_FIELD_MANAGER,
    CreateSecretTokenSaOptions,
    DryRunStrategy,
    ValidationDirective,
)
from ._printers import PrintFlags

logger = logging.getLogger(__name__)

SECRET_TYPE_SERVICE_ACCOUNT_TOKEN = "kubernetes.io/service-account-token"
SERVICE_ACCOUNT_NAME_KEY = "kubernetes.io/service-account.name"
DRY_RUN_ALL = "All"


def name_from_command_args(args: Sequence[str]) -> str:
    if len(args) == 0:
        raise MissingArgument("NAME is required")
    if len(args) > 1:
        raise MissingArgument(f"exactly one NAME is required, got {len(args)}")
    return args[0]


async def complete(
    factory: Factory,
    args: Sequence[str],
    service_account: str = "",
    field_manager: str = DEFAULT_FIELD_MANAGER,
    save_config: bool = False,
    dry_run: Optional[str] = None,
    validate: Optional[str] = None,
    print_flags: Optional[PrintFlags] = None,
    out: Optional[Console] = None,
) -> CreateSecretTokenSaOptions:
    """Resolve the command line and execution context into options.

    The only I/O performed here is constructing the client. Server side dry
    run support is checked later by :func:`run`.

    Args:
        factory: The execution context
        args: Positional arguments, the first is the secret name
        service_account: The service account the token is issued for
        field_manager: Name of the manager used to track field ownership
        save_config: Record the last-applied-configuration annotation
        dry_run: One of ``none``, ``client`` or ``server``
        validate: The field validation directive
        print_flags: Output flags, defaults to printing ``secret/<name> created``
        out: Console the result is printed to

    Returns:
        The resolved options.
    """
    name = name_from_command_args(args)

    try:
        client = await factory.client()
    except CreateSecretError:
        raise
    except Exception as e:
        raise ClientConstructionError(f"unable to construct client: {e}") from e

    strategy = DryRunStrategy.parse(dry_run)
    verifier = None
    if strategy is DryRunStrategy.SERVER:
        verifier = factory.dry_run_verifier(client)

    namespace, enforce_namespace = factory.namespace(client)

    printer = (
        (print_flags or PrintFlags()).with_dry_run_strategy(strategy).to_printer()
    )
    console = out or Console()

    def print_obj(obj) -> None:
        printer.print_obj(obj, console)

    options = CreateSecretTokenSaOptions(
        name=name,
        service_account=service_account,
        print_obj=print_obj,
        client=client,
        namespace=namespace,
        enforce_namespace=enforce_namespace,
        field_manager=field_manager,
        create_annotation=save_config,
        dry_run_strategy=strategy,
        dry_run_verifier=verifier,
        validation_directive=ValidationDirective.parse(validate),
    )
    logger.debug("Resolved %s", options)
    return options


def validate(options: CreateSecretTokenSaOptions) -> None:
    """Check that the options are complete enough to run."""
    errors: list[ValidationError] = []
    if not options.name:
        errors.append(EmptyName("name must be specified"))
    if not options.service_account:
        errors.append(EmptyOwningReference("--serviceaccount is required"))
    if len(errors) == 1:
        raise errors[0]
    if errors:
        raise ValidationError(", ".join(str(e) for e in errors), errors=errors)


def build_annotations(service_account: str) -> dict[str, str]:
    return {SERVICE_ACCOUNT_NAME_KEY: service_account}


def new_secret_token(
    name: str, namespace: str, secret_type: str, annotations: dict[str, str]
) -> Secret:
    """Build a Secret object without binding it to a client."""
    metadata: dict = {"name": name}
    if namespace:
        metadata["namespace"] = namespace
    metadata["annotations"] = dict(annotations)
    return Secret(
        {
            "apiVersion": "v1",
            "kind": "Secret",
            "metadata": metadata,
            "type": secret_type,
        }
    )


def create_secret_token(options: CreateSecretTokenSaOptions) -> Secret:
    namespace = options.namespace if options.enforce_namespace else ""
    return new_secret_token(
        options.name,
        namespace,
        SECRET_TYPE_SERVICE_ACCOUNT_TOKEN,
        build_annotations(options.service_account),
    )


async def _create(
    options: CreateSecretTokenSaOptions, secret: Secret, dry_run: bool = False
) -> Secret:
    params = {}
    if options.field_manager:
        params["fieldManager"] = options.field_manager
    params["fieldValidation"] = options.validation_directive.value
    if dry_run:
        params["dryRun"] = DRY_RUN_ALL
    logger.debug(
        "POST %s/%s in namespace %s params=%s",
        secret.version,
        secret.endpoint,
        options.namespace,
        params,
    )
    try:
        async with options.client.call_api(
            "POST",
            version=secret.version,
            url=secret.endpoint,
            namespace=options.namespace,
            params=params,
            data=json.dumps(secret.raw.to_dict()),
        ) as response:
            for warning in response.headers.get_list("warning"):
                logger.warning(warning)
            return Secret(response.json(), api=options.client)
    except (ServerError, APITimeoutError, httpx.HTTPError, ValueError) as e:
        raise CreateFailed(f"failed to create secret {e}") from e


async def _run_client_dry_run(
    options: CreateSecretTokenSaOptions, secret: Secret
) -> Secret:
    logger.debug("Client side dry run, not contacting the API server")
    return secret


async def _run_server_dry_run(
    options: CreateSecretTokenSaOptions, secret: Secret
) -> Secret:
    if options.dry_run_verifier is None:
        raise DryRunUnsupported("no dry run verifier configured")
    await options.dry_run_verifier.has_support(secret)
    return await _create(options, secret, dry_run=True)


async def _run_create(options: CreateSecretTokenSaOptions, secret: Secret) -> Secret:
    return await _create(options, secret)


_HANDLERS: dict[
    DryRunStrategy,
    Callable[[CreateSecretTokenSaOptions, Secret], Awaitable[Secret]],
] = {
    DryRunStrategy.CLIENT: _run_client_dry_run,
    DryRunStrategy.SERVER: _run_server_dry_run,
    DryRunStrategy.NONE: _run_create,
}


async def run(options: CreateSecretTokenSaOptions) -> Secret:
    """Create the secret, or simulate creating it, and print the result.

    Returns:
        The object that was printed. This is the server's response unless
        running a client side dry run.
    """
    secret = create_secret_token(options)
    create_or_update_annotation(options.create_annotation, secret)
    secret = await _HANDLERS[options.dry_run_strategy](options, secret)
    try:
        options.print_obj(secret)
    except CreateSecretError:
        raise
    except Exception as e:
        raise EmitFailure(str(e)) from e
    return secret
