# SPDX-FileCopyrightText: Copyright (c) 2024-2025, Kr8s Developers (See LICENSE for list)
# SPDX-License-Identifier: BSD 3-Clause License
"""Resolved inputs for ``create secret token-sa``."""
from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable

from ._exceptions import InvalidDryRun, InvalidValidationDirective

if TYPE_CHECKING:
    from kr8s.asyncio.objects import APIObject

    from ._dryrun import QueryParamVerifier

DEFAULT_FIELD_MANAGER = "kubectl-create"


class DryRunStrategy(enum.Enum):
    NONE = "none"
    CLIENT = "client"
    SERVER = "server"

    @classmethod
    def parse(cls, value: str | None) -> DryRunStrategy:
        """Convert a --dry-run flag value into a strategy."""
        if not value:
            return cls.NONE
        try:
            return cls(value.lower())
        except ValueError:
            raise InvalidDryRun(
                f'Invalid dry-run value ({value}). Must be "none", "server", or "client".'
            ) from None


class ValidationDirective(enum.Enum):
    STRICT = "Strict"
    WARN = "Warn"
    IGNORE = "Ignore"

    @classmethod
    def parse(cls, value: str | None) -> ValidationDirective:
        """Convert a --validate flag value into a field validation directive."""
        if not value:
            return cls.STRICT
        aliases = {
            "true": cls.STRICT,
            "strict": cls.STRICT,
            "warn": cls.WARN,
            "false": cls.IGNORE,
            "ignore": cls.IGNORE,
        }
        try:
            return aliases[value.lower()]
        except KeyError:
            raise InvalidValidationDirective(
                f'invalid - validate option "{value}"; must be one of: '
                "strict (or true), warn, ignore (or false)"
            ) from None


@dataclass(frozen=True)
class CreateSecretTokenSaOptions:
    """Everything needed to create a service account token secret.

    Produced by :func:`kubectl_sa._secret_sa.complete` and consumed unchanged
    by :func:`kubectl_sa._secret_sa.validate` and :func:`kubectl_sa._secret_sa.run`.
    """

    name: str
    service_account: str
    print_obj: Callable[[APIObject], None] = field(repr=False)
    client: Any = field(default=None, repr=False)
    namespace: str = ""
    enforce_namespace: bool = False
    field_manager: str = DEFAULT_FIELD_MANAGER
    create_annotation: bool = False
    dry_run_strategy: DryRunStrategy = DryRunStrategy.NONE
    dry_run_verifier: QueryParamVerifier | None = field(default=None, repr=False)
    validation_directive: ValidationDirective = ValidationDirective.STRICT
