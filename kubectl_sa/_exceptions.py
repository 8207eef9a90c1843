# SPDX-FileCopyrightText: Copyright (c) 2024-2025, Kr8s Developers (See LICENSE for list)
# SPDX-License-Identifier: BSD 3-Clause License
from __future__ import annotations


class CreateSecretError(Exception):
    """Base class for errors raised while creating a service account token secret."""


class MissingArgument(CreateSecretError):
    """A required positional argument was not provided."""


class ClientConstructionError(CreateSecretError):
    """Unable to construct a client for the Kubernetes API server."""


class InvalidDryRun(CreateSecretError):
    """The --dry-run value is not one of none, client or server."""


class InvalidValidationDirective(CreateSecretError):
    """The --validate value is not a known field validation directive."""


class PrintFlagsError(CreateSecretError):
    """No printer matches the requested output format."""


class ValidationError(CreateSecretError):
    """The resolved options are incomplete.

    Attributes:
        errors: The individual validation failures
    """

    def __init__(self, message: str, errors: list[ValidationError] | None = None):
        self.errors = errors if errors is not None else [self]
        super().__init__(message)


class EmptyName(ValidationError):
    """The secret name is empty."""


class EmptyOwningReference(ValidationError):
    """The service account the token is issued for is empty."""


class AnnotationEncodingFailure(CreateSecretError):
    """Unable to encode the last-applied-configuration annotation."""


class DryRunUnsupported(CreateSecretError):
    """The API server does not support server side dry run for this kind."""


class CreateFailed(CreateSecretError):
    """The create request was rejected or could not be completed."""


class EmitFailure(CreateSecretError):
    """The created object could not be printed."""
