# SPDX-FileCopyrightText: Copyright (c) 2024-2025, Kr8s Developers (See LICENSE for list)
# SPDX-License-Identifier: BSD 3-Clause License
"""kubectl-sa: create service account token secrets with kr8s."""
from ._exceptions import (
    AnnotationEncodingFailure,
    ClientConstructionError,
    CreateFailed,
    CreateSecretError,
    DryRunUnsupported,
    EmitFailure,
    EmptyName,
    EmptyOwningReference,
    InvalidDryRun,
    InvalidValidationDirective,
    MissingArgument,
    PrintFlagsError,
    ValidationError,
)
from ._factory import Factory
from ._options import CreateSecretTokenSaOptions, DryRunStrategy, ValidationDirective

try:
    from .__version import version as __version__  # noqa
    from .__version import version_tuple as __version_tuple__  # noqa
except ImportError:
    __version__ = "0.0.0"
    __version_tuple__ = (0, 0, 0)

__all__ = [
    "AnnotationEncodingFailure",
    "ClientConstructionError",
    "CreateFailed",
    "CreateSecretError",
    "CreateSecretTokenSaOptions",
    "DryRunStrategy",
    "DryRunUnsupported",
    "EmitFailure",
    "EmptyName",
    "EmptyOwningReference",
    "Factory",
    "InvalidDryRun",
    "InvalidValidationDirective",
    "MissingArgument",
    "PrintFlagsError",
    "ValidationDirective",
    "ValidationError",
]
