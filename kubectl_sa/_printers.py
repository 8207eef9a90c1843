# SPDX-FileCopyrightText: Copyright (c) 2024-2025, Kr8s Developers (See LICENSE for list)
# SPDX-License-Identifier: BSD 3-Clause License
"""Printers for objects returned by the API server."""
from __future__ import annotations

import json
import re
from dataclasses import dataclass, replace

import jsonpath
import yaml
from rich.console import Console
from rich.syntax import Syntax

from kr8s.asyncio.objects import APIObject

from ._exceptions import PrintFlagsError
from ._options import DryRunStrategy

JSONPATH_PREFIXES = ("jsonpath=", "jsonpath-as-json=")

# A dotted member whose key contains backslash escaped dots
_ESCAPED_MEMBER = re.compile(r"\.((?:[^.\[\]\\]|\\\.)*\\\.(?:[^.\[\]\\]|\\\.)*)")


def _bracket_escaped_members(expression: str) -> str:
    r"""Rewrite kubectl style escaped keys into bracket notation.

    Examples:
        >>> _bracket_escaped_members(r".metadata.annotations.kubernetes\.io/created-by")
        ".metadata.annotations['kubernetes.io/created-by']"
    """

    def bracket(match: re.Match) -> str:
        key = match.group(1).replace("\\.", ".")
        return f"['{key}']"

    return _ESCAPED_MEMBER.sub(bracket, expression)


def _printable(obj: APIObject, show_managed_fields: bool) -> dict:
    data = obj.raw.to_dict()
    if not show_managed_fields:
        data.get("metadata", {}).pop("managedFields", None)
    return data


def _print_document(out: Console, text: str, lexer: str) -> None:
    if out.is_terminal:
        out.print(Syntax(text, lexer, background_color="default", word_wrap=True))
    else:
        out.out(text, highlight=False)


class NamePrinter:
    """Prints ``<singular>/<name>`` optionally followed by the operation."""

    def __init__(self, operation: str = "") -> None:
        self.operation = operation

    def print_obj(self, obj: APIObject, out: Console) -> None:
        message = f"{obj.singular}/{obj.name}"
        if self.operation:
            message = f"{message} {self.operation}"
        out.out(message, highlight=False)


class JSONPrinter:
    def __init__(self, show_managed_fields: bool = False) -> None:
        self.show_managed_fields = show_managed_fields

    def print_obj(self, obj: APIObject, out: Console) -> None:
        data = _printable(obj, self.show_managed_fields)
        _print_document(out, json.dumps(data, indent=4), "json")


class YAMLPrinter:
    def __init__(self, show_managed_fields: bool = False) -> None:
        self.show_managed_fields = show_managed_fields

    def print_obj(self, obj: APIObject, out: Console) -> None:
        data = _printable(obj, self.show_managed_fields)
        _print_document(out, yaml.safe_dump(data, default_flow_style=False), "yaml")


class JSONPathPrinter:
    """Prints the values matched by a JSONPath expression, space separated.

    Accepts both the kubectl template form ``{.metadata.name}`` and plain
    expressions such as ``$.metadata.name``.
    """

    def __init__(self, template: str, as_json: bool = False) -> None:
        expression = template.strip().strip("'\"")
        if expression.startswith("{") and expression.endswith("}"):
            expression = expression[1:-1]
        if not expression:
            raise PrintFlagsError("template format specified but no template given")
        try:
            self.path = jsonpath.compile(_bracket_escaped_members(expression))
        except jsonpath.JSONPathError as e:
            raise PrintFlagsError(f"error parsing jsonpath {template}, {e}") from e
        self.as_json = as_json

    def print_obj(self, obj: APIObject, out: Console) -> None:
        values = self.path.findall(obj.raw.to_dict())
        if self.as_json:
            out.out(json.dumps(values, indent=4), highlight=False)
            return
        text = " ".join(
            json.dumps(v) if isinstance(v, (dict, list)) else str(v) for v in values
        )
        out.out(text, highlight=False)


@dataclass(frozen=True)
class PrintFlags:
    """Output flags shared by the create commands.

    Args:
        output: The value of ``-o/--output``
        operation: The verb appended to the default output, e.g. ``created``
        show_managed_fields: Keep ``metadata.managedFields`` in json and yaml output
    """

    output: str = ""
    operation: str = "created"
    show_managed_fields: bool = False

    def with_dry_run_strategy(self, strategy: DryRunStrategy) -> PrintFlags:
        if strategy is DryRunStrategy.CLIENT:
            return replace(self, operation=f"{self.operation} (dry run)")
        if strategy is DryRunStrategy.SERVER:
            return replace(self, operation=f"{self.operation} (server dry run)")
        return self

    def to_printer(self):
        output = self.output.strip()
        if output == "":
            return NamePrinter(self.operation)
        if output == "name":
            return NamePrinter()
        if output == "json":
            return JSONPrinter(self.show_managed_fields)
        if output == "yaml":
            return YAMLPrinter(self.show_managed_fields)
        for prefix in JSONPATH_PREFIXES:
            if output.startswith(prefix):
                return JSONPathPrinter(
                    output[len(prefix) :], as_json=prefix == "jsonpath-as-json="
                )
        raise PrintFlagsError(
            f'unable to match a printer suitable for the output format "{output}", '
            "allowed formats are: json,jsonpath,jsonpath-as-json,name,yaml"
        )
