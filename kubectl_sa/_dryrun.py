# SPDX-FileCopyrightText: Copyright (c) 2024-2025, Kr8s Developers (See LICENSE for list)
# SPDX-License-Identifier: BSD 3-Clause License
"""Check whether the API server accepts a query parameter for a resource kind."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx
import jsonpath

from kr8s import APITimeoutError, ServerError

from ._exceptions import DryRunUnsupported

if TYPE_CHECKING:
    from kr8s.asyncio.objects import APIObject

logger = logging.getLogger(__name__)

QUERY_PARAM_DRY_RUN = "dryRun"


def split_api_version(api_version: str) -> tuple[str, str]:
    """Split an apiVersion string into its group and version.

    Examples:
        >>> split_api_version("v1")
        ('', 'v1')
        >>> split_api_version("apps/v1")
        ('apps', 'v1')
    """
    if "/" in api_version:
        group, version = api_version.split("/", 1)
        return group, version
    return "", api_version


def _resolve(doc: dict, item: Any) -> Any:
    if isinstance(item, dict) and "$ref" in item:
        ref = item["$ref"]
        if not ref.startswith("#/"):
            return item
        try:
            return jsonpath.pointer.resolve(ref[1:], doc)
        except jsonpath.JSONPointerError:
            logger.debug("Unresolvable reference %s", ref)
            return {}
    return item


def _matches_gvk(operation: dict, gvk: dict) -> bool:
    candidates = operation.get("x-kubernetes-group-version-kind", [])
    if isinstance(candidates, dict):
        candidates = [candidates]
    for candidate in candidates:
        if (
            candidate.get("group", "") == gvk["group"]
            and candidate.get("version") == gvk["version"]
            and candidate.get("kind") == gvk["kind"]
        ):
            return True
    return False


def supports_query_param(doc: dict, gvk: dict, query_param: str) -> bool:
    """Search an OpenAPI document for a POST of ``gvk`` taking ``query_param``."""
    for path_item in doc.get("paths", {}).values():
        path_item = _resolve(doc, path_item)
        operation = path_item.get("post")
        if not operation or not _matches_gvk(operation, gvk):
            continue
        parameters = path_item.get("parameters", []) + operation.get("parameters", [])
        for parameter in parameters:
            parameter = _resolve(doc, parameter)
            if parameter.get("name") == query_param:
                return True
    return False


class QueryParamVerifier:
    """Verifies that the API server supports a query parameter for a kind.

    Support is read from the server's published OpenAPI schema, preferring
    the per group-version v3 documents and falling back to the v2 document
    on servers which do not serve v3.

    Args:
        client: A kr8s API object, or anything exposing a compatible ``call_api``
        query_param: The query parameter to look for, ``dryRun`` by default
    """

    def __init__(self, client, query_param: str = QUERY_PARAM_DRY_RUN) -> None:
        self.client = client
        self.query_param = query_param

    async def _openapi(self, group: str, version: str) -> dict:
        gv_path = f"apis/{group}/{version}" if group else f"api/{version}"
        try:
            async with self.client.call_api(
                "GET", version="", base="/openapi", url=f"v3/{gv_path}"
            ) as response:
                return response.json()
        except ServerError as e:
            if e.response is None or e.response.status_code != 404:
                raise
        logger.debug("OpenAPI v3 not served for %s, falling back to v2", gv_path)
        async with self.client.call_api(
            "GET", version="", base="/openapi", url="v2"
        ) as response:
            return response.json()

    async def has_support(self, obj: APIObject) -> None:
        """Raise :class:`DryRunUnsupported` unless the query parameter is supported.

        Args:
            obj: The object about to be submitted.
        """
        group, version = split_api_version(obj.version)
        gvk = {"group": group, "version": version, "kind": obj.kind}
        if obj.kind == "List":
            raise DryRunUnsupported(f"{obj.kind} doesn't support {self.query_param}")
        try:
            doc = await self._openapi(group, version)
        except (ServerError, APITimeoutError, httpx.HTTPError, ValueError) as e:
            raise DryRunUnsupported(
                f"unable to verify {self.query_param} support for {obj.kind}: {e}"
            ) from e
        if not supports_query_param(doc, gvk, self.query_param):
            raise DryRunUnsupported(f"{obj.kind} doesn't support {self.query_param}")
        logger.debug("%s supports %s", obj.kind, self.query_param)
