# SPDX-FileCopyrightText: Copyright (c) 2024-2025, Kr8s Developers (See LICENSE for list)
# SPDX-License-Identifier: BSD 3-Clause License
"""In-memory stand-ins for the kr8s client used by the test suite."""
from __future__ import annotations

import contextlib
import json
from dataclasses import dataclass, field

import httpx

from kr8s import ServerError

from ._factory import Factory


@dataclass
class Request:
    method: str
    path: str
    kwargs: dict = field(default_factory=dict)

    @property
    def params(self) -> dict:
        return self.kwargs.get("params") or {}

    @property
    def body(self) -> dict:
        return json.loads(self.kwargs["data"])


class FakeApi:
    """Stands in for ``kr8s.asyncio.Api`` by serving canned responses per route.

    Routes map ``(method, path)`` to an ``httpx.Response``, an exception to
    raise or a callable taking the :class:`Request` and returning either.
    """

    def __init__(self, namespace: str = "default") -> None:
        self.namespace = namespace
        self.requests: list[Request] = []
        self.routes: dict = {}

    def route(self, method: str, path: str, response) -> None:
        self.routes[(method, path)] = response

    def requests_to(self, method: str, path: str | None = None) -> list[Request]:
        return [
            r
            for r in self.requests
            if r.method == method and (path is None or r.path == path)
        ]

    @contextlib.asynccontextmanager
    async def call_api(
        self,
        method: str = "GET",
        version: str = "v1",
        base: str = "",
        namespace: str | None = None,
        url: str = "",
        raise_for_status: bool = True,
        **kwargs,
    ):
        if not base:
            base = "/api" if version == "v1" else "/apis"
        parts = [base]
        if version:
            parts.append(version)
        if namespace:
            parts.extend(["namespaces", namespace])
        parts.append(url)
        request = Request(method, "/".join(parts), kwargs)
        self.requests.append(request)

        response = self.routes.get((method, request.path))
        if callable(response) and not isinstance(response, httpx.Response):
            response = response(request)
        if response is None:
            response = httpx.Response(
                404,
                json={"kind": "Status", "message": f"{request.path} not found"},
            )
        if isinstance(response, Exception):
            raise response
        if raise_for_status and response.status_code >= 400:
            status = response.json()
            raise ServerError(status["message"], status=status, response=response)
        yield response


class FakeFactory(Factory):
    def __init__(self, api, namespace=None, client_error=None) -> None:
        super().__init__(namespace=namespace)
        self.api = api
        self.client_error = client_error

    async def client(self):
        if self.client_error is not None:
            raise self.client_error
        return self.api


def echo_created(request: Request) -> httpx.Response:
    """Mimic the API server creating a token secret."""
    obj = request.body
    obj["metadata"].setdefault("namespace", request.path.split("/")[4])
    obj["metadata"]["uid"] = "6f1c8a3e-1111-2222-3333-444455556666"
    obj["metadata"]["resourceVersion"] = "1234"
    obj["metadata"]["managedFields"] = [
        {"manager": request.params.get("fieldManager", ""), "operation": "Update"}
    ]
    if request.params.get("dryRun") != "All":
        obj["data"] = {"token": "ZXlKaGJHY2lPaUpTVXpJMU5pSXNJbXRwWkNJNklpSjk="}
    return httpx.Response(201, json=obj)


SECRETS_PATH = "/api/v1/namespaces/default/secrets"
