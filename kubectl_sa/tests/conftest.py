# SPDX-FileCopyrightText: Copyright (c) 2024-2025, Kr8s Developers (See LICENSE for list)
# SPDX-License-Identifier: BSD 3-Clause License
import io

import httpx
import pytest
from rich.console import Console

from kubectl_sa._testutils import SECRETS_PATH, FakeApi, FakeFactory, echo_created


@pytest.fixture
def openapi_v3_core():
    return {
        "openapi": "3.0.0",
        "paths": {
            "/api/v1/namespaces/{namespace}/secrets": {
                "parameters": [
                    {"$ref": "#/components/parameters/namespace-vxI3BqTh"},
                    {"$ref": "#/components/parameters/pretty-tJGM1-ng"},
                ],
                "get": {
                    "operationId": "listCoreV1NamespacedSecret",
                    "x-kubernetes-action": "list",
                    "x-kubernetes-group-version-kind": {
                        "group": "",
                        "kind": "Secret",
                        "version": "v1",
                    },
                },
                "post": {
                    "operationId": "createCoreV1NamespacedSecret",
                    "parameters": [
                        {
                            "name": "dryRun",
                            "in": "query",
                            "schema": {"type": "string", "uniqueItems": True},
                        },
                        {"$ref": "#/components/parameters/fieldManager-Qy4HdaTW"},
                        {
                            "name": "fieldValidation",
                            "in": "query",
                            "schema": {"type": "string", "uniqueItems": True},
                        },
                    ],
                    "x-kubernetes-action": "post",
                    "x-kubernetes-group-version-kind": {
                        "group": "",
                        "kind": "Secret",
                        "version": "v1",
                    },
                },
            },
        },
        "components": {
            "parameters": {
                "namespace-vxI3BqTh": {"name": "namespace", "in": "path"},
                "pretty-tJGM1-ng": {"name": "pretty", "in": "query"},
                "fieldManager-Qy4HdaTW": {"name": "fieldManager", "in": "query"},
            }
        },
    }


@pytest.fixture
def api():
    api = FakeApi()
    api.route("POST", SECRETS_PATH, echo_created)
    return api


@pytest.fixture
def api_with_openapi(api, openapi_v3_core):
    api.route("GET", "/openapi/v3/api/v1", httpx.Response(200, json=openapi_v3_core))
    return api


@pytest.fixture
def factory(api):
    return FakeFactory(api)


@pytest.fixture
def out():
    return Console(file=io.StringIO(), width=200)
