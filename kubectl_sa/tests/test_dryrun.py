# SPDX-FileCopyrightText: Copyright (c) 2024-2025, Kr8s Developers (See LICENSE for list)
# SPDX-License-Identifier: BSD 3-Clause License
import httpx
import pytest

from kr8s import APITimeoutError
from kr8s.asyncio.objects import APIObject, Deployment, Secret
from kubectl_sa import DryRunUnsupported
from kubectl_sa._dryrun import (
    QueryParamVerifier,
    split_api_version,
    supports_query_param,
)
from kubectl_sa._testutils import FakeApi

SECRET_GVK = {"group": "", "version": "v1", "kind": "Secret"}
SECRETS = "/api/v1/namespaces/{namespace}/secrets"


@pytest.fixture
def secret():
    return Secret({"metadata": {"name": "my-secret"}})


def test_split_api_version():
    assert split_api_version("v1") == ("", "v1")
    assert split_api_version("apps/v1") == ("apps", "v1")
    assert split_api_version("rbac.authorization.k8s.io/v1") == (
        "rbac.authorization.k8s.io",
        "v1",
    )


def test_supports_query_param(openapi_v3_core):
    assert supports_query_param(openapi_v3_core, SECRET_GVK, "dryRun")
    assert supports_query_param(openapi_v3_core, SECRET_GVK, "fieldManager")
    # Path level parameters apply to the operation too
    assert supports_query_param(openapi_v3_core, SECRET_GVK, "pretty")
    assert not supports_query_param(openapi_v3_core, SECRET_GVK, "foo")
    assert not supports_query_param(
        openapi_v3_core, {**SECRET_GVK, "kind": "ConfigMap"}, "dryRun"
    )


def test_supports_query_param_ignores_other_verbs(openapi_v3_core):
    path = openapi_v3_core["paths"][SECRETS]
    del path["post"]
    path["get"]["parameters"] = [{"name": "dryRun", "in": "query"}]
    assert not supports_query_param(openapi_v3_core, SECRET_GVK, "dryRun")


def test_supports_query_param_gvk_list(openapi_v3_core):
    post = openapi_v3_core["paths"][SECRETS]["post"]
    post["x-kubernetes-group-version-kind"] = [SECRET_GVK]
    assert supports_query_param(openapi_v3_core, SECRET_GVK, "dryRun")


def test_supports_query_param_unresolvable_ref(openapi_v3_core):
    post = openapi_v3_core["paths"][SECRETS]["post"]
    post["parameters"] = [{"$ref": "#/components/parameters/missing"}]
    assert not supports_query_param(openapi_v3_core, SECRET_GVK, "dryRun")


async def test_has_support(api_with_openapi, secret):
    verifier = QueryParamVerifier(api_with_openapi)
    await verifier.has_support(secret)
    [request] = api_with_openapi.requests
    assert request.path == "/openapi/v3/api/v1"


async def test_has_support_unsupported(api_with_openapi):
    verifier = QueryParamVerifier(api_with_openapi, "fooBar")
    with pytest.raises(DryRunUnsupported, match="Secret doesn't support fooBar"):
        await verifier.has_support(Secret({"metadata": {"name": "my-secret"}}))


async def test_has_support_group():
    api = FakeApi()
    verifier = QueryParamVerifier(api)
    deployment = Deployment({"metadata": {"name": "foo"}})
    with pytest.raises(DryRunUnsupported):
        await verifier.has_support(deployment)
    assert [r.path for r in api.requests] == ["/openapi/v3/apis/apps/v1", "/openapi/v2"]


async def test_has_support_v2_fallback(openapi_v3_core, secret):
    api = FakeApi()
    openapi_v3_core["swagger"] = "2.0"
    api.route("GET", "/openapi/v2", httpx.Response(200, json=openapi_v3_core))
    await QueryParamVerifier(api).has_support(secret)
    assert [r.path for r in api.requests] == ["/openapi/v3/api/v1", "/openapi/v2"]


async def test_has_support_server_error(secret):
    api = FakeApi()
    api.route(
        "GET",
        "/openapi/v3/api/v1",
        httpx.Response(500, json={"message": "etcdserver: request timed out"}),
    )
    with pytest.raises(DryRunUnsupported, match="etcdserver"):
        await QueryParamVerifier(api).has_support(secret)
    # Only a 404 triggers the v2 fallback
    assert len(api.requests) == 1


async def test_has_support_timeout(secret):
    api = FakeApi()
    api.route("GET", "/openapi/v3/api/v1", APITimeoutError("timed out"))
    with pytest.raises(DryRunUnsupported, match="timed out"):
        await QueryParamVerifier(api).has_support(secret)


class List(APIObject):
    version = "v1"
    endpoint = "lists"
    kind = "List"
    plural = "lists"
    singular = "list"


async def test_has_support_list(api_with_openapi):
    with pytest.raises(DryRunUnsupported):
        await QueryParamVerifier(api_with_openapi).has_support(List({"metadata": {}}))
    assert api_with_openapi.requests == []


async def test_has_support_not_json(secret):
    api = FakeApi()
    api.route("GET", "/openapi/v3/api/v1", httpx.Response(200, text="<html></html>"))
    with pytest.raises(DryRunUnsupported, match="unable to verify dryRun"):
        await QueryParamVerifier(api).has_support(secret)
