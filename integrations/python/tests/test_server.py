import pytest

from apigw_core import (
    ENDPOINT_CONFIGURATION_EXTENSION,
    EndpointConfiguration,
    EndpointType,
    ServerVariable,
    as_edge_endpoint,
    as_private_endpoint,
    as_regional_endpoint,
    disable_execute_api_endpoint,
    with_endpoint_configuration,
    with_variable,
)


def _config(server):
    return server[ENDPOINT_CONFIGURATION_EXTENSION]


def test_private_endpoint_drops_empty_ids():
    server = {"url": "https://internal.example.com"}
    result = as_private_endpoint(server, "vpce-1", "", None, "vpce-2")

    assert result is server
    assert _config(server) == {"types": ["PRIVATE"], "vpcEndpointIds": ["vpce-1", "vpce-2"]}


def test_edge_endpoint_with_custom_domain():
    server: dict = {}
    as_edge_endpoint(server, "api.example.com")

    assert _config(server) == {"types": ["EDGE", "api.example.com"]}


def test_regional_endpoint_without_domain():
    server: dict = {}
    as_regional_endpoint(server, "")

    assert _config(server) == {"types": ["REGIONAL"]}


def test_helpers_compose_without_losing_settings():
    server: dict = {"url": "/"}
    disable_execute_api_endpoint(as_private_endpoint(server, "vpce-1"))

    assert _config(server) == {
        "types": ["PRIVATE"],
        "vpcEndpointIds": ["vpce-1"],
        "disableExecuteApiEndpoint": True,
    }
    assert server["url"] == "/"


def test_switching_endpoint_type_replaces_types():
    server: dict = {}
    as_private_endpoint(server, "vpce-1")
    as_regional_endpoint(server)

    assert _config(server) == {"types": ["REGIONAL"], "vpcEndpointIds": ["vpce-1"]}


def test_with_endpoint_configuration_accepts_instance():
    server: dict = {}
    config = EndpointConfiguration(types=[EndpointType.EDGE], disable_execute_api_endpoint=False)
    with_endpoint_configuration(server, config)

    assert _config(server) == {"types": ["EDGE"], "disableExecuteApiEndpoint": False}


def test_empty_configuration_emits_empty_object():
    assert EndpointConfiguration().to_extensions() == {ENDPOINT_CONFIGURATION_EXTENSION: {}}


def test_with_variable_adds_server_variable():
    server = {"url": "https://{host}/{basePath}"}
    with_variable(server, "basePath", ServerVariable(default="v1", enum=["v1", "v2"]))
    with_variable(server, "host", {"default": "api.example.com"})

    assert server["variables"] == {
        "basePath": {"default": "v1", "enum": ["v1", "v2"]},
        "host": {"default": "api.example.com"},
    }


def test_with_variable_rejects_duplicates():
    server: dict = {}
    with_variable(server, "basePath", ServerVariable(default="v1"))

    with pytest.raises(ValueError, match="basePath"):
        with_variable(server, "basePath", ServerVariable(default="v2"))


def test_endpoint_type_parse():
    assert EndpointType.parse(" regional ") is EndpointType.REGIONAL
    with pytest.raises(ValueError, match="unknown endpoint type"):
        EndpointType.parse("GLOBAL")
