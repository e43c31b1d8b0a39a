"""Helpers that annotate an OpenAPI Server Object with API Gateway settings.

Every helper mutates the server dict in place and returns it, so calls can be
nested::

    disable_execute_api_endpoint(as_regional_endpoint(server, "api.example.com"))
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, MutableMapping, Optional, Union

from .endpoint import EndpointConfiguration, EndpointType, non_empty
from .merge import merge_extensions

Server = MutableMapping[str, Any]
Configure = Callable[[EndpointConfiguration], Any]


@dataclass
class ServerVariable:
    """OpenAPI Server Variable Object."""

    default: str
    enum: Optional[List[str]] = None
    description: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"default": self.default}
        if self.enum:
            payload["enum"] = list(self.enum)
        if self.description:
            payload["description"] = self.description
        return payload


def with_variable(
    server: Server, key: str, value: Union[ServerVariable, Mapping[str, Any]]
) -> Server:
    """Add a variable (e.g. ``basePath``) to the server."""

    variables = server.setdefault("variables", {})
    if key in variables:
        raise ValueError(f"server variable {key!r} already defined")
    variables[key] = value.to_dict() if isinstance(value, ServerVariable) else dict(value)
    return server


def with_endpoint_configuration(
    server: Server, configure: Union[Configure, EndpointConfiguration]
) -> Server:
    """Merge an endpoint configuration into the server's extensions."""

    if isinstance(configure, EndpointConfiguration):
        config = configure
    else:
        config = EndpointConfiguration()
        configure(config)
    merge_extensions(server, config.to_extensions())
    return server


def as_private_endpoint(server: Server, *vpc_endpoint_ids: Optional[str]) -> Server:
    """PRIVATE: for a private API reachable through the given VPC endpoints."""

    def configure(config: EndpointConfiguration) -> None:
        config.vpc_endpoint_ids = non_empty(vpc_endpoint_ids)
        config.types = [EndpointType.PRIVATE.value]

    return with_endpoint_configuration(server, configure)


def as_edge_endpoint(server: Server, custom_domain_name: Optional[str] = None) -> Server:
    """EDGE: for an edge-optimized API and its custom domain name."""

    def configure(config: EndpointConfiguration) -> None:
        config.types = non_empty([EndpointType.EDGE.value, custom_domain_name])

    return with_endpoint_configuration(server, configure)


def as_regional_endpoint(server: Server, custom_domain_name: Optional[str] = None) -> Server:
    """REGIONAL: for a regional API and its custom domain name."""

    def configure(config: EndpointConfiguration) -> None:
        config.types = non_empty([EndpointType.REGIONAL.value, custom_domain_name])

    return with_endpoint_configuration(server, configure)


def disable_execute_api_endpoint(server: Server) -> Server:
    """Stop clients from invoking the API through the default execute-api endpoint.

    By default an API is reachable at
    ``https://{api_id}.execute-api.{region}.amazonaws.com``.
    """

    def configure(config: EndpointConfiguration) -> None:
        config.disable_execute_api_endpoint = True

    return with_endpoint_configuration(server, configure)
