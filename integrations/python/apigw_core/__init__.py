"""API Gateway OpenAPI extension helpers.

This package centralises the ``x-amazon-apigateway-*`` vendor extensions and the
merge rules used to attach them to OpenAPI documents. Framework adapters import
from here to avoid duplicating logic.
"""

from .config import EndpointSettings
from .endpoint import ENDPOINT_CONFIGURATION_EXTENSION, EndpointConfiguration, EndpointType
from .merge import merge_extensions
from .server import (
    ServerVariable,
    as_edge_endpoint,
    as_private_endpoint,
    as_regional_endpoint,
    disable_execute_api_endpoint,
    with_endpoint_configuration,
    with_variable,
)

__all__ = [
    "ENDPOINT_CONFIGURATION_EXTENSION",
    "EndpointConfiguration",
    "EndpointSettings",
    "EndpointType",
    "ServerVariable",
    "as_edge_endpoint",
    "as_private_endpoint",
    "as_regional_endpoint",
    "disable_execute_api_endpoint",
    "merge_extensions",
    "with_endpoint_configuration",
    "with_variable",
]
