"""Endpoint configuration for the ``x-amazon-apigateway-endpoint-configuration`` extension."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional

ENDPOINT_CONFIGURATION_EXTENSION = "x-amazon-apigateway-endpoint-configuration"


class EndpointType(str, Enum):
    """How API Gateway exposes the API."""

    EDGE = "EDGE"
    REGIONAL = "REGIONAL"
    PRIVATE = "PRIVATE"

    @classmethod
    def parse(cls, value: str) -> "EndpointType":
        try:
            return cls(value.strip().upper())
        except ValueError:
            allowed = ", ".join(member.value for member in cls)
            raise ValueError(f"unknown endpoint type {value!r} (expected one of {allowed})") from None


@dataclass
class EndpointConfiguration:
    """Endpoint settings collected before they are merged into a server.

    Fields left as ``None`` are not emitted, so a merge only touches the
    settings a caller actually configured.
    """

    types: Optional[List[str]] = None
    vpc_endpoint_ids: Optional[List[str]] = None
    disable_execute_api_endpoint: Optional[bool] = None

    def to_extensions(self) -> Dict[str, Any]:
        """Return the pending vendor extensions for this configuration."""

        options: Dict[str, Any] = {}
        if self.types is not None:
            options["types"] = [
                item.value if isinstance(item, EndpointType) else item for item in self.types
            ]
        if self.vpc_endpoint_ids is not None:
            options["vpcEndpointIds"] = list(self.vpc_endpoint_ids)
        if self.disable_execute_api_endpoint is not None:
            options["disableExecuteApiEndpoint"] = self.disable_execute_api_endpoint
        return {ENDPOINT_CONFIGURATION_EXTENSION: options}


def non_empty(values: Iterable[Optional[str]]) -> List[str]:
    """Drop ``None`` and empty strings, keeping order."""

    return [value for value in values if value]
