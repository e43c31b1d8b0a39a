"""Environment-driven endpoint settings."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

from .endpoint import EndpointType
from .server import (
    Server,
    as_edge_endpoint,
    as_private_endpoint,
    as_regional_endpoint,
    disable_execute_api_endpoint,
)

_TRUE = {"true", "1", "yes", "on"}
_FALSE = {"false", "0", "no", "off"}


def _parse_bool(name: str, raw: Optional[str]) -> bool:
    if raw is None or not raw.strip():
        return False
    lowered = raw.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean string (true/false), got {raw!r}")


def _parse_list(raw: Optional[str]) -> List[str]:
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass
class EndpointSettings:
    endpoint_type: Optional[EndpointType] = None
    custom_domain_name: Optional[str] = None
    vpc_endpoint_ids: List[str] = field(default_factory=list)
    disable_execute_api_endpoint: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EndpointSettings":
        """Read ``APIGW_*`` variables from ``environ`` (defaults to ``os.environ``)."""

        env = os.environ if environ is None else environ
        raw_type = env.get("APIGW_ENDPOINT_TYPE")
        return cls(
            endpoint_type=EndpointType.parse(raw_type) if raw_type and raw_type.strip() else None,
            custom_domain_name=env.get("APIGW_CUSTOM_DOMAIN_NAME") or None,
            vpc_endpoint_ids=_parse_list(env.get("APIGW_VPC_ENDPOINT_IDS")),
            disable_execute_api_endpoint=_parse_bool(
                "APIGW_DISABLE_EXECUTE_API_ENDPOINT",
                env.get("APIGW_DISABLE_EXECUTE_API_ENDPOINT"),
            ),
        )

    def apply(self, server: Server) -> Server:
        if self.endpoint_type is EndpointType.PRIVATE:
            as_private_endpoint(server, *self.vpc_endpoint_ids)
        elif self.endpoint_type is EndpointType.EDGE:
            as_edge_endpoint(server, self.custom_domain_name)
        elif self.endpoint_type is EndpointType.REGIONAL:
            as_regional_endpoint(server, self.custom_domain_name)
        if self.disable_execute_api_endpoint:
            disable_execute_api_endpoint(server)
        return server
