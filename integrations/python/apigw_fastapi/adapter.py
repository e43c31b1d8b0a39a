"""FastAPI adapter that annotates the generated OpenAPI schema."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Mapping, MutableMapping, Optional, Union

from apigw_core import EndpointSettings, ServerVariable, with_variable

logger = logging.getLogger(__name__)

ServerHook = Callable[[MutableMapping[str, Any]], Any]


class FastAPIAdapter:
    """Attach API Gateway extensions to the servers of a FastAPI app."""

    def __init__(
        self,
        *,
        app: Any,
        settings: Optional[EndpointSettings] = None,
        variables: Optional[Mapping[str, Union[ServerVariable, Mapping[str, Any]]]] = None,
    ):
        self.app = app
        self.settings = settings
        self.variables: Dict[str, Union[ServerVariable, Mapping[str, Any]]] = dict(variables or {})
        self._hooks: List[ServerHook] = []

    def configure(self, hook: ServerHook) -> ServerHook:
        """Register ``hook`` to run against every server; usable as a decorator."""

        self._hooks.append(hook)
        return hook

    def patch_openapi(self) -> None:
        schema = self.app.openapi()
        servers = schema.setdefault("servers", [])
        if not servers:
            servers.append({"url": getattr(self.app, "root_path", "") or "/"})
        for server in servers:
            existing = server.get("variables", {})
            for key, value in self.variables.items():
                if key not in existing:
                    with_variable(server, key, value)
            if self.settings is not None:
                self.settings.apply(server)
            for hook in self._hooks:
                hook(server)
            logger.info("patched OpenAPI server %s", server.get("url"))
        self.app.openapi_schema = schema
