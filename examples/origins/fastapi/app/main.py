from __future__ import annotations

import logging
import os
import time

from fastapi import FastAPI

from apigw_core import EndpointSettings, ServerVariable
from apigw_fastapi.adapter import FastAPIAdapter

ROOT_PATH = os.getenv("APIGW_ROOT_PATH", "")
STAGE = os.getenv("APIGW_STAGE", "prod")

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO"))

app = FastAPI(title="API Gateway FastAPI Example", version="0.1.0", root_path=ROOT_PATH)


@app.get("/healthz")
def health() -> dict[str, str]:
    return {"status": "ok", "ts": str(int(time.time()))}


@app.get("/v1/demo")
def demo() -> dict[str, str]:
    return {"result": "Hello from FastAPI"}


adapter = FastAPIAdapter(
    app=app,
    settings=EndpointSettings.from_env(),
    variables={"stage": ServerVariable(default=STAGE, description="API Gateway stage")},
)
adapter.patch_openapi()
