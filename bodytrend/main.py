from __future__ import annotations

from fastapi import Depends, FastAPI

from .routes.sources import router as sources_router
from .routes.trends import router as trends_router
from .security import verify_api_key

app: FastAPI = FastAPI(
    title="Body Trend",
    version="1.0.0",
    description="Body measurement imports and weight trend projections",
)


@app.api_route("/", methods=["GET", "HEAD"], include_in_schema=False)
@app.api_route("/healthz", methods=["GET", "HEAD"], include_in_schema=False)
async def healthz() -> dict[str, str]:
    """Lightweight endpoint used for health checks."""
    return {"status": "ok"}


for router in (trends_router, sources_router):
    app.include_router(router, prefix="/v1", dependencies=[Depends(verify_api_key)])
