from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .config import get_settings
from .errors import InconsistentDataError
from .logging_config import configure_logging
from .middleware import CSRFMiddleware
from .routes.people import router as people_router
from .routes.relationship import router as relationship_router

configure_logging(get_settings().log_level)
log = logging.getLogger(__name__)

app = FastAPI(title="Kinship API", version="0.1.0")
app.add_middleware(CSRFMiddleware)
app.include_router(relationship_router)
app.include_router(people_router)


@app.exception_handler(InconsistentDataError)
async def _inconsistent_data_handler(request: Request, exc: InconsistentDataError) -> JSONResponse:
    log.error("inconsistent family data on %s: %s", request.url.path, exc)
    return JSONResponse({"detail": "family data is inconsistent"}, status_code=500)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
