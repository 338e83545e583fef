# api/interfaces/api/main.py
from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.domain.errors import ConflictError, DomainValidationError, NotFoundError
from api.infrastructure.log import log
from api.interfaces.api.middleware.rate_limit import RateLimitMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    from api.infrastructure.duckdb_connection import get_connection
    get_connection()  # valida conexao e aplica schema no startup
    log("API pronta")
    yield


app = FastAPI(
    title="Agro Registry API",
    debug=False,  # NUNCA True em producao
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url=None,
)


@app.exception_handler(DomainValidationError)
async def domain_validation_handler(request: Request, exc: DomainValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(ConflictError)
async def conflict_handler(request: Request, exc: ConflictError) -> JSONResponse:
    return JSONResponse(status_code=409, content={"detail": str(exc)})


@app.middleware("http")
async def add_security_headers(request: Request, call_next: object) -> Response:
    response = await call_next(request)  # type: ignore[misc]
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    return response  # type: ignore[return-value]


app.add_middleware(RateLimitMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:5173"],
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
)

from api.interfaces.api.routes.crop_routes import router as crop_router  # noqa: E402
from api.interfaces.api.routes.harvest_routes import router as harvest_router  # noqa: E402
from api.interfaces.api.routes.producer_routes import router as producer_router  # noqa: E402
from api.interfaces.api.routes.property_crop_routes import (  # noqa: E402
    router as property_crop_router,
)
from api.interfaces.api.routes.property_routes import router as property_router  # noqa: E402
from api.interfaces.api.routes.reports_routes import router as reports_router  # noqa: E402

app.include_router(producer_router, prefix="/api")
app.include_router(property_router, prefix="/api")
app.include_router(harvest_router, prefix="/api")
app.include_router(crop_router, prefix="/api")
app.include_router(property_crop_router, prefix="/api")
app.include_router(reports_router, prefix="/api")
