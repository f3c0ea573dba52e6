"""FastAPI wiring for ServiceError responses."""

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from shared.errors import ServiceError

logger = structlog.get_logger(__name__)


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(
        "Request failed",
        method=request.method,
        path=request.url.path,
        kind=type(exc).__name__,
        status_code=exc.status_code,
        message=exc.message,
        error=str(exc.cause) if exc.cause is not None else None,
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ServiceError, service_error_handler)


def bind_domains(app: FastAPI, route_domains: dict) -> None:
    """Push the matching Protean domain context around each request.

    ``route_domains`` maps URL prefixes to domains; unmatched paths (health
    check, docs, payments) pass through without a domain context.
    """

    def _resolve_domain(path: str):
        for prefix, domain in route_domains.items():
            if path.startswith(prefix):
                return domain
        return None

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        domain = _resolve_domain(request.url.path)
        if domain is not None:
            with domain.domain_context():
                response = await call_next(request)
            return response
        return await call_next(request)
