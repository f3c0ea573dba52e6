"""Shopfront FastAPI application.

Hosts checkout, order administration and payment-token endpoints. Each
request under /orders runs inside the ordering domain context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV controls which config overlay is applied.
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from ordering.domain import ordering
from payments.gateway import PaymentGatewayClient, build_gateway
from shared.http import bind_domains, register_error_handlers

ordering.init()

from ordering.api.routes import order_router  # noqa: E402
from payments.api.routes import payment_router  # noqa: E402

# ---------------------------------------------------------------------------
# Route-to-domain mapping
# ---------------------------------------------------------------------------
ROUTE_DOMAIN_MAP = {
    "/orders": ordering,
}


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
def create_app(gateway: PaymentGatewayClient | None = None) -> FastAPI:
    app = FastAPI(
        title="Shopfront API",
        description="Checkout, order administration and payment tokens",
    )
    app.state.payment_gateway = gateway or build_gateway()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    bind_domains(app, ROUTE_DOMAIN_MAP)

    app.include_router(order_router)
    app.include_router(payment_router)
    register_error_handlers(app)

    # -----------------------------------------------------------------------
    # Health / root
    # -----------------------------------------------------------------------
    @app.get("/health")
    async def health():
        return JSONResponse(
            content={
                "status": "ok",
                "domains": {"ordering": {"name": ordering.name}},
                "payment_gateway": app.state.payment_gateway.name,
            }
        )

    return app


app = create_app()
