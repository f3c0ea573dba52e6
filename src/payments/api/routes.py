"""FastAPI routes for the Payments domain: client tokens and gateway control."""

import os

from fastapi import APIRouter, HTTPException, Request

from payments.api.schemas import ClientTokenResponse, ConfigureGatewayRequest, GatewayConfigResponse
from payments.gateway.fake_adapter import FakeProcessor

payment_router = APIRouter(prefix="/payments", tags=["payments"])


@payment_router.get("/token", response_model=ClientTokenResponse)
async def client_token(request: Request) -> ClientTokenResponse:
    """Issue a client token for the storefront's drop-in payment UI."""
    gateway = request.app.state.payment_gateway
    token = await gateway.generate_client_token()
    return ClientTokenResponse(client_token=token)


@payment_router.post("/gateway/configure", response_model=GatewayConfigResponse)
async def configure_gateway(request: Request, body: ConfigureGatewayRequest) -> GatewayConfigResponse:
    """Configure the FakeProcessor behavior (non-production only).

    This endpoint is only available when PROTEAN_ENV is not 'production'.
    It allows toggling success/decline behavior for manual API testing.
    """
    if os.environ.get("PROTEAN_ENV") == "production":
        raise HTTPException(status_code=403, detail="Gateway configuration not available in production")

    processor = request.app.state.payment_gateway.processor
    if not isinstance(processor, FakeProcessor):
        raise HTTPException(status_code=400, detail="Gateway configuration only available for FakeProcessor")

    processor.configure(
        should_succeed=body.should_succeed,
        failure_reason=body.failure_reason,
    )
    return GatewayConfigResponse(
        gateway=type(processor).__name__,
        should_succeed=processor.should_succeed,
        failure_reason=processor.failure_reason,
    )
