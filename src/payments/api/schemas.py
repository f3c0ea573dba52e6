"""Pydantic request/response schemas for the Payments API.

These are external contracts (anti-corruption layer), separate from the
gateway's internal result types.
"""

from pydantic import BaseModel, Field


class ClientTokenResponse(BaseModel):
    client_token: str = Field(serialization_alias="clientToken")
    success: bool = True


class ConfigureGatewayRequest(BaseModel):
    should_succeed: bool
    failure_reason: str = "Processor Declined"


class GatewayConfigResponse(BaseModel):
    gateway: str
    should_succeed: bool
    failure_reason: str
