"""
Pydantic models for the token refresh exchange.

Defines the JSON contract of the refresh endpoint. Field names on
the wire are camelCase, attributes are snake_case.
"""

from pydantic import BaseModel, ConfigDict, Field


class TokenRefreshRequest(BaseModel):
    """Body sent to the refresh endpoint."""
    model_config = ConfigDict(populate_by_name=True)

    refresh_token: str = Field(
        ...,
        min_length=1,
        alias="refreshToken",
        description="The stored refresh token"
    )


class TokenRefreshResponse(BaseModel):
    """
    Body returned by the refresh endpoint.

    Extra fields sent by the server are ignored.
    """
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {"accessToken": "eyJhbGciOiJIUzI1NiJ9.e30.c2lnbmF0dXJl"}
        }
    )

    access_token: str = Field(
        ...,
        min_length=1,
        alias="accessToken",
        description="The newly issued access token"
    )
