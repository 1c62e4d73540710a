"""
API request and response models.

Pydantic models for the response envelope, the echo request body and
OpenAPI schema generation.
"""

from datetime import datetime
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator


class GreetingData(BaseModel):
    """Data returned by the greeting endpoint."""

    model_config = ConfigDict(from_attributes=True)

    greeting: str
    timestamp: datetime


class HealthData(BaseModel):
    """Data returned by the health check endpoint."""

    model_config = ConfigDict(from_attributes=True)

    status: str
    time: datetime


class EchoData(BaseModel):
    """Data returned by the echo endpoint."""

    model_config = ConfigDict(from_attributes=True)

    original: str
    echoed: str
    length: int = Field(..., description="Number of Unicode code points in original")
    timestamp: datetime


class Envelope(BaseModel):
    """
    Standard JSON wrapper for every response.

    Successful replies carry message and data; failures carry only error.
    Unset fields are omitted from the serialized body.
    """

    success: bool
    message: str | None = None
    data: GreetingData | HealthData | EchoData | None = None
    error: str | None = None

    @model_validator(mode="after")
    def check_outcome_fields(self) -> Self:
        if self.success and self.error is not None:
            raise ValueError("successful envelope must not carry an error")
        if self.success and (self.message is None or self.data is None):
            raise ValueError("successful envelope must carry message and data")
        if not self.success and (self.message is not None or self.data is not None):
            raise ValueError("failed envelope must not carry message or data")
        return self

    @classmethod
    def ok(cls, message: str, data: GreetingData | HealthData | EchoData) -> Self:
        """Build a success envelope around a payload."""
        return cls(success=True, message=message, data=data)

    @classmethod
    def fail(cls, error: str) -> Self:
        """Build a failure envelope carrying only the error text."""
        return cls(success=False, error=error)


class EchoRequest(BaseModel):
    """
    Request model for the echo endpoint.

    Unknown keys and non-string values are rejected. A missing message
    decodes to the empty string and is refused later by the domain rule.
    """

    model_config = ConfigDict(extra="forbid", strict=True)

    message: str = Field("", description="Text to echo back")
