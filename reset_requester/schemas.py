"""Pydantic models for the forgot-password request."""

from pydantic import BaseModel, Field


class ForgotPasswordRequest(BaseModel):
    """Request body for POST /api/v1/auth/forgot-password."""
    email: str = Field("test@example.com", description="Account email to send the reset link to")
