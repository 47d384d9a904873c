#!/usr/bin/env python3
"""
Diagnostic for the /api/v1/auth/forgot-password endpoint.
Sends one reset request for the test account and prints what comes back.
"""

import asyncio
import logging
from typing import Optional

import httpx

from reset_requester.schemas import ForgotPasswordRequest

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
# httpx logs every request at INFO; keep stderr for failures only
logging.getLogger("httpx").setLevel(logging.WARNING)
logger = logging.getLogger(__name__)

BASE_URL = "http://localhost:8080"
FORGOT_PASSWORD_PATH = "/api/v1/auth/forgot-password"
TEST_EMAIL = "test@example.com"


async def request_password_reset(transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
    """POST the reset payload and print the status and decoded body.

    Any failure (connection, transport or JSON decoding) is logged as a
    single error line; the status code itself is never treated as a failure.
    """
    payload = ForgotPasswordRequest(email=TEST_EMAIL)
    url = f"{BASE_URL}{FORGOT_PASSWORD_PATH}"

    try:
        async with httpx.AsyncClient(transport=transport, timeout=None) as client:
            logger.debug(f"POST {url} for {payload.email}")
            response = await client.post(
                url,
                headers={"Content-Type": "application/json"},
                content=payload.model_dump_json(),
            )
            result = response.json()

        print(f"Status: {response.status_code}")
        print(f"Response: {result}")
    except Exception as e:
        logger.error(f"Error testing password reset: {type(e).__name__}: {e}")


def run() -> None:
    """Send the reset request once and wait for it to settle."""
    asyncio.run(request_password_reset())


if __name__ == "__main__":
    run()
