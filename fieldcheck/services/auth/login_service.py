"""
Login API client.

Exchanges email/password credentials for a user identity.
"""

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from common.utils.exceptions import AuthFailedException, NetworkException
from config.checkin_config import LOGIN_PATH
from fieldcheck.schemas.auth import LoginRequest, LoginResponse
from fieldcheck.types import User

logger = logging.getLogger(__name__)


class LoginService:
    """
    Login API client.
    Stateless: the session layer keeps the returned User.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 15.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize LoginService.

        Args:
            base_url: Backend base URL (no trailing slash needed)
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests, mock backend)
        """
        self._login_url = f"{base_url.rstrip('/')}{LOGIN_PATH}"
        self._timeout = timeout
        self._transport = transport

    async def login(self, email: str, password: str) -> User:
        """
        Authenticate a user.

        Args:
            email: User email, sent as "username"
            password: User password

        Returns:
            User built from the server's user block

        Raises:
            AuthFailedException: Server answered without status "success"
            NetworkException: Transport failure or unreadable response
        """
        payload = LoginRequest(username=email, password=password).model_dump()

        try:
            async with httpx.AsyncClient(
                transport=self._transport,
                timeout=self._timeout
            ) as client:
                response = await client.post(self._login_url, json=payload)
        except httpx.HTTPError as e:
            logger.error(f"Login request failed: {e}")
            raise NetworkException(details=str(e))

        try:
            data = LoginResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.error(f"Unreadable login response ({response.status_code}): {response.text[:200]}")
            raise NetworkException(
                message="Unexpected response from login server",
                details=str(e)
            )

        if data.status != "success":
            logger.info(f"Login rejected for {email}: {data.message}")
            raise AuthFailedException(
                message=data.message or "Login failed",
                details={"statusCode": response.status_code}
            )

        if data.user is None:
            logger.error("Login succeeded without a user block")
            raise NetworkException(message="Unexpected response from login server")

        logger.info(f"Login succeeded for {data.user.email}")
        return User(
            name=data.user.name,
            email=data.user.email,
            photo=data.user.photo,
        )
