"""Firebase Authentication: token verification and account creation."""

import asyncio
import logging
from typing import Any

from firebase_admin import auth
from firebase_admin import exceptions as firebase_exceptions
from pydantic import BaseModel

from services.errors import AuthenticationError, InputValidationError, UpstreamError

logger = logging.getLogger(__name__)


class AuthUser(BaseModel):
    uid: str
    email: str | None = None
    name: str | None = None


class IdentityProvider:
    def __init__(self, app: Any = None) -> None:
        self._app = app

    async def verify(self, token: str) -> str:
        """Resolve a Firebase ID token to its user id."""
        try:
            claims = await asyncio.to_thread(auth.verify_id_token, token, self._app, True)
        except auth.CertificateFetchError as e:
            logger.error("Could not fetch token signing certificates: %s", e)
            raise UpstreamError("Identity backend unavailable") from e
        except (ValueError, auth.InvalidIdTokenError, auth.UserDisabledError, auth.UserNotFoundError) as e:
            # Expired and revoked tokens are InvalidIdTokenError subclasses
            logger.info("Rejected identity token: %s", e)
            raise AuthenticationError("Invalid or expired token") from e
        except firebase_exceptions.FirebaseError as e:
            logger.error("Firebase token verification failed: %s", e)
            raise UpstreamError("Identity backend unavailable") from e
        return claims["uid"]

    async def create_user(self, email: str, password: str, name: str) -> AuthUser:
        try:
            record = await asyncio.to_thread(
                auth.create_user, email=email, password=password, display_name=name, app=self._app
            )
        except ValueError as e:
            raise InputValidationError(str(e)) from e
        except auth.EmailAlreadyExistsError as e:
            raise InputValidationError("Email already registered") from e
        except firebase_exceptions.FirebaseError as e:
            logger.error("Firebase create_user failed: %s", e)
            raise UpstreamError("Identity backend unavailable") from e
        return AuthUser(uid=record.uid, email=record.email, name=record.display_name)

    async def create_custom_token(self, uid: str) -> str:
        try:
            token = await asyncio.to_thread(auth.create_custom_token, uid, None, self._app)
        except (ValueError, auth.TokenSignError) as e:
            logger.error("Firebase custom token signing failed: %s", e)
            raise UpstreamError("Identity backend unavailable") from e
        return token.decode("utf-8") if isinstance(token, bytes) else token
