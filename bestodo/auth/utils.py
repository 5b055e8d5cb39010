from passlib.context import CryptContext
from jose import ExpiredSignatureError, JOSEError, JWTError, jwt
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional
from bestodo.config.validators import PASSWORD_MAX_BYTES
from bestodo.errors import InternalError
import logging

logger = logging.getLogger(__name__)

USER_ID_CLAIM = "user_id"


class PasswordHasher:
    """Salted bcrypt hashing of account passwords"""

    def __init__(self, rounds: int = 12):
        self.pwd_context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
            bcrypt__truncate_error=True,
        )

    def hash(self, password: str) -> str:
        """Hash a password using bcrypt"""
        try:
            return self.pwd_context.hash(password)
        except (ValueError, TypeError) as e:
            logger.error(f"Password hashing failed: {e}")
            raise InternalError("Error hashing password") from e

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """Verify a password against its hash"""
        # bcrypt would compare only the first 72 bytes, so longer input never matches
        if len(plain_password.encode("utf-8")) > PASSWORD_MAX_BYTES:
            return False
        try:
            return self.pwd_context.verify(plain_password, hashed_password)
        except (ValueError, TypeError) as e:
            logger.warning(f"Password could not be verified: {e}")
            return False


class TokenError(Exception):
    """An identity token failed validation"""


class TokenService:
    """
    Issues and validates signed identity tokens.

    A token is a JWT carrying the user id and an absolute expiry. Nothing is
    stored server side, so a token stays valid until it expires or the
    signing secret changes.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expire_hours: int = 24,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expires_delta = timedelta(hours=expire_hours)
        self.clock = clock or (lambda: datetime.now(timezone.utc))

    def issue(self, user_id: str) -> str:
        """Create a token for user_id expiring after the configured lifetime"""
        to_encode = {
            USER_ID_CLAIM: user_id,
            "exp": self.clock() + self.expires_delta,
        }
        try:
            return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)
        except JOSEError as e:
            logger.error(f"Token signing failed: {e}")
            raise InternalError("Error generating token") from e

    def validate(self, token: str) -> str:
        """Return the user id carried by token, or raise TokenError"""
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                options={"require_exp": True},
            )
        except ExpiredSignatureError:
            raise TokenError("Token has expired")
        except JWTError as e:
            raise TokenError(f"Invalid token: {str(e)}")

        user_id = payload.get(USER_ID_CLAIM)
        if not isinstance(user_id, str) or not user_id:
            raise TokenError("Token does not carry a user id")
        return user_id
