"""Bearer token and password primitives."""
from __future__ import annotations

from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext

from civicos.core.settings import Settings

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


class InvalidTokenError(Exception):
    """Raised when a bearer token cannot be trusted."""


class TokenVerifier:
    """Issue and verify HMAC-signed access tokens.

    The signing secret is supplied at construction time so the dependency is
    explicit; nothing here reads the process environment.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expire_minutes: int = 60 * 24 * 7,
    ) -> None:
        if not secret_key:
            raise ValueError("A non-empty signing secret is required")
        self._secret_key = secret_key
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    @classmethod
    def from_settings(cls, config: Settings) -> TokenVerifier:
        """Build a verifier from an application settings object."""
        return cls(
            config.session_secret,
            algorithm=config.jwt_algorithm,
            expire_minutes=config.access_token_expire_minutes,
        )

    def issue(self, user_id: int, extra_claims: dict[str, object] | None = None) -> str:
        """Create a signed access token whose subject is ``user_id``."""
        now = datetime.now(UTC)
        to_encode: dict[str, object] = {
            "sub": str(user_id),
            "iat": int(now.timestamp()),
            "exp": now + timedelta(minutes=self.expire_minutes),
        }
        if extra_claims:
            to_encode.update(extra_claims)
        encoded_jwt: str = jwt.encode(to_encode, self._secret_key, algorithm=self.algorithm)
        return encoded_jwt

    def verify(self, token: str) -> int:
        """Return the user id carried by ``token``.

        Raises:
            InvalidTokenError: If the signature, algorithm, expiry or subject is invalid.
        """
        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[self.algorithm])
        except JWTError as err:
            raise InvalidTokenError("Invalid or expired token") from err

        subject = payload.get("sub")
        if subject is None:
            raise InvalidTokenError("Token has no subject")
        try:
            return int(subject)
        except (TypeError, ValueError) as err:
            raise InvalidTokenError("Token subject is not a user id") from err


def hash_password(password: str) -> str:
    """Return a salted PBKDF2 hash of ``password``."""
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str | None) -> bool:
    """Check ``password`` against a stored hash; missing hashes never match."""
    if not password_hash:
        return False
    return pwd_context.verify(password, password_hash)
