"""Bearer token helpers.

Authentication proper lives outside this service: whoever issues tokens vouches
for the ``sub`` claim, which is used verbatim as the caller identity.
"""
from __future__ import annotations

from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt

from postboard.core.settings import Settings, settings


class InvalidTokenError(ValueError):
    """Raised when a bearer token cannot be decoded into a caller identity."""


def create_access_token(
    subject: str,
    extra_claims: dict[str, str] | None = None,
    expires_minutes: int | None = None,
    app_settings: Settings | None = None,
) -> str:
    """Create a JWT access token for ``subject``."""
    cfg = app_settings or settings
    to_encode: dict[str, object] = {"sub": subject}
    if extra_claims:
        to_encode.update(extra_claims)
    minutes = cfg.access_token_expire_minutes if expires_minutes is None else expires_minutes
    to_encode["exp"] = datetime.now(UTC) + timedelta(minutes=minutes)
    encoded_jwt: str = jwt.encode(
        to_encode,
        cfg.secret_key,
        algorithm=cfg.jwt_algorithm,
    )
    return encoded_jwt


def decode_caller(token: str, app_settings: Settings | None = None) -> str:
    """Return the caller identity carried by ``token``.

    Args:
        token: Encoded JWT taken from the ``Authorization`` header.
        app_settings: Settings holding the signing key and algorithm; the
            module-level settings by default.

    Returns:
        The non-empty ``sub`` claim.

    Raises:
        InvalidTokenError: If the signature or expiry check fails, or the token
            carries no usable subject.
    """
    cfg = app_settings or settings
    try:
        payload = jwt.decode(
            token,
            cfg.secret_key,
            algorithms=[cfg.jwt_algorithm],
        )
    except JWTError as err:
        raise InvalidTokenError("Could not validate credentials") from err

    subject = payload.get("sub")
    if not isinstance(subject, str) or not subject:
        raise InvalidTokenError("Could not validate credentials")
    return subject
