from typing import Optional
import logging

from jose import JWTError, jwt

from config import ApplicationConfig

logger = logging.getLogger(__name__)


def verify_jwt(token: str) -> Optional[dict]:
    """
    Verify and decode JWT token from the identity provider

    Args:
        token: JWT token string

    Returns:
        Decoded payload dict (sub or user_id identifies the caller) or None if invalid
    """
    try:
        payload = jwt.decode(token, ApplicationConfig.JWT_SECRET, algorithms=["HS256"])
        logger.debug(f"JWT verification successful for subject: {external_id_of(payload)}")
        return payload
    except JWTError as e:
        logger.warning(f"JWT verification failed: {type(e).__name__} - {str(e)}")
        return None


def external_id_of(payload: dict) -> Optional[str]:
    """Identity provider user id carried by the token"""
    return payload.get("sub") or payload.get("user_id")
