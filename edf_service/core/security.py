"""Pre-shared key authentication."""

import hmac
from typing import Optional

from loguru import logger

from .environment import get_config_service


def is_valid_key(key: Optional[str], secret_key: Optional[str] = None) -> bool:
    """Check a caller-supplied key against the configured pre-shared key.

    Args:
        key: Key sent by the caller
        secret_key: Expected key; defaults to the configured ``APP_SECRET_KEY``

    Returns:
        True if the key matches, False otherwise
    """
    if not key or not key.strip():
        logger.warning("Authentication failed: Provided key is null or empty.")
        return False

    if secret_key is None:
        secret_key = get_config_service().get_auth_settings().app_secret_key

    is_valid = hmac.compare_digest(key.encode("utf-8"), secret_key.encode("utf-8"))
    if is_valid:
        logger.info("Authentication successful.")
    else:
        logger.warning("Authentication failed: Invalid key provided.")
    return is_valid
