"""Firebase Admin SDK initialization and ID token verification."""

import json
import os

import firebase_admin
from firebase_admin import auth, credentials
from structlog import get_logger

logger = get_logger(__name__)

_firebase_app: firebase_admin.App | None = None


def initialize_firebase(
    firebase_credentials_path: str | None = None, firebase_config_json: str | None = None
) -> None:
    """
    Initialize Firebase Admin SDK.

    Credentials are taken from, in order: the raw service account JSON, the
    service account file path, then Application Default Credentials.
    """
    global _firebase_app

    if _firebase_app is not None:
        logger.info("firebase_already_initialized")
        return

    cred = None
    if firebase_config_json:
        logger.info("firebase_init", source="json")
        cred = credentials.Certificate(json.loads(firebase_config_json))
    elif firebase_credentials_path and os.path.exists(firebase_credentials_path):
        logger.info("firebase_init", source="file", path=firebase_credentials_path)
        cred = credentials.Certificate(firebase_credentials_path)

    try:
        if cred:
            _firebase_app = firebase_admin.initialize_app(cred)
        else:
            _firebase_app = firebase_admin.initialize_app()
            logger.info("firebase_init", source="default_credentials")
    except Exception as e:
        logger.error("firebase_init_failed", error=str(e))
        raise


def get_firebase_app() -> firebase_admin.App:
    """
    Get the Firebase app instance.

    Raises:
        RuntimeError: If Firebase is not initialized
    """
    if _firebase_app is None:
        raise RuntimeError("Firebase not initialized. Call initialize_firebase() first.")
    return _firebase_app


async def verify_firebase_token(id_token: str) -> dict:
    """
    Verify a Firebase ID token.

    Args:
        id_token: Firebase ID token from the web client

    Returns:
        Decoded token claims; ``uid`` identifies the account

    Raises:
        ValueError: If the token is invalid, expired or cannot be verified
    """
    try:
        decoded_token = auth.verify_id_token(id_token, clock_skew_seconds=10)
    except auth.InvalidIdTokenError as e:
        logger.warning("firebase_token_invalid", error=str(e))
        raise ValueError(f"Invalid Firebase ID token: {e!s}")
    except Exception as e:
        logger.error("firebase_token_verification_failed", error=str(e))
        raise ValueError(f"Token verification failed: {e!s}")

    logger.info("firebase_token_verified", uid=decoded_token.get("uid"))
    return decoded_token
