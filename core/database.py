import json
import os

import firebase_admin
from fastapi import Request
from firebase_admin import credentials, firestore

from core.config import Settings
from core.errors import ConfigurationError
from core.log import get_logger
from core.store import DocumentStore, FirestoreStore


logger = get_logger(__name__)


def load_service_account(settings: Settings) -> dict:
    """Service account from FIREBASE_SERVICE_ACCOUNT_KEY, else from the key file."""
    try:
        if settings.FIREBASE_SERVICE_ACCOUNT_KEY:
            info = json.loads(settings.FIREBASE_SERVICE_ACCOUNT_KEY)
            logger.info("Firebase service account loaded from environment variable")
        else:
            path = os.path.abspath(settings.FIREBASE_SERVICE_ACCOUNT_PATH)
            with open(path, "r", encoding="utf-8") as fh:
                info = json.load(fh)
            logger.info("Firebase service account loaded from file")
    except (OSError, ValueError) as e:
        logger.error("Error loading Firebase service account key: %s", e)
        logger.error("For production: Set FIREBASE_SERVICE_ACCOUNT_KEY environment variable")
        logger.error("For development: Make sure '%s' exists", settings.FIREBASE_SERVICE_ACCOUNT_PATH)
        raise ConfigurationError("Firebase service account key could not be loaded") from e
    return info


def init_firestore_store(settings: Settings) -> FirestoreStore:
    info = load_service_account(settings)
    try:
        try:
            app = firebase_admin.get_app()
        except ValueError:
            app = firebase_admin.initialize_app(credentials.Certificate(info))
        client = firestore.client(app)
    except (ValueError, OSError) as e:
        logger.error("Error initializing Firebase: %s", e)
        raise ConfigurationError(f"Firebase initialization failed: {e}") from e
    logger.info("Firebase initialized successfully")
    return FirestoreStore(client)


def get_store(request: Request) -> DocumentStore:
    return request.app.state.store
