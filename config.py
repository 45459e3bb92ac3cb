import os
import logging
import firebase_admin
from firebase_admin import credentials, firestore
from dotenv import load_dotenv

load_dotenv()

FIREBASE_CREDENTIALS = os.getenv("FIREBASE_CREDENTIALS", "serviceAccountKey.json")
BILLING_API_KEY      = os.getenv("BILLING_API_KEY", "")
LOG_LEVEL            = os.getenv("LOG_LEVEL", "INFO")
DEFAULT_BASE_RATE    = float(os.getenv("DEFAULT_BASE_RATE", "150"))

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Configure root logging for the API process."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )


# ── Firebase initialization (lazy, runs once) ────────────────────
def get_db():
    if not firebase_admin._apps:
        cred = credentials.Certificate(FIREBASE_CREDENTIALS)
        firebase_admin.initialize_app(cred)
    return firestore.client()


# ── Package categories, in primary-recommendation order ─────────
CATEGORY_RANK = {
    "standard": 0,
    "hosted":   1,
    "special":  2,
}

# ── Entitlement tiers ───────────────────────────────────────────
ENTITLEMENTS = ("none", "standard", "pro")

# ── Nights covered by one billing period ────────────────────────
# Hourly products are treated as a single-night stay.
PERIOD_NIGHTS = {
    "hour":  1,
    "day":   1,
    "week":  7,
    "month": 30,
    "year":  365,
}

# ── Roles allowed to manage a listing's packages ────────────────
HOST_ROLES = ("host", "admin")
