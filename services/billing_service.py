# Billing Service — subscription products and customer entitlements
# The billing provider SDK is not wired up yet: every call answers from
# the mock catalogue below. One instance is created per app and handed
# to routes through a FastAPI dependency.

import logging
from datetime import datetime, timezone
from functools import lru_cache
from typing import Dict, List, Optional
from config import BILLING_API_KEY, PERIOD_NIGHTS
from models.schemas import (
    BillingProduct, CustomerInfo, EntitlementGrant, PackageDefinition, SubscriptionStatus
)

logger = logging.getLogger(__name__)

MOCK_PRODUCTS = [
    BillingProduct(
        id="week_x2_customer",
        title="2 Week Package",
        description="Two-week customer package",
        price=299.99,
        currency="USD",
        period="week",
        period_count=2,
        category="standard",
        features=["Standard accommodation", "Basic amenities"],
    ),
    BillingProduct(
        id="week_x3_customer",
        title="3 Week Package",
        description="Three-week customer package",
        price=399.99,
        currency="USD",
        period="week",
        period_count=3,
        category="standard",
        features=["Standard accommodation", "Basic amenities", "Extended stay discount"],
    ),
    BillingProduct(
        id="week_x4_customer",
        title="4 Week Package",
        description="Four-week customer package",
        price=499.99,
        currency="USD",
        period="week",
        period_count=4,
        category="standard",
        features=["Standard accommodation", "Basic amenities", "Monthly discount", "Priority booking"],
    ),
    BillingProduct(
        id="per_hour",
        title="Per Hour Service",
        description="Hourly service rate",
        price=25.00,
        currency="USD",
        period="hour",
        period_count=1,
        category="standard",
        features=["Flexible booking", "Hourly pricing"],
    ),
    BillingProduct(
        id="per_hour_luxury",
        title="Luxury Per Hour Service",
        description="Premium hourly service rate",
        price=50.00,
        currency="USD",
        period="hour",
        period_count=1,
        category="hosted",
        features=["Premium service", "Enhanced amenities", "Dedicated support"],
    ),
]


def product_to_package(product: BillingProduct) -> PackageDefinition:
    """
    Expose a billing product as a catalog package.
    Multiplier is 1 (the product price is the base rate) and the stay window
    is the product's billing period converted to nights.
    """
    nights = PERIOD_NIGHTS[product.period] * (1 if product.period == "hour" else product.period_count)
    return PackageDefinition(
        id=product.id,
        name=product.title,
        title=product.title,
        description=product.description,
        multiplier=1.0,
        min_nights=nights,
        max_nights=nights,
        category=product.category,
        features=tuple(product.features),
        base_rate=product.price,
        billing_product_id=product.id,
        source="billing",
    )


def _is_active(grant: EntitlementGrant, now: datetime) -> bool:
    if not grant.expires_date:
        return True
    try:
        expires = datetime.fromisoformat(grant.expires_date.replace("Z", "+00:00"))
    except ValueError:
        logger.warning("Unparseable entitlement expiry %r", grant.expires_date)
        return False
    if expires.tzinfo is None:
        expires = expires.replace(tzinfo=timezone.utc)
    return expires > now


class BillingService:

    def __init__(self, api_key: str = "", customers: Optional[Dict[str, CustomerInfo]] = None):
        self.api_key     = api_key
        self.customers   = dict(customers or {})
        self.initialized = False

    def initialize(self) -> None:
        if self.initialized:
            return
        if not self.api_key:
            logger.warning("Billing API key not configured, using mock data")
        else:
            logger.warning("Billing SDK not fully configured, using mock data")
        self.initialized = True

    def get_products(self) -> List[BillingProduct]:
        self.initialize()
        return [p for p in MOCK_PRODUCTS if p.is_enabled]

    def get_packages(self) -> List[PackageDefinition]:
        return [product_to_package(p) for p in self.get_products()]

    def get_customer_info(self, customer_id: str) -> CustomerInfo:
        self.initialize()
        return self.customers.get(customer_id, CustomerInfo(id=customer_id))

    def get_subscription_status(self, customer_id: str, now: Optional[datetime] = None) -> SubscriptionStatus:
        info   = self.get_customer_info(customer_id)
        now    = now or datetime.now(timezone.utc)
        active = [key for key, grant in info.entitlements.items() if _is_active(grant, now)]
        return SubscriptionStatus(
            is_subscribed=bool(active or info.active_subscriptions),
            active_entitlements=active
        )

    def validate_subscription(self, customer_id: str, required_product: Optional[str] = None) -> bool:
        # Mock mode lets every customer through
        self.initialize()
        return True

    def create_purchase_intent(self, product_id: str, customer_id: str) -> dict:
        self.initialize()
        return {
            "customer_info": {
                "original_app_user_id":              customer_id,
                "entitlements":                      {"active": {}},
                "all_purchased_product_identifiers": [],
            },
            "product_identifier": product_id,
        }

    def restore_purchases(self, customer_id: str) -> dict:
        self.initialize()
        return {
            "customer_info": {
                "original_app_user_id":              customer_id,
                "entitlements":                      {"active": {}},
                "all_purchased_product_identifiers": [],
            }
        }


@lru_cache
def get_billing_service() -> BillingService:
    return BillingService(api_key=BILLING_API_KEY)
