# Catalog Service — per-listing package catalogs and priced recommendations
# Merges a listing's enabled database packages with billing products,
# and attaches a total to every recommended package.

from typing import List, Optional, Tuple
from models.schemas import PackageDefinition, PricedPackage, RecommendationResponse, StoredPackage
from services.billing_service import BillingService
from services.firestore_store import PackageStore
from services.rate_calculator import compute_total, display_total, multiplier_label, valid_base_rate
from services.recommender import Recommendation


def stored_to_definition(pkg: StoredPackage) -> PackageDefinition:
    """Database packages are open to every entitlement tier."""
    return PackageDefinition(
        id=pkg.id,
        name=pkg.custom_name or pkg.name,
        title=pkg.custom_name or pkg.name,
        description=pkg.description,
        multiplier=pkg.multiplier,
        min_nights=pkg.min_nights,
        max_nights=pkg.max_nights,
        category=pkg.category,
        entitlement_required="none",
        features=tuple(pkg.features),
        base_rate=pkg.base_rate,
        billing_product_id=pkg.billing_product_id,
        source="database",
    )


def listing_catalog(
    post_id: str,
    store:   PackageStore,
    billing: BillingService
) -> Tuple[PackageDefinition, ...]:
    """Read-only snapshot: the listing's enabled packages, then billing products."""
    db_packages = [stored_to_definition(p) for p in store.list_packages(post_id=post_id, is_enabled=True)]
    return tuple(db_packages + billing.get_packages())


def price_package(
    pkg:       PackageDefinition,
    nights:    int,
    base_rate: Optional[float] = None
) -> PricedPackage:
    # A package's own base rate overrides the listing's
    rate  = valid_base_rate(base_rate, pkg.base_rate)
    total = compute_total(rate, nights, pkg.multiplier)
    return PricedPackage(
        package=pkg,
        total=display_total(total),
        multiplier_label=multiplier_label(pkg.multiplier)
    )


def price_recommendation(
    rec:         Recommendation,
    nights:      int,
    entitlement: str,
    base_rate:   Optional[float] = None
) -> RecommendationResponse:
    priced: List[PricedPackage] = [price_package(p, nights, base_rate) for p in rec.packages]
    primary = next(
        (priced[i] for i, p in enumerate(rec.packages) if p is rec.primary),
        None
    )
    return RecommendationResponse(
        nights=nights,
        entitlement=entitlement,
        packages=priced,
        primary=primary
    )
