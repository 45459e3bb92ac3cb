# Package Recommender
# Filters a read-only catalog by stay length and entitlement, then picks
# one primary package. The catalog is always passed in by the caller.

import logging
from typing import Iterable, List, NamedTuple, Optional, Sequence
from config import CATEGORY_RANK
from models.schemas import PackageDefinition, SubscriptionStatus
from services.rate_calculator import stay_nights

logger = logging.getLogger(__name__)


class Recommendation(NamedTuple):
    packages: List[PackageDefinition]
    primary:  Optional[PackageDefinition]


def covers_stay(pkg: PackageDefinition, nights: int) -> bool:
    return pkg.min_nights <= nights <= pkg.max_nights


def is_entitled(pkg: PackageDefinition, entitlement: str) -> bool:
    """'none' packages are open to all; 'pro' customers see everything."""
    return (
        pkg.entitlement_required == "none"
        or pkg.entitlement_required == entitlement
        or entitlement == "pro"
    )


def _primary(eligible: Sequence[PackageDefinition], prefer_hosted: bool) -> Optional[PackageDefinition]:
    candidates = [p for p in eligible if p.category != "addon"]
    if not candidates:
        return None

    if prefer_hosted:
        for pkg in candidates:
            if pkg.category == "hosted":
                return pkg

    # min() keeps the first of equal keys, so catalog order breaks ties
    return min(candidates, key=lambda p: (
        CATEGORY_RANK.get(p.category, len(CATEGORY_RANK)),
        abs(p.multiplier - 1.0)
    ))


def recommend_packages(
    duration_nights: int,
    entitlement:     str,
    include_addons:  bool,
    catalog:         Iterable[PackageDefinition],
    prefer_hosted:   bool = False
) -> Recommendation:
    """
    Eligible packages in catalog order plus one primary recommendation.
      1. Keep packages whose [min_nights, max_nights] contains the stay
      2. Keep packages the entitlement unlocks
      3. Drop add-ons unless include_addons
      4. Primary: standard > hosted > special, then multiplier closest to 1.0
         (prefer_hosted swaps in the first eligible hosted package)
    """
    nights = stay_nights(duration_nights)

    eligible = [
        pkg for pkg in catalog
        if covers_stay(pkg, nights)
        and is_entitled(pkg, entitlement)
        and (include_addons or pkg.category != "addon")
    ]
    primary = _primary(eligible, prefer_hosted)

    logger.debug(
        "recommend nights=%d entitlement=%s eligible=%d primary=%s",
        nights, entitlement, len(eligible), primary.id if primary else None
    )
    return Recommendation(eligible, primary)


def get_customer_entitlement(status: SubscriptionStatus) -> str:
    if "pro" in status.active_entitlements:
        return "pro"
    if status.is_subscribed or status.active_entitlements:
        return "standard"
    return "none"
