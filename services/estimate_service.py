# Estimate Service — price a stay request and record it
# Coordinates: package lookup → stay duration → total → create or update

import logging
from typing import Optional, Tuple
from models.schemas import Estimate, EstimateRequest, User
from services.firestore_store import EstimateStore, PackageStore
from services.package_lookup import DEFAULT_LOOKUP_ORDER, resolve_package
from services.rate_calculator import compute_total, stay_duration, valid_base_rate

logger = logging.getLogger(__name__)


def save_estimate(
    req:       EstimateRequest,
    user:      User,
    packages:  PackageStore,
    estimates: EstimateStore,
    order=DEFAULT_LOOKUP_ORDER
) -> Tuple[Optional[Estimate], bool]:
    """
    Returns (estimate, created). estimate is None when no package resolves.
    One estimate exists per (listing, customer, from_date, to_date);
    a repeat request re-prices and updates it.
    """
    candidates = packages.list_packages(post_id=req.post_id, is_enabled=True)
    match      = resolve_package(candidates, req.package_type, order)
    if match.package is None:
        logger.info("No package %r for post %s", req.package_type, req.post_id)
        return None, False

    pkg = match.package
    if match.strategy != "id":
        logger.info("Package %r resolved by %s to %s", req.package_type, match.strategy, pkg.id)

    nights    = stay_duration(req.from_date, req.to_date)
    base_rate = valid_base_rate(pkg.base_rate)
    total     = compute_total(base_rate, nights, pkg.multiplier)

    data = {
        "from_date":     req.from_date,
        "to_date":       req.to_date,
        "guests":        req.guests,
        "customer":      user.id,
        "package_type":  pkg.id,
        "package_name":  pkg.custom_name or pkg.name,
        "nights":        nights,
        "base_rate":     base_rate,
        "multiplier":    pkg.multiplier,
        "total":         total,
        "package_match": match.strategy,
    }

    existing = estimates.find_estimate(req.post_id, user.id, req.from_date, req.to_date)
    if existing:
        return estimates.update_estimate(existing.id, data), False

    data["title"] = req.title or f"Estimate for {req.post_id}"
    data["post"]  = req.post_id
    return estimates.create_estimate(data), True
