import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from data.packages import DEFAULT_CATALOG
from models.schemas import (
    Entitlement, PackageCreate, PackageSettingsUpdate, PricedPackage,
    RecommendationResponse, StoredPackage, PackageUpdate, User
)
from services.auth import require_host
from services.billing_service import BillingService, get_billing_service
from services.catalog_service import listing_catalog, price_package, price_recommendation
from services.firestore_store import PackageStore, get_package_store
from services.recommender import recommend_packages

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/packages", tags=["packages"])


@router.get("/", response_model=List[StoredPackage])
def list_packages(
    post:       Optional[str]  = None,
    is_enabled: Optional[bool] = None,
    store:      PackageStore   = Depends(get_package_store)
):
    """Stored packages, optionally filtered by listing and enabled flag."""
    return store.list_packages(post_id=post, is_enabled=is_enabled)


@router.post("/", response_model=StoredPackage)
def create_package(
    body:  PackageCreate,
    user:  User         = Depends(require_host),
    store: PackageStore = Depends(get_package_store)
):
    return store.create_package(body)


@router.get("/recommend", response_model=RecommendationResponse)
def recommend(
    nights:         int                 = Query(1),
    entitlement:    Entitlement         = "none",
    include_addons: bool                = False,
    prefer_hosted:  bool                = False,
    base_rate:      Optional[float]     = None
):
    """Recommend from the site-wide catalog and price each package."""
    nights = max(1, nights)
    rec    = recommend_packages(nights, entitlement, include_addons, DEFAULT_CATALOG, prefer_hosted)
    return price_recommendation(rec, nights, entitlement, base_rate)


@router.patch("/{package_id}", response_model=StoredPackage)
def update_package(
    package_id: str,
    body:       PackageUpdate,
    user:       User         = Depends(require_host),
    store:      PackageStore = Depends(get_package_store)
):
    changes = body.model_dump(exclude_unset=True)
    current = store.get_package(package_id)
    if current is None:
        raise HTTPException(status_code=404, detail=f"Package '{package_id}' not found")

    min_n = changes.get("min_nights", current.min_nights)
    max_n = changes.get("max_nights", current.max_nights)
    if min_n > max_n:
        raise HTTPException(status_code=422, detail="min_nights must not exceed max_nights")

    return store.update_package(package_id, changes)


@router.get("/post/{post_id}")
def get_post_packages(
    post_id:   str,
    nights:    int             = Query(1),
    base_rate: Optional[float] = None,
    store:     PackageStore    = Depends(get_package_store),
    billing:   BillingService  = Depends(get_billing_service)
):
    """A listing's enabled packages merged with billing products, priced for the stay."""
    catalog = listing_catalog(post_id, store, billing)
    priced: List[PricedPackage] = [price_package(p, max(1, nights), base_rate) for p in catalog]
    return {"packages": priced, "total": len(priced)}


@router.get("/post/{post_id}/recommend", response_model=RecommendationResponse)
def recommend_for_post(
    post_id:        str,
    nights:         int             = Query(1),
    entitlement:    Entitlement     = "none",
    include_addons: bool            = False,
    prefer_hosted:  bool            = False,
    base_rate:      Optional[float] = None,
    store:          PackageStore    = Depends(get_package_store),
    billing:        BillingService  = Depends(get_billing_service)
):
    nights  = max(1, nights)
    catalog = listing_catalog(post_id, store, billing)
    rec     = recommend_packages(nights, entitlement, include_addons, catalog, prefer_hosted)
    return price_recommendation(rec, nights, entitlement, base_rate)


@router.put("/post/{post_id}/settings", response_model=List[StoredPackage])
def update_post_settings(
    post_id: str,
    body:    PackageSettingsUpdate,
    user:    User         = Depends(require_host),
    store:   PackageStore = Depends(get_package_store)
):
    """Bulk enable/disable and rename a listing's packages."""
    owned   = {p.id for p in store.list_packages(post_id=post_id)}
    missing = [s.package for s in body.package_settings if s.package not in owned]
    if missing:
        raise HTTPException(
            status_code=404,
            detail=f"Packages not found for post '{post_id}': {', '.join(missing)}"
        )

    updated = []
    for setting in body.package_settings:
        changes = {"is_enabled": setting.enabled}
        if setting.custom_name is not None:
            changes["custom_name"] = setting.custom_name
        updated.append(store.update_package(setting.package, changes))

    logger.info("User %s updated %d package settings for post %s", user.id, len(updated), post_id)
    return updated
