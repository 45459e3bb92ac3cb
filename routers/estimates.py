from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from models.schemas import Estimate, EstimateRequest, User
from services.auth import get_current_user
from services.estimate_service import save_estimate
from services.firestore_store import (
    EstimateStore, PackageStore, get_estimate_store, get_package_store
)

router = APIRouter(prefix="/estimates", tags=["estimates"])


@router.post("/", response_model=Estimate)
def create_estimate(
    req:       EstimateRequest,
    user:      User          = Depends(get_current_user),
    packages:  PackageStore  = Depends(get_package_store),
    estimates: EstimateStore = Depends(get_estimate_store)
):
    """
    Price a stay with the requested package and record the estimate.
    Returns 201 for a new estimate, 200 when an existing one was re-priced.
    """
    estimate, created = save_estimate(req, user, packages, estimates)
    if estimate is None:
        raise HTTPException(status_code=400, detail="Package not found")
    return JSONResponse(status_code=201 if created else 200, content=estimate.model_dump())


@router.get("/{estimate_id}", response_model=Estimate)
def get_estimate(
    estimate_id: str,
    user:        User          = Depends(get_current_user),
    estimates:   EstimateStore = Depends(get_estimate_store)
):
    estimate = estimates.get_estimate(estimate_id)
    if estimate is None:
        raise HTTPException(status_code=404, detail=f"Estimate '{estimate_id}' not found")
    if estimate.customer != user.id and "admin" not in user.roles:
        raise HTTPException(status_code=403, detail="Not your estimate")
    return estimate
