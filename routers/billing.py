from typing import List
from fastapi import APIRouter, Depends
from models.schemas import BillingProduct, EntitlementResponse, User
from services.auth import get_current_user
from services.billing_service import BillingService, get_billing_service
from services.recommender import get_customer_entitlement

router = APIRouter(prefix="/billing", tags=["billing"])


@router.get("/products", response_model=List[BillingProduct])
def list_products(billing: BillingService = Depends(get_billing_service)):
    return billing.get_products()


@router.get("/entitlement", response_model=EntitlementResponse)
def current_entitlement(
    user:    User           = Depends(get_current_user),
    billing: BillingService = Depends(get_billing_service)
):
    """The signed-in customer's entitlement tier, derived from their subscription."""
    status = billing.get_subscription_status(user.id)
    return EntitlementResponse(
        customer_id=user.id,
        entitlement=get_customer_entitlement(status),
        subscription=status
    )
