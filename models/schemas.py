from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import List, Optional, Literal, Dict, Any, Tuple

Category    = Literal["standard", "hosted", "addon", "special"]
Entitlement = Literal["none", "standard", "pro"]
Period      = Literal["hour", "day", "week", "month", "year"]
Role        = Literal["admin", "host", "customer"]


class PackageDefinition(BaseModel):
    """Read-only catalog entry used for pricing and recommendation."""
    model_config = ConfigDict(frozen=True)

    id:                   str
    name:                 str
    title:                str = ""
    description:          str = ""
    multiplier:           float = Field(default=1.0, gt=0)
    min_nights:           int = Field(default=1, ge=1)
    max_nights:           int = Field(default=7, ge=1)
    category:             Category = "standard"
    entitlement_required: Entitlement = "none"
    features:             Tuple[str, ...] = ()
    base_rate:            Optional[float] = None
    billing_product_id:   Optional[str] = None
    source:               Literal["catalog", "database", "billing"] = "catalog"

    @model_validator(mode="after")
    def _check_window(self):
        if self.min_nights > self.max_nights:
            raise ValueError("min_nights must not exceed max_nights")
        return self


# ── Stored packages (persistence layer) ──────────────────────────

class PackageCreate(BaseModel):
    post:               str
    name:               str
    slug:               str
    description:        str = ""
    multiplier:         float = Field(default=1.0, ge=0.1, le=3.0)
    features:           List[str] = []
    category:           Category = "standard"
    min_nights:         int = Field(default=1, ge=1)
    max_nights:         int = Field(default=7, ge=1)
    billing_product_id: Optional[str] = None
    is_enabled:         bool = True
    base_rate:          Optional[float] = None

    @model_validator(mode="after")
    def _check_window(self):
        if self.min_nights > self.max_nights:
            raise ValueError("min_nights must not exceed max_nights")
        return self


class PackageUpdate(BaseModel):
    name:               Optional[str]       = None
    description:        Optional[str]       = None
    multiplier:         Optional[float]     = Field(default=None, ge=0.1, le=3.0)
    features:           Optional[List[str]] = None
    category:           Optional[Category]  = None
    min_nights:         Optional[int]       = Field(default=None, ge=1)
    max_nights:         Optional[int]       = Field(default=None, ge=1)
    billing_product_id: Optional[str]       = None
    is_enabled:         Optional[bool]      = None
    custom_name:        Optional[str]       = None
    base_rate:          Optional[float]     = None

    @field_validator(
        "name", "description", "multiplier", "features", "category",
        "min_nights", "max_nights", "is_enabled"
    )
    @classmethod
    def _not_null(cls, value):
        # Omit a field to leave it unchanged; null would clear a required value
        if value is None:
            raise ValueError("may be omitted but not null")
        return value


class StoredPackage(PackageCreate):
    id:          str
    custom_name: Optional[str] = None


class PackageSetting(BaseModel):
    package:     str
    enabled:     bool
    custom_name: Optional[str] = None


class PackageSettingsUpdate(BaseModel):
    package_settings: List[PackageSetting]


class PricedPackage(BaseModel):
    package:          PackageDefinition
    total:            Optional[float] = None
    multiplier_label: str


class RecommendationResponse(BaseModel):
    nights:      int
    entitlement: Entitlement
    packages:    List[PricedPackage]
    primary:     Optional[PricedPackage] = None


# ── Estimates ────────────────────────────────────────────────────

class EstimateRequest(BaseModel):
    post_id:      str
    from_date:    Optional[str] = None
    to_date:      Optional[str] = None
    guests:       List[Dict[str, Any]] = []
    title:        Optional[str] = None
    package_type: str


class Estimate(BaseModel):
    id:            str
    title:         str
    post:          str
    from_date:     Optional[str] = None
    to_date:       Optional[str] = None
    guests:        List[Dict[str, Any]] = []
    customer:      str
    package_type:  str
    package_name:  str
    nights:        int
    base_rate:     float
    multiplier:    float
    total:         float
    package_match: Optional[str] = None


# ── Users & billing ──────────────────────────────────────────────

class User(BaseModel):
    id:    str
    email: Optional[str] = None
    name:  Optional[str] = None
    roles: List[Role] = ["customer"]


class BillingProduct(BaseModel):
    id:           str
    title:        str
    description:  str
    price:        float
    currency:     str
    period:       Period
    period_count: int
    category:     Category
    features:     List[str] = []
    is_enabled:   bool = True


class EntitlementGrant(BaseModel):
    expires_date:       Optional[str] = None
    product_identifier: str
    purchase_date:      str


class CustomerInfo(BaseModel):
    id:                                 str
    entitlements:                       Dict[str, EntitlementGrant] = {}
    active_subscriptions:               List[str] = []
    all_purchased_product_identifiers:  List[str] = []


class SubscriptionStatus(BaseModel):
    is_subscribed:       bool = False
    active_entitlements: List[str] = []


class EntitlementResponse(BaseModel):
    customer_id:  str
    entitlement:  Entitlement
    subscription: SubscriptionStatus
