# Site-wide stay packages
# Each package defines a rate multiplier, the stay window it applies to,
# its category and the entitlement tier needed to book it.
# Listings can add their own packages through the packages collection;
# this tuple is the read-only default catalog handed to the recommender.

from models.schemas import PackageDefinition

DEFAULT_CATALOG = (
    PackageDefinition(
        id="short_stay",
        name="Short Stay",
        description="Flexible nightly booking",
        multiplier=1.0,
        min_nights=1,
        max_nights=6,
        category="standard",
        entitlement_required="none",
        features=("Standard accommodation", "Basic amenities"),
    ),
    PackageDefinition(
        id="short_stay_member",
        name="Member Short Stay",
        description="Nightly booking at the member rate",
        multiplier=0.9,
        min_nights=1,
        max_nights=6,
        category="standard",
        entitlement_required="standard",
        features=("Standard accommodation", "Basic amenities", "Member discount"),
    ),
    PackageDefinition(
        id="hosted_short_stay",
        name="Hosted Short Stay",
        description="Nightly booking with a dedicated host",
        multiplier=1.5,
        min_nights=1,
        max_nights=6,
        category="hosted",
        entitlement_required="pro",
        features=("Premium service", "Enhanced amenities", "Dedicated support"),
    ),
    PackageDefinition(
        id="week_x1_customer",
        name="1 Week Package",
        description="One-week customer package",
        multiplier=0.95,
        min_nights=7,
        max_nights=13,
        category="standard",
        entitlement_required="none",
        features=("Standard accommodation", "Basic amenities", "Weekly discount"),
    ),
    PackageDefinition(
        id="week_x2_customer",
        name="2 Week Package",
        description="Two-week customer package",
        multiplier=0.9,
        min_nights=14,
        max_nights=20,
        category="standard",
        entitlement_required="none",
        features=("Standard accommodation", "Basic amenities"),
    ),
    PackageDefinition(
        id="week_x3_customer",
        name="3 Week Package",
        description="Three-week customer package",
        multiplier=0.85,
        min_nights=21,
        max_nights=27,
        category="standard",
        entitlement_required="standard",
        features=("Standard accommodation", "Basic amenities", "Extended stay discount"),
    ),
    PackageDefinition(
        id="week_x4_customer",
        name="4 Week Package",
        description="Four-week customer package",
        multiplier=0.8,
        min_nights=28,
        max_nights=31,
        category="standard",
        entitlement_required="standard",
        features=("Standard accommodation", "Basic amenities", "Monthly discount", "Priority booking"),
    ),
    PackageDefinition(
        id="hosted_week",
        name="Hosted Week",
        description="Week-long stay with a dedicated host",
        multiplier=1.3,
        min_nights=7,
        max_nights=31,
        category="hosted",
        entitlement_required="pro",
        features=("Premium service", "Enhanced amenities", "Dedicated support"),
    ),
    PackageDefinition(
        id="special_celebration",
        name="Celebration Stay",
        description="Decorated suite for special occasions",
        multiplier=1.8,
        min_nights=1,
        max_nights=3,
        category="special",
        entitlement_required="none",
        features=("Room decoration", "Late checkout"),
    ),
    PackageDefinition(
        id="wine",
        name="Wine Tasting",
        description="Optional wine tasting add-on",
        multiplier=1.1,
        min_nights=1,
        max_nights=31,
        category="addon",
        entitlement_required="none",
        features=("Local wine selection", "Sommelier notes"),
    ),
)

CATALOG_BY_ID = {pkg.id: pkg for pkg in DEFAULT_CATALOG}
