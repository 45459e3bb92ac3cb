import itertools
import pytest
from fastapi.testclient import TestClient

from main import app
from models.schemas import Estimate, StoredPackage, User
from services.auth import get_current_user
from services.billing_service import BillingService, get_billing_service
from services.firestore_store import get_estimate_store, get_package_store


class InMemoryPackageStore:
    """Stands in for PackageStore without Firestore."""

    def __init__(self, packages=()):
        self.packages = {p.id: p for p in packages}
        self._ids     = itertools.count(1)

    def list_packages(self, post_id=None, is_enabled=None):
        return [
            p for p in self.packages.values()
            if (post_id is None or p.post == post_id)
            and (is_enabled is None or p.is_enabled == is_enabled)
        ]

    def get_package(self, package_id):
        return self.packages.get(package_id)

    def create_package(self, data):
        pkg = StoredPackage(id=f"pkg-{next(self._ids)}", **data.model_dump())
        self.packages[pkg.id] = pkg
        return pkg

    def update_package(self, package_id, changes):
        current = self.packages.get(package_id)
        if current is None:
            return None
        updated = current.model_copy(update=changes)
        self.packages[package_id] = updated
        return updated


class InMemoryEstimateStore:

    def __init__(self):
        self.estimates = {}
        self._ids      = itertools.count(1)

    def get_estimate(self, estimate_id):
        return self.estimates.get(estimate_id)

    def find_estimate(self, post_id, customer_id, from_date, to_date):
        for e in self.estimates.values():
            if (e.post, e.customer, e.from_date, e.to_date) == (post_id, customer_id, from_date, to_date):
                return e
        return None

    def create_estimate(self, data):
        estimate = Estimate(id=f"est-{next(self._ids)}", **data)
        self.estimates[estimate.id] = estimate
        return estimate

    def update_estimate(self, estimate_id, data):
        updated = self.estimates[estimate_id].model_copy(update=data)
        self.estimates[estimate_id] = updated
        return updated


def make_package(**overrides):
    fields = {
        "id":         "pkg-standard",
        "post":       "post-1",
        "name":       "Standard",
        "slug":       "standard",
        "multiplier": 1.0,
        "min_nights": 1,
        "max_nights": 7,
        "category":   "standard",
        "is_enabled": True,
    }
    fields.update(overrides)
    return StoredPackage(**fields)


HOST     = User(id="host-1", email="host@example.com", roles=["host"])
CUSTOMER = User(id="cust-1", email="guest@example.com", roles=["customer"])


@pytest.fixture
def package_store():
    return InMemoryPackageStore([
        make_package(),
        make_package(id="pkg-weekly", name="Weekly", slug="weekly", multiplier=0.9,
                     min_nights=7, max_nights=14),
        make_package(id="pkg-hosted", name="Hosted", slug="hosted", multiplier=1.5,
                     category="hosted", base_rate=200),
        make_package(id="pkg-off", name="Retired", slug="retired", is_enabled=False),
        make_package(id="pkg-other", post="post-2", name="Other", slug="other"),
    ])


@pytest.fixture
def estimate_store():
    return InMemoryEstimateStore()


@pytest.fixture
def billing():
    return BillingService(api_key="")


@pytest.fixture
def current_user():
    return {"user": CUSTOMER}


@pytest.fixture
def client(package_store, estimate_store, billing, current_user):
    app.dependency_overrides[get_package_store]   = lambda: package_store
    app.dependency_overrides[get_estimate_store]  = lambda: estimate_store
    app.dependency_overrides[get_billing_service] = lambda: billing
    app.dependency_overrides[get_current_user]    = lambda: current_user["user"]
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
