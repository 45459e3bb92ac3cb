# Firestore persistence for packages and estimates
#
# Collections:
#   packages   — host-managed packages, one document per package,
#                `post` holds the listing id
#   estimates  — priced stay requests, one per (post, customer, from, to)
#
# Stores take the Firestore client in their constructor; routes get them
# through the dependencies at the bottom of this module.

import logging
from typing import Dict, List, Optional
from google.cloud.firestore_v1.base_query import FieldFilter
from config import get_db
from models.schemas import Estimate, PackageCreate, StoredPackage

logger = logging.getLogger(__name__)


def _with_id(doc) -> Dict:
    data       = doc.to_dict() or {}
    data["id"] = doc.id
    return data


class PackageStore:

    def __init__(self, db):
        self.ref = db.collection("packages")

    def list_packages(
        self,
        post_id:    Optional[str]  = None,
        is_enabled: Optional[bool] = None
    ) -> List[StoredPackage]:
        query = self.ref
        if post_id is not None:
            query = query.where(filter=FieldFilter("post", "==", post_id))
        if is_enabled is not None:
            query = query.where(filter=FieldFilter("is_enabled", "==", is_enabled))
        return [StoredPackage(**_with_id(doc)) for doc in query.stream()]

    def get_package(self, package_id: str) -> Optional[StoredPackage]:
        doc = self.ref.document(package_id).get()
        return StoredPackage(**_with_id(doc)) if doc.exists else None

    def create_package(self, data: PackageCreate) -> StoredPackage:
        doc_ref = self.ref.document()
        doc_ref.set(data.model_dump())
        logger.info("Created package %s for post %s", doc_ref.id, data.post)
        return StoredPackage(id=doc_ref.id, **data.model_dump())

    def update_package(self, package_id: str, changes: Dict) -> Optional[StoredPackage]:
        doc_ref = self.ref.document(package_id)
        if not doc_ref.get().exists:
            return None
        if changes:
            doc_ref.update(changes)
            logger.info("Updated package %s: %s", package_id, sorted(changes))
        return self.get_package(package_id)


class EstimateStore:

    def __init__(self, db):
        self.ref = db.collection("estimates")

    def get_estimate(self, estimate_id: str) -> Optional[Estimate]:
        doc = self.ref.document(estimate_id).get()
        return Estimate(**_with_id(doc)) if doc.exists else None

    def find_estimate(
        self,
        post_id:     str,
        customer_id: str,
        from_date:   Optional[str],
        to_date:     Optional[str]
    ) -> Optional[Estimate]:
        query = (
            self.ref
            .where(filter=FieldFilter("post",      "==", post_id))
            .where(filter=FieldFilter("customer",  "==", customer_id))
            .where(filter=FieldFilter("from_date", "==", from_date))
            .where(filter=FieldFilter("to_date",   "==", to_date))
            .limit(1)
        )
        for doc in query.stream():
            return Estimate(**_with_id(doc))
        return None

    def create_estimate(self, data: Dict) -> Estimate:
        doc_ref = self.ref.document()
        doc_ref.set(data)
        logger.info("Created estimate %s for post %s", doc_ref.id, data.get("post"))
        return Estimate(id=doc_ref.id, **data)

    def update_estimate(self, estimate_id: str, data: Dict) -> Estimate:
        doc_ref = self.ref.document(estimate_id)
        doc_ref.update(data)
        logger.info("Updated estimate %s", estimate_id)
        return Estimate(**_with_id(doc_ref.get()))


def get_package_store() -> PackageStore:
    return PackageStore(get_db())


def get_estimate_store() -> EstimateStore:
    return EstimateStore(get_db())
