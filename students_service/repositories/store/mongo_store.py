"""MongoDB student store - one document per student, `_id` = student id"""
import logging
from typing import Dict, Iterator, Optional
from pymongo import ASCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError
from students_service.exceptions.exceptions import StoreUnavailableError
from students_service.repositories.store.base_store import StudentStore
from students_service.utils.time.timeutils import date_to_native, parse_date

logger = logging.getLogger(__name__)


def to_mongo(doc: Dict) -> Dict:
    """Store layout -> BSON document (dates become midnight datetimes)"""
    return {
        "_id": doc["id"],
        "id": doc["id"],
        "name": doc["name"],
        "phone": doc["phone"],
        "marks": [mark_to_mongo(m) for m in doc.get("marks") or []]
    }

def mark_to_mongo(mark: Dict) -> Dict:
    return {"subject": mark["subject"], "date": date_to_native(mark["date"]), "score": mark["score"]}

def from_mongo(doc: Dict) -> Dict:
    """BSON document -> store layout"""
    return {
        "id": doc.get("id", doc.get("_id")),
        "name": doc.get("name"),
        "phone": doc.get("phone"),
        "marks": [
            {"subject": m["subject"], "date": parse_date(m["date"]), "score": m["score"]}
            for m in doc.get("marks") or []
        ]
    }


class MongoStudentStore(StudentStore):
    """Relies on MongoDB single-document atomicity; driver failures surface as StoreUnavailableError."""

    def __init__(self, collection):
        self.collection = collection

    def get(self, student_id: int) -> Optional[Dict]:
        try:
            doc = self.collection.find_one({"_id": student_id})
        except PyMongoError as e:
            raise StoreUnavailableError(f"Failed to read student {student_id}: {e}") from e
        return from_mongo(doc) if doc else None

    def insert_if_absent(self, doc: Dict) -> bool:
        try:
            self.collection.insert_one(to_mongo(doc))
            return True
        except DuplicateKeyError:
            return False
        except PyMongoError as e:
            raise StoreUnavailableError(f"Failed to insert student {doc['id']}: {e}") from e

    def put(self, doc: Dict) -> None:
        try:
            self.collection.replace_one({"_id": doc["id"]}, to_mongo(doc), upsert=True)
        except PyMongoError as e:
            raise StoreUnavailableError(f"Failed to save student {doc['id']}: {e}") from e

    def append_mark(self, student_id: int, mark: Dict) -> Optional[Dict]:
        # $push without upsert: a removed student is never brought back
        try:
            doc = self.collection.find_one_and_update(
                {"_id": student_id},
                {"$push": {"marks": mark_to_mongo(mark)}},
                return_document=ReturnDocument.AFTER
            )
        except PyMongoError as e:
            raise StoreUnavailableError(f"Failed to add mark for student {student_id}: {e}") from e
        return from_mongo(doc) if doc else None

    def set_phone(self, student_id: int, phone: str) -> Optional[Dict]:
        try:
            doc = self.collection.find_one_and_update(
                {"_id": student_id},
                {"$set": {"phone": phone}},
                return_document=ReturnDocument.BEFORE
            )
        except PyMongoError as e:
            raise StoreUnavailableError(f"Failed to update phone of student {student_id}: {e}") from e
        return from_mongo(doc) if doc else None

    def delete(self, student_id: int) -> Optional[Dict]:
        try:
            doc = self.collection.find_one_and_delete({"_id": student_id})
        except PyMongoError as e:
            raise StoreUnavailableError(f"Failed to delete student {student_id}: {e}") from e
        return from_mongo(doc) if doc else None

    def scan_all(self) -> Iterator[Dict]:
        try:
            for doc in self.collection.find({}, {"_id": 0}):
                yield from_mongo(doc)
        except PyMongoError as e:
            raise StoreUnavailableError(f"Failed to scan students: {e}") from e

    def count(self) -> int:
        try:
            return self.collection.count_documents({})
        except PyMongoError as e:
            raise StoreUnavailableError(f"Failed to count students: {e}") from e

    def ensure_indexes(self) -> None:
        """Phone lookups only; results are identical without it"""
        try:
            self.collection.create_index([("phone", ASCENDING)], name="phone_1")
            logger.info("Ensured phone index on students collection")
        except PyMongoError as e:
            raise StoreUnavailableError(f"Failed to create indexes: {e}") from e
