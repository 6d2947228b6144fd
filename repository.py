"""
Per-collection repositories.

Domain code talks to these instead of issuing Mongo queries directly:
lookups by email or id, filtered finds, and inserts.
"""

from typing import Any, Optional, Union

from bson import ObjectId
from bson.errors import InvalidId
from pydantic import BaseModel
from pymongo.database import Database

from database import create_document, get_documents


def serialize(value: Any) -> Any:
    """Make a stored document JSON friendly (ObjectId -> str)."""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, dict):
        return {k: serialize(v) for k, v in value.items()}
    if isinstance(value, list):
        return [serialize(v) for v in value]
    return value


def to_object_id(value: Any) -> Optional[ObjectId]:
    if isinstance(value, ObjectId):
        return value
    # ObjectId(None) would generate a fresh id
    if value is None:
        return None
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None


class Repository:
    def __init__(self, database: Database, collection_name: str):
        self.database = database
        self.collection_name = collection_name

    @property
    def collection(self):
        return self.database[self.collection_name]

    def find_by_email(self, field: str, email: str) -> Optional[dict]:
        return self.collection.find_one({field: email})

    def find_by_id(self, doc_id: Any) -> Optional[dict]:
        oid = to_object_id(doc_id)
        if oid is None:
            return None
        return self.collection.find_one({"_id": oid})

    def find(self, filter_dict: Optional[dict] = None) -> list:
        return get_documents(self.database, self.collection_name, filter_dict)

    def insert(self, data: Union[BaseModel, dict]) -> dict:
        """Insert a document and return it as stored, `_id` and timestamps included."""
        inserted_id = create_document(self.database, self.collection_name, data)
        return self.find_by_id(inserted_id)
