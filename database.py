"""
MongoDB connection and document helpers.

The connection is configured from the environment:
- DATABASE_URL: Mongo connection string
- DATABASE_NAME: database to use

When either is missing, `db` is None and the API reports the database as
not configured.
"""

import os
from datetime import datetime, timezone
from typing import Optional, Union

from dotenv import load_dotenv
from pydantic import BaseModel
from pymongo import MongoClient
from pymongo.database import Database

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL")
DATABASE_NAME = os.getenv("DATABASE_NAME")


def get_database(url: Optional[str] = DATABASE_URL, name: Optional[str] = DATABASE_NAME) -> Optional[Database]:
    if not url or not name:
        return None
    client = MongoClient(url)
    return client[name]


db = get_database()


def _as_dict(data: Union[BaseModel, dict]) -> dict:
    if isinstance(data, BaseModel):
        return data.model_dump()
    return dict(data)


def create_document(database: Database, collection_name: str, data: Union[BaseModel, dict]) -> str:
    """Insert a single document with created_at/updated_at stamps and return its id."""
    if database is None:
        raise Exception("Database not available. Check DATABASE_URL and DATABASE_NAME environment variables.")

    data_dict = _as_dict(data)
    now = datetime.now(timezone.utc)
    data_dict["created_at"] = now
    data_dict["updated_at"] = now

    result = database[collection_name].insert_one(data_dict)
    return str(result.inserted_id)


def get_documents(database: Database, collection_name: str, filter_dict: Optional[dict] = None) -> list:
    if database is None:
        raise Exception("Database not available. Check DATABASE_URL and DATABASE_NAME environment variables.")

    return list(database[collection_name].find(filter_dict or {}))
