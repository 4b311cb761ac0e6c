"""
Helpers that turn raw pymongo documents and write results into JSON-ready dicts.
"""
from typing import Optional

from pymongo.results import DeleteResult, InsertOneResult, UpdateResult


def serialize_document(document: Optional[dict]) -> Optional[dict]:
    if not document:
        return None
    doc = document.copy()
    doc["id"] = str(doc.pop("_id"))
    return doc


def insert_ack(result: InsertOneResult) -> dict:
    return {"acknowledged": result.acknowledged, "insertedId": str(result.inserted_id)}


def update_ack(result: UpdateResult) -> dict:
    return {
        "acknowledged": result.acknowledged,
        "matchedCount": result.matched_count,
        "modifiedCount": result.modified_count,
    }


def delete_ack(result: DeleteResult) -> dict:
    return {"acknowledged": result.acknowledged, "deletedCount": result.deleted_count}
