from typing import List, Optional

from bson import ObjectId

from dbase.documents import delete_ack, insert_ack, serialize_document, update_ack
from dbase.errors import translate_store_errors
from dbase.identifiers import is_valid_id


class VisaCollection:
    """
    CRUD helper for visa offerings stored in MongoDB.
    Malformed ids are rejected by the router; `get` also tolerates them so it
    can serve as the lookup for application enrichment.
    """

    def __init__(self, collection):
        self.collection = collection

    @translate_store_errors
    def list(self, limit: Optional[int] = None, visa_type: Optional[str] = None) -> List[dict]:
        query = {}
        if visa_type:
            query["visa_type"] = visa_type
        cursor = self.collection.find(query)
        if limit:
            cursor = cursor.limit(limit)
        return [serialize_document(doc) for doc in cursor]

    @translate_store_errors
    def list_by_user(self, email: str) -> List[dict]:
        return [serialize_document(doc) for doc in self.collection.find({"userEmail": email})]

    @translate_store_errors
    def get(self, visa_id: str) -> Optional[dict]:
        if not is_valid_id(visa_id):
            return None
        document = self.collection.find_one({"_id": ObjectId(visa_id)})
        return serialize_document(document)

    @translate_store_errors
    def create(self, data: dict) -> dict:
        document = dict(data)
        result = self.collection.insert_one(document)
        return insert_ack(result)

    @translate_store_errors
    def update(self, visa_id: str, updates: dict) -> dict:
        result = self.collection.update_one({"_id": ObjectId(visa_id)}, {"$set": updates})
        return update_ack(result)

    @translate_store_errors
    def delete(self, visa_id: str) -> dict:
        result = self.collection.delete_one({"_id": ObjectId(visa_id)})
        return delete_ack(result)
