from typing import List, Optional

from bson import ObjectId

from dbase.documents import delete_ack, insert_ack, serialize_document
from dbase.errors import translate_store_errors
from dbase.identifiers import is_valid_id


class ApplicationCollection:
    """
    CRUD helper for visa applications stored in MongoDB.
    Applications are never updated in place; `visaId` is kept as the plain
    string the client sent, with no link enforced to the visas collection.
    """

    def __init__(self, collection):
        self.collection = collection

    @translate_store_errors
    def list_by_user(self, email: str) -> List[dict]:
        cursor = self.collection.find({"userEmail": email})
        return [serialize_document(doc) for doc in cursor]

    @translate_store_errors
    def get(self, application_id: str) -> Optional[dict]:
        if not is_valid_id(application_id):
            return None
        document = self.collection.find_one({"_id": ObjectId(application_id)})
        return serialize_document(document)

    @translate_store_errors
    def create(self, data: dict) -> dict:
        document = dict(data)
        result = self.collection.insert_one(document)
        return insert_ack(result)

    @translate_store_errors
    def delete(self, application_id: str) -> dict:
        result = self.collection.delete_one({"_id": ObjectId(application_id)})
        return delete_ack(result)
