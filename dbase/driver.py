import logging
from typing import Optional

from pymongo import MongoClient
from pymongo.errors import ConnectionFailure

from dbase.errors import StoreUnavailable

logger = logging.getLogger(__name__)


class DbaseDriver:
    """
    Thin wrapper around MongoClient that:
    - Opens one client per process (built at startup, passed to collections)
    - Exposes a helper to obtain a collection handle from any database
    - Reports an unreachable server as StoreUnavailable.
    """

    def __init__(self, uri: Optional[str], timeout_ms: int = 5000, client: Optional[MongoClient] = None):
        if client is None and not uri:
            raise ValueError("MONGODB_URI is not set. Add it to .env or pass uri explicitly.")

        self.uri = uri
        self.client = client or MongoClient(uri, serverSelectionTimeoutMS=timeout_ms)

    def get_collection(self, db_name: str, collection_name: str):
        return self.client[db_name][collection_name]

    def ping(self) -> None:
        try:
            self.client.admin.command("ping")
        except ConnectionFailure as exc:
            raise StoreUnavailable(f"Could not reach MongoDB: {exc}") from exc
        logger.info("Pinged your deployment. You successfully connected to MongoDB!")

    def close(self) -> None:
        self.client.close()
