"""
Shared fixtures: an app wired to in-memory collections, so routes run
without a MongoDB server.
"""
import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from api.main import create_app
from dbase.collections.ApplicationCollection import ApplicationCollection
from dbase.collections.VisaCollection import VisaCollection
from tests.fakes import CANADA_ID, JAPAN_ID, FakeCollection


@pytest.fixture
def visa_documents():
    return [
        {
            "_id": ObjectId(JAPAN_ID),
            "country_name": "Japan",
            "country_image": "https://example.com/japan.png",
            "visa_type": "Tourist visa",
            "processing_time": "5 days",
            "fee": 50,
            "validity": "90 days",
            "application_method": "Online",
            "description": "Short stay",
            "userEmail": "admin@x.com",
        },
        {
            "_id": ObjectId(CANADA_ID),
            "country_name": "Canada",
            "visa_type": "Student visa",
            "fee": 150,
            "userEmail": "other@x.com",
        },
    ]


@pytest.fixture
def visa_store(visa_documents):
    return FakeCollection(visa_documents)


@pytest.fixture
def application_store():
    return FakeCollection()


@pytest.fixture
def app(visa_store, application_store):
    app = create_app(with_store=False)
    app.state.visas_db = VisaCollection(visa_store)
    app.state.applications_db = ApplicationCollection(application_store)
    return app


@pytest.fixture
def client(app):
    return TestClient(app)
