import pytest
from bson import ObjectId

from dbase.collections.ApplicationCollection import ApplicationCollection
from dbase.collections.VisaCollection import VisaCollection
from dbase.errors import StoreUnavailable
from tests.fakes import CANADA_ID, DANGLING_ID, JAPAN_ID, FakeCollection


@pytest.fixture
def visas(visa_store):
    return VisaCollection(visa_store)


def test_get_serializes_object_id(visas):
    visa = visas.get(JAPAN_ID)

    assert visa["id"] == JAPAN_ID
    assert "_id" not in visa
    assert visa["country_name"] == "Japan"


def test_get_returns_none_for_missing_or_malformed_id(visas, visa_store):
    assert visas.get(DANGLING_ID) is None
    assert visas.get("not-an-id") is None
    assert visa_store.find_one_calls == [{"_id": ObjectId(DANGLING_ID)}]


def test_list_with_limit_and_filter(visas):
    assert [visa["id"] for visa in visas.list()] == [JAPAN_ID, CANADA_ID]
    assert [visa["id"] for visa in visas.list(limit=1)] == [JAPAN_ID]
    assert [visa["id"] for visa in visas.list(visa_type="Student visa")] == [CANADA_ID]


def test_update_and_delete_return_acknowledgements(visas):
    assert visas.update(CANADA_ID, {"fee": 200}) == {"acknowledged": True, "matchedCount": 1, "modifiedCount": 1}
    assert visas.get(CANADA_ID)["fee"] == 200
    assert visas.delete(CANADA_ID) == {"acknowledged": True, "deletedCount": 1}
    assert visas.delete(CANADA_ID) == {"acknowledged": True, "deletedCount": 0}


def test_application_create_get_and_list_in_store_order():
    applications = ApplicationCollection(FakeCollection())

    first = applications.create({"visaId": JAPAN_ID, "userEmail": "u@x.com"})
    applications.create({"visaId": CANADA_ID, "userEmail": "other@x.com"})
    applications.create({"visaId": CANADA_ID, "userEmail": "u@x.com"})

    assert first["acknowledged"] is True
    assert applications.get(first["insertedId"])["visaId"] == JAPAN_ID
    assert [item["visaId"] for item in applications.list_by_user("u@x.com")] == [JAPAN_ID, CANADA_ID]
    assert applications.list_by_user("nobody@x.com") == []


def test_connection_failures_become_store_unavailable():
    store = FakeCollection()
    store.offline = True
    applications = ApplicationCollection(store)

    with pytest.raises(StoreUnavailable):
        applications.list_by_user("u@x.com")


def test_application_get_returns_none_for_malformed_or_missing_id():
    store = FakeCollection()
    applications = ApplicationCollection(store)

    assert applications.get("not-an-id") is None
    assert applications.get(DANGLING_ID) is None
    assert store.find_one_calls == [{"_id": ObjectId(DANGLING_ID)}]
