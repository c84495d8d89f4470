import pytest
from pymongo import MongoClient

from oximod import client as client_module
from oximod.client import get_global_client, set_global_client
from oximod.errors import (
    DatabaseConnectionError,
    GlobalClientInitError,
    GlobalClientMissingError,
    OximodError,
)

URI = "mongodb://localhost:27017"


@pytest.fixture(autouse=True)
def fresh_client(capsys):
    client_module._reset_global_client()
    yield
    client_module._reset_global_client()
    capsys.readouterr()


def test_connects_to_db_successfully():
    set_global_client(URI)
    client = get_global_client()
    assert isinstance(client, MongoClient)
    assert get_global_client() is client


def test_get_before_set_raises_missing():
    with pytest.raises(GlobalClientMissingError) as info:
        get_global_client()
    assert str(info.value).startswith("CLIENT not found: ")
    assert info.value.suggestion == (
        "Ensure you call `set_global_client` before using `get_global_client`."
    )


def test_second_set_raises_and_keeps_first():
    set_global_client(URI)
    first = get_global_client()
    with pytest.raises(GlobalClientInitError) as info:
        set_global_client(URI)
    assert str(info.value) == "Failed to set CLIENT"
    assert get_global_client() is first


def test_invalid_uri_raises_connection_error():
    with pytest.raises(DatabaseConnectionError) as info:
        set_global_client("http://localhost:27017")
    assert str(info.value).startswith("Failed to connect to db: ")
    with pytest.raises(GlobalClientMissingError):
        get_global_client()


def test_errors_share_base_class():
    with pytest.raises(OximodError):
        get_global_client()