"""Tests for the credential data models."""

import pytest
from pydantic import ValidationError
from netrcparse.models.dataModel import MachineRecord, NetrcToken


def test_keyword_match():
    assert NetrcToken.keyword_match("machine") is NetrcToken.MACHINE
    assert NetrcToken.keyword_match("macdef") is NetrcToken.MACDEF
    assert NetrcToken.keyword_match("Machine") is None
    assert NetrcToken.keyword_match("default") is None
    assert NetrcToken.keyword_match("") is None


def test_field_keywords():
    assert not NetrcToken.MACHINE.is_field
    assert all(
        token.is_field
        for token in (
            NetrcToken.LOGIN,
            NetrcToken.PASSWORD,
            NetrcToken.ACCOUNT,
            NetrcToken.MACDEF,
        )
    )


def test_record_defaults():
    record = MachineRecord(name="host")
    assert record.machine == "host"
    assert record.login is None
    assert record.password is None
    assert record.account is None
    assert record.macdef is None
    assert record.properties == {}


def test_record_requires_name():
    with pytest.raises(ValidationError):
        MachineRecord()


def test_field_access_by_token():
    record = MachineRecord(name="host")
    record.field_set(NetrcToken.PASSWORD, "pw")
    assert record.password == "pw"
    assert record.field_get(NetrcToken.PASSWORD) == "pw"
    assert record.field_get(NetrcToken.LOGIN) is None


def test_machine_is_not_a_field():
    record = MachineRecord(name="host")
    with pytest.raises(ValueError):
        record.field_get(NetrcToken.MACHINE)
    with pytest.raises(ValueError):
        record.field_set(NetrcToken.MACHINE, "other")
    assert record.name == "host"


def test_auxiliary_properties():
    record = MachineRecord(name="host", login="joe")
    assert record.property_get("port") is None
    record.property_set("port", "2121")
    record.property_set("login", "shadow")
    assert record.property_get("port") == "2121"
    assert record.property_get("login") == "shadow"
    assert record.login == "joe"
    record.property_set("port", None)
    assert record.property_get("port") is None
    assert "port" not in record.properties


def test_properties_not_shared_between_records():
    first = MachineRecord(name="a")
    second = MachineRecord(name="b")
    first.property_set("k", "v")
    assert second.properties == {}


def test_repr_masks_password():
    record = MachineRecord(name="host", login="joe", password="hunter2")
    text = repr(record)
    assert "hunter2" not in text
    assert "****" in text
    assert "joe" in text
    assert "hunter2" not in str(record)
