import copy

from engine.privacy import strip_private_fields
from engine.schema import DocumentSchema, FieldOptions


SCHEMA = {
    "password": {"private": True},
    "profile.ssn": {"private": True},
    "sessions.token": {"private": True},
    "name": {"private": False},
    "email": {},
}


def _doc():
    return {
        "name": "ann",
        "email": "a@x",
        "password": "hash",
        "profile": {"ssn": "123", "city": "Oslo"},
        "sessions": [{"token": "t1", "ip": "1"}, {"token": "t2", "ip": "2"}],
    }


def test_strips_private_paths_at_any_depth():
    doc = strip_private_fields(_doc(), SCHEMA)
    assert doc == {
        "name": "ann",
        "email": "a@x",
        "profile": {"city": "Oslo"},
        "sessions": [{"ip": "1"}, {"ip": "2"}],
    }


def test_idempotent():
    once = strip_private_fields(_doc(), SCHEMA)
    snapshot = copy.deepcopy(once)
    twice = strip_private_fields(once, SCHEMA)
    assert twice == snapshot


def test_accepts_schema_objects_and_none():
    schema = DocumentSchema(paths={"password": FieldOptions(private=True)})
    assert schema.private_paths() == ["password"]
    assert "password" not in strip_private_fields(_doc(), schema)
    assert strip_private_fields(_doc(), None) == _doc()


def test_missing_private_paths_are_ignored():
    doc = {"name": "x"}
    assert strip_private_fields(doc, SCHEMA) == {"name": "x"}
