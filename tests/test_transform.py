from bson import ObjectId

from engine.transform import DocumentTransformer, ToJSONOptions, to_json


SCHEMA = {"secret": {"private": True}, "profile.pin": {"private": True}}


def _doc():
    return {
        "_id": ObjectId("65a1b2c3d4e5f60718293a4b"),
        "__v": 0,
        "password": "hash",
        "name": "ann",
        "secret": "s",
        "profile": {"pin": 1234, "city": "Oslo"},
        "createdAt": "2024-01-01",
        "updatedAt": "2024-01-02",
    }


def test_default_transform():
    out = to_json(_doc(), SCHEMA)
    assert out == {"id": "65a1b2c3d4e5f60718293a4b", "name": "ann", "profile": {"city": "Oslo"}}


def test_include_timestamps():
    out = to_json(_doc(), SCHEMA, {"includeTimeStamps": True})
    assert out["createdAt"] == "2024-01-01"
    assert out["updatedAt"] == "2024-01-02"


def test_alias_runs_after_privacy():
    out = to_json(_doc(), SCHEMA, alias="secret::exposed;profile.pin::pin;profile.city::city")
    assert "exposed" not in out
    assert "pin" not in out
    assert out["city"] == "Oslo"
    assert out["profile"] == {}


def test_alias_mapping_form():
    out = to_json(_doc(), None, ToJSONOptions(alias={"profile.city": "location.city"}))
    assert out["location"] == {"city": "Oslo"}


def test_alias_shortcut_overrides_options():
    out = to_json({"a": 1}, None, {"alias": "a::b"}, alias="a::c")
    assert out == {"c": 1}


def test_document_without_id_has_no_id_key():
    assert to_json({"name": "x"}) == {"name": "x"}


def test_chained_transform_result_is_returned():
    seen = {}

    def previous(doc, options):
        seen["options"] = options
        return {"wrapped": doc}

    transformer = DocumentTransformer(SCHEMA, chain=previous)
    out = transformer({"_id": 7, "name": "x"}, {"alias": "name::title"})
    assert out == {"wrapped": {"id": "7", "title": "x"}}
    assert isinstance(seen["options"], ToJSONOptions)


def test_single_colon_string_alias_renames():
    out = to_json(
        {"_id": 1, "name": "Test Alias", "email": "alias@example.com"},
        None,
        alias="name:fullName;email:userEmail",
    )
    assert out == {"id": "1", "fullName": "Test Alias", "userEmail": "alias@example.com"}
