from engine.accessor import MISSING, get_value
from engine.alias import FAN_OUT, RENAME, apply_alias, parse_alias_rules


def test_parse_string_rules_in_order():
    rules = parse_alias_rules(" a::b ; profile:email,phone ;; junk ; :: ; x: ")
    assert [r.kind for r in rules] == [RENAME, FAN_OUT]
    assert rules[0].source == "a" and rules[0].destination == "b"
    assert rules[1].source == "profile" and rules[1].fields == ["email", "phone"]


def test_parse_mapping_is_always_rename():
    rules = parse_alias_rules({"a.b": "c", "": "x", "d": ""})
    assert len(rules) == 1
    assert rules[0].kind == RENAME


def test_rename_scalar_and_array():
    doc = {"name": "n", "tags": [1, 2], "nested": {"deep": "v"}}
    apply_alias(doc, "name::title;tags::labels;nested.deep::flat.value")
    assert doc == {"title": "n", "labels": [1, 2], "nested": {}, "flat": {"value": "v"}}
    assert get_value(doc, "name") is MISSING


def test_fan_out_copies_to_top_level():
    doc = {"_id": 1, "user": {"profile": {"email": "e", "phone": "p"}}}
    apply_alias(doc, "user.profile:email,phone,missing")
    assert doc["email"] == "e"
    assert doc["phone"] == "p"
    assert "missing" not in doc
    # copy-up keeps the source in place
    assert doc["user"]["profile"]["email"] == "e"


def test_fan_out_with_empty_base():
    doc = {"a": 1}
    apply_alias(doc, ":a")
    assert doc == {"a": 1}


def test_fan_out_through_to_many_relation_takes_first_match():
    doc = {"orders": [{"total": None}, {"total": 5}, {"total": 9}]}
    apply_alias(doc, "orders:total")
    assert doc["total"] == 5


def test_last_rule_wins_on_same_destination():
    doc = {"a": 1, "b": 2}
    apply_alias(doc, "a::c;b::c")
    assert doc == {"c": 2}

    doc = {"a": 1, "b": 2}
    apply_alias(doc, {"a": "c", "b": "c"})
    assert doc == {"c": 2}


def test_rule_without_delimiter_ignored():
    doc = {"a": 1}
    apply_alias(doc, "a;;   ")
    assert doc == {"a": 1}


def test_none_spec_is_noop():
    doc = {"a": 1}
    assert apply_alias(doc, None) is doc
    assert doc == {"a": 1}


def test_colon_renames_mode_reads_single_colon_as_move():
    rules = parse_alias_rules("a:b;c::d;e.f:g.h", colon_renames=True)
    assert [r.kind for r in rules] == [RENAME, RENAME, RENAME]
    doc = {"a": 1, "c": 2, "e": {"f": 3}}
    apply_alias(doc, "a:b;c::d;e.f:g.h", colon_renames=True)
    assert doc == {"b": 1, "d": 2, "e": {}, "g": {"h": 3}}

    # default grammar keeps copy-up for the same text
    doc = {"a": {"b": 1}}
    apply_alias(doc, "a:b")
    assert doc == {"a": {"b": 1}, "b": 1}
