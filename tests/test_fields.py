"""
Unit tests for umasync/fields.py: the per-field merge rules.
"""

import pytest

from umasync.errors import MappingError
from umasync.fields import column, keep, label, map_params, optional, render, text


def no_lookup(category, index):
    raise AssertionError("lookup should not be called")


class TestRender:

    def test_none_is_empty(self):
        assert render(None) == ""

    def test_int(self):
        assert render(3) == "3"

    def test_zero_is_kept(self):
        assert render(0) == "0"


class TestColumn:

    def test_copies_value(self):
        assert column("rarity")("r", {"rarity": 2}, {}, no_lookup) == "2"

    def test_ignores_existing(self):
        assert column("rarity")("r", {"rarity": 2}, {"r": "5"}, no_lookup) == "2"

    def test_missing_column_raises_keyerror(self):
        with pytest.raises(KeyError):
            column("nope")("r", {}, {}, no_lookup)


class TestOptional:

    @pytest.mark.parametrize("value", [None, 0, ""])
    def test_falsy_values_are_empty(self, value):
        assert optional("month")("month", {"month": value}, {}, no_lookup) == ""

    def test_value_passes_through(self):
        assert optional("month")("month", {"month": 11}, {}, no_lookup) == "11"


class TestKeep:

    def test_keeps_existing(self):
        assert keep()("title", {}, {"title": "Foo"}, no_lookup) == "Foo"

    def test_absent_is_empty(self):
        assert keep()("title", {}, {}, no_lookup) == ""

    def test_empty_is_empty(self):
        assert keep()("title", {}, {"title": ""}, no_lookup) == ""

    def test_never_reads_row(self):
        assert keep()("title", {"title": "db"}, {}, no_lookup) == ""


class TestText:

    def test_looks_up_by_row_id(self):
        calls = []

        def lookup(category, index):
            calls.append((category, index))
            return "名前"

        assert text(6)("name_jp", {"id": 1001}, {}, lookup) == "名前"
        assert calls == [(6, 1001)]

    def test_looks_up_by_index_column(self):
        calls = []

        def lookup(category, index):
            calls.append((category, index))
            return "中山"

        rule = text(35, index="race_track_id")
        assert rule("track_jp", {"id": 1, "race_track_id": 10005}, {}, lookup) == "中山"
        assert calls == [(35, 10005)]

    def test_null_index_column_is_empty(self):
        rule = text(35, index="race_track_id")
        assert rule("track_jp", {"id": 1, "race_track_id": None}, {}, no_lookup) == ""

    def test_strip_brackets(self):
        rule = text(5, strip_brackets=True)
        assert rule("title_jp", {"id": 1}, {}, lambda c, i: "[Title]") == "Title"

    def test_strip_brackets_only_first_pair(self):
        rule = text(5, strip_brackets=True)
        assert rule("title_jp", {"id": 1}, {}, lambda c, i: "[a][b]") == "a[b]"

    def test_brackets_kept_without_flag(self):
        assert text(5)("title_jp", {"id": 1}, {}, lambda c, i: "[Title]") == "[Title]"

    def test_missing_text_is_empty(self):
        assert text(5)("title_jp", {"id": 1}, {}, lambda c, i: "") == ""


class TestLabel:
    TABLE = {1: "R", 2: "SR", 3: "SSR"}

    def test_known_code(self):
        assert label(self.TABLE, "rarity")("rarity", {"rarity": 3}, {}, no_lookup) == "SSR"

    def test_unknown_code_is_empty(self):
        rule = label(self.TABLE, "rarity")
        assert rule("rarity", {"rarity": 9}, {"rarity": "SR"}, no_lookup) == ""

    def test_unknown_code_keeps_existing(self):
        rule = label(self.TABLE, "rarity", keep_existing=True)
        assert rule("rarity", {"rarity": 0}, {"rarity": "SR"}, no_lookup) == "SR"

    def test_unknown_code_without_existing(self):
        rule = label(self.TABLE, "rarity", keep_existing=True)
        assert rule("rarity", {"rarity": None}, {}, no_lookup) == ""


class TestMapParams:
    FIELDS = [
        ("id", column("id")),
        ("name", keep()),
        ("month", optional("month")),
    ]

    def test_key_order_is_fixed(self):
        existing = {"month": "3", "zzz": "stale", "name": "Foo", "id": "9"}
        params = map_params(self.FIELDS, {"id": 1, "month": None}, existing, no_lookup)
        assert list(params) == ["id", "name", "month"]

    def test_unknown_existing_keys_dropped(self):
        params = map_params(self.FIELDS, {"id": 1, "month": 4}, {"zzz": "x"}, no_lookup)
        assert "zzz" not in params

    def test_values(self):
        params = map_params(self.FIELDS, {"id": 1, "month": 4}, {"name": "Foo"}, no_lookup)
        assert params == {"id": "1", "name": "Foo", "month": "4"}

    def test_missing_column_is_mapping_error(self):
        with pytest.raises(MappingError, match="month"):
            map_params(self.FIELDS, {"id": 1}, {}, no_lookup)
