"""Tests for the StuffId value type."""

import pytest
from bson import ObjectId

from stuff_api.domains.stuff.ids import InvalidStuffIdError, StuffId


class TestStuffId:
    def test_parse_valid_hex(self):
        stuff_id = StuffId.parse("5f1d7c2e9b1e8a3d4c6f0a12")

        assert str(stuff_id) == "5f1d7c2e9b1e8a3d4c6f0a12"
        assert stuff_id.object_id == ObjectId("5f1d7c2e9b1e8a3d4c6f0a12")

    def test_parse_uppercase_hex_formats_lowercase(self):
        stuff_id = StuffId.parse("5F1D7C2E9B1E8A3D4C6F0A12")

        assert str(stuff_id) == "5f1d7c2e9b1e8a3d4c6f0a12"

    @pytest.mark.parametrize(
        "value",
        ["", "not-a-valid-id", "5f1d7c2e9b1e8a3d4c6f0a1", "5f1d7c2e9b1e8a3d4c6f0a1z", "x" * 12],
    )
    def test_parse_rejects_malformed(self, value):
        with pytest.raises(InvalidStuffIdError):
            StuffId.parse(value)

    def test_invalid_id_is_value_error(self):
        with pytest.raises(ValueError):
            StuffId.parse("nope")

    def test_generate_is_unique(self):
        ids = {StuffId.generate() for _ in range(100)}

        assert len(ids) == 100
        assert all(len(str(i)) == 24 for i in ids)

    def test_equality_and_hash(self):
        a = StuffId.parse("5f1d7c2e9b1e8a3d4c6f0a12")
        b = StuffId.parse("5f1d7c2e9b1e8a3d4c6f0a12")

        assert a == b
        assert hash(a) == hash(b)
        assert a != "5f1d7c2e9b1e8a3d4c6f0a12"
