"""Tests for share code encoding and decoding."""

import random
import re

import pytest

from sharelink import codec
from sharelink.codec import CodecError
from sharelink.entities import ENTITY_TYPES

from samples import (
    HYPHEN_HEAVY_SHARE_ID,
    PROJECT_SHARE_ID,
    PROJECT_UUID1_PAYLOAD,
    PROJECT_UUID2_PAYLOAD,
    PROPOSAL_SHARE_ID,
)
from random_share_ids import random_share_id


SLUG_RE = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")

UUID1 = "0b9e2f1a-1111-2222-3333-444455556666"
UUID2 = "aabbccdd-5555-6666-7777-888899990000"


class TestEncode:
    """Test share id encoding."""

    def test_encode_project(self):
        """Project share ids get the p prefix and base64url UUID payloads."""
        code = codec.encode(PROJECT_SHARE_ID)

        prefix, first, middle, last = code.split("-")

        assert prefix == "p"
        assert first == PROJECT_UUID1_PAYLOAD
        assert last == PROJECT_UUID2_PAYLOAD
        assert middle == middle.lower()
        assert int(middle, 36) == 20240115093000

    def test_encode_proposal_prefix(self):
        code = codec.encode(PROPOSAL_SHARE_ID)

        assert code.startswith("pr-")
        assert code.endswith("-" + "A" * 21 + "Q")

    def test_encode_is_compact(self):
        """22 + 22 base64url chars and at most 9 base36 chars."""
        code = codec.encode(PROJECT_SHARE_ID)

        assert len(code) <= len("p") + 3 + 22 + 9 + 22
        assert len(code) < len(PROJECT_SHARE_ID)

    def test_encode_uppercase_uuid(self):
        """Hex case does not change the code."""
        assert codec.encode(PROJECT_SHARE_ID.upper().replace("PROJECT", "project")) == codec.encode(PROJECT_SHARE_ID)

    def test_encode_ignores_extra_fields(self):
        assert codec.encode(PROJECT_SHARE_ID + "_extra_fields") == codec.encode(PROJECT_SHARE_ID)

    @pytest.mark.parametrize("share_id, error", [
        ("", CodecError.EMPTY_INPUT),
        (f"project_{UUID1}_20240115_{UUID2}", CodecError.TOO_FEW_FIELDS),
        (f"invoice_{UUID1}_20240115_093000_{UUID2}", CodecError.UNKNOWN_ENTITY),
        (f"Project_{UUID1}_20240115_093000_{UUID2}", CodecError.UNKNOWN_ENTITY),
        (f"project_{UUID1}_2024011a_093000_{UUID2}", CodecError.BAD_DATE),
        (f"project_{UUID1}_240115_093000_{UUID2}", CodecError.BAD_DATE),
        (f"project_{UUID1}_20240115_0930_{UUID2}", CodecError.BAD_TIME),
        (f"project_{UUID1}_20240115_09300x_{UUID2}", CodecError.BAD_TIME),
        (f"project_{UUID1[:-1]}_20240115_093000_{UUID2}", CodecError.BAD_UUID),
        (f"project_{UUID1}_20240115_093000_{UUID2[:-1]}g", CodecError.BAD_UUID),
        (f"project_{UUID1.replace('-', '')}abcd_20240115_093000_{UUID2}", CodecError.BAD_UUID),
    ])
    def test_encode_rejects_malformed(self, share_id, error):
        """Malformed share ids return None with a specific reason."""
        result = codec.encode_result(share_id)

        assert not result.ok
        assert result.error == error
        assert result.value is None
        assert codec.encode(share_id) is None

    @pytest.mark.parametrize("value", [None, 42, b"project", ["project"]])
    def test_encode_non_string(self, value):
        assert codec.encode(value) is None
        assert codec.encode_result(value).error == CodecError.NOT_A_STRING


class TestDecode:
    """Test share code decoding."""

    def test_round_trip(self, sample_share_ids):
        for share_id in sample_share_ids:
            assert codec.decode(codec.encode(share_id)) == share_id

    def test_round_trip_random_share_ids(self):
        rng = random.Random(20240115)

        for _ in range(3000):
            share_id = random_share_id(rng)
            code = codec.encode(share_id)

            assert codec.decode(code) == share_id, code

    def test_round_trip_normalizes_hex_case(self):
        upper = f"proposal_{UUID1.upper()}_20240115_093000_{UUID2.upper()}"

        assert codec.decode(codec.encode(upper)) == f"proposal_{UUID1}_20240115_093000_{UUID2}"

    def test_round_trip_hyphens_in_payload(self):
        """Payloads made of '-' still split into the right segments."""
        code = codec.encode(HYPHEN_HEAVY_SHARE_ID)

        assert code.startswith("p-" + "-" * 21 + "w-")
        assert len(code.split("-")) > 4
        assert codec.decode(code) == HYPHEN_HEAVY_SHARE_ID

    def test_decode_restores_leading_zeros(self):
        share_id = (
            "project_00000000-0000-0000-0000-000000000000_00000000_000001_"
            "000000ff-0000-0000-0000-000000000000"
        )
        code = codec.encode(share_id)

        assert code.split("-")[2] == "1"
        assert codec.decode(code) == share_id

    def test_prefix_fidelity(self):
        """Every registered entity round-trips through its own prefix."""
        for entity in ENTITY_TYPES:
            share_id = f"{entity.name}_{UUID1}_20240115_093000_{UUID2}"
            code = codec.encode(share_id)

            assert code.split("-")[0] == entity.code_prefix
            assert codec.decode(code).split("_")[0] == entity.name

    def test_decode_prefix_case_insensitive(self):
        code = codec.encode(PROPOSAL_SHARE_ID)

        assert codec.decode("PR" + code[2:]) == PROPOSAL_SHARE_ID

    def test_decode_garbage(self):
        assert codec.decode("x-!!!-###-$$$") is None
        assert codec.decode_result("x-!!!-###-$$$").error == CodecError.UNKNOWN_PREFIX

    @pytest.mark.parametrize("code, error", [
        ("", CodecError.EMPTY_INPUT),
        ("p", CodecError.BAD_SEGMENT_COUNT),
        ("p-abc-def", CodecError.BAD_SEGMENT_COUNT),
        ("p-C54vGhERIiIzM0REVVVmZg-qrvM3VVVZmZ3d4iImZkAAA", CodecError.BAD_SEGMENT_COUNT),
        ("p-C54vGhERIiIzM0REVVVmZg-abc-qrvM3VVVZmZ3d4iImZkAAA-x", CodecError.BAD_SEGMENT_COUNT),
        ("p-C54vGhERIiIzM0REVVVmZg-a-b-qrvM3VVVZmZ3d4iImZkAAA", CodecError.BAD_SEGMENT_COUNT),
        ("q-C54vGhERIiIzM0REVVVmZg-abc-qrvM3VVVZmZ3d4iImZkAAA", CodecError.UNKNOWN_PREFIX),
        ("p-C54vGhERIiIzM0REVVVm!g-abc-qrvM3VVVZmZ3d4iImZkAAA", CodecError.BAD_UUID_PAYLOAD),
        ("p-C54vGhERIiIzM0REVVVmZg-ab$-qrvM3VVVZmZ3d4iImZkAAA", CodecError.BAD_TIMESTAMP_PAYLOAD),
        ("p-C54vGhERIiIzM0REVVVmZg-zzzzzzzzzz-qrvM3VVVZmZ3d4iImZkAAA", CodecError.BAD_TIMESTAMP_PAYLOAD),
        ("p-C54vGhERIiIzM0REVVVmZg-zzzzzzzzz-qrvM3VVVZmZ3d4iImZkAAA", CodecError.BAD_TIMESTAMP_PAYLOAD),
    ])
    def test_decode_rejects_malformed(self, code, error):
        """Malformed codes return None with a specific reason."""
        result = codec.decode_result(code)

        assert result.error == error
        assert codec.decode(code) is None

    @pytest.mark.parametrize("payload", [
        PROJECT_UUID1_PAYLOAD[:-1] + "h",
        PROJECT_UUID1_PAYLOAD[:-1] + "v",
    ])
    def test_decode_rejects_non_canonical_payload(self, payload):
        """Unused trailing bits must be zero, so each share id has one code."""
        code = codec.encode(PROJECT_SHARE_ID).replace(PROJECT_UUID1_PAYLOAD, payload)

        assert codec.decode_result(code).error == CodecError.BAD_UUID_PAYLOAD
        assert codec.decode(code) is None

    @pytest.mark.parametrize("value", [None, 3.5, {"code": "p"}])
    def test_decode_non_string(self, value):
        assert codec.decode(value) is None


class TestSlugify:
    """Test slug generation."""

    def test_slugify_title(self):
        assert codec.slugify("Q3 Report: Revenue & Growth!!") == "q3-report-revenue-growth"

    @pytest.mark.parametrize("text", ["", "!!!", "   ", "---", "ß€漢字"])
    def test_slugify_empty(self, text):
        assert codec.slugify(text) == ""

    def test_slugify_unicode(self):
        assert codec.slugify("Café Déjà Vu") == "caf-d-j-vu"

    def test_slugify_length_bound(self):
        slug = codec.slugify("word " * 40)

        assert len(slug) <= 60
        assert SLUG_RE.match(slug)

    def test_slugify_truncation_drops_trailing_hyphen(self):
        # Character 60 falls on a separator
        slug = codec.slugify("a" * 59 + " tail")

        assert slug == "a" * 59

    def test_slugify_shape(self):
        for text in ["Hello, World", "  --Mixed__Case 123--  ", "a/b\\c", "x" * 100]:
            slug = codec.slugify(text)
            assert slug == codec.slugify(text)
            assert SLUG_RE.match(slug)
            assert len(slug) <= 60

    def test_slugify_non_string(self):
        assert codec.slugify(None) == ""
