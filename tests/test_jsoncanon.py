from __future__ import annotations

import math

import pytest

from contracts.jsoncanon import jcs_dump, jcs_sha256


def test_canonical_order_and_numbers():
    payload_a = {"b": 2, "a": 1.0}
    payload_b = {"a": 1, "b": 2}
    assert jcs_dump(payload_a) == jcs_dump(payload_b)
    assert jcs_sha256(payload_a) == jcs_sha256(payload_b)


def test_tube_order_is_significant():
    assert jcs_sha256([["A", "B"], []]) != jcs_sha256([[], ["A", "B"]])
    assert jcs_sha256([["A", "B"]]) != jcs_sha256([["B", "A"]])


def test_tuples_encode_like_lists():
    assert jcs_dump((("A",), ())) == b'[["A"],[]]'


def test_rejects_nan():
    with pytest.raises(ValueError):
        jcs_dump({"value": math.nan})


def test_rejects_unknown_types():
    with pytest.raises(TypeError):
        jcs_dump({"value": object()})
