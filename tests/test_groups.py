"""Tests for triplet, quartet and final group codecs."""

from __future__ import annotations

import secrets

import pytest

from b64buffer import (
    RFC4648,
    URLSAFE,
    InvalidInputError,
    build_alphabet,
    decode_quartet,
    decode_tail,
    encode_tail,
    encode_triplet,
)


@pytest.mark.parametrize(
    "triplet,quartet",
    [
        (b"foo", b"Zm9v"),
        (b"bar", b"YmFy"),
        (b"\x00\x00\x00", b"AAAA"),
        (b"\xff\xff\xff", b"////"),
        (b"\xfb\xff\xfe", b"+//+"),
    ],
)
def test_encode_triplet(triplet: bytes, quartet: bytes) -> None:
    """Test triplets against known encodings."""
    assert encode_triplet(RFC4648, triplet) == quartet
    assert decode_quartet(RFC4648, quartet) == triplet


def test_encode_triplet_uses_the_given_alphabet() -> None:
    """Test that the same bits map through a different table."""
    assert encode_triplet(URLSAFE, b"\xfb\xff\xfe") == b"-__-"
    assert decode_quartet(URLSAFE, b"-__-") == b"\xfb\xff\xfe"


def test_encode_triplet_splits_bits_most_significant_first() -> None:
    """Test that every six-bit group lands in its own position."""
    # 000001 000010 000011 000100
    assert encode_triplet(RFC4648, bytes((0x04, 0x20, 0xC4))) == b"BCDE"


@pytest.mark.parametrize("quartet", [b"Zm9@", b"@m9v", b"Zm=v", b"Zm9v"[:3] + b"\n"])
def test_decode_quartet_rejects_symbols_outside_the_alphabet(quartet: bytes) -> None:
    """Test that any non-member symbol fails the whole group."""
    with pytest.raises(InvalidInputError):
        decode_quartet(RFC4648, quartet)


def test_decode_quartet_rejects_symbols_from_another_alphabet() -> None:
    """Test that URL-safe symbols are not accepted by the standard table."""
    with pytest.raises(InvalidInputError):
        decode_quartet(RFC4648, b"-__-")


@pytest.mark.parametrize(
    "tail,encoded",
    [
        (b"f", b"Zg=="),
        (b"fo", b"Zm8="),
        (b"\x00", b"AA=="),
        (b"\xff\xff", b"//8="),
    ],
)
def test_encode_tail_pads_absent_bytes(tail: bytes, encoded: bytes) -> None:
    """Test that one absent byte gives one "=" and two give two."""
    assert encode_tail(RFC4648, tail) == encoded


@pytest.mark.parametrize("tail", [b"", b"foo"])
def test_encode_tail_only_takes_partial_groups(tail: bytes) -> None:
    """Test that encode_tail refuses empty and full groups."""
    with pytest.raises(ValueError):
        encode_tail(RFC4648, tail)


def test_decode_tail_only_takes_final_groups() -> None:
    """Test that decode_tail refuses more than one quartet."""
    with pytest.raises(ValueError):
        decode_tail(RFC4648, b"Zm9vY")


@pytest.mark.parametrize(
    "encoded,decoded",
    [
        (b"", b""),
        (b"Zg==", b"f"),
        (b"Zg=", b"f"),
        (b"Zg", b"f"),
        (b"Zm8=", b"fo"),
        (b"Zm8", b"fo"),
        (b"Zm9v", b"foo"),
    ],
)
def test_decode_tail(encoded: bytes, decoded: bytes) -> None:
    """Test that n remaining symbols decode to n - 1 bytes."""
    assert decode_tail(RFC4648, encoded) == decoded


@pytest.mark.parametrize("encoded", [b"Z", b"Z=", b"Z==", b"Z===", b"=", b"===="])
def test_decode_tail_rejects_a_single_symbol(encoded: bytes) -> None:
    """Test that one symbol, or none, cannot carry a byte."""
    with pytest.raises(InvalidInputError):
        decode_tail(RFC4648, encoded)


def test_decode_tail_rejects_padding_before_data() -> None:
    """Test that "=" is only stripped from the right."""
    with pytest.raises(InvalidInputError):
        decode_tail(RFC4648, b"Zg=g")


def test_decode_tail_fills_with_the_alphabet_zero_symbol() -> None:
    """Test that a custom alphabet without "A" still decodes short groups."""
    rotated = build_alphabet(URLSAFE.encode_map[1:] + URLSAFE.encode_map[:1])
    encoded = encode_tail(rotated, b"f")

    assert encoded.endswith(b"==")
    assert decode_tail(rotated, encoded) == b"f"


def test_decode_tail_rejects_lone_symbols_for_every_member() -> None:
    """Test the single leftover symbol rule across the whole alphabet."""
    for symbol in RFC4648.encode_map:
        for padding in range(4):
            with pytest.raises(InvalidInputError):
                decode_tail(RFC4648, bytes((symbol,)) + b"=" * padding)


def test_tail_round_trips_random_partial_groups() -> None:
    """Test encode_tail against decode_tail on random input."""
    for _ in range(200):
        tail = secrets.token_bytes(1 + secrets.randbelow(2))
        assert decode_tail(URLSAFE, encode_tail(URLSAFE, tail)) == tail
