"""Tests for field-element encoding."""

from starknet_py.hash.utils import compute_hash_on_elements

from escrownet.hashing import hash_text, to_felt

# Starknet field prime
FIELD_PRIME = 2**251 + 17 * 2**192 + 1


class TestHashText:
    """Tests for hash_text."""

    def test_deterministic(self):
        assert hash_text("alice") == hash_text("alice")

    def test_distinguishes_inputs(self):
        assert hash_text("alice") != hash_text("alicf")
        assert hash_text("alice") != hash_text("Alice")

    def test_short_text_is_single_chunk(self):
        expected = compute_hash_on_elements([int.from_bytes(b"alice", "big")])

        assert hash_text("alice") == expected

    def test_long_text_is_chunked(self):
        text = "x" * 200
        chunks = [text[i : i + 31].encode() for i in range(0, 200, 31)]

        assert hash_text(text) == compute_hash_on_elements(
            [int.from_bytes(c, "big") for c in chunks]
        )

    def test_result_is_field_element(self):
        assert 0 <= hash_text("é" * 200) < FIELD_PRIME


class TestToFelt:
    """Tests for to_felt."""

    def test_accepts_int_hex_and_decimal(self):
        assert to_felt(10) == 10
        assert to_felt("0xA") == 10
        assert to_felt("0XA") == 10
        assert to_felt("10") == 10
