"""Tests for payload selection."""

import pytest

from webhook_flow.models import PayloadChoice
from webhook_flow.selection import is_last_two_digits_odd, select_payload, trailing_digits


class TestTrailingDigits:
    def test_strips_non_digits(self):
        assert trailing_digits("PES-12-023-00-0-17") == "17"

    def test_fewer_than_two_digits(self):
        assert trailing_digits("ABC7") == "7"

    def test_no_digits(self):
        assert trailing_digits("----") == ""


class TestSelectPayload:
    def test_odd_selects_a(self):
        assert select_payload("PES1202300001") is PayloadChoice.A

    def test_even_selects_b(self):
        assert select_payload("PES1202300002") is PayloadChoice.B

    def test_uses_last_two_digits_only(self):
        # only "10" counts, not "910"
        assert select_payload("REG910") is PayloadChoice.B
        assert select_payload("REG9X1Y") is PayloadChoice.A

    def test_single_digit(self):
        assert select_payload("ID3") is PayloadChoice.A
        assert select_payload("ID0") is PayloadChoice.B

    def test_trailing_letters_ignored(self):
        assert is_last_two_digits_odd("22BCE0043XYZ") is True

    def test_no_digits_raises(self):
        with pytest.raises(ValueError):
            select_payload("----")

        with pytest.raises(ValueError):
            select_payload("")

    def test_resource_paths(self):
        assert PayloadChoice.A.resource_path == "sql/q1.sql"
        assert PayloadChoice.B.resource_path == "sql/q2.sql"
