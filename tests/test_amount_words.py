"""Tests for amounts in Indian-English words."""

import pytest

from amount_words import number_to_words


class TestNumberToWords:

    def test_zero(self):
        assert number_to_words(0) == "Zero"

    def test_lakh_grouping_with_paise(self):
        assert number_to_words(123456.75) == (
            "One Lakh Twenty Three Thousand Four Hundred and Fifty Six Rupees "
            "and Seventy Five Paise Only"
        )

    def test_plural_kept_for_one(self):
        assert number_to_words(1.50) == "One Rupees and Fifty Paise Only"
        assert number_to_words(1) == "One Rupees Only"

    @pytest.mark.parametrize("amount,words", [
        (19, "Nineteen Rupees Only"),
        (20, "Twenty Rupees Only"),
        (99, "Ninety Nine Rupees Only"),
        (100, "One Hundred Rupees Only"),
        (101, "One Hundred and One Rupees Only"),
        (1000, "One Thousand Rupees Only"),
        (2183, "Two Thousand One Hundred and Eighty Three Rupees Only"),
        (100000, "One Lakh Rupees Only"),
        (10000000, "One Crore Rupees Only"),
        (1234567890, "One Hundred and Twenty Three Crore Forty Five Lakh Sixty Seven Thousand "
                     "Eight Hundred and Ninety Rupees Only"),
    ])
    def test_groupings(self, amount, words):
        assert number_to_words(amount) == words

    def test_paise_only(self):
        assert number_to_words(0.05) == "Zero Rupees and Five Paise Only"

    def test_decimal_input(self):
        from decimal import Decimal
        assert number_to_words(Decimal("2183.00")) == "Two Thousand One Hundred and Eighty Three Rupees Only"

    def test_negative_amount(self):
        assert number_to_words(-1.5) == "Minus One Rupees and Fifty Paise Only"
        assert number_to_words(-2183) == "Minus Two Thousand One Hundred and Eighty Three Rupees Only"

    def test_paise_carry_into_rupees(self):
        assert number_to_words(0.999) == "One Rupees Only"
        assert number_to_words(99.995) == "One Hundred Rupees Only"

    def test_sub_paisa_amount_is_zero(self):
        assert number_to_words(0.001) == "Zero"
