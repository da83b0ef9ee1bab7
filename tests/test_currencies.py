"""
test_currencies.py — Currency, currency lists, decimal formatter and parser
"""

import logging

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from exactmoney import (
    AggregateCurrencies,
    Currency,
    CurrencyList,
    DecimalMoneyFormatter,
    DecimalMoneyParser,
    InvalidAmount,
    InvalidArgument,
    ISOCurrencies,
    Money,
    UnknownCurrency,
)


# ==============================================================================
# UNIT TESTS: Currency
# ==============================================================================

class TestCurrency:

    def test_code_is_upper_case(self):
        assert Currency("eur").code == "EUR"
        assert Currency(" usd ").code == "USD"

    def test_equality_by_code(self):
        assert Currency("eur") == Currency("EUR")
        assert Currency("EUR").is_(Currency("eur"))
        assert Currency("EUR") != Currency("USD")
        assert hash(Currency("eur")) == hash(Currency("EUR"))

    @pytest.mark.parametrize("code", ["", "   "])
    def test_empty_code(self, code):
        with pytest.raises(InvalidArgument):
            Currency(code)

    def test_code_must_be_str(self):
        with pytest.raises(TypeError):
            Currency(978)

    def test_string_forms(self):
        assert str(Currency("eur")) == "EUR"
        assert repr(Currency("eur")) == "Currency('EUR')"
        assert Currency("eur").to_json() == "EUR"

    def test_of(self):
        eur = Currency("EUR")
        assert Currency.of(eur) is eur
        assert Currency.of("eur") == eur

    @pytest.mark.parametrize("code, digits", [("EUR", 2), ("JPY", 0), ("KWD", 3)])
    def test_default_fraction_digits(self, code, digits):
        assert Currency(code).default_fraction_digits == digits

    def test_default_fraction_digits_unknown(self):
        with pytest.raises(UnknownCurrency):
            Currency("XYZ").default_fraction_digits

    def test_default_fraction_digits_reuses_the_iso_table(self, caplog):
        caplog.set_level(logging.DEBUG, logger="exactmoney.currencies")
        Currency("EUR").default_fraction_digits
        caplog.clear()
        for code in ["EUR", "USD", "JPY"]:
            Currency(code).default_fraction_digits
        assert "CurrencyList built" not in caplog.text


# ==============================================================================
# UNIT TESTS: Currency lists
# ==============================================================================

class TestCurrencyList:

    def test_lookup(self):
        currencies = CurrencyList({"btc": 8, "EUR": 2})

        assert currencies.contains(Currency("BTC"))
        assert Currency("EUR") in currencies
        assert not currencies.contains(Currency("USD"))
        assert currencies.subunit_for(Currency("btc")) == 8

    def test_unknown_currency(self):
        with pytest.raises(UnknownCurrency):
            CurrencyList({"EUR": 2}).subunit_for(Currency("USD"))

    def test_unknown_currency_is_a_lookup_error(self):
        with pytest.raises(LookupError):
            CurrencyList({}).subunit_for(Currency("USD"))

    def test_iteration(self):
        currencies = CurrencyList({"EUR": 2, "JPY": 0})
        assert list(currencies) == [Currency("EUR"), Currency("JPY")]
        assert len(currencies) == 2

    @pytest.mark.parametrize("subunit", [-1, "2", 2.0, True])
    def test_invalid_subunit(self, subunit):
        with pytest.raises(InvalidArgument):
            CurrencyList({"EUR": subunit})

    def test_iso_list(self):
        iso = ISOCurrencies()
        assert iso.contains(Currency("USD"))
        assert iso.subunit_for(Currency("BHD")) == 3
        assert not iso.contains(Currency("BTC"))

    def test_aggregate_searches_in_order(self):
        currencies = AggregateCurrencies([
            CurrencyList({"EUR": 4}),
            ISOCurrencies(),
            CurrencyList({"BTC": 8}),
        ])

        assert currencies.subunit_for(Currency("EUR")) == 4
        assert currencies.subunit_for(Currency("JPY")) == 0
        assert currencies.subunit_for(Currency("BTC")) == 8
        assert not currencies.contains(Currency("XYZ"))
        with pytest.raises(UnknownCurrency):
            currencies.subunit_for(Currency("XYZ"))

    def test_aggregate_iterates_each_currency_once(self):
        currencies = AggregateCurrencies([
            CurrencyList({"EUR": 2, "USD": 2}),
            CurrencyList({"EUR": 4, "BTC": 8}),
        ])
        assert list(currencies) == [Currency("EUR"), Currency("USD"), Currency("BTC")]


# ==============================================================================
# UNIT TESTS: Decimal formatter and parser
# ==============================================================================

CURRENCIES = AggregateCurrencies([ISOCurrencies(), CurrencyList({"BTC": 8})])


class TestDecimalMoneyFormatter:

    @pytest.mark.parametrize("amount, code, expected", [
        (105, "EUR", "1.05"),
        (100, "EUR", "1.00"),
        (5, "EUR", "0.05"),
        (-5, "EUR", "-0.05"),
        (0, "EUR", "0.00"),
        (-123456, "USD", "-1234.56"),
        (105, "JPY", "105"),
        (-105, "JPY", "-105"),
        (5, "KWD", "0.005"),
        (1, "BTC", "0.00000001"),
        (10 ** 30, "EUR", "1" + "0" * 28 + ".00"),
    ])
    def test_format(self, amount, code, expected):
        assert DecimalMoneyFormatter(CURRENCIES).format(Money(amount, code)) == expected

    def test_unknown_currency(self):
        with pytest.raises(UnknownCurrency):
            DecimalMoneyFormatter(ISOCurrencies()).format(Money(1, "XYZ"))


class TestDecimalMoneyParser:

    @pytest.mark.parametrize("text, code, expected", [
        ("1.05", "EUR", 105),
        ("-0.05", "EUR", -5),
        ("1.1", "EUR", 110),
        ("1.050", "EUR", 105),
        ("1", "EUR", 100),
        (".5", "EUR", 50),
        ("-0.00", "EUR", 0),
        ("12", "JPY", 12),
        ("0.00000001", "BTC", 1),
    ])
    def test_parse(self, text, code, expected):
        assert DecimalMoneyParser(CURRENCIES).parse(text, code) == Money(expected, code)

    @pytest.mark.parametrize("text, code", [
        ("1.055", "EUR"),
        ("1.5", "JPY"),
        ("1,05", "EUR"),
        ("1.0.5", "EUR"),
        ("", "EUR"),
        (" 1.05", "EUR"),
    ])
    def test_invalid(self, text, code):
        with pytest.raises(InvalidAmount):
            DecimalMoneyParser(CURRENCIES).parse(text, code)

    def test_unknown_currency(self):
        with pytest.raises(UnknownCurrency):
            DecimalMoneyParser(ISOCurrencies()).parse("1.00", "XYZ")

    @given(
        amount=st.integers(min_value=-10**20, max_value=10**20),
        code=st.sampled_from(["EUR", "JPY", "KWD", "BTC"]),
    )
    @settings(max_examples=500)
    def test_parse_inverts_format(self, amount, code):
        """PROPERTY: parse(format(m)) == m"""
        money = Money(amount, code)
        text = DecimalMoneyFormatter(CURRENCIES).format(money)
        assert DecimalMoneyParser(CURRENCIES).parse(text, code) == money
