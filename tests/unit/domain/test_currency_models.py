# nosec B101


import pytest

from google_currency.domain.exceptions.currency import InvalidCurrencyError
from google_currency.domain.models.currency import (
    CURRENCIES,
    Currency,
    RateKey,
    normalize_currency,
)
from google_currency.domain.models.iso4217 import ISO_4217


@pytest.mark.parametrize('value', ['USD', 'usd', ' Usd ', Currency('USD', 'United States Dollar')])
def test_normalize_currency_is_case_and_type_insensitive(value):
    assert normalize_currency(value) == 'USD'


def test_normalize_currency_accepts_unregistered_looking_currency_object():
    assert normalize_currency(Currency('eur', 'whatever')) == 'EUR'


@pytest.mark.parametrize('value', ['', '   ', 'XYZ', 'US', 'DOLLAR', None, 840, b'USD'])
def test_normalize_currency_rejects_unknown_values(value):
    with pytest.raises(InvalidCurrencyError):
        normalize_currency(value)


def test_currency_wrap_returns_registered_currency():
    euro = Currency.wrap('eur')

    assert euro is CURRENCIES['EUR']
    assert euro.name == 'Euro'
    assert euro.symbol == '€'


def test_registry_keys_are_three_letter_codes():
    assert all(len(code) == 3 and code.isupper() for code in CURRENCIES)
    assert all(code == currency.iso_code for code, currency in CURRENCIES.items())


@pytest.mark.parametrize('code', ['LKR', 'xof', 'KZT', 'dzd', 'AFN', 'XDR', 'ZWG'])
def test_normalize_currency_knows_full_iso_table(code):
    assert normalize_currency(code) == code.upper()
    assert Currency.wrap(code).name


def test_iso_table_has_no_duplicate_codes():
    codes = [code for code, _, _ in ISO_4217]

    assert len(codes) == len(set(codes))
    assert len(CURRENCIES) > 170
    assert 'XTS' not in CURRENCIES
    assert 'XXX' not in CURRENCIES


# ============================================================================
# TEST: RateKey
# ============================================================================

def test_rate_key_for_pair_normalizes_both_sides():
    key = RateKey.for_pair('usd', Currency.wrap('EUR'))

    assert key == RateKey('USD', 'EUR')
    assert str(key) == 'USD_TO_EUR'


def test_rate_key_is_order_sensitive():
    assert RateKey.for_pair('USD', 'EUR') != RateKey.for_pair('EUR', 'USD')


def test_rate_key_is_hashable_and_stable():
    rates = {RateKey.for_pair('usd', 'eur'): 1}

    assert RateKey('USD', 'EUR') in rates
    assert RateKey('EUR', 'USD') not in rates


def test_rate_key_for_pair_rejects_invalid_currency():
    with pytest.raises(InvalidCurrencyError):
        RateKey.for_pair('USD', 'ZZZ')
