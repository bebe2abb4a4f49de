import pytest

from pasmpp.address import COUNTRY_CODE, convert_to_international
from pasmpp.params import Ton


def test_empty_address_is_kept():
    assert convert_to_international(Ton.UNKNOWN, "") == ""


def test_unknown_with_leading_zero_gets_country_code():
    assert convert_to_international(Ton.UNKNOWN, "0912") == COUNTRY_CODE + "912"


def test_unknown_with_double_zero_strips_prefix():
    assert convert_to_international(Ton.UNKNOWN, "00441") == "441"


def test_unknown_without_country_code_is_prefixed():
    assert convert_to_international(Ton.UNKNOWN, "912") == COUNTRY_CODE + "912"


def test_unknown_with_country_code_is_unchanged():
    assert convert_to_international(Ton.UNKNOWN, "98912") == "98912"


def test_single_zero():
    assert convert_to_international(Ton.UNKNOWN, "0") == COUNTRY_CODE


def test_national_is_always_prefixed():
    assert convert_to_international(Ton.NATIONAL, "98912") == COUNTRY_CODE + "98912"


@pytest.mark.parametrize("ton", [Ton.INTERNATIONAL, Ton.ALPHANUMERIC, Ton.ABBREVIATED])
def test_other_types_are_unchanged(ton):
    assert convert_to_international(ton, "0912") == "0912"