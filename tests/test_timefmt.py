import os
import time

import pytest

from pasmpp.timefmt import abs_time_to_smpp, smpp_time_to_abs

Y2K = 946684800


@pytest.fixture
def utc():
    previous = os.environ.get("TZ")
    os.environ["TZ"] = "UTC"
    time.tzset()
    yield
    if previous is None:
        del os.environ["TZ"]
    else:
        os.environ["TZ"] = previous
    time.tzset()


def test_absolute_time_in_utc(utc):
    assert smpp_time_to_abs("000101000000000+") == Y2K


def test_format_in_utc(utc):
    assert abs_time_to_smpp(Y2K) == "000101000000000+"


def test_round_trip(utc):
    stamp = Y2K + 123456789
    assert smpp_time_to_abs(abs_time_to_smpp(stamp)) == stamp


def test_time_zone_offset(utc):
    base = smpp_time_to_abs("000101000000000+")
    assert smpp_time_to_abs("000101000000004+") == base - 4 * 15 * 60
    assert smpp_time_to_abs("000101000000004-") == base + 4 * 15 * 60


def test_relative_time():
    before = time.time()
    result = smpp_time_to_abs("000000000100000R")
    after = time.time()
    assert int(before) + 60 - 1 <= result <= int(after) + 60


@pytest.mark.parametrize(
    "text",
    [
        "0001010000000+",
        "001301000000000+",
        "000100000000000+",
        "000101240000000+",
        "000101000000049+",
        "000101000000000X",
    ],
)
def test_invalid_times(text):
    with pytest.raises(ValueError):
        smpp_time_to_abs(text)