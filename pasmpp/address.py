"""Address normalisation helpers."""

from .params import Ton

COUNTRY_CODE = "98"


def convert_to_international(ton, address):
    """Return address in international form according to its type of number."""
    if not address:
        return address

    if ton == Ton.UNKNOWN:
        if address.startswith("0"):
            if address[1:2] == "0":
                return address[2:]
            return COUNTRY_CODE + address[1:]
        if not address.startswith(COUNTRY_CODE):
            return COUNTRY_CODE + address
    elif ton == Ton.NATIONAL:
        return COUNTRY_CODE + address

    return address