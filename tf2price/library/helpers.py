import math
import re
from logging import getLogger
from typing import Callable, TypeVar
from .constants import (
    ONE_WEAPON,
    ONE_SCRAP,
    ONE_REF,
    METAL_MAX,
    METAL_MIN,
    COUNT_PATTERN,
    KEY_SYMBOL,
    KEYS_SYMBOL,
    METAL_SYMBOL,
    INVALID_CURRENCIES_FORMAT,
    UNKNOWN_CURRENCY_SYMBOL,
    KEY_COUNT_PARSE_ERROR,
    METAL_COUNT_PARSE_ERROR,
    NO_CURRENCIES_PARSED,
)
from .exceptions import (
    MalformedElementError,
    UnparsableKeyCountError,
    UnparsableMetalCountError,
    UnknownSymbolError,
    NoCurrencyParsedError,
)

K = TypeVar("K")

logger = getLogger("Helpers")

count_pattern = re.compile(COUNT_PATTERN)


def refined(count: int) -> int:
    return count * ONE_REF


def scrap(count: int) -> int:
    return count * ONE_SCRAP


def weapon(count: int) -> int:
    return count * ONE_WEAPON


def round_half_away(value: float) -> int:
    # round() rounds halves to even, currencies round them away from zero
    rounded = math.floor(abs(value) + 0.5)
    return int(-rounded if value < 0 else rounded)


def get_metal_float(value: int) -> float:
    """Converts a metal value into its float value.

    The result is truncated to 2 decimal places so it never shows more metal
    than there actually is.

    >>> get_metal_float(6)
    0.33
    """
    return math.trunc(value * 100 / ONE_REF) / 100


def get_metal_from_float(value: float) -> int:
    """Converts a float value into a metal value.

    NaN converts to 0 and infinite values saturate at METAL_MAX / METAL_MIN.

    >>> get_metal_from_float(0.33)
    6
    """
    metal = value * ONE_REF
    if math.isnan(metal):
        return 0
    if math.isinf(metal):
        return METAL_MAX if metal > 0 else METAL_MIN
    return round_half_away(metal)


def metal_deserializer(value) -> int:
    # float() raises on anything it can't decode, let that through untouched
    value = float(value)

    if not math.isfinite(value):
        raise ValueError(f"Not a valid metal value: {value}")

    return get_metal_from_float(value)


def pluralize(amount: int, singular: str, plural: str) -> str:
    return singular if amount == 1 else plural


def pluralize_float(amount: float, singular: str, plural: str) -> str:
    return singular if amount == 1.0 else plural


def print_float(amount: float) -> str:
    if amount % 1.0 == 0.0:
        return str(int(round(amount)))
    return f"{amount:.2f}"


def parse_from_string(string: str, key_type: Callable[..., K] = int) -> tuple[K, int]:
    """Parses a currencies string such as "2 keys, 23.33 ref" into keys and metal.

    `key_type` is called without arguments for the default key count and with
    the count token to parse it, so `int` and `float` both work.

    If a currency appears more than once the last occurrence is used, they are
    not summed.
    """
    keys = key_type()
    metal = 0
    keys_seen = False
    metal_seen = False

    if string == "":
        raise NoCurrencyParsedError(NO_CURRENCIES_PARSED, string)

    for element in string.split(", "):
        element_split = element.split(" ")

        if not len(element_split) == 2:
            raise MalformedElementError(INVALID_CURRENCIES_FORMAT, string, element)

        count_str, currency_name = element_split

        if currency_name in (KEY_SYMBOL, KEYS_SYMBOL):
            if not count_pattern.fullmatch(count_str):
                raise UnparsableKeyCountError(KEY_COUNT_PARSE_ERROR, string, element)
            try:
                count = key_type(count_str)
            except (ValueError, TypeError, ArithmeticError):
                raise UnparsableKeyCountError(KEY_COUNT_PARSE_ERROR, string, element) from None
            if keys_seen:
                logger.debug(f"Keys given more than once in {string!r}, using {count_str}.")
            keys = count
            keys_seen = True
        elif currency_name == METAL_SYMBOL:
            if not count_pattern.fullmatch(count_str):
                raise UnparsableMetalCountError(METAL_COUNT_PARSE_ERROR, string, element)
            count = float(count_str)
            # Literals like 1e400 overflow to inf
            if not math.isfinite(count):
                raise UnparsableMetalCountError(METAL_COUNT_PARSE_ERROR, string, element)
            if metal_seen:
                logger.debug(f"Metal given more than once in {string!r}, using {count_str}.")
            metal = get_metal_from_float(count)
            metal_seen = True
        else:
            raise UnknownSymbolError(UNKNOWN_CURRENCY_SYMBOL, string, element)

    if keys == key_type() and metal == 0:
        raise NoCurrencyParsedError(NO_CURRENCIES_PARSED, string)

    return keys, metal
