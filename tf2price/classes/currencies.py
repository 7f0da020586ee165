from logging import getLogger
from jsonschema import validate
from ..library.constants import KEY_SYMBOL, KEYS_SYMBOL, METAL_SYMBOL
from ..library.exceptions import CurrenciesError
from ..library.helpers import (
    get_metal_float,
    metal_deserializer,
    parse_from_string,
    pluralize,
    print_float,
)
from ..library.rounding import Rounding, round_metal
from ..schemas.currencies import currencies_schema


class Currencies:
    logger = getLogger("Currencies")

    # Metal is stored in weapons, see ONE_REF
    def __init__(self, keys: int = 0, metal: int = 0):
        self.keys = keys
        self.metal = metal

    # Creates a new Currencies instance from a string like "2 keys, 23.33 ref"
    @classmethod
    def from_string(cls, string: str) -> "Currencies":
        keys, metal = parse_from_string(string)
        return cls(keys, metal)

    # Creates a new Currencies instance from a {"keys": ..., "metal": ...} object
    @classmethod
    def from_dict(cls, currencies: dict) -> "Currencies":
        if currencies is None:
            raise CurrenciesError("Missing currencies object")

        validate(currencies, currencies_schema)

        keys = currencies.get("keys", 0)
        if not float(keys).is_integer():
            raise CurrenciesError(f"Keys must be a whole number, got {keys}")

        metal = metal_deserializer(currencies.get("metal", 0))
        cls.logger.debug(f"Deserialized {currencies}.")
        return cls(int(keys), metal)

    # Splits a value in metal into keys and the metal that is left over
    @classmethod
    def from_value(cls, value: int, key_price: int) -> "Currencies":
        if key_price <= 0:
            raise CurrenciesError(f"Key price must be positive, got {key_price}")

        sign = -1 if value < 0 else 1
        # Whole keys only, truncated towards zero
        keys = sign * (abs(value) // key_price)
        return cls(keys, value - keys * key_price)

    # Get the value of the currencies in metal
    def to_value(self, key_price: int = None) -> int:
        if key_price is None and not self.keys == 0:
            raise CurrenciesError("Missing key price for currencies with keys")

        value = self.metal
        if not self.keys == 0:
            value += self.keys * key_price

        return value

    def round(self, rounding: Rounding) -> "Currencies":
        return Currencies(self.keys, round_metal(self.metal, rounding))

    # Creates a string that represents this currencies object
    def to_string(self) -> str:
        metal = f"{print_float(get_metal_float(self.metal))} {METAL_SYMBOL}"
        keys = f"{self.keys} {pluralize(self.keys, KEY_SYMBOL, KEYS_SYMBOL)}"

        if not self.keys == 0 and not self.metal == 0:
            return f"{keys}, {metal}"
        if not self.keys == 0:
            return keys
        if not self.metal == 0:
            return metal
        return f"0 {KEYS_SYMBOL}, 0 {METAL_SYMBOL}"

    # Creates an object that represents this currencies object
    def to_json(self) -> dict:
        json = {
            "keys": self.keys,
            "metal": get_metal_float(self.metal),
        }

        return json

    def __add__(self, other):
        if not isinstance(other, Currencies):
            return NotImplemented
        return Currencies(self.keys + other.keys, self.metal + other.metal)

    def __sub__(self, other):
        if not isinstance(other, Currencies):
            return NotImplemented
        return Currencies(self.keys - other.keys, self.metal - other.metal)

    def __eq__(self, other):
        if not isinstance(other, Currencies):
            return NotImplemented
        return self.keys == other.keys and self.metal == other.metal

    def __hash__(self):
        return hash((self.keys, self.metal))

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"Currencies(keys={self.keys}, metal={self.metal})"
