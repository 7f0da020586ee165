# Denominations, in weapons
ONE_WEAPON = 1
ONE_SCRAP = ONE_WEAPON * 2
ONE_REC = ONE_SCRAP * 3
ONE_REF = ONE_REC * 3

KEY_SYMBOL = "key"
KEYS_SYMBOL = "keys"
METAL_SYMBOL = "ref"

INVALID_CURRENCIES_FORMAT = "Invalid currencies format"
UNKNOWN_CURRENCY_SYMBOL = "Unknown currency symbol"
KEY_COUNT_PARSE_ERROR = "Error parsing key count"
METAL_COUNT_PARSE_ERROR = "Error parsing metal count"
NO_CURRENCIES_PARSED = "No currencies could be parsed from string"

# Infinite metal saturates to these, same as a 32-bit price would
METAL_MAX = 2**31 - 1
METAL_MIN = -(2**31)

# Plain decimal literals only, no underscores, whitespace or non-ASCII digits
COUNT_PATTERN = r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?"
