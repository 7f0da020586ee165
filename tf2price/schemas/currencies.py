currencies_schema = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "properties": {"keys": {"type": "number"}, "metal": {"type": "number"}},
    "additionalProperties": False,
}
