class CurrenciesError(Exception):
    pass


class ParseError(CurrenciesError):
    def __init__(self, reason: str, string: str, element: str = None):
        super().__init__(reason)  # Message is the reason, the rest is context
        self.reason = reason
        self.string = string
        self.element = element

    def get_data(self) -> dict:
        return {"reason": self.reason, "string": self.string, "element": self.element}


class MalformedElementError(ParseError):
    pass


class UnparsableKeyCountError(ParseError):
    pass


class UnparsableMetalCountError(ParseError):
    pass


class UnknownSymbolError(ParseError):
    pass


class NoCurrencyParsedError(ParseError):
    pass
