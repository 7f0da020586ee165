from logging import getLogger
from os import getenv
from ..library.rounding import Rounding


class Options:
    # Environment variable based options
    loggingLevel: str
    logFile: str

    rounding: Rounding

    logger = getLogger("Options")

    def __init__(self):
        self.loggingLevel = getOption("LOGGING_LEVEL", "INFO", str)
        self.logFile = getOption("LOG_FILE", "app.log", str)

        self.rounding = getOption("ROUNDING", Rounding.NONE, Rounding)

        self.logger.debug("Loaded options.")


def getOption(option: str, default: any, parseFn: callable) -> any:
    optionValue = getenv(option)
    if optionValue is None:
        if default is None:
            raise Exception(f"Missing required environment variable: {option}")
        Options.logger.debug(f"{option} not set, using {default}.")
        return default
    try:
        return parseFn(optionValue)
    except Exception as e:
        raise Exception(f"Failed to parse environment variable {option}={optionValue!r}: {e}")
