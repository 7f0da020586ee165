# tf2price
# Usage: python -m tf2price "2 keys, 23.33 ref" "5.11 ref" ...

from logging import basicConfig, getLogger, DEBUG

basicConfig(level=DEBUG)
logger = getLogger(__name__)

from dotenv import load_dotenv

load_dotenv()

from .classes.options import Options

options = Options()

from logging import FileHandler, Formatter
from colorlog import StreamHandler, ColoredFormatter

logging_console_handler = StreamHandler()
logging_console_handler.setFormatter(ColoredFormatter("[ %(asctime)s ] [ %(log_color)s%(levelname)s%(reset)s ] [ %(name)s ]: %(message)s"))
logging_file_handler = FileHandler(options.logFile)
logging_file_handler.setFormatter(Formatter("[ %(asctime)s ] [ %(levelname)s ] [ %(name)s ]: %(message)s"))
basicConfig(
    handlers=[logging_console_handler, logging_file_handler],
    level=options.loggingLevel,
    force=True,
)
logger.debug(f"Logger initialized (level: {options.loggingLevel}, file: {options.logFile}).")
logger.info(f"tf2price, rounding metal with {options.rounding.name}")

import sys
from json import dumps
from .classes.currencies import Currencies
from .library.exceptions import ParseError

failed = 0

for string in sys.argv[1:]:
    try:
        currencies = Currencies.from_string(string).round(options.rounding)
    except ParseError as e:
        logger.error(f"Failed to parse {string!r}: {e} ({e.element!r})")
        failed += 1
        continue
    logger.debug(f"Parsed {string!r} into {currencies!r}.")
    print(f"{currencies} {dumps(currencies.to_json())}")

sys.exit(1 if failed else 0)
