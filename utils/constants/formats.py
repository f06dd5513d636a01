"""Game format constants and command-line aliases."""

OPENING_HAND_SIZE = 7

COMMANDER_DECK_SIZE = 99
STANDARD_DECK_SIZE = 60

FORMAT_ALIASES = {
    "commander": "commander",
    "edh": "commander",
    "standard": "standard",
    "modern": "standard",
}

FORMAT_OPTIONS = ["edh", "commander", "modern", "standard"]

INPUT_METHOD_OPTIONS = ["stdin", "file"]

DEFAULT_FORMAT = "commander"
DEFAULT_INPUT_METHOD = "stdin"
DEFAULT_TURN_COUNT = 15
DEFAULT_CATEGORY_FILE = "categories"

STARTING_HAND_LABEL = "Starting Hand"
