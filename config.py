import os
from dotenv import load_dotenv

load_dotenv()


def _flag(name, default):
    return os.getenv(name, default).strip().lower() == "true"


LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_JSON = _flag("LOG_JSON", "false")

# Invoice defaults
DEFAULT_ROUND_OFF = _flag("GST_DEFAULT_ROUND_OFF", "true")
DEFAULT_IS_GST = _flag("GST_DEFAULT_IS_GST", "true")
STRICT_NUMBERS = _flag("GST_STRICT_NUMBERS", "false")
DEFAULT_CURRENCY = os.getenv("DEFAULT_CURRENCY", "INR").upper()

# HSN catalog
HSN_CSV_PATH = os.getenv("HSN_CSV_PATH", "")
HSN_MIN_SCORE = float(os.getenv("HSN_MIN_SCORE", "70"))
