# tests/utils/constants.py

from pathlib import Path


PROJ_ROOT = Path(__file__).resolve().parent.parent.parent

# most verbose level the app logger knows
DEFAULT_TEST_LOG_LEVEL = "TRACE"
