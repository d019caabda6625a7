"""Global configuration and constants for the launcher list models."""

from __future__ import annotations

import os
from typing import Final

DATA_DIR: Final = os.environ.get("LAUNCHPAD_DATA_DIR", "data")

# "alphabetary" or "dde_category"; unknown values fall back to alphabetary
DEFAULT_CATEGORY_TYPE: Final = os.environ.get("LAUNCHPAD_CATEGORY_TYPE", "alphabetary")

FILTER_DEBOUNCE_MS: Final = 250  # milliseconds
INITIALS_SEPARATOR: Final = ","
VIEW_STATE_FILENAME: Final = "launcher_view_state.json"
