"""Per-user directories used by the emmet-volt plugin.

The plugin itself is stateless between initializations; the only thing it
writes to disk is its own log output.
"""

import os
from pathlib import Path

from platformdirs import user_data_dir

APP_NAME = "emmet-volt"


class GlobalPath:
    """Global path lookups for emmet-volt."""

    @classmethod
    def data(cls) -> str:
        """Application data directory, overridable for tests."""
        override = os.environ.get("EMMET_VOLT_DATA_DIR")
        if override:
            return override
        return user_data_dir(APP_NAME)

    @classmethod
    def log(cls) -> str:
        """Log file directory."""
        return str(Path(cls.data()) / "log")
