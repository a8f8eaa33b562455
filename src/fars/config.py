"""
FARS data-directory configuration.

The yearly accident files live in a single directory.  Rather than a
process-wide lookup, every reader takes a ``FarsConfig`` naming that
directory; ``FarsConfig.default()`` resolves it from the environment or
falls back to the ``extdata/`` folder shipped inside the package.

Package Location: src/fars/config.py
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

# Environment variable that overrides the bundled data directory.
DATA_DIR_ENV = "FARS_DATA_DIR"

# Directory bundled with the package.
PACKAGE_DATA_DIR = Path(__file__).resolve().parent / "extdata"

FILENAME_PATTERN = "accident_{year:d}.csv.bz2"


@dataclass(frozen=True)
class FarsConfig:
    """Location of the yearly FARS accident files.

    Args:
        data_dir: Directory holding ``accident_<year>.csv.bz2`` files.
    """

    data_dir: Path

    def __post_init__(self) -> None:
        object.__setattr__(self, "data_dir", Path(self.data_dir))

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "FarsConfig":
        return cls(Path(path).expanduser())

    @classmethod
    def default(cls) -> "FarsConfig":
        """Build the configuration used when callers pass ``config=None``.

        ``$FARS_DATA_DIR`` wins when set and non-empty; otherwise the
        package's own ``extdata/`` directory is used.
        """
        env_dir = os.environ.get(DATA_DIR_ENV)
        if env_dir:
            return cls.from_path(env_dir)
        return cls(PACKAGE_DATA_DIR)


def resolve_config(config: Optional[FarsConfig]) -> FarsConfig:
    return config if config is not None else FarsConfig.default()
