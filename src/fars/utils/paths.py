"""Centralized data-directory resolution."""

import logging
import os
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)

DATA_DIR_ENV = "FARS_DATA_DIR"


def resolve_data_dir(data_dir: Optional[Union[str, Path]] = None) -> Path:
    """Resolve the directory that holds the ``accident_<year>.csv.bz2`` files.

    Precedence: explicit *data_dir* argument, then the ``FARS_DATA_DIR``
    environment variable, then the current working directory.  The
    directory is not required to exist; missing files surface later as
    ``FileNotFoundError`` from the reader.

    Args:
        data_dir: Optional explicit directory.

    Returns:
        Path to the data directory.
    """
    if data_dir is not None:
        return Path(data_dir)

    env_dir = os.environ.get(DATA_DIR_ENV)
    if env_dir:
        return Path(env_dir)

    logger.debug(f"{DATA_DIR_ENV} not set; using current working directory.")
    return Path.cwd()
