"""Expand schema glob patterns into an ordered list of files."""

import glob
import logging
import os
from typing import Iterable

logger = logging.getLogger(__name__)


def discover_schema_files(patterns: Iterable[str], base_dir: str | None = None) -> list[str]:
    """Collect the files matching ``patterns``.

    Relative patterns resolve against ``base_dir`` (the working directory by
    default) and ``**`` matches any number of directories. ``base_dir`` is
    taken literally, so brackets or stars in it are not pattern syntax.
    Matches are sorted per pattern and files already matched by an earlier
    pattern are skipped, so the result is stable across runs.
    """
    base_dir = os.path.abspath(base_dir or os.getcwd())
    files: list[str] = []
    seen = set()

    for pattern in patterns:
        if pattern.startswith("./"):
            pattern = pattern[2:]

        matches = sorted(
            path
            for path in (
                os.path.abspath(os.path.join(base_dir, match))
                for match in glob.glob(pattern, root_dir=base_dir, recursive=True)
            )
            if os.path.isfile(path)
        )
        if not matches:
            logger.warning("No schema files match %s", pattern)

        for path in matches:
            if path in seen:
                continue
            seen.add(path)
            files.append(path)
            logger.debug("Discovered %s", path)

    return files
