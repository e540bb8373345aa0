"""Golden-file assertions: compare output with a recorded file."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Union

SUFFIX = ".golden"
DEFAULT_FOLDER = "testdata"

_log = logging.getLogger(__name__)


class GoldenMismatchError(AssertionError):
    """Raised when actual output differs from the recorded golden file."""

    def __init__(self, path: Path, expected: bytes, actual: bytes) -> None:
        super().__init__(
            f"Results differ, expected output was not equal to recorded output ({path})"
        )
        self.path = path
        self.expected = expected
        self.actual = actual


def assert_golden(
    name: str,
    actual: Union[bytes, str],
    update: bool = False,
    folder: Union[str, os.PathLike] = DEFAULT_FOLDER,
) -> None:
    """Check ``actual`` against ``<folder>/<name>.golden``, or record it if ``update``.

    Raises GoldenMismatchError when the contents differ and FileNotFoundError
    when there is no golden file to compare with.
    """
    data = actual.encode("utf-8") if isinstance(actual, str) else bytes(actual)
    folder_path = Path(folder)
    path = folder_path / f"{name}{SUFFIX}"

    _log.debug("Checking equality: name=%s update=%s golden_file=%s", name, update, path)

    if update:
        folder_path.mkdir(mode=0o750, parents=True, exist_ok=True)
        path.write_bytes(data)
        return

    expected = path.read_bytes()
    if expected != data:
        raise GoldenMismatchError(path, expected, data)