from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Callable, List, Optional, TypeVar, Union

from .paths import DEFAULT_NAMESPACE, Environment, PathLike

logger = logging.getLogger("filekit.utils")

T = TypeVar("T")

_ASCII_LOWER = str.maketrans("ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz")


def read_file_contents(path: PathLike, encoding: str = "utf-8") -> Optional[str]:
    """Return the whole file as text, or ``None`` if it cannot be read.

    Failures are logged rather than raised; callers carry on with an empty
    result.
    """

    target = Path(path)
    if not target.is_file():
        logger.error("Cannot open %s: %s", target, "file not found")
        return None
    try:
        with target.open("r", encoding=encoding, newline="") as handle:
            return handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Cannot open %s: %s", target, exc)
        return None


def read_lines(path: PathLike, encoding: str = "utf-8") -> List[str]:
    content = read_file_contents(path, encoding=encoding)
    if content is None:
        return []
    return content.split("\n")


def build_unique_list(
    path: PathLike,
    parse: Callable[[str], Optional[T]],
    is_same: Callable[[T, T], bool],
    encoding: str = "utf-8",
) -> List[T]:
    """Parse the lines of ``path`` into a list without duplicates.

    ``parse`` turns a stripped, non-empty line into a value or returns
    ``None`` to drop it. When ``is_same(new, existing)`` holds for an entry
    already collected, that entry is dropped and the new value goes to the
    end, so each value sits at the position of its last occurrence.
    """

    values: List[T] = []
    for line in read_lines(path, encoding=encoding):
        line = line.strip()
        if not line:
            continue
        value = parse(line)
        if value is None:
            continue
        for index, existing in enumerate(values):
            if is_same(value, existing):
                del values[index]
                break
        values.append(value)
    return values


def case_insensitive_find(haystack: str, needle: str) -> int:
    """Like ``str.find`` but ASCII letters match regardless of case."""

    return haystack.translate(_ASCII_LOWER).find(needle.translate(_ASCII_LOWER))


def replace_all(search: str, replace: str, text: Optional[str]) -> Optional[str]:
    if text is None:
        return None
    if not search:
        return text
    return replace.join(text.split(search))


def create_temp_file(
    content: Union[str, bytes],
    prefix: str = f"{DEFAULT_NAMESPACE}-",
    encoding: str = "utf-8",
    env: Optional[Environment] = None,
) -> str:
    """Write ``content`` to a new temporary file and return its path.

    The caller owns the file. Partial files are removed before an
    ``OSError`` is raised.
    """

    temp_dir = env.temp_dir if env is not None else None
    attempted = os.path.join(temp_dir or tempfile.gettempdir(), f"{prefix}XXXXXXXX")
    try:
        data = content.encode(encoding) if isinstance(content, str) else content
    except (UnicodeEncodeError, LookupError) as exc:
        logger.error("Could not encode content for temporary file %s: %s", attempted, exc)
        raise OSError(f"Could not write temporary file {attempted}") from exc

    try:
        fd, path = tempfile.mkstemp(prefix=prefix, dir=temp_dir)
    except OSError as exc:
        logger.error("Could not create temporary file %s: %s", attempted, exc)
        raise OSError(f"Could not create temporary file {attempted}") from exc

    try:
        try:
            written = os.write(fd, data)
        finally:
            os.close(fd)
        if written < len(data):
            raise OSError(f"short write ({written} of {len(data)} bytes)")
    except OSError as exc:
        logger.error("Could not write temporary file %s: %s", path, exc)
        try:
            os.unlink(path)
        except FileNotFoundError:
            pass
        raise OSError(f"Could not write temporary file {path}") from exc
    logger.debug("Created temporary file %s (%d bytes)", path, len(data))
    return path
