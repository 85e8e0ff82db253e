from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger("filekit.paths")

PathLike = Union[str, os.PathLike]

DEFAULT_NAMESPACE = "filekit"
DEFAULT_DIR_MODE = 0o755
DEFAULT_PATH_MODE = 0o700


def ensure_dir(path: PathLike, mode: int = DEFAULT_DIR_MODE) -> Path:
    path = Path(path)
    if not path.is_dir():
        path.mkdir(mode=mode, parents=True, exist_ok=True)
    return path


def ensure_file(path: PathLike) -> Path:
    """Create an empty regular file unless one already exists."""

    path = Path(path)
    if not path.is_file():
        with path.open("a", encoding="utf-8"):
            pass
    return path


@dataclass(frozen=True)
class Environment:
    """Process state the path helpers depend on.

    Tests build one directly; everything else goes through ``from_os``.
    ``cwd`` and ``temp_dir`` left as ``None`` are looked up when needed.
    """

    home: Path
    config_home: Path
    cache_home: Path
    cwd: Optional[Path] = None
    temp_dir: Optional[Path] = None

    @classmethod
    def from_os(cls) -> "Environment":
        home = Path(os.environ.get("HOME") or Path.home())
        config_home = os.environ.get("XDG_CONFIG_HOME")
        cache_home = os.environ.get("XDG_CACHE_HOME")
        return cls(
            home=home,
            config_home=Path(config_home) if config_home else home / ".config",
            cache_home=Path(cache_home) if cache_home else home / ".cache",
        )

    def working_dir(self) -> Path:
        return self.cwd if self.cwd is not None else Path.cwd()


def _env(env: Optional[Environment]) -> Environment:
    return env if env is not None else Environment.from_os()


def _best_effort_mkdir(path: PathLike, mode: int) -> None:
    try:
        ensure_dir(path, mode)
    except OSError as exc:
        logger.warning("Could not create directory %s: %s", path, exc)


def get_home_dir(env: Optional[Environment] = None) -> str:
    return str(_env(env).home)


def get_config_dir(
    namespace: str = DEFAULT_NAMESPACE,
    env: Optional[Environment] = None,
    mode: int = DEFAULT_DIR_MODE,
) -> str:
    path = _env(env).config_home / namespace
    _best_effort_mkdir(path, mode)
    return str(path)


def get_cache_dir(
    namespace: str = DEFAULT_NAMESPACE,
    env: Optional[Environment] = None,
    mode: int = DEFAULT_DIR_MODE,
) -> str:
    path = _env(env).cache_home / namespace
    _best_effort_mkdir(path, mode)
    return str(path)


def build_path(
    path: PathLike,
    base_dir: Optional[PathLike] = None,
    env: Optional[Environment] = None,
    mode: int = DEFAULT_PATH_MODE,
) -> str:
    """Resolve ``path`` to a full path and create its parent directories.

    Absolute paths are kept as given. ``~/rest`` and ``~rest`` both expand
    to ``<home>/rest``. Anything else is joined onto ``base_dir``, or onto
    the working directory when no base is given. The result is plain string
    concatenation, no ``..`` collapsing is done.
    """

    raw = os.fspath(path)
    if raw.startswith("/"):
        full_path = raw
    elif raw.startswith("~"):
        home = get_home_dir(env)
        rest = raw[1:]
        full_path = home + rest if rest.startswith("/") else f"{home}/{rest}"
    elif base_dir is not None:
        full_path = f"{os.fspath(base_dir)}/{raw}"
    else:
        full_path = f"{_env(env).working_dir()}/{raw}"

    parent, sep, _ = full_path.rpartition("/")
    if sep and parent:
        _best_effort_mkdir(parent, mode)
    return full_path
