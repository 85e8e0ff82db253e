"""Filesystem and string helpers shared by the application and its CLI."""

from __future__ import annotations

from .config import FileKitConfig, load_config  # noqa: F401
from .paths import (  # noqa: F401
    Environment,
    build_path,
    ensure_dir,
    ensure_file,
    get_cache_dir,
    get_config_dir,
    get_home_dir,
)
from .utils import (  # noqa: F401
    build_unique_list,
    case_insensitive_find,
    create_temp_file,
    read_file_contents,
    read_lines,
    replace_all,
)
