from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from .paths import DEFAULT_DIR_MODE, DEFAULT_NAMESPACE, DEFAULT_PATH_MODE, Environment


class FileKitConfig(BaseModel):
    namespace: str = Field(
        default=DEFAULT_NAMESPACE,
        description="Directory name used under the config and cache homes.",
    )
    temp_prefix: Optional[str] = Field(default=None, description="Temp file name prefix (default '<namespace>-').")
    dir_mode: int = Field(default=DEFAULT_DIR_MODE, ge=0, le=0o7777)
    path_mode: int = Field(default=DEFAULT_PATH_MODE, ge=0, le=0o7777)
    encoding: str = "utf-8"

    @field_validator("namespace")
    @classmethod
    def _validate_namespace(cls, value: str) -> str:
        value = value.strip()
        if not value or "/" in value or value in {".", ".."}:
            raise ValueError(f"Namespace must be a single directory name: {value!r}")
        return value

    @field_validator("dir_mode", "path_mode", mode="before")
    @classmethod
    def _validate_mode(cls, value: Union[int, str]) -> int:
        if isinstance(value, str):
            return int(value.strip().lower().removeprefix("0o"), 8)
        return int(value)

    @model_validator(mode="after")
    def _default_temp_prefix(self) -> "FileKitConfig":
        if self.temp_prefix is None:
            self.temp_prefix = f"{self.namespace}-"
        return self

    def environment(self) -> Environment:
        return Environment.from_os()


def _load_from_file(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    text = path.read_text(encoding="utf-8")
    suffix = path.suffix.lower()
    if suffix == ".json":
        data = json.loads(text)
    elif suffix in {".yaml", ".yml"}:
        data = yaml.safe_load(text) or {}
    else:
        raise ValueError(f"Unsupported config extension: {path}")
    if not isinstance(data, dict):
        raise ValueError(f"Config root must be a mapping: {path}")
    return data


def load_config(explicit_path: Optional[Path] = None, env: Optional[Environment] = None) -> FileKitConfig:
    """Load configuration from file or environment."""

    candidate: Optional[Path] = Path(explicit_path) if explicit_path is not None else None
    if candidate is None:
        env_path = os.environ.get("FILEKIT_CONFIG")
        if env_path:
            candidate = Path(env_path)
    if candidate is None:
        base_env = env if env is not None else Environment.from_os()
        candidate = base_env.config_home / DEFAULT_NAMESPACE / "filekit.yml"
    data = _load_from_file(candidate)
    return FileKitConfig(**data)
