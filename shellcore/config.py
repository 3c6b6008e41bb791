#!/usr/bin/env python3
# shellcore/config.py
from __future__ import annotations

"""
Configuration loader (stdlib-only).

Precedence (low → high):
  1) Built-in defaults
  2) Files in CWD: .env, config.ini, config.json, config.toml
  3) Environment variables (recognized keys only)

Validation:
  - SESSION_USER / SESSION_HOST: non-empty str
  - PLUGIN_PACKAGE: dotted module name
  - LOG_FILE_PATH: None or normalized path
  - LOG_LEVEL: None or one of {'DEBUG','INFO','WARNING','ERROR','CRITICAL'}
  - SHOW_BANNER / ENABLE_COMPLETION: bool
  - HISTORY_LIMIT: int >= 0 (0 = unbounded)
  - RESTART_DELAY: float >= 0
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional
import configparser
import json
import os
import re
import tomllib  # stdlib in 3.11+

from shellcore.ui import colorize, print_line

# ---------- defaults ----------

DEFAULTS: dict[str, Any] = {
    "SESSION_USER": "ash",
    "SESSION_HOST": "portfolio",
    "PLUGIN_PACKAGE": "plugins",
    "LOG_FILE_PATH": None,
    "LOG_LEVEL": None,              # 'DEBUG'/'INFO'/'WARNING'/'ERROR'/'CRITICAL'
    "SHOW_BANNER": True,
    "ENABLE_COMPLETION": True,
    "HISTORY_LIMIT": 1000,
    "RESTART_DELAY": 1.0,
}


# ---------- data model ----------

@dataclass(frozen=True)
class AppConfig:
    session_user: str
    session_host: str
    plugin_package: str
    log_file_path: Path | None
    log_level: str | None

    show_banner: bool
    enable_completion: bool

    history_limit: int
    restart_delay: float

    # Unrecognized file keys preserved for debugging/forward-compat
    extra: dict[str, Any] = field(default_factory=dict)


# ---------- file loaders (stdlib) ----------

def _load_env_file(path: Path) -> dict[str, str]:
    """Very small .env parser: KEY=VALUE, supports quotes; ignores comments/blank lines."""
    out: dict[str, str] = {}
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return out

    line_re = re.compile(r"""^\s*([A-Za-z_][A-Za-z0-9_]*)\s*=\s*(.*?)\s*$""")
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        m = line_re.match(line)
        if not m:
            continue
        k, v = m.group(1), m.group(2)
        if (v.startswith("'") and v.endswith("'")) or (v.startswith('"') and v.endswith('"')):
            v = v[1:-1]
        out[k] = v
    return out


def _load_ini_file(path: Path) -> dict[str, str]:
    cfg = configparser.ConfigParser()
    if not cfg.read(path, encoding="utf-8"):
        return {}
    flat: dict[str, str] = {}
    for sec in cfg.sections():
        for k, v in cfg.items(sec):
            flat[k.upper()] = v
    return flat


def _load_json_file(path: Path) -> dict[str, Any]:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (FileNotFoundError, json.JSONDecodeError):
        return {}


def _load_toml_file(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except (FileNotFoundError, tomllib.TOMLDecodeError):
        return {}


def _flatten_mapping(obj: Any, prefix: str = "") -> dict[str, Any]:
    """
    Flatten nested dicts to UPPER_SNAKE keys.
    Example: {'session': {'user': 'ash'}} -> {'SESSION_USER': 'ash'}
    """
    flat: dict[str, Any] = {}
    if isinstance(obj, Mapping):
        for k, v in obj.items():
            key = f"{prefix}_{k}" if prefix else str(k)
            if isinstance(v, Mapping):
                flat.update(_flatten_mapping(v, key))
            else:
                flat[str(key).upper()] = v
    return flat


def _find_config_files(base: Path) -> list[Path]:
    return [
        base / ".env",
        base / "config.ini",
        base / "config.json",
        base / "config.toml",
    ]


# ---------- normalization & coercion ----------

_BOOL_TRUE = {"1", "true", "yes", "y", "on"}
_BOOL_FALSE = {"0", "false", "no", "n", "off"}


def _as_bool(val: Any) -> bool:
    if isinstance(val, bool):
        return val
    s = str(val).strip().lower()
    if s in _BOOL_TRUE:
        return True
    if s in _BOOL_FALSE:
        return False
    raise ValueError(f"Expected boolean, got: {val!r}")


def _as_int(val: Any) -> int:
    if isinstance(val, int) and not isinstance(val, bool):
        return val
    try:
        return int(str(val).strip())
    except ValueError as exc:
        raise ValueError(f"Expected integer, got: {val!r}") from exc


def _as_float(val: Any) -> float:
    if isinstance(val, (int, float)) and not isinstance(val, bool):
        return float(val)
    try:
        return float(str(val).strip())
    except ValueError as exc:
        raise ValueError(f"Expected number, got: {val!r}") from exc


def _as_opt_str(val: Any) -> str | None:
    return None if val is None or str(val).strip().lower() in {"", "none"} else str(val)


def _as_name(key: str, val: Any) -> str:
    s = _as_opt_str(val)
    if s is None or not s.strip():
        raise ValueError(f"{key} must not be empty")
    return s.strip()


def _as_log_level(val: Any) -> str | None:
    lv = _as_opt_str(val)
    if lv is None:
        return None
    up = lv.upper()
    allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
    if up not in allowed:
        raise ValueError(
            f"LOG_LEVEL must be one of {sorted(allowed)}, got {lv!r}")
    return up


def _as_opt_path(val: Any, base: Path) -> Path | None:
    v = _as_opt_str(val)
    if v is None:
        return None
    p = Path(os.path.expandvars(os.path.expanduser(v)))
    return (p if p.is_absolute() else base / p).resolve()


# ---------- merge & load ----------

def _normalize_keys(d: Mapping[str, Any]) -> dict[str, Any]:
    return {str(k).upper(): v for k, v in d.items()}


def _merge_sources(base: Path, environ: Mapping[str, str]) -> dict[str, Any]:
    merged: dict[str, Any] = dict(DEFAULTS)

    for file in _find_config_files(base):
        if file.suffix == ".env" or file.name == ".env":
            merged.update(_normalize_keys(_load_env_file(file)))
        elif file.suffix == ".ini":
            merged.update(_normalize_keys(_load_ini_file(file)))
        elif file.suffix == ".json":
            merged.update(_normalize_keys(
                _flatten_mapping(_load_json_file(file))))
        elif file.suffix == ".toml":
            merged.update(_normalize_keys(
                _flatten_mapping(_load_toml_file(file))))

    # Environment variables override all; only recognized keys
    merged.update({k: v for k, v in environ.items() if k in DEFAULTS})
    return merged


# ---------- validation ----------

def _validate_and_build(config: dict[str, Any], base: Path) -> AppConfig:
    plugin_package = _as_name("PLUGIN_PACKAGE", config.get("PLUGIN_PACKAGE"))
    if not re.fullmatch(r"[A-Za-z_][\w]*(\.[A-Za-z_][\w]*)*", plugin_package):
        raise ValueError(f"PLUGIN_PACKAGE is not a module name: {plugin_package!r}")

    history_limit = _as_int(config.get("HISTORY_LIMIT", DEFAULTS["HISTORY_LIMIT"]))
    restart_delay = _as_float(config.get("RESTART_DELAY", DEFAULTS["RESTART_DELAY"]))
    if history_limit < 0:
        raise ValueError("HISTORY_LIMIT must be >= 0")
    if restart_delay < 0:
        raise ValueError("RESTART_DELAY must be >= 0")

    extra = {k: v for k, v in config.items() if k not in DEFAULTS}

    return AppConfig(
        session_user=_as_name("SESSION_USER", config.get("SESSION_USER")),
        session_host=_as_name("SESSION_HOST", config.get("SESSION_HOST")),
        plugin_package=plugin_package,
        log_file_path=_as_opt_path(config.get("LOG_FILE_PATH"), base),
        log_level=_as_log_level(config.get("LOG_LEVEL", DEFAULTS["LOG_LEVEL"])),
        show_banner=_as_bool(config.get("SHOW_BANNER", DEFAULTS["SHOW_BANNER"])),
        enable_completion=_as_bool(config.get(
            "ENABLE_COMPLETION", DEFAULTS["ENABLE_COMPLETION"])),
        history_limit=history_limit,
        restart_delay=restart_delay,
        extra=extra,
    )


# ---------- public API ----------

def default_config() -> AppConfig:
    return _validate_and_build(dict(DEFAULTS), Path.cwd())


def load_config(
    base: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> AppConfig:
    """
    Load, merge, normalize, and validate configuration.
    No filesystem side-effects. Raises ValueError on invalid values.
    """
    base = (base or Path.cwd()).resolve()
    raw = _merge_sources(base, os.environ if environ is None else environ)
    return _validate_and_build(raw, base)


def load_config_or_default(
    base: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> AppConfig:
    try:
        return load_config(base, environ)
    except ValueError as exc:
        print_line(
            colorize(f"[ WARN ] Invalid configuration: {exc}; using defaults", "yellow"))
        return default_config()
