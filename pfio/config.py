from __future__ import annotations
import os
import codecs
import json
import logging
from typing import Any, Dict
from pathlib import Path
import copy

logger = logging.getLogger(__name__)

ENV_PREFIX = "PFIO__"

_DEFAULTS: Dict[str, Any] = {
    "log_level": "INFO",
    "formats": {
        "m3u_encoding": "ISO-8859-1",
        "m3u8_encoding": "UTF-8",
        "pls_fallback_encoding": "ISO-8859-1",
        "m3u_content_type": "audio/mpegurl",
        "pls_content_type": "audio/x-scpls",
    },
    "export": {
        "collision_mode": "abort",
        "max_name_bytes": 250,
        "extension_reserve": 5,
        "suffix_reserve": 5,
        "extension": ".m3u8",
    },
}


def validate_config(cfg: Dict[str, Any]) -> None:
    """Check values that would otherwise only fail deep inside an import/export.

    Raises:
        ValueError: On an unknown collision mode or encoding, or a name budget <= 0
    """
    from .config_types import ExportConfig
    from .models import ExportCollisionMode

    export = cfg.get('export', {})
    ExportCollisionMode.parse(export.get('collision_mode', 'abort'))

    budget = ExportConfig.from_dict(export).name_budget
    if budget <= 0:
        raise ValueError(
            f"Export name budget must be positive (max_name_bytes minus reserves = {budget})"
        )

    formats = cfg.get('formats', {})
    for key in ('m3u_encoding', 'm3u8_encoding', 'pls_fallback_encoding'):
        name = formats.get(key)
        if name is None:
            continue
        try:
            codecs.lookup(str(name))
        except LookupError:
            raise ValueError(f"Unknown encoding for formats.{key}: '{name}'") from None


def deep_merge(a: Dict[str, Any], b: Dict[str, Any]) -> Dict[str, Any]:
    """Merge dict b into a (shallow copies) returning new dict.
    Nested dicts are merged recursively; other values override.
    """
    result = dict(a)
    for k, v in b.items():
        if isinstance(v, dict) and isinstance(result.get(k), dict):
            result[k] = deep_merge(result[k], v)  # type: ignore[arg-type]
        else:
            result[k] = v
    return result


def _strip_inline_comment(val: str) -> str:
    # '#' starts a comment unless inside quotes
    in_single = False
    in_double = False
    kept = []
    for ch in val:
        if ch == "'" and not in_double:
            in_single = not in_single
        elif ch == '"' and not in_single:
            in_double = not in_double
        if ch == '#' and not in_single and not in_double:
            break
        kept.append(ch)
    return ''.join(kept).rstrip()


def _load_dotenv(path: Path) -> Dict[str, str]:
    values: Dict[str, str] = {}
    if not path.exists():
        return values
    for line in path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, val = line.split('=', 1)
        key = key.strip()
        val = val.strip()
        if '#' in val:
            val = _strip_inline_comment(val)
        if len(val) >= 2 and val[0] == val[-1] and val[0] in ('"', "'"):
            val = val[1:-1]
        if key:
            values[key] = val
    return values


def _env_overrides(values: Dict[str, str]) -> Dict[str, Any]:
    """Turn PFIO__SECTION__KEY=value pairs into a nested dict."""
    nested: Dict[str, Any] = {}
    for raw_key, value in values.items():
        path_parts = raw_key[len(ENV_PREFIX):].split("__")
        cursor: Dict[str, Any] = nested
        for part in path_parts[:-1]:
            cursor = cursor.setdefault(part.lower(), {})  # type: ignore[assignment]
        cursor[path_parts[-1].lower()] = coerce_scalar(value)
    return nested


def load_config(overrides: Dict[str, Any] | None = None) -> Dict[str, Any]:
    """Load configuration merging defaults <- .env <- environment <- overrides.

    During test runs (detected via PYTEST_CURRENT_TEST) .env loading is skipped
    unless PFIO_ENABLE_DOTENV=1 is set to allow deterministic defaults.

    Args:
        overrides: Dict of values to deep-merge last (primarily for tests).

    Returns:
        dict: Configuration dictionary (for typed access use load_typed_config()).
    """
    dotenv_values: Dict[str, str] = {}
    if os.environ.get('PFIO_ENABLE_DOTENV') or not os.environ.get('PYTEST_CURRENT_TEST'):
        dotenv_values = _load_dotenv(Path('.env'))
    # Deep copy defaults to avoid cross-call mutation of nested dicts
    cfg: Dict[str, Any] = copy.deepcopy(_DEFAULTS)

    # Real environment wins over .env
    combined = {**{k: v for k, v in dotenv_values.items() if k.startswith(ENV_PREFIX)},
                **{k: v for k, v in os.environ.items() if k.startswith(ENV_PREFIX)}}
    cfg = deep_merge(cfg, _env_overrides(combined))
    if overrides:
        cfg = deep_merge(cfg, overrides)
    # coerce_scalar turns encodings such as "1252" into ints
    cfg['formats'] = {k: str(v) for k, v in cfg.get('formats', {}).items()}

    validate_config(cfg)
    _configure_logging(cfg.get('log_level', 'INFO'))

    return cfg


def load_typed_config(overrides: Dict[str, Any] | None = None):
    """Load configuration as typed AppConfig object.

    Args:
        overrides: Dictionary of override values

    Returns:
        AppConfig: Typed configuration object with .to_dict() for dict conversion
    """
    from .config_types import AppConfig
    return AppConfig.from_dict(load_config(overrides))


def _configure_logging(level_str: str) -> None:
    """Configure Python logging based on configured level."""
    level = logging.getLevelName(str(level_str).upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format='%(message)s',  # Simple format - just the message
        force=True  # Reconfigure even if already configured
    )


def coerce_scalar(value: str) -> Any:
    txt = value.strip()
    # JSON object or array
    if (txt.startswith('[') and txt.endswith(']')) or (txt.startswith('{') and txt.endswith('}')):
        try:
            return json.loads(txt)
        except ValueError:
            pass  # fall through to scalar heuristics
    lower = txt.lower()
    if lower in {"true", "yes"}:
        return True
    if lower in {"false", "no"}:
        return False
    if txt.isdigit() or (txt.startswith("-") and txt[1:].isdigit()):
        return int(txt)
    try:
        return float(txt)
    except ValueError:
        return txt


__all__ = ["load_config", "load_typed_config", "deep_merge", "coerce_scalar", "validate_config"]
