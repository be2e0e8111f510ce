"""Typed configuration dataclasses for playlist-file-io.

Provides strongly-typed configuration objects that can be used throughout
the application for better type safety and IDE support.
"""
from __future__ import annotations
from dataclasses import dataclass, field, asdict
from typing import Dict, Any


@dataclass
class FormatsConfig:
    """Playlist format detection and decoding configuration."""
    m3u_encoding: str = "ISO-8859-1"  # initial encoding for .m3u
    m3u8_encoding: str = "UTF-8"  # initial encoding for .m3u8
    pls_fallback_encoding: str = "ISO-8859-1"  # used when PLS content is not valid UTF-8
    m3u_content_type: str = "audio/mpegurl"
    pls_content_type: str = "audio/x-scpls"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> FormatsConfig:
        # env coercion turns "1252" into an int; every field here is text
        return cls(**{k: str(v) for k, v in data.items()})


@dataclass
class ExportConfig:
    """Playlist export configuration."""
    collision_mode: str = "abort"  # "overwrite", "keepboth" or "abort"
    max_name_bytes: int = 250  # name limit of the storage, extension included
    extension_reserve: int = 5
    suffix_reserve: int = 5  # room for " (xx)" added on name collisions
    extension: str = ".m3u8"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ExportConfig:
        values = dict(data)
        for key in ("collision_mode", "extension"):
            if key in values:
                values[key] = str(values[key])
        for key in ("max_name_bytes", "extension_reserve", "suffix_reserve"):
            if key in values:
                values[key] = int(values[key])
        return cls(**values)

    @property
    def name_budget(self) -> int:
        """Bytes left for the playlist name part of the file name."""
        return self.max_name_bytes - self.extension_reserve - self.suffix_reserve


@dataclass
class AppConfig:
    """Root application configuration with all subsections."""
    log_level: str = "INFO"
    formats: FormatsConfig = field(default_factory=FormatsConfig)
    export: ExportConfig = field(default_factory=ExportConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the nested dictionary form used by load_config.

        Returns:
            Nested dict structure matching config format
        """
        return {
            "log_level": self.log_level,
            "formats": self.formats.to_dict(),
            "export": self.export.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> AppConfig:
        """Create typed config from dictionary.

        Args:
            data: Dictionary config (from load_config)

        Returns:
            Typed AppConfig instance
        """
        return cls(
            log_level=data.get("log_level", "INFO"),
            formats=FormatsConfig.from_dict(data.get("formats", {})),
            export=ExportConfig.from_dict(data.get("export", {})),
        )


__all__ = ["FormatsConfig", "ExportConfig", "AppConfig"]
