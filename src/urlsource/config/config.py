"""Configuration management for urlsource."""

from __future__ import annotations

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar, Final

from urlsource.config.file_ops import write_text_file
from urlsource.config.paths import default_config_path
from urlsource.platform.logging import logger

# Primary class path first, bootstrap class path second.
DEFAULT_ORIGINS: Final[tuple[str, ...]] = ("CLASSPATH", "BOOT_CLASSPATH")


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion."""
    return field(default=default, metadata={"path": True})


def _default_origins() -> list[str]:
    return list(DEFAULT_ORIGINS)


@dataclass
class Config:
    """Application configuration."""

    # Configuration origins read by ``resolve`` when none are given
    origins: list[str] = field(default_factory=_default_origins)

    # Log file path
    log_file: Path | None = _path_field()

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects and tidy origin names."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

        origins: Any = self.origins
        if isinstance(origins, str):
            origins = [origins]
        elif not isinstance(origins, (list, tuple)):
            raise TypeError(
                f"origins must be a string or a list of strings, not {type(origins).__name__}"
            )

        cleaned: list[str] = []
        for name in origins:
            stripped = str(name).strip()
            if stripped and stripped not in cleaned:
                cleaned.append(stripped)
        self.origins = cleaned

    def save(self, path: Path | None = None) -> Path:
        """Save configuration to ``path`` (the default config path if omitted)."""
        config_dict = asdict(self)
        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        target = path or default_config_path()
        try:
            write_text_file(target, self._render_toml(config_dict))
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        logger.info("Configuration saved to %s", target)
        return target

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# urlsource configuration file")
        lines.append("")

        lines.append("# Configuration origins resolved by `urlsource resolve`, in order")
        lines.append("# Each names an environment variable holding a class path string")
        lines.append(f"origins = {self._format_toml_value(config['origins'])}")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/urlsource.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (list, tuple)):
            return "[" + ", ".join(self._format_toml_value(item) for item in value) + "]"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls, path: Path | None = None) -> Config:
        """Load configuration from ``path`` or the default config path.

        A missing file yields the defaults. The loaded instance is cached
        until a different path is requested or :meth:`reset` is called.

        Raises:
            tomllib.TOMLDecodeError: The file is not valid TOML.
            TypeError: ``origins`` is neither a string nor a list.
        """
        config_file = (path or default_config_path()).expanduser().resolve()
        if cls._instance is not None and cls._loaded_from == config_file:
            return cls._instance

        if config_file.exists():
            try:
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                logger.error("Failed to load configuration from %s: %s", config_file, e)
                raise

            known = {f.name for f in fields(cls)}
            unknown = sorted(set(config_dict) - known)
            if unknown:
                logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
            kwargs = {key: value for key, value in config_dict.items() if key in known}
            try:
                instance = cls(**kwargs)
            except TypeError as e:
                logger.error("Invalid configuration in %s: %s", config_file, e)
                raise
            logger.debug("Configuration loaded from %s", config_file)
        else:
            instance = cls()
            logger.debug("No configuration at %s; using defaults", config_file)

        cls._instance = instance
        cls._loaded_from = config_file
        return instance

    @classmethod
    def reset(cls) -> None:
        """Drop the cached instance."""
        cls._instance = None
        cls._loaded_from = None


__all__ = ["Config", "DEFAULT_ORIGINS"]
