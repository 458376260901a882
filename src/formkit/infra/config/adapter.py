from __future__ import annotations

from typing import Any

from formkit.schemas import BuilderConfig


class ConfigAdapter:
    """Typed accessor over a loaded settings mapping.

    Expected layout::

        [builder]
        template_path = "..."
        autoescape = true
        skip = ["Password"]

        [builder.selects."Address.State"]
        California = "CA"

        [debug]
        log_level = "INFO"

    Missing or malformed sections fall back to defaults.

    Args:
        config (dict[str, Any]): Loaded settings mapping.
    """

    def __init__(self, config: dict[str, Any]) -> None:
        self._config: dict[str, Any] = dict(config)

    def get_config(self) -> dict[str, Any]:
        """Return the full raw configuration mapping."""
        return self._config

    def get_builder_config(self) -> BuilderConfig:
        """Build a BuilderConfig from the ``builder`` section.

        Returns:
            BuilderConfig: Resolved builder configuration.

        Raises:
            ValueError: If ``skip`` or ``selects`` have an invalid shape.
        """
        cfg = self._section("builder")

        template_path = cfg.get("template_path") or None
        if template_path is not None:
            template_path = str(template_path)

        return BuilderConfig(
            template_path=template_path,
            autoescape=bool(cfg.get("autoescape", True)),
            skip=self._to_skip_list(cfg.get("skip", [])),
            selects=self._to_selects(cfg.get("selects", {})),
        )

    def get_log_level(self) -> str:
        """Return the configured logging level.

        Returns:
            str: Logging level or ``"INFO"`` if missing.
        """
        return self._section("debug").get("log_level") or "INFO"

    def _section(self, name: str) -> dict[str, Any]:
        value = self._config.get(name)
        return value if isinstance(value, dict) else {}

    @staticmethod
    def _to_skip_list(raw: Any) -> list[str]:
        if isinstance(raw, str):
            return [raw]
        if not isinstance(raw, list):
            raise ValueError(f"skip must be str|list, got {type(raw).__name__}")
        return [str(name) for name in raw]

    @staticmethod
    def _to_selects(raw: Any) -> dict[str, dict[str, Any]]:
        if not isinstance(raw, dict):
            raise ValueError(f"selects must be a table, got {type(raw).__name__}")

        result: dict[str, dict[str, Any]] = {}
        for name, options in raw.items():
            if not isinstance(options, dict):
                raise ValueError(
                    f"Invalid options for {name!r}: expected table, "
                    f"got {type(options).__name__}"
                )
            result[str(name)] = dict(options)
        return result
