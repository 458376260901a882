from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from formkit.infra.paths import DEFAULT_CONFIG_FILE, SETTING_PATH

logger = logging.getLogger(__name__)

LOCAL_FILENAMES = ["formkit.toml", "formkit.json"]


def _resolve_file_path(
    user_path: str | Path | None,
    local_filenames: list[str],
    fallback_path: Path,
) -> Path | None:
    """
    Pick the settings file to read.

    Lookup order:
        1. User-specified path (must exist)
        2. The first of `local_filenames` present in the working directory
        3. The per-user fallback path

    Args:
        user_path: Optional file path explicitly provided by the user.
        local_filenames: File names to look for in the working directory.
        fallback_path: Per-user settings file.

    Returns:
        The resolved path, or None if nothing matched.

    Raises:
        FileNotFoundError: If `user_path` is given but does not exist.
    """
    if user_path:
        path = Path(user_path).expanduser().resolve()
        if not path.is_file():
            raise FileNotFoundError(f"Specified config file not found: {path}")
        return path

    for name in local_filenames:
        local_path = (Path.cwd() / name).resolve()
        if local_path.is_file():
            logger.debug("Using local config file: %s", local_path)
            return local_path

    if fallback_path.is_file():
        return fallback_path.resolve()

    return None


def _load_by_extension(path: Path) -> dict[str, Any]:
    """
    Parse a `.json` or `.toml` settings file.

    Args:
        path: Path to the settings file.

    Returns:
        The parsed mapping.

    Raises:
        ValueError: If the extension is unsupported, parsing fails, or the
            root element is not a table/object.
    """
    ext = path.suffix.lower()

    if ext == ".json":
        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e

    elif ext == ".toml":
        import tomllib

        try:
            with path.open("rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ValueError(f"Invalid TOML in {path}: {e}") from e

    else:
        raise ValueError(f"Unsupported config file extension: {ext}")

    if not isinstance(data, dict):
        raise ValueError(f"Config root must be a dict, got {type(data)} in {path}")

    return data


def load_config(config_path: str | Path | None = None) -> dict[str, Any]:
    """
    Load formkit settings.

    Resolution order:
        - Explicit `config_path` (if provided)
        - `formkit.toml` or `formkit.json` in the working directory
        - `SETTING_PATH` in the user config directory

    An empty mapping is returned when no file exists at all, so every
    setting falls back to its default.

    Args:
        config_path: Optional explicit configuration file path.

    Returns:
        Parsed configuration as a dictionary.

    Raises:
        FileNotFoundError: If `config_path` is given but missing.
        ValueError: If the file cannot be parsed or contains invalid structure.
    """
    path = _resolve_file_path(
        user_path=config_path,
        local_filenames=LOCAL_FILENAMES,
        fallback_path=SETTING_PATH,
    )

    if not path:
        logger.debug("No config file found, using defaults")
        return {}

    logger.debug("Loading configuration from: %s", path)
    return _load_by_extension(path)


def copy_default_config(target: Path) -> None:
    """
    Write the bundled sample settings to `target`.

    Args:
        target: Destination path, usually ``./formkit.toml``.
    """
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(DEFAULT_CONFIG_FILE.read_bytes())


def save_config(
    config: dict[str, Any],
    output_path: str | Path = SETTING_PATH,
) -> None:
    """
    Save settings to disk as JSON.

    Args:
        config: Settings mapping.
        output_path: Destination path for the JSON file.

    Raises:
        OSError: If writing to disk fails.
    """
    output = Path(output_path).expanduser().resolve()
    output.parent.mkdir(parents=True, exist_ok=True)

    try:
        with output.open("w", encoding="utf-8") as f:
            json.dump(config, f, indent=2, ensure_ascii=False)
    except OSError as e:
        logger.error("Failed to write config JSON '%s': %s", output, e)
        raise

    logger.info("Configuration saved to JSON: %s", output)


def save_config_file(
    source_path: str | Path, output_path: str | Path = SETTING_PATH
) -> None:
    """
    Install a TOML/JSON settings file as the per-user JSON settings.

    Args:
        source_path: Path to the source TOML/JSON file.
        output_path: Path to the output JSON file.

    Raises:
        FileNotFoundError: If the source file does not exist.
        ValueError: If the source file cannot be parsed.
    """
    source = Path(source_path).expanduser().resolve()
    if not source.is_file():
        raise FileNotFoundError(f"Source file not found: {source}")

    save_config(_load_by_extension(source), output_path)
