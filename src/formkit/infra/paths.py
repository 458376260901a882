from importlib.resources import files

from platformdirs import user_config_path

PACKAGE_NAME = "formkit"  # Python package name

# -----------------------------------------------------------------------------
# User-writable directories & files
# -----------------------------------------------------------------------------

# Base config directory (e.g. ~/.config/formkit/)
USER_CONFIG_DIR = user_config_path(PACKAGE_NAME, appauthor=False)

SETTING_PATH = USER_CONFIG_DIR / "settings.json"

# -----------------------------------------------------------------------------
# Embedded resources
# -----------------------------------------------------------------------------

RES = files(PACKAGE_NAME).joinpath("resources")

# Config
DEFAULT_CONFIG_FILE = RES.joinpath("config", "settings.sample.toml")

# Templates
DEFAULT_TEMPLATE_FILE = RES.joinpath("templates", "bootstrap.html.j2")

# Default config filename (used when copying embedded template)
DEFAULT_CONFIG_FILENAME = "formkit.toml"
