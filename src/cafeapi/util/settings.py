r"""Basic tools to handle application settings.

It provides:
    A Settings base class to manage persistent application settings as basic
        key/value pairs stored in a JSON file.
    A SettingsError exception to handle settings persistency errors.
    A Setting data descriptor to access the key/value pairs as class
        attributes (settings.set_value('port', 8000) is replaced by
        settings.port = 8000)
    A get_app_dirs convenient function to retrieve the user directories of the
        application ('%LOCALAPPDATA%\<appName>' on Windows,
        '$XDG_DATA_HOME/<appName>' elsewhere)
"""

from __future__ import annotations

import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, NamedTuple, Optional, cast, overload

from cafeapi.util.basicpatterns import Singleton

__all__ = ["Settings", "SettingsError", "Setting", "AppDirs", "get_app_dirs"]

logger = logging.getLogger(__name__)


class SettingsError(Exception):
    """Exception raised on settings saving error."""


class Settings(object, metaclass=Singleton):
    """A base class to handle persistent application settings.

    Settings is a singleton: only one instance of settings may exist for an
    application.
    Settings key/value pairs are read from / saved to the JSON file passed when
    creating the Settings instance.

    Examples:
        app_settings = Settings(Path('path/to/settings'))
        app_settings.set_value('port', 8080)
        app_settings.value('port', default_value=8000)   # returns 8080

    Attributes:
        _settings_file: the path to the persistent settings file.
        _keys: the settings key/value pairs container.
    """

    _keys: dict[str, Any]
    _settings_file: Path

    def __init__(self, settings_file: Path) -> None:
        self._settings_file = settings_file.with_suffix(".json")

        self._keys = self._load()

    def _load(self) -> dict[str, Any]:
        """Initialize the settings from its persistent JSON file.

        Returns:
            The key/value pairs read from the JSON file or an empty dict on
            loading errors.
        """
        try:
            with self._settings_file.open() as fh:
                keys = cast(dict[str, Any], json.load(fh))
            return keys
        except (FileNotFoundError, json.JSONDecodeError) as exc:
            logger.debug("Cannot load the settings file: %s", exc)
            return dict()

    def save(self) -> None:
        """Save the settings key/value pairs in the JSON file.

        Raises:
            A SettingsError exception on OS or JSON encoding errors.
        """
        try:
            with self._settings_file.open(mode="w") as fh:
                json.dump(self._keys, fh, indent=4)
        except (OSError, TypeError) as e:
            raise SettingsError(e) from e

    def value(self, key: str, default_value: Any = None) -> Any:
        """Returns the value of the setting key, or default_value if unset."""
        return self._keys.get(key, default_value)

    def set_value(self, key: str, value: Any) -> None:
        """Sets the value of setting key to value, overwriting any previous one."""
        self._keys[key] = value


class Setting(object):
    """A data descriptor to simplify a key/value access in a Settings instance.

    The name of a Setting descriptor is the key in the Settings instance
    container / persistent file.
    On creation, an optional default value can be set for the associated key.

    Examples:
        class AppSettings(Settings):
            port = Setting(default_value=8000)

        app_settings = AppSettings(Path('path/to/settings'))
        app_settings.port   # returns 8000
        app_settings.port = 8080
        app_settings.port   # returns 8080

    Attributes:
        default_value: an optional default value for the setting.
        _key: the settings key in the key/value pairs container.
    """

    _key: str
    default_value: Optional[Any]

    def __init__(self, default_value: Any = None) -> None:
        self.default_value = default_value

    def __set_name__(self, owner: type[Settings], name: str) -> None:
        self._key = name

    @overload
    def __get__(self, instance: None, owner: type[Settings]) -> Setting:
        ...

    @overload
    def __get__(self, instance: Settings, owner: type[Settings]) -> Any:
        ...

    def __get__(
        self, instance: Optional[Settings], owner: Optional[type[Settings]]
    ) -> Any:
        if instance is None:
            return self
        return instance.value(self._key, self.default_value)

    def __set__(self, instance: Settings, value: Any) -> None:
        instance.set_value(self._key, value)


class AppDirs(NamedTuple):
    """Paths of the user directories for the application."""

    user_data_dir: Path
    user_log_dir: Path


def get_app_dirs(app_name: str) -> AppDirs:
    r"""Returns the user directories for the application.

    Windows: %LOCALAPPDATA%\<app_name>
    Others: $XDG_DATA_HOME/<app_name>, $XDG_DATA_HOME defaulting to
        ~/.local/share

    Fallback to the user home directory if the environment variable is not
    found on Windows. The directories are created if required.

    Args:
        app_name: the application name.

    Returns:
        An AppDirs NamedTuple containing the user app directories paths.
    """
    folder: str | Path | None
    if sys.platform == "win32":
        folder = os.environ.get("LOCALAPPDATA") or Path.home()
    else:
        folder = os.environ.get("XDG_DATA_HOME") or Path.home() / ".local" / "share"
    folder = Path(folder)

    user_data_dir = folder / app_name
    user_data_dir.mkdir(parents=True, exist_ok=True)

    user_log_dir = user_data_dir / "Logs"
    user_log_dir.mkdir(parents=True, exist_ok=True)

    return AppDirs(user_data_dir, user_log_dir)
