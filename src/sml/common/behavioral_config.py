"""Defines a global set of configurations that define how the library behaves."""

from __future__ import annotations

# Standard Library Imports
from configparser import ConfigParser
from configparser import Error as ConfigError
from importlib import resources
from logging import CRITICAL, DEBUG, ERROR, INFO, NOTSET, WARNING
from pathlib import Path
from typing import TYPE_CHECKING

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from collections.abc import Callable
    from typing import Any, Final


class SubConfig:
    """Class that represents a section in the configuration.

    Sections are accessed as attributes, `BehavioralConfig.section.Option`, rather than through
    item lookups like `BehavioralConfig["section"]["Option"]`.
    """

    def __init__(self, section: str):
        """Instantiate a `SubConfig` object.

        Args:
            section (``str``): name of section that this SubConfig object represents
        """
        if not isinstance(section, str):
            raise TypeError("Config section must be a string")
        self.section = section

    def setonce(self, name: str, value: Any):
        """Set the field for this `SubConfig`, but raise an error if the field was already set.

        Args:
            name (``str``): name of field to set
            value (``any``): value to set the field to
        """
        if hasattr(self, name):
            raise AttributeError(
                f"SubConfig {self.section!r} already has a value set for {name!r}:{getattr(self, name)!r}",
            )
        setattr(self, name, value)


class CustomConfigParser(ConfigParser):
    """Perform custom parsing operations on our custom config convention."""

    LOGGING_LEVELS: Final[dict[str, int]] = {
        "CRITICAL": CRITICAL,
        "ERROR": ERROR,
        "WARNING": WARNING,
        "INFO": INFO,
        "DEBUG": DEBUG,
        "NOTSET": NOTSET,
    }

    def getlogginglevel(self, section: str, option: str) -> int:
        """Return logging level for this config file."""
        got = self.get(section, option)

        return self.LOGGING_LEVELS.get(got.upper(), NOTSET)


class BehavioralConfig:
    """Singleton, config settings class."""

    DEFAULT_CONFIG_FILE: Final[str] = "default_behavior.config"

    DEFAULT_SECTIONS: Final[dict[str, dict[str, Any]]] = {
        "logging": {
            "OutputLocation": "stdout",
            "Level": DEBUG,
            "MaxFileSize": 1048576,
            "MaxFileCount": 50,
            "AllowMultipleHandlers": False,
        },
        "validation": {
            "DegenerateInput": False,
        },
    }

    LOGGING_LEVEL_ITEMS: Final[dict[str, tuple[str, ...]]] = {"logging": ("Level",)}

    STR_ITEMS: Final[dict[str, tuple[str, ...]]] = {"logging": ("OutputLocation",)}

    INT_ITEMS: Final[dict[str, tuple[str, ...]]] = {
        "logging": (
            "MaxFileSize",
            "MaxFileCount",
        ),
    }

    BOOL_ITEMS: Final[dict[str, tuple[str, ...]]] = {
        "logging": ("AllowMultipleHandlers",),
        "validation": ("DegenerateInput",),
    }

    __shared_inst: BehavioralConfig | None = None

    def __init__(self, config_file_path: str | None = None):
        """Initialize the configuration object.

        Args:
            config_file_path (``str``, optional): path to a custom config file. Defaults to
                ``None``, which reads the packaged ``default_behavior.config``. Options missing
                from the file fall back to :attr:`.DEFAULT_SECTIONS`.
        """
        self._parser = CustomConfigParser()

        if config_file_path is None:
            res = resources.files("sml.common").joinpath(self.DEFAULT_CONFIG_FILE)
            with (
                resources.as_file(res) as res_filepath,
                open(res_filepath, encoding="utf-8") as config_file,
            ):
                self._parser.read_file(config_file)

        elif Path(config_file_path).exists():
            with open(config_file_path, encoding="utf-8") as config_file:
                self._parser.read_file(config_file)

        for section, section_config in self.DEFAULT_SECTIONS.items():
            sub = SubConfig(section)
            for key, default in section_config.items():
                sub.setonce(key, self._getOption(section, key, default))

            setattr(self, section, sub)

        BehavioralConfig.__shared_inst = self

    def _getOption(self, section: str, key: str, default: Any) -> Any:
        """Read a single typed option, falling back to `default` if it can't be read."""
        getter: Callable[[str, str], Any]
        if key in self.STR_ITEMS.get(section, ()):
            getter = self._parser.get

        elif key in self.INT_ITEMS.get(section, ()):
            getter = self._parser.getint

        elif key in self.BOOL_ITEMS.get(section, ()):
            getter = self._parser.getboolean

        elif key in self.LOGGING_LEVEL_ITEMS.get(section, ()):
            getter = self._parser.getlogginglevel

        else:
            raise KeyError(
                f"Configuration item '{section}::{key}' lacks a type classification.",
            )

        try:
            return getter(section, key)
        except ConfigError:
            return default

    @classmethod
    def getConfig(cls, config_file_path: str | None = None) -> BehavioralConfig:
        """Return a reference to the singleton shared config."""
        if cls.__shared_inst is None:
            cls.__shared_inst = BehavioralConfig(config_file_path=config_file_path)

        return cls.__shared_inst

    @classmethod
    def reset(cls) -> None:
        """Drop the shared config so the next :meth:`.getConfig` call re-reads it."""
        cls.__shared_inst = None
