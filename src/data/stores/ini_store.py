"""INI file store: one section per graph."""

import configparser
import logging
import os
from pathlib import Path
from typing import Union

from .base import MemoryConfigStore, StoreError

logger = logging.getLogger(__name__)


def _new_parser() -> configparser.ConfigParser:
    parser = configparser.ConfigParser(interpolation=None)
    # Keep key case, "panelId" must survive a round trip
    parser.optionxform = str
    return parser


class IniConfigStore(MemoryConfigStore):
    """Sections read from and written back to an INI file.

    Changes are staged in memory until ``save()``, which rewrites the whole
    file through a temporary sibling and ``os.replace``.
    """

    def __init__(self, path: Union[str, Path]):
        super().__init__()
        self.path = Path(path)
        self._load()

    def _load(self) -> None:
        if not self.path.exists():
            logger.info("Config file %s does not exist yet; starting empty", self.path)
            return

        parser = _new_parser()
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                parser.read_file(f)
        except configparser.Error as e:
            raise StoreError(f"Could not parse {self.path}: {e}") from e

        for name in parser.sections():
            self._sections[name] = dict(parser.items(name))
        logger.debug("Loaded %d sections from %s", len(self._sections), self.path)

    def set_section(self, name: str, values) -> None:
        # configparser treats this section as defaults for every other one
        if name == configparser.DEFAULTSECT:
            raise StoreError(f"'{name}' is reserved in INI files")
        super().set_section(name, values)

    def save(self) -> bool:
        parser = _new_parser()
        for name, values in self._sections.items():
            parser[name] = values

        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                parser.write(f)
            os.replace(tmp_path, self.path)
        except OSError as e:
            logger.error("Could not save config file %s: %s", self.path, e)
            return False

        logger.info("Saved %d sections to %s", len(self._sections), self.path)
        return True
