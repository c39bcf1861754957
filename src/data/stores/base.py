"""Base store interface for section-keyed configuration."""

from abc import ABC, abstractmethod
from typing import Dict, List, Mapping


class ConfigStore(ABC):
    """Interface for any section-based configuration store (INI, DuckDB)."""

    @abstractmethod
    def has_section(self, name: str) -> bool:
        """Return True if a section called name exists."""
        ...

    @abstractmethod
    def get_section(self, name: str) -> Dict[str, str]:
        """Return a copy of the key/value pairs stored under name."""
        ...

    @abstractmethod
    def set_section(self, name: str, values: Mapping[str, object]) -> None:
        """Create or replace the section called name."""
        ...

    @abstractmethod
    def remove_section(self, name: str) -> None:
        """Delete the section called name."""
        ...

    @abstractmethod
    def sections(self) -> List[str]:
        """Return section names in store order."""
        ...

    @abstractmethod
    def save(self) -> bool:
        """Persist all pending changes. Return False if persisting failed."""
        ...

    def close(self) -> None:
        """Release resources held by the store."""
        pass


class StoreError(RuntimeError):
    """Error raised by configuration stores."""
    pass


class MemoryConfigStore(ConfigStore):
    """Store that keeps sections in memory; save() always succeeds.

    Subclasses load their backing storage into ``_sections`` and override
    ``save()`` to write it back.
    """

    def __init__(self, sections: Mapping[str, Mapping[str, object]] = None):
        self._sections: Dict[str, Dict[str, str]] = {}
        for name, values in (sections or {}).items():
            self.set_section(name, values)

    def has_section(self, name: str) -> bool:
        return name in self._sections

    def get_section(self, name: str) -> Dict[str, str]:
        if name not in self._sections:
            raise StoreError(f"Section '{name}' does not exist")
        return dict(self._sections[name])

    def set_section(self, name: str, values: Mapping[str, object]) -> None:
        if not name:
            raise StoreError("Section name must not be empty")
        # Section stores are string-valued
        self._sections[name] = {str(k): str(v) for k, v in values.items()}

    def remove_section(self, name: str) -> None:
        if name not in self._sections:
            raise StoreError(f"Section '{name}' does not exist")
        del self._sections[name]

    def sections(self) -> List[str]:
        return list(self._sections.keys())

    def save(self) -> bool:
        return True
