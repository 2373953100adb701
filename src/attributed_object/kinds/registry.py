"""Named registry of attributed kinds.

Kinds defined from declarative config files reference each other (as
attribute types and as bases) by name. This registry resolves those names.
"""

from __future__ import annotations

import threading
from typing import Any

from attributed_object.core.errors import ConfigurationError
from attributed_object.model import AttributedObject


class KindRegistry:
    """Registry mapping kind names to :class:`AttributedObject` subclasses.

    Registration is serialized with a lock so kinds can be defined from more
    than one thread.
    """

    def __init__(self) -> None:
        self._kinds: dict[str, type[AttributedObject]] = {}
        self._lock = threading.Lock()

    def register(
        self,
        kind: type[AttributedObject],
        *,
        name: str | None = None,
    ) -> type[AttributedObject]:
        """Register one kind.

        Parameters
        ----------
        kind : type[AttributedObject]
            Kind class to register.
        name : str | None, optional
            Registry name. Defaults to ``kind.__name__``.

        Returns
        -------
        type[AttributedObject]
            The registered kind, so this method can be used as a decorator.

        Raises
        ------
        TypeError
            If ``kind`` is not an :class:`AttributedObject` subclass.
        ConfigurationError
            If a different kind is already registered under the same name.
        """

        if not (isinstance(kind, type) and issubclass(kind, AttributedObject)):
            raise TypeError(f"kind must be an AttributedObject subclass, got {kind!r}")

        key = kind.__name__ if name is None else name
        with self._lock:
            existing = self._kinds.get(key)
            if existing is None:
                self._kinds[key] = kind
                return kind
            if existing is not kind:
                raise ConfigurationError(f"kind conflict for {key!r}; already registered")
        return kind

    def get(self, name: str) -> type[AttributedObject]:
        """Return a kind by name.

        Raises
        ------
        KeyError
            If no kind is registered under ``name``.
        """

        return self._kinds[name]

    def list(self) -> tuple[str, ...]:
        """Return registered kind names, sorted."""

        return tuple(sorted(self._kinds))

    def create(self, name: str, /, **fields: Any) -> AttributedObject:
        """Construct an instance of the kind registered under ``name``."""

        return self.get(name)(**fields)

    def __contains__(self, name: object) -> bool:
        return name in self._kinds

    def __len__(self) -> int:
        return len(self._kinds)


__all__ = ["KindRegistry"]
