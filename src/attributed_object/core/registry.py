"""Ordered per-kind attribute registries.

A registry is created when a kind is defined. A child kind's registry starts
as an independent copy of its parent's declarations and appends its own.
Once the defining class statement completes the registry is frozen.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from .declaration import MISSING, AttributeDeclaration
from .errors import ConfigurationError


class AttributeRegistry:
    """Ordered mapping from attribute name to declaration.

    Parameters
    ----------
    owner_name : str
        Name of the owning kind, used in error messages.
    parent : AttributeRegistry | None, optional
        Registry of the nearest ancestor kind. Its declarations are copied
        in order before any new declaration.
    """

    def __init__(self, owner_name: str, parent: AttributeRegistry | None = None) -> None:
        self.owner_name = owner_name
        self.parent = parent
        self._declarations: dict[str, AttributeDeclaration] = {}
        self._frozen = False
        if parent is not None:
            self._declarations.update(parent._declarations)

    def declare(
        self,
        name: str,
        type_spec: Any = None,
        *,
        default: Any = MISSING,
        disallow: Any = MISSING,
    ) -> AttributeDeclaration:
        """Declare one attribute from raw options.

        Parameters
        ----------
        name : str
            Attribute name.
        type_spec : Any, optional
            ``None``, a primitive tag string, or a class.
        default : Any, optional
            Static default or zero-argument callable.
        disallow : Any, optional
            Disallowed value; ``None`` forbids nil.

        Returns
        -------
        AttributeDeclaration
            Registered declaration.

        Raises
        ------
        ConfigurationError
            If the type spec is invalid, the name is invalid or already
            declared, or the registry is frozen.
        """

        declaration = AttributeDeclaration.build(
            name,
            type_spec,
            default=default,
            disallow=disallow,
        )
        return self.add(declaration)

    def add(self, declaration: AttributeDeclaration) -> AttributeDeclaration:
        """Append an already-built declaration."""

        if self._frozen:
            raise ConfigurationError(
                f"{self.owner_name} attributes are frozen; cannot declare {declaration.name!r}"
            )
        if declaration.name in self._declarations:
            origin = "an ancestor of " if self._is_inherited(declaration.name) else ""
            raise ConfigurationError(
                f"attribute {declaration.name!r} is already declared on {origin}{self.owner_name}"
            )
        self._declarations[declaration.name] = declaration
        return declaration

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def get(self, name: str) -> AttributeDeclaration:
        """Return the declaration for ``name``.

        Raises
        ------
        KeyError
            If ``name`` is not declared.
        """

        return self._declarations[name]

    def names(self) -> tuple[str, ...]:
        return tuple(self._declarations)

    def own_names(self) -> tuple[str, ...]:
        """Names declared on this kind itself, excluding inherited ones."""

        return tuple(name for name in self._declarations if not self._is_inherited(name))

    def _is_inherited(self, name: str) -> bool:
        return self.parent is not None and name in self.parent

    def __contains__(self, name: object) -> bool:
        return name in self._declarations

    def __iter__(self) -> Iterator[AttributeDeclaration]:
        return iter(tuple(self._declarations.values()))

    def __len__(self) -> int:
        return len(self._declarations)

    def __repr__(self) -> str:
        return f"AttributeRegistry({self.owner_name!r}, names={list(self._declarations)})"


__all__ = ["AttributeRegistry"]
