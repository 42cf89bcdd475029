"""Utility functions."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel as _BaseModel


class BaseModel(_BaseModel):
    """Base class for rosactl models."""

    def get(self, name: str, default: Any = None) -> Any:
        """Safely get the value of an attribute.

        Args:
            name: Attribute name to return the value for.
            default: Value to return if attribute is not found.

        """
        return getattr(self, name, default)

    def __contains__(self, name: object) -> bool:
        """Implement evaluation of 'in' conditional.

        Args:
            name: The name to check for existence in the model.

        """
        if name in self.__dict__:
            return True
        return bool(self.model_extra and name in self.model_extra)

    def __getitem__(self, name: str) -> Any:
        """Implement evaluation of self[name].

        Args:
            name: Attribute name to return the value for.

        Returns:
            The value associated with the provided name/attribute name.

        Raises:
            AttributeError: If attribute does not exist on this object.

        """
        return getattr(self, name)

