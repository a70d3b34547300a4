from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtWidgets import QWidget

if TYPE_CHECKING:
    from rastervis.view.panels.params import ParamEditorBase

_REGISTRY: dict[str, type[ParamEditorBase]] = {}


def register_editor(cls: type[ParamEditorBase]) -> type[ParamEditorBase]:
    """Class decorator to register an editor by its KEY (an InputKind value)."""
    key = getattr(cls, "KEY", None)
    if not key:
        raise ValueError(f"{cls.__name__} must define KEY")
    _REGISTRY[key] = cls
    return cls


def create_editor(key: str, parent: QWidget | None = None) -> ParamEditorBase:
    cls = _REGISTRY.get(key)
    if not cls:
        raise KeyError(f"No editor registered for key '{key}'")
    return cls(parent)
