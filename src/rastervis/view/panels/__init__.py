"""
Side panels of the main window.

Importing this package registers the input editors (`params` module) so
`registry.create_editor()` knows about every input kind.
"""
from __future__ import annotations

from rastervis.view.panels import params as _params  # noqa: F401
