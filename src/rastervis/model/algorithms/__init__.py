"""
Auto-import all algorithm modules to ensure registration side-effects run.

After importing this package, `sources.list_keys()` and `sources.create_source()`
will know about all built-in algorithms.
"""
from __future__ import annotations

import importlib
import pkgutil

for _module in pkgutil.iter_modules(__path__, __name__ + "."):
    importlib.import_module(_module.name)
