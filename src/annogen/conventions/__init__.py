"""Annotation convention registry.

Built-in conventions live in this package, one module per convention
exposing an ``ANNOTATION`` rule list, and are imported on first use.
Conventions registered at runtime take precedence over built-ins.
"""

import importlib
import logging
from typing import Any, Dict, List, Optional, Sequence

logger = logging.getLogger(__name__)

BUILTIN_CONVENTIONS = ["emmylua", "google_docstrings", "jsdoc", "numpydoc", "reST"]

_registered: Dict[str, Sequence[Any]] = {}
_loaded: Dict[str, Sequence[Any]] = {}


def register_convention(name: str, annotation: Sequence[Any]) -> None:
    """Make a convention available to lookup() under ``name``"""
    _registered[name] = annotation


def unregister_convention(name: str) -> bool:
    """Remove a registered convention"""
    return _registered.pop(name, None) is not None


def lookup(name: str) -> Optional[Sequence[Any]]:
    """Find a convention by name, or None if it doesn't exist"""
    if name in _registered:
        return _registered[name]
    if name in _loaded:
        return _loaded[name]

    if not isinstance(name, str) or not name.isidentifier():
        return None

    module_name = f"{__name__}.{name}"
    try:
        module = importlib.import_module(module_name)
    except ModuleNotFoundError as e:
        # A convention module with a broken import still propagates
        if e.name != module_name:
            raise
        logger.debug("No convention module %s", module_name)
        return None

    annotation = getattr(module, "ANNOTATION", None)
    if annotation is None:
        return None

    logger.debug("Loaded convention '%s' (%d rules)", name, len(annotation))
    _loaded[name] = annotation
    return annotation


def list_conventions() -> List[str]:
    """Names of built-in and registered conventions"""
    return sorted(set(BUILTIN_CONVENTIONS) | set(_registered))
