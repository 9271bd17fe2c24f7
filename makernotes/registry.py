# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Vendor registry

Maps vendor identifiers ("apple", "pentax", ...) to Directory classes so a
caller that has identified the camera maker can construct the matching
directory without inspecting types at runtime.

Vendor modules register themselves with the ``register_directory`` class
decorator. The built-in vendor modules are imported the first time the
registry is queried; additional modules can be loaded by name.

Copyright 2025 DNAi inc.
"""

import importlib
import logging
from types import ModuleType
from typing import Callable, Dict, List, Type

from makernotes.directory import Directory
from makernotes.exceptions import MakernoteError, UnknownVendorError

logger = logging.getLogger(__name__)

BUILTIN_VENDOR_MODULES = (
    'makernotes.makernote_apple',
    'makernotes.makernote_casio',
    'makernotes.makernote_kyocera',
    'makernotes.makernote_leica',
    'makernotes.makernote_pentax',
    'makernotes.makernote_ricoh',
    'makernotes.makernote_sanyo',
    'makernotes.makernote_sigma',
)

_directory_classes: Dict[str, Type[Directory]] = {}
_builtins_loaded = False


def register_directory(vendor_id: str) -> Callable[[Type[Directory]], Type[Directory]]:
    """
    Class decorator registering a Directory subclass under a vendor id.

    Args:
        vendor_id: Identifier, matched case-insensitively

    Raises:
        MakernoteError: If the id is already taken, or the class is not a
            Directory with a schema
    """
    key = vendor_id.strip().lower()

    def decorator(cls: Type[Directory]) -> Type[Directory]:
        if not (isinstance(cls, type) and issubclass(cls, Directory)):
            raise MakernoteError(f"Cannot register {cls!r}: not a Directory subclass")
        if cls.SCHEMA is None:
            raise MakernoteError(f"Cannot register {cls.__name__}: no SCHEMA defined")
        existing = _directory_classes.get(key)
        if existing is not None and existing is not cls:
            raise MakernoteError(
                f"Vendor '{key}' is already registered to {existing.__name__}"
            )
        _directory_classes[key] = cls
        logger.debug("Registered %s for vendor '%s'", cls.__name__, key)
        return cls

    return decorator


def _ensure_builtins() -> None:
    global _builtins_loaded
    if _builtins_loaded:
        return
    _builtins_loaded = True
    for module_name in BUILTIN_VENDOR_MODULES:
        importlib.import_module(module_name)


def load_vendor_module(module_name: str) -> ModuleType:
    """
    Import a module that registers additional vendor directories.

    A module-level ``init()`` function, if present, is called after import.

    Raises:
        MakernoteError: If the module cannot be imported
    """
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise MakernoteError(f"Could not load vendor module '{module_name}': {e}")
    if hasattr(module, 'init'):
        module.init()
    logger.debug("Loaded vendor module %s", module_name)
    return module


def get_directory_class(vendor_id: str) -> Type[Directory]:
    """
    Return the Directory class registered for a vendor.

    Raises:
        UnknownVendorError: If nothing is registered under the id
    """
    _ensure_builtins()
    key = vendor_id.strip().lower()
    try:
        return _directory_classes[key]
    except KeyError:
        known = ', '.join(sorted(_directory_classes))
        raise UnknownVendorError(f"Unknown vendor '{vendor_id}' (known: {known})")


def create_directory(vendor_id: str) -> Directory:
    """Construct an empty directory for a vendor."""
    return get_directory_class(vendor_id)()


def registered_vendors() -> List[str]:
    """All registered vendor ids, sorted."""
    _ensure_builtins()
    return sorted(_directory_classes)
