"""
Sanitize I package root.

Locates Schedule I save data on disk and clears the item lists that
accumulate in a save's trash and generator documents.
"""

__version__ = "1.0.0"

__all__ = [
    "__version__",
]
