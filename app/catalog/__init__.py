"""Exercise catalog provider and the built-in reference catalog."""

from app.catalog.builtin import BUILTIN_EXERCISES, default_catalog
from app.catalog.provider import CatalogLike, ExerciseCatalog, as_catalog

__all__ = [
    "BUILTIN_EXERCISES",
    "CatalogLike",
    "ExerciseCatalog",
    "as_catalog",
    "default_catalog",
]
