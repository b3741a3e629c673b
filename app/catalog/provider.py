"""
Exercise catalog provider.

The analytics engine only needs two things from a catalog: lookup by id
(a miss returns ``None``, never raises) and iteration over every entry.
:class:`ExerciseCatalog` provides both over an in-memory dict.  Engine
entry points also accept a plain iterable of :class:`Exercise`; it is
wrapped with :func:`as_catalog`.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Union

from app.schemas.exercise import Exercise


class ExerciseCatalog:
    """Read-mostly exercise lookup keyed by ``Exercise.id``."""

    def __init__(self, exercises: Iterable[Exercise] = ()) -> None:
        self._exercises: dict[str, Exercise] = {}
        for exercise in exercises:
            self.register(exercise)

    def register(self, exercise: Exercise) -> None:
        """Add an exercise.

        Raises :class:`ValueError` if ``exercise.id`` is already taken.
        """
        if exercise.id in self._exercises:
            raise ValueError(f"Exercise '{exercise.id}' already registered")
        self._exercises[exercise.id] = exercise

    def get(self, exercise_id: str) -> Optional[Exercise]:
        """Look up an exercise by its ID.  Returns ``None`` if not found."""
        return self._exercises.get(exercise_id)

    def get_or_raise(self, exercise_id: str) -> Exercise:
        """Look up an exercise by its ID.

        Raises :class:`KeyError` if not found.
        """
        exercise = self._exercises.get(exercise_id)
        if exercise is None:
            raise KeyError(
                f"Exercise '{exercise_id}' not in catalog. "
                f"Available: {sorted(self._exercises.keys())}"
            )
        return exercise

    def all(self) -> list[Exercise]:
        """Every exercise, in registration order."""
        return list(self._exercises.values())

    def ids(self) -> list[str]:
        return sorted(self._exercises.keys())

    def __iter__(self) -> Iterator[Exercise]:
        return iter(list(self._exercises.values()))

    def __len__(self) -> int:
        return len(self._exercises)

    def __contains__(self, exercise_id: object) -> bool:
        return exercise_id in self._exercises


CatalogLike = Union[ExerciseCatalog, Iterable[Exercise]]


def as_catalog(catalog: CatalogLike) -> ExerciseCatalog:
    """Return *catalog* as an :class:`ExerciseCatalog`.

    A plain iterable is indexed by id; when ids repeat the first entry wins.
    """
    if isinstance(catalog, ExerciseCatalog):
        return catalog
    wrapped = ExerciseCatalog()
    for exercise in catalog:
        if exercise.id not in wrapped:
            wrapped.register(exercise)
    return wrapped
