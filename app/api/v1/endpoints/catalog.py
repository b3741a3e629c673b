"""
Exercise catalog endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.dependencies import get_catalog
from app.catalog import ExerciseCatalog
from app.schemas.exercise import Exercise

router = APIRouter()


@router.get(
    "/exercises",
    summary="List every exercise in the catalog.",
    response_model=list[Exercise],
)
def list_exercises(catalog: ExerciseCatalog = Depends(get_catalog)):
    return catalog.all()


@router.get(
    "/exercises/{exercise_id}",
    summary="Get one catalog exercise by id.",
    response_model=Exercise,
)
def get_exercise(exercise_id: str, catalog: ExerciseCatalog = Depends(get_catalog)):
    try:
        return catalog.get_or_raise(exercise_id)
    except KeyError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Exercise '{exercise_id}' not found",
        )
