"""
Genre API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException, Path
from sqlalchemy.orm import Session

from movie_catalog.api.dependencies import get_db
from movie_catalog.api.models.genre import GenreCreate, GenreResponse
from movie_catalog.database import crud

router = APIRouter(prefix="/api/genres", tags=["genres"])


@router.get("", response_model=list[GenreResponse])
def list_genres(db: Session = Depends(get_db)):
    """List all genres ordered by name."""
    return crud.get_genres(db)


@router.post("", response_model=GenreResponse)
def create_genre(genre_in: GenreCreate, db: Session = Depends(get_db)):
    """Create a new genre."""
    try:
        return crud.create_genre(db, name=genre_in.name)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.put("/{genre_id}", response_model=GenreResponse)
def update_genre(
    genre_in: GenreCreate,
    genre_id: int = Path(..., ge=0, le=255),
    db: Session = Depends(get_db),
):
    """Rename a genre."""
    genre = crud.get_genre(db, genre_id)
    if not genre:
        raise HTTPException(status_code=404, detail=f"No genre was found with ID: {genre_id}")
    return crud.update_genre(db, genre, name=genre_in.name)


@router.delete("/{genre_id}", response_model=GenreResponse)
def delete_genre(genre_id: int = Path(..., ge=0, le=255), db: Session = Depends(get_db)):
    """Delete a genre that no movie uses."""
    genre = crud.get_genre(db, genre_id)
    if not genre:
        raise HTTPException(status_code=404, detail=f"No genre was found with ID: {genre_id}")
    if crud.genre_in_use(db, genre_id):
        raise HTTPException(status_code=400, detail="Genre is used by existing movies.")
    deleted = GenreResponse.model_validate(genre)
    crud.delete_genre(db, genre)
    return deleted
