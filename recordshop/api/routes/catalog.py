"""Static dropdown values for the record form."""
from fastapi import APIRouter

from recordshop.models.record import FORMATS, GENRES

router = APIRouter()


@router.get("/formats")
def list_formats():
    return list(FORMATS)


@router.get("/genres")
def list_genres():
    return list(GENRES)
