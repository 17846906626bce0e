"""Initial shop catalogue loaded into a fresh store."""
from typing import List

from recordshop.models.record import Record

_CATALOGUE = [
    (1, "Californication", "Red Hot Chili Peppers", "Vinyl", "Rock", 1999, 29.99, 8),
    (2, "Black Summer", "Red Hot Chili Peppers", "CD", "Rock", 2022, 14.99, 12),
    (3, "Audioslave", "Audioslave", "Vinyl", "Rock", 2002, 27.99, 6),
    (4, "Stony Hill", "Damian Marley", "CD", "Reggae", 2017, 12.99, 9),
    (5, "The Bends", "Radiohead", "Vinyl", "Alternative", 1995, 26.99, 5),
    (6, "OK Computer", "Radiohead", "Vinyl", "Alternative", 1997, 28.99, 4),
]


def seed_records() -> List[Record]:
    """Fresh copies of the catalogue (no customer attached yet)."""
    return [
        Record(
            id=id_,
            title=title,
            artist=artist,
            format=format_,
            genre=genre,
            release_year=year,
            price=price,
            stock_qty=qty,
        )
        for id_, title, artist, format_, genre, year, price, qty in _CATALOGUE
    ]
