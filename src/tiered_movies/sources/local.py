"""SQLite data source, the local persistent tier."""

from __future__ import annotations

import asyncio
import json
import logging
import sqlite3
import threading

from ..models.movie import Movie
from .base import MoviesDataSource

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS movies (
    position          INTEGER PRIMARY KEY AUTOINCREMENT,
    id                INTEGER NOT NULL UNIQUE,
    title             TEXT NOT NULL,
    overview          TEXT,
    release_date      TEXT,
    poster_path       TEXT,
    backdrop_path     TEXT,
    original_language TEXT,
    vote_average      REAL,
    vote_count        INTEGER,
    popularity        REAL,
    genre_ids         TEXT NOT NULL DEFAULT '[]'
);
"""

_COLUMNS = (
    "id, title, overview, release_date, poster_path, backdrop_path, "
    "original_language, vote_average, vote_count, popularity, genre_ids"
)


def _row_to_movie(row: sqlite3.Row) -> Movie:
    return Movie(
        id=row["id"],
        title=row["title"],
        overview=row["overview"],
        release_date=row["release_date"],
        poster_path=row["poster_path"],
        backdrop_path=row["backdrop_path"],
        original_language=row["original_language"],
        vote_average=row["vote_average"],
        vote_count=row["vote_count"],
        popularity=row["popularity"],
        genre_ids=json.loads(row["genre_ids"]),
    )


class SQLiteMoviesDataSource(MoviesDataSource):
    """
    Stores the movies written by the last refresh in a single table.

    Every collection query reads that same table: popular in insertion order,
    top-rated by vote average, search by a case-insensitive title match.
    The page number is accepted and ignored. Reads run in a worker thread;
    add_movie and clear_data write on the calling thread.
    """

    def __init__(self, path: str = "movies.db"):
        self.path = path
        self._lock = threading.RLock()
        self._conn = sqlite3.connect(path, check_same_thread=False)
        self._conn.row_factory = sqlite3.Row
        with self._lock:
            self._conn.executescript(SCHEMA)
            self._conn.commit()

    def close(self) -> None:
        with self._lock:
            self._conn.close()

    def _fetch(self, sql: str, params: tuple) -> list[Movie]:
        with self._lock:
            rows = self._conn.execute(sql, params).fetchall()
        return [_row_to_movie(row) for row in rows]

    async def _query(self, sql: str, params: tuple = ()) -> list[Movie]:
        return await asyncio.to_thread(self._fetch, sql, params)

    async def load_popular_movies(self, force_remote: bool, page: int) -> list[Movie]:
        return await self._query(f"SELECT {_COLUMNS} FROM movies ORDER BY position")

    async def load_top_rated_movies(self, force_remote: bool) -> list[Movie]:
        return await self._query(
            f"SELECT {_COLUMNS} FROM movies "
            "ORDER BY vote_average IS NULL, vote_average DESC, position"
        )

    async def search_movie(self, force_remote: bool, query: str) -> list[Movie]:
        escaped = query.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
        return await self._query(
            f"SELECT {_COLUMNS} FROM movies "
            "WHERE title LIKE ? ESCAPE '\\' ORDER BY position",
            (f"%{escaped}%",),
        )

    async def get_movie(self, online_required: bool, movie_id: int) -> Movie | None:
        movies = await self._query(
            f"SELECT {_COLUMNS} FROM movies WHERE id = ?", (movie_id,)
        )
        return movies[0] if movies else None

    def add_movie(self, movie: Movie) -> None:
        """Insert the movie, or update the stored row with the same id in place."""
        values = (
            movie.id,
            movie.title,
            movie.overview,
            movie.release_date,
            movie.poster_path,
            movie.backdrop_path,
            movie.original_language,
            movie.vote_average,
            movie.vote_count,
            movie.popularity,
            json.dumps(list(movie.genre_ids)),
        )
        with self._lock:
            self._conn.execute(
                f"INSERT INTO movies ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?) "
                "ON CONFLICT(id) DO UPDATE SET "
                "title = excluded.title, overview = excluded.overview, "
                "release_date = excluded.release_date, poster_path = excluded.poster_path, "
                "backdrop_path = excluded.backdrop_path, "
                "original_language = excluded.original_language, "
                "vote_average = excluded.vote_average, vote_count = excluded.vote_count, "
                "popularity = excluded.popularity, genre_ids = excluded.genre_ids",
                values,
            )
            self._conn.commit()

    def clear_data(self) -> None:
        with self._lock:
            self._conn.execute("DELETE FROM movies")
            self._conn.commit()
        logger.debug("Cleared local movie store at %s", self.path)
