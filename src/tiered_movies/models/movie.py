"""Movie data models."""

from enum import Enum

from attrs import asdict, field, frozen


class QueryKind(Enum):
    """The collection queries a data source can answer."""

    POPULAR = "popular"
    TOP_RATED = "top_rated"
    SEARCH = "search"


@frozen
class Movie:
    """Represents a movie record. Two movies are equal when their ids match."""

    id: int
    title: str = field(default="", eq=False)
    overview: str | None = field(default=None, eq=False)
    release_date: str | None = field(default=None, eq=False)
    poster_path: str | None = field(default=None, eq=False)
    backdrop_path: str | None = field(default=None, eq=False)
    original_language: str | None = field(default=None, eq=False)
    vote_average: float | None = field(default=None, eq=False)
    vote_count: int | None = field(default=None, eq=False)
    popularity: float | None = field(default=None, eq=False)
    genre_ids: list[int] = field(factory=list, eq=False)

    @classmethod
    def from_tmdb(cls, data: dict) -> "Movie":
        """Build a movie from a TMDb movie or search-result object."""
        genre_ids = data.get("genre_ids")
        if genre_ids is None:
            genre_ids = [g["id"] for g in data.get("genres", [])]
        return cls(
            id=int(data["id"]),
            title=data.get("title", ""),
            overview=data.get("overview"),
            release_date=data.get("release_date") or None,
            poster_path=data.get("poster_path"),
            backdrop_path=data.get("backdrop_path"),
            original_language=data.get("original_language"),
            vote_average=data.get("vote_average"),
            vote_count=data.get("vote_count"),
            popularity=data.get("popularity"),
            genre_ids=list(genre_ids),
        )

    def to_dict(self) -> dict:
        return asdict(self)
