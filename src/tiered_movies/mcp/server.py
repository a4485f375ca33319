"""MCP server exposing the tiered movie repository as tools."""

import asyncio
import json
import logging

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from ..cache import MovieCache
from ..config import Settings, get_settings
from ..logging_config import configure_logging
from ..models.movie import Movie
from ..repository import MoviesRepository
from ..sources.local import SQLiteMoviesDataSource
from ..sources.remote import TMDbMoviesDataSource

logger = logging.getLogger(__name__)


def build_repository(settings: Settings) -> MoviesRepository:
    """Wire the SQLite and TMDb tiers into a repository."""
    return MoviesRepository(
        local_data_source=SQLiteMoviesDataSource(settings.database_path),
        remote_data_source=TMDbMoviesDataSource(
            read_access_token=settings.tmdb_read_access_token,
            base_url=settings.tmdb_base_url,
        ),
        cache=MovieCache(partitioned=settings.partitioned_cache),
    )


def movies_to_text(movies: list[Movie]) -> list[TextContent]:
    result = {
        "count": len(movies),
        "movies": [movie.to_dict() for movie in movies],
    }
    return [TextContent(type="text", text=json.dumps(result, indent=2))]


FORCE_REMOTE_PROPERTY = {
    "type": "boolean",
    "description": "Skip the cache and local store and refresh from TMDb (default false)",
}


async def dispatch_tool(
    repository: MoviesRepository, name: str, arguments: dict
) -> list[TextContent]:
    """Run one tool call against the repository."""
    try:
        if name == "get_popular_movies":
            movies = await repository.load_popular_movies(
                arguments.get("force_remote", False), arguments.get("page", 1)
            )
            return movies_to_text(movies)

        elif name == "get_top_rated_movies":
            movies = await repository.load_top_rated_movies(
                arguments.get("force_remote", False)
            )
            return movies_to_text(movies)

        elif name == "search_movies":
            movies = await repository.search_movie(
                arguments.get("force_remote", False), arguments["query"]
            )
            return movies_to_text(movies)

        elif name == "get_movie":
            movie_id = int(arguments["movie_id"])
            movie = await repository.get_movie(
                arguments.get("online_required", False), movie_id
            )
            if movie is None:
                return [TextContent(type="text", text=f"Movie {movie_id} not found")]
            return [TextContent(type="text", text=json.dumps(movie.to_dict(), indent=2))]

        elif name == "clear_data":
            repository.clear_data()
            return [TextContent(type="text", text="Cleared cached and stored movies")]

        else:
            return [TextContent(type="text", text=f"Unknown tool: {name}")]

    except Exception as e:
        logger.exception("Tool %s failed", name)
        return [TextContent(type="text", text=f"Error: {str(e)}")]


def create_mcp_server(repository: MoviesRepository | None = None) -> Server:
    """Create and configure the MCP server."""
    server = Server("tiered-movies")
    if repository is None:
        repository = build_repository(get_settings())

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        return [
            Tool(
                name="get_popular_movies",
                description="Get a page of popular movies, served from cache or local store when available",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "page": {
                            "type": "integer",
                            "description": "Page number (default 1)",
                        },
                        "force_remote": FORCE_REMOTE_PROPERTY,
                    },
                },
            ),
            Tool(
                name="get_top_rated_movies",
                description="Get top-rated movies, served from cache or local store when available",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "force_remote": FORCE_REMOTE_PROPERTY,
                    },
                },
            ),
            Tool(
                name="search_movies",
                description="Search movies by title",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "query": {
                            "type": "string",
                            "description": "Title to search for",
                        },
                        "force_remote": FORCE_REMOTE_PROPERTY,
                    },
                    "required": ["query"],
                },
            ),
            Tool(
                name="get_movie",
                description="Get one movie by TMDb ID, from the local store unless online is required",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "movie_id": {
                            "type": "integer",
                            "description": "TMDb movie ID",
                        },
                        "online_required": {
                            "type": "boolean",
                            "description": "Always fetch from TMDb (default false)",
                        },
                    },
                    "required": ["movie_id"],
                },
            ),
            Tool(
                name="clear_data",
                description="Empty the in-memory cache and the local movie store",
                inputSchema={
                    "type": "object",
                    "properties": {},
                },
            ),
        ]

    @server.call_tool()
    async def call_tool(name: str, arguments: dict) -> list[TextContent]:
        return await dispatch_tool(repository, name, arguments)

    return server


async def close_repository(repository: MoviesRepository) -> None:
    """Release the local database connection and the remote HTTP client."""
    try:
        await repository.remote_data_source.close()
    finally:
        repository.local_data_source.close()


async def main():
    """Run the MCP server."""
    settings = get_settings()
    configure_logging(settings)
    repository = build_repository(settings)
    server = create_mcp_server(repository)
    try:
        async with stdio_server() as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())
    finally:
        await close_repository(repository)


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()
