from movietracker.models.movie import Movie
from movietracker.models.utils import decode_genre
from movietracker.schemas.movie import MoviePublic


def to_public(movie: Movie) -> MoviePublic:
    """
    Convert a Movie row to the MoviePublic schema returned by the API.

    Parameters:
        movie (Movie): The Movie object to convert.
    Returns:
        MoviePublic: The converted schema, with the stored genre decoded.
    Raises:
        ValidationError: If the movie data is invalid.
    """
    return MoviePublic(
        **movie.model_dump(exclude={"genre"}),
        genre=decode_genre(movie.genre),
    )
