# =============================================================================
# core/formatting.py  —  Human-Readable Text Views
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns the dataclasses from core/models.py into the plain-text blocks the
#   agent reads.  Every function here is pure: same input, same text.
#
# OUTPUT CONVENTIONS:
#   - One "Label: value" line per field, units appended where SWAPI implies
#     them (cm, kg, km, h, days).
#   - Search results are prefixed with the number of blocks shown and the
#     blocks are separated by a "---" line.
#   - The film catalog is one line per film, separated by blank lines.
# =============================================================================

from typing import Callable, Sequence, TypeVar

from core.models import Character, Film, Planet

T = TypeVar("T")

BLOCK_SEPARATOR = "\n---\n\n"


def format_character(char: Character) -> str:
    """Field block used in character search results."""
    return "\n".join([
        f"Name: {char.name}",
        f"Height: {char.height} cm",
        f"Mass: {char.mass} kg",
        f"Hair color: {char.hair_color}",
        f"Skin color: {char.skin_color}",
        f"Eye color: {char.eye_color}",
        f"Birth year: {char.birth_year}",
        f"Gender: {char.gender}",
    ])


def format_character_details(char: Character) -> str:
    """Field block for a single character fetched by ID.

    Adds the homeworld URL and the number of films the character appears in.
    """
    return "\n".join([
        f"Name: {char.name}",
        f"Height: {char.height} cm",
        f"Mass: {char.mass} kg",
        f"Hair color: {char.hair_color}",
        f"Eye color: {char.eye_color}",
        f"Birth year: {char.birth_year}",
        f"Gender: {char.gender}",
        f"Homeworld URL: {char.homeworld}",
        f"Number of films: {len(char.films)}",
    ])


def format_planet(planet: Planet) -> str:
    return "\n".join([
        f"Name: {planet.name}",
        f"Climate: {planet.climate}",
        f"Terrain: {planet.terrain}",
        f"Population: {planet.population}",
        f"Diameter: {planet.diameter} km",
        f"Rotation period: {planet.rotation_period} h",
        f"Orbital period: {planet.orbital_period} days",
    ])


def format_film(film: Film) -> str:
    return "\n".join([
        f"Title: {film.title}",
        f"Episode: {film.episode_id}",
        f"Director: {film.director}",
        f"Producer(s): {film.producer}",
        f"Release date: {film.release_date}",
        f"Opening crawl: {film.opening_crawl}",
    ])


def format_film_line(film: Film) -> str:
    return (
        f"Episode {film.episode_id}: {film.title}, "
        f"directed by {film.director}, released {film.release_date}"
    )


def format_search_results(items: Sequence[T], formatter: Callable[[T], str], noun_plural: str) -> str:
    """Count-prefixed, separator-joined blocks for a page of search results.

    Args:
        items: The results to render (must be non-empty; the caller handles
               the "nothing found" case).
        formatter: Renders one item as a field block.
        noun_plural: e.g. "character(s)", used in the header line.
    """
    blocks = BLOCK_SEPARATOR.join(formatter(item) for item in items)
    return f"Found {len(items)} {noun_plural}:\n\n{blocks}"


def format_film_catalog(films: Sequence[Film]) -> str:
    """All films, ascending by episode number, one line each."""
    ordered = sorted(films, key=lambda film: film.episode_id)
    lines = "\n\n".join(format_film_line(film) for film in ordered)
    return f"Star Wars films:\n\n{lines}"
