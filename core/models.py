# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the *shape* of every piece of SWAPI data that
# flows through the system.  They are request-scoped view-models: built when
# a response is decoded, consumed by the formatters, then thrown away.
# Nothing here is cached, merged, or mutated (every class is frozen).
#
# DESIGN PRINCIPLE — "Fail Closed":
#   SWAPI is a third-party API and its JSON is duck-typed.  Each model has a
#   from_json() classmethod that checks every field it needs up front.  A
#   missing or mistyped field raises SchemaError instead of rendering as
#   "None" in the text the agent reads.  Extra fields are ignored.
#
# NOTE ON STRING-Y NUMBERS:
#   SWAPI sends height, mass, population, diameter etc. as STRINGS
#   ("172", "unknown", "1,000").  We keep them as strings.  Only
#   episode_id is a real integer upstream, and we require it to be one.
# =============================================================================

from dataclasses import dataclass, field
from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class SchemaError(ValueError):
    """Raised when an upstream JSON object does not have the expected shape."""


def _require(data: dict, key: str, kind: type, entity: str):
    """Fetch data[key] and check its type, or raise SchemaError."""
    if not isinstance(data, dict):
        raise SchemaError(f"{entity} payload must be a JSON object, got {type(data).__name__}")
    if key not in data:
        raise SchemaError(f"{entity} payload is missing required field '{key}'")
    value = data[key]
    # bool is a subclass of int; an episode number of True is still garbage.
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise SchemaError(
            f"{entity} field '{key}' must be {kind.__name__}, got {type(value).__name__}"
        )
    return value


# -----------------------------------------------------------------------------
# Character — a person from /people/
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Character:
    """A Star Wars character as returned by /people/."""

    name: str
    height: str               # centimeters, as sent by SWAPI
    mass: str                 # kilograms
    hair_color: str
    skin_color: str
    eye_color: str
    birth_year: str           # e.g. "19BBY"
    gender: str
    homeworld: str            # URL of the planet resource
    films: tuple[str, ...] = field(default_factory=tuple)   # film URLs

    @classmethod
    def from_json(cls, data: dict) -> "Character":
        films = _require(data, "films", list, "Character")
        if not all(isinstance(url, str) for url in films):
            raise SchemaError("Character field 'films' must be a list of URLs")
        return cls(
            name=_require(data, "name", str, "Character"),
            height=_require(data, "height", str, "Character"),
            mass=_require(data, "mass", str, "Character"),
            hair_color=_require(data, "hair_color", str, "Character"),
            skin_color=_require(data, "skin_color", str, "Character"),
            eye_color=_require(data, "eye_color", str, "Character"),
            birth_year=_require(data, "birth_year", str, "Character"),
            gender=_require(data, "gender", str, "Character"),
            homeworld=_require(data, "homeworld", str, "Character"),
            films=tuple(films),
        )


# -----------------------------------------------------------------------------
# Planet — a planet from /planets/
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Planet:
    """A Star Wars planet as returned by /planets/."""

    name: str
    climate: str
    terrain: str
    population: str
    diameter: str             # kilometers
    rotation_period: str      # hours
    orbital_period: str       # days

    @classmethod
    def from_json(cls, data: dict) -> "Planet":
        return cls(
            name=_require(data, "name", str, "Planet"),
            climate=_require(data, "climate", str, "Planet"),
            terrain=_require(data, "terrain", str, "Planet"),
            population=_require(data, "population", str, "Planet"),
            diameter=_require(data, "diameter", str, "Planet"),
            rotation_period=_require(data, "rotation_period", str, "Planet"),
            orbital_period=_require(data, "orbital_period", str, "Planet"),
        )


# -----------------------------------------------------------------------------
# Film — a film from /films/
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Film:
    """A Star Wars film as returned by /films/."""

    title: str
    episode_id: int
    release_date: str         # ISO date, e.g. "1977-05-25"
    director: str
    producer: str             # comma-separated when there are several
    opening_crawl: str

    @classmethod
    def from_json(cls, data: dict) -> "Film":
        return cls(
            title=_require(data, "title", str, "Film"),
            episode_id=_require(data, "episode_id", int, "Film"),
            release_date=_require(data, "release_date", str, "Film"),
            director=_require(data, "director", str, "Film"),
            producer=_require(data, "producer", str, "Film"),
            opening_crawl=_require(data, "opening_crawl", str, "Film"),
        )


# -----------------------------------------------------------------------------
# SearchResult — one page of a list endpoint
# -----------------------------------------------------------------------------
# `count` is the upstream total across ALL pages; `results` is only the
# first page.  Formatters report len(results), never count, so the stated
# number always matches the blocks shown.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class SearchResult(Generic[T]):
    results: list[T]
    count: int

    @classmethod
    def from_json(cls, data: dict, parse_item: Callable[[dict], T]) -> "SearchResult[T]":
        raw_results = _require(data, "results", list, "Search response")
        return cls(
            results=[parse_item(item) for item in raw_results],
            count=_require(data, "count", int, "Search response"),
        )


# -----------------------------------------------------------------------------
# ToolResponse — the content envelope every tool operation returns
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ToolResponse:
    """One text block plus an error flag."""

    text: str
    is_error: bool = False
