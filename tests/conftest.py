"""Pytest configuration and shared fixtures.

The upstream SWAPI is replaced by an httpx.MockTransport serving a small,
fixed data set.  Films are deliberately listed out of episode order.
"""

import re

import httpx
import pytest

from core.config import Settings
from core.gateway import LookupGateway
from core.swapi_client import SwapiClient

BASE_URL = "https://swapi.test/api"

LUKE = {
    "name": "Luke Skywalker",
    "height": "172",
    "mass": "77",
    "hair_color": "blond",
    "skin_color": "fair",
    "eye_color": "blue",
    "birth_year": "19BBY",
    "gender": "male",
    "homeworld": f"{BASE_URL}/planets/1/",
    "films": [
        f"{BASE_URL}/films/1/",
        f"{BASE_URL}/films/2/",
        f"{BASE_URL}/films/3/",
        f"{BASE_URL}/films/6/",
        f"{BASE_URL}/films/7/",
    ],
    "url": f"{BASE_URL}/people/1/",
}

ANAKIN = {
    "name": "Anakin Skywalker",
    "height": "188",
    "mass": "84",
    "hair_color": "blond",
    "skin_color": "fair",
    "eye_color": "blue",
    "birth_year": "41.9BBY",
    "gender": "male",
    "homeworld": f"{BASE_URL}/planets/1/",
    "films": [f"{BASE_URL}/films/4/", f"{BASE_URL}/films/5/", f"{BASE_URL}/films/6/"],
    "url": f"{BASE_URL}/people/11/",
}

LEIA = {
    "name": "Leia Organa",
    "height": "150",
    "mass": "49",
    "hair_color": "brown",
    "skin_color": "light",
    "eye_color": "brown",
    "birth_year": "19BBY",
    "gender": "female",
    "homeworld": f"{BASE_URL}/planets/2/",
    "films": [f"{BASE_URL}/films/1/", f"{BASE_URL}/films/2/"],
    "url": f"{BASE_URL}/people/5/",
}

PEOPLE_BY_ID = {1: LUKE, 5: LEIA, 11: ANAKIN}

TATOOINE = {
    "name": "Tatooine",
    "rotation_period": "23",
    "orbital_period": "304",
    "diameter": "10465",
    "climate": "arid",
    "gravity": "1 standard",
    "terrain": "desert",
    "surface_water": "1",
    "population": "200000",
}

ALDERAAN = {
    "name": "Alderaan",
    "rotation_period": "24",
    "orbital_period": "364",
    "diameter": "12500",
    "climate": "temperate",
    "gravity": "1 standard",
    "terrain": "grasslands, mountains",
    "surface_water": "40",
    "population": "2000000000",
}

EMPIRE = {
    "title": "The Empire Strikes Back",
    "episode_id": 5,
    "opening_crawl": "It is a dark time for the Rebellion.",
    "director": "Irvin Kershner",
    "producer": "Gary Kurtz, Rick McCallum",
    "release_date": "1980-05-17",
}

NEW_HOPE = {
    "title": "A New Hope",
    "episode_id": 4,
    "opening_crawl": "It is a period of civil war.",
    "director": "George Lucas",
    "producer": "Gary Kurtz, Rick McCallum",
    "release_date": "1977-05-25",
}

PHANTOM = {
    "title": "The Phantom Menace",
    "episode_id": 1,
    "opening_crawl": "Turmoil has engulfed the Galactic Republic.",
    "director": "George Lucas",
    "producer": "Rick McCallum",
    "release_date": "1999-05-19",
}

PEOPLE = [LUKE, LEIA, ANAKIN]
PLANETS = [TATOOINE, ALDERAAN]
FILMS = [EMPIRE, NEW_HOPE, PHANTOM]


def page(results):
    """A SWAPI list response holding one page of results."""
    return {"count": len(results), "next": None, "previous": None, "results": results}


def _matching(items, key, search):
    if search is None:
        return list(items)
    return [item for item in items if search.lower() in item[key].lower()]


def swapi_handler(request: httpx.Request) -> httpx.Response:
    """Route a request to the fixture data the way SWAPI would."""
    path = request.url.path
    search = request.url.params.get("search")

    if path == "/api/people/":
        return httpx.Response(200, json=page(_matching(PEOPLE, "name", search)))
    if path == "/api/planets/":
        return httpx.Response(200, json=page(_matching(PLANETS, "name", search)))
    if path == "/api/films/":
        return httpx.Response(200, json=page(_matching(FILMS, "title", search)))

    match = re.fullmatch(r"/api/people/(\d+)/", path)
    if match and int(match.group(1)) in PEOPLE_BY_ID:
        return httpx.Response(200, json=PEOPLE_BY_ID[int(match.group(1))])

    return httpx.Response(404, json={"detail": "Not found"})


def timeout_handler(request: httpx.Request) -> httpx.Response:
    raise httpx.ReadTimeout("timed out", request=request)


def server_error_handler(request: httpx.Request) -> httpx.Response:
    return httpx.Response(503, text="Service Unavailable")


@pytest.fixture
def settings():
    return Settings(swapi_base_url=BASE_URL, request_timeout=10.0)


@pytest.fixture
def make_client(settings):
    """Factory: SwapiClient wired to a MockTransport with the given handler."""

    def _make(handler=swapi_handler):
        return SwapiClient(settings, transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture
def client(make_client):
    return make_client()


@pytest.fixture
def gateway(client):
    return LookupGateway(client)
