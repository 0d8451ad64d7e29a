"""Client for the location-area and pokemon endpoints of the Pokémon API."""

from __future__ import annotations

import json
import urllib.error
import urllib.request
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .pokecache import Cache

_TIMEOUT = 30.0


class PokeAPIError(Exception):
    """Raised when a request fails or its response cannot be decoded."""


def _mapping(data: Any, what: str) -> Mapping[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise PokeAPIError(f"expected a JSON object for {what}")
    return data


def _int(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    return int(value) if value is not None else 0


def _str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    return str(value) if value is not None else ""


def _list(data: Mapping[str, Any], key: str) -> list[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise PokeAPIError(f"expected a JSON array for {key}")
    return value


@dataclass(frozen=True)
class NamedResource:
    """A name together with the URL of the resource it names."""

    name: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> NamedResource:
        data = _mapping(data, "named resource")
        return cls(name=_str(data, "name"), url=_str(data, "url"))


@dataclass(frozen=True)
class LocationAreas:
    """One page of location areas."""

    count: int = 0
    next: str | None = None
    previous: str | None = None
    results: tuple[NamedResource, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> LocationAreas:
        data = _mapping(data, "location areas")
        return cls(
            count=_int(data, "count"),
            next=data.get("next"),
            previous=data.get("previous"),
            results=tuple(NamedResource.from_dict(r) for r in _list(data, "results")),
        )


@dataclass(frozen=True)
class LocationData:
    """A single location area and the pokemon that can be met there."""

    id: int = 0
    name: str = ""
    game_index: int = 0
    location: NamedResource = field(default_factory=NamedResource)
    pokemon_encounters: tuple[NamedResource, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> LocationData:
        data = _mapping(data, "location data")
        encounters = tuple(
            NamedResource.from_dict(_mapping(e, "encounter").get("pokemon"))
            for e in _list(data, "pokemon_encounters")
        )
        return cls(
            id=_int(data, "id"),
            name=_str(data, "name"),
            game_index=_int(data, "game_index"),
            location=NamedResource.from_dict(data.get("location")),
            pokemon_encounters=encounters,
        )


@dataclass(frozen=True)
class PokemonStat:
    """A base stat of a pokemon."""

    name: str = ""
    base_stat: int = 0
    effort: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> PokemonStat:
        data = _mapping(data, "stat")
        return cls(
            name=NamedResource.from_dict(data.get("stat")).name,
            base_stat=_int(data, "base_stat"),
            effort=_int(data, "effort"),
        )


@dataclass(frozen=True)
class PokemonData:
    """The details of one pokemon."""

    id: int = 0
    name: str = ""
    base_experience: int = 0
    height: int = 0
    weight: int = 0
    stats: tuple[PokemonStat, ...] = ()
    types: tuple[NamedResource, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> PokemonData:
        data = _mapping(data, "pokemon")
        return cls(
            id=_int(data, "id"),
            name=_str(data, "name"),
            base_experience=_int(data, "base_experience"),
            height=_int(data, "height"),
            weight=_int(data, "weight"),
            stats=tuple(PokemonStat.from_dict(s) for s in _list(data, "stats")),
            types=tuple(
                NamedResource.from_dict(_mapping(t, "type").get("type"))
                for t in _list(data, "types")
            ),
        )


def _download(url: str) -> bytes:
    try:
        with urllib.request.urlopen(url, timeout=_TIMEOUT) as response:
            body = response.read()
            status = response.status
    except urllib.error.HTTPError as exc:
        raise PokeAPIError("Response failed") from exc
    except (urllib.error.URLError, OSError) as exc:
        raise PokeAPIError(str(exc)) from exc
    if status > 299:
        raise PokeAPIError("Response failed")
    return body


def fetch_json(url: str, cache: Cache) -> Any:
    """Return the decoded JSON at ``url``, consulting and filling ``cache``."""
    body = cache.get(url)
    if body is None:
        body = _download(url)
        cache.add(url, body)
    try:
        return json.loads(body)
    except ValueError as exc:
        raise PokeAPIError(f"invalid JSON from {url}") from exc


def get_location_areas(url: str, cache: Cache) -> LocationAreas:
    """Fetch a page of location areas."""
    return LocationAreas.from_dict(fetch_json(url, cache))


def get_location_data(url: str, cache: Cache) -> LocationData:
    """Fetch the details of one location area."""
    return LocationData.from_dict(fetch_json(url, cache))


def get_pokemon_data(url: str, cache: Cache) -> PokemonData:
    """Fetch the details of one pokemon."""
    return PokemonData.from_dict(fetch_json(url, cache))