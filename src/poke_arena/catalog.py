"""
Creature catalog with an in-memory cache

The catalog serves the full list of creatures to pick teams from. Reads go through a
cache that expires after ``cache_seconds``; on a miss the repository is read and, if
it turns out to be empty, seeded first from the seed loader (for example a Pokedex
JSON file).
"""

import json
import logging
import time
from pathlib import Path
from typing import Callable, Iterable, Protocol

import requests
from pydantic import TypeAdapter

from src.poke_arena.config import BattleConfig
from src.poke_arena.constants import CATALOG_CACHE_SECONDS, POKEDEX_URL
from src.poke_arena.errors import CatalogSeedError, CreatureNotFoundError
from src.poke_arena.schema.creature import Creature

logger = logging.getLogger(__name__)

_CREATURE_LIST = TypeAdapter(list[Creature])


class CreatureRepository(Protocol):
    def count(self) -> int: ...

    def insert_many(self, creatures: Iterable[Creature]) -> None: ...

    def find_all(self) -> list[Creature]: ...


class InMemoryCreatureRepository:
    """Repository keyed by creature id; inserting an existing id replaces it"""

    def __init__(self, creatures: Iterable[Creature] = ()):
        self._creatures: dict[int, Creature] = {}
        self.insert_many(creatures)

    def count(self) -> int:
        return len(self._creatures)

    def insert_many(self, creatures: Iterable[Creature]) -> None:
        for creature in creatures:
            self._creatures[creature.id] = creature

    def find_all(self) -> list[Creature]:
        return sorted(self._creatures.values(), key=lambda creature: creature.id)


def parse_pokedex(document: dict) -> list[Creature]:
    """Validate a Pokedex document of the form {"pokemon": [...]}"""
    return _CREATURE_LIST.validate_python(document.get("pokemon", []))


def load_pokedex_file(path: str | Path) -> list[Creature]:
    with Path(path).open(encoding="utf-8") as handle:
        return parse_pokedex(json.load(handle))


def fetch_pokedex(url: str = POKEDEX_URL, timeout: float = 10.0) -> list[Creature]:
    """Download and validate a Pokedex document. Raises CatalogSeedError on a non-2xx response."""
    logger.info("Fetching Pokedex from %s", url)
    response = requests.get(url, timeout=timeout)
    if not response.ok:
        raise CatalogSeedError(f"Failed to fetch external Pokémon data ({response.status_code}): {response.text}")
    return parse_pokedex(response.json())


class CreatureCatalog:
    def __init__(
        self,
        repository: CreatureRepository,
        seed_loader: Callable[[], list[Creature]] | None = None,
        cache_seconds: float = CATALOG_CACHE_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.repository = repository
        self.seed_loader = seed_loader
        self.cache_seconds = cache_seconds
        self._clock = clock
        self._cached: list[Creature] | None = None
        self._fetched_at = 0.0

    @classmethod
    def from_config(cls, repository: CreatureRepository, config: BattleConfig, seed_loader: Callable[[], list[Creature]] | None = None) -> "CreatureCatalog":
        return cls(repository, seed_loader=seed_loader, cache_seconds=config.catalog_cache_seconds)

    def get_all(self) -> list[Creature]:
        if self._cached is not None and self._clock() - self._fetched_at < self.cache_seconds:
            logger.debug("Serving %d creatures from cache", len(self._cached))
            return list(self._cached)

        if self.repository.count() == 0:
            self._seed()

        self._cached = self.repository.find_all()
        self._fetched_at = self._clock()
        return list(self._cached)

    def get(self, creature_id: int) -> Creature:
        for creature in self.get_all():
            if creature.id == creature_id:
                return creature
        raise CreatureNotFoundError(creature_id)

    def invalidate(self) -> None:
        self._cached = None

    def _seed(self) -> None:
        if self.seed_loader is None:
            raise CatalogSeedError("Catalog is empty and no seed source is configured")

        logger.info("No creatures in the catalog. Seeding from external source.")
        creatures = self.seed_loader()
        if not creatures:
            raise CatalogSeedError("Seed source returned no creatures")

        self.repository.insert_many(creatures)
        logger.info("Seeded %d creatures into the catalog.", len(creatures))
