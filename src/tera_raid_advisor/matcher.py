"""
Autocomplete over the bundled creature list with hiragana/katakana bridging.
"""

import logging
import re
from functools import lru_cache
from pathlib import Path
from typing import Iterator

import yaml

from .models import ReferenceEntity

logger = logging.getLogger("tera-raid-advisor")

DEFAULT_DATASET = Path(__file__).parent / "data" / "pokemon_master.yaml"
DEFAULT_SUGGESTION_LIMIT = 5

# Hiragana ぁ..ん and katakana ァ..ン share layout, 0x60 code points apart
_HIRAGANA = re.compile(r"[ぁ-ん]")
_KANA_OFFSET = 0x60


def to_katakana(text: str) -> str:
    """Shift every hiragana character in ``text`` to its katakana twin.

    Other characters pass through untouched.

    Example:
        >>> to_katakana("ぴかちゅう")
        'ピカチュウ'
        >>> to_katakana("ピカ1")
        'ピカ1'
    """
    if not text:
        return ""
    return _HIRAGANA.sub(lambda m: chr(ord(m.group(0)) + _KANA_OFFSET), text)


class ReferenceTable:
    """Read-only, ordered table of reference creatures.

    Entries keep the order they have in the source file; that order is the
    only ranking ``suggest`` applies.

    Example:
        >>> table = ReferenceTable.from_yaml(Path("pokemon_master.yaml"))
        >>> [e.name for e in table.suggest("ぴか")]
        ['ピカチュウ']
    """

    def __init__(self, entities: list[ReferenceEntity] | tuple[ReferenceEntity, ...] = ()) -> None:
        self._entities: tuple[ReferenceEntity, ...] = tuple(entities)
        self._by_name: dict[str, ReferenceEntity] = {}
        for entity in self._entities:
            self._by_name.setdefault(entity.name, entity)

    @classmethod
    def from_yaml(cls, path: Path) -> "ReferenceTable":
        """Load a table from a YAML file.

        Expected YAML format:
            pokemon:
              - name: ピカチュウ
                national_dex: 25

        Raises:
            FileNotFoundError: If the YAML file doesn't exist
            yaml.YAMLError: If the YAML is malformed
            ValueError: If the ``pokemon`` key is missing
        """
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if not data or "pokemon" not in data:
            raise ValueError("YAML file must contain a 'pokemon' key")

        entities = [ReferenceEntity(**entry) for entry in data["pokemon"]]
        logger.debug(f"📚 Loaded {len(entities)} reference entries from {path}")
        return cls(entities)

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self) -> Iterator[ReferenceEntity]:
        return iter(self._entities)

    def get(self, name: str) -> ReferenceEntity | None:
        """Exact-name lookup."""
        return self._by_name.get(name)

    def suggest(self, partial_input: str, limit: int = DEFAULT_SUGGESTION_LIMIT) -> list[ReferenceEntity]:
        """Return up to ``limit`` entries whose name contains the input.

        The input matches either as typed or after hiragana→katakana shifting,
        so "ぴか" finds "ピカチュウ". Results follow table order.

        Args:
            partial_input: Text typed so far
            limit: Maximum number of suggestions

        Returns:
            Matching entries, empty for empty input
        """
        if not partial_input:
            return []

        shifted = to_katakana(partial_input)
        matches: list[ReferenceEntity] = []
        for entity in self._entities:
            if shifted in entity.name or partial_input in entity.name:
                matches.append(entity)
                if len(matches) >= limit:
                    break
        return matches


@lru_cache(maxsize=None)
def _load_cached(path: Path) -> ReferenceTable:
    return ReferenceTable.from_yaml(path)


def load_reference_table(path: Path | None = None) -> ReferenceTable:
    """Load a dataset once per process and share it; the bundled one by default."""
    return _load_cached(Path(path or DEFAULT_DATASET).resolve())


def suggest(partial_input: str, limit: int = DEFAULT_SUGGESTION_LIMIT) -> list[ReferenceEntity]:
    """Autocomplete against the bundled dataset."""
    return load_reference_table().suggest(partial_input, limit=limit)
