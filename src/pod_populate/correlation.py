from __future__ import annotations

import logging
import os
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .errors import SourceDirectoryError
from .settings import PopulateSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CorrelationEntry:
    source_id: str
    account: str
    source_file: str


class CorrelationTable(Mapping[str, CorrelationEntry]):
    """Read-only mapping from LDBC person id to the pod account seeded with it.

    Iteration follows account numbering (``user0``, ``user1``, ...).
    """

    def __init__(self, entries: list[CorrelationEntry]):
        by_id: dict[str, CorrelationEntry] = {}
        for entry in entries:
            if entry.source_id in by_id:
                raise ValueError(f"duplicate source id {entry.source_id}")
            by_id[entry.source_id] = entry
        self._entries = MappingProxyType(by_id)

    def __getitem__(self, source_id: str) -> CorrelationEntry:
        return self._entries[source_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def account_for(self, source_id: str) -> str | None:
        entry = self._entries.get(source_id)
        return entry.account if entry else None

    def accounts(self) -> list[str]:
        return [e.account for e in self._entries.values()]


def build_correlation_table(source_dir: str, settings: PopulateSettings) -> CorrelationTable:
    """Scan ``source_dir`` for person files and number them as accounts.

    File names are sorted before numbering so the same dataset always yields
    the same person -> account mapping.
    """
    try:
        names = os.listdir(source_dir)
    except OSError as e:
        raise SourceDirectoryError(f"cannot list source data dir {source_dir}: {e}") from e

    person_files = sorted(n for n in names if settings.is_person_file(n))
    suffix_len = len(settings.person_file_suffix)

    entries = [
        CorrelationEntry(
            source_id=name[:-suffix_len] if suffix_len else name,
            account=settings.account_name(index),
            source_file=name,
        )
        for index, name in enumerate(person_files)
    ]
    logger.info(f"Correlated {len(entries)} persons from {source_dir}")
    return CorrelationTable(entries)
