from __future__ import annotations

import logging

from rdflib import Dataset, URIRef

from .models import PersonRecord
from .rdf import read_source_graph
from .settings import PopulateSettings

logger = logging.getLogger(__name__)


def _one(store: Dataset, subject: URIRef, predicate: URIRef, label: str) -> str | None:
    """Single literal value of ``predicate`` on ``subject``.

    When a person carries several values the lexically smallest wins, so
    repeated runs over the same file agree.
    """
    values = sorted({str(o) for o in store.objects(subject, predicate)})
    if not values:
        return None
    if len(values) > 1:
        logger.warning(f"Person {subject} has {len(values)} {label}s, keeping {values[0]!r}")
    return values[0]


def extract_person(
    store: Dataset, source_id: str, settings: PopulateSettings
) -> PersonRecord | None:
    """Identity facts of ``source_id``, or None when any of them is missing.

    Example of the statements read::

        <.../data/pers65> <.../vocabulary/id> "65"^^xsd:long .
        <.../data/pers65> <.../vocabulary/firstName> "Marc" .
        <.../data/pers65> <.../vocabulary/lastName> "Ravalomanana" .
    """
    person = URIRef(settings.ldbc_person_uri(source_id))
    pid = _one(store, person, URIRef(settings.ldbc_vocab("id")), "id")
    first_name = _one(store, person, URIRef(settings.ldbc_vocab("firstName")), "firstName")
    last_name = _one(store, person, URIRef(settings.ldbc_vocab("lastName")), "lastName")

    if not pid or not first_name or not last_name:
        logger.info(f"Skipping {source_id}: incomplete identity (id, firstName, lastName)")
        return None
    return PersonRecord(id=pid, first_name=first_name, last_name=last_name)


def extract_friends(store: Dataset, source_id: str, settings: PopulateSettings) -> list[str]:
    """Friend URIs of ``source_id`` in the source dataset.

    Each ``knows`` edge points at an intermediate node whose ``hasPerson``
    names the friend.
    """
    person = URIRef(settings.ldbc_person_uri(source_id))
    knows = URIRef(settings.ldbc_vocab("knows"))
    has_person = URIRef(settings.ldbc_vocab("hasPerson"))

    friends: list[str] = []
    for node in sorted(set(store.objects(person, knows))):
        found = sorted({str(o) for o in store.objects(node, has_person)})
        if not found:
            logger.warning(f"Friend node {node} of {source_id} has no hasPerson link")
            continue
        friends.extend(found)
    return friends


def read_person(
    path: str, source_id: str, settings: PopulateSettings
) -> tuple[PersonRecord, list[str]] | None:
    """Load one person file and pull identity plus friends out of it."""
    store = read_source_graph(path)
    person = extract_person(store, source_id, settings)
    if person is None:
        return None
    return person, extract_friends(store, source_id, settings)
