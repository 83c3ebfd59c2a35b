from __future__ import annotations

import logging
from collections.abc import Iterable

from rdflib import Graph, Literal, URIRef

from .errors import ProfileError
from .models import MergeResult, PersonRecord
from .rdf import read_profile, write_profile
from .settings import PopulateSettings
from .vocab import FOAF, VCARD

logger = logging.getLogger(__name__)


class ProfileMerger:
    """Adds names and friend edges to WebID profiles on disk.

    Merges only ever add statements. Nothing already in the profile is
    removed; an earlier name stays next to a new one.
    """

    def __init__(self, settings: PopulateSettings):
        self.settings = settings

    def load(self, account: str) -> Graph:
        path = self.settings.profile_path(account)
        try:
            return read_profile(path, self.settings.profile_document_uri(account))
        except Exception as e:
            raise ProfileError(account, path, f"unreadable ({e})") from e

    def save(self, account: str, graph: Graph) -> None:
        path = self.settings.profile_path(account)
        try:
            write_profile(graph, path, URIRef(self.settings.profile_uri(account)))
        except Exception as e:
            raise ProfileError(account, path, f"unwritable ({e})") from e

    def add_name(self, graph: Graph, account: str, person: PersonRecord) -> None:
        me = URIRef(self.settings.profile_uri(account))
        graph.add((me, VCARD.fn, Literal(person.full_name)))

    def add_friends(self, graph: Graph, account: str, friends: Iterable[URIRef]) -> int:
        me = URIRef(self.settings.profile_uri(account))
        added = 0
        for friend in friends:
            graph.add((me, FOAF.knows, friend))
            added += 1
        return added

    def merge(
        self,
        account: str,
        person: PersonRecord | None = None,
        friends: Iterable[URIRef] = (),
    ) -> MergeResult:
        """Load, augment and rewrite the profile of ``account``.

        Failures are logged and returned in the result, never raised.
        """
        result = MergeResult(account=account)
        try:
            graph = self.load(account)
            if person is not None:
                self.add_name(graph, account, person)
                result.name_added = True
            result.friends_added = self.add_friends(graph, account, friends)
            self.save(account, graph)
        except ProfileError as e:
            logger.error(str(e))
            result.error = str(e)
            return result
        result.ok = True
        logger.debug(f"Merged profile of {account}: {result.friends_added} friends")
        return result
