from __future__ import annotations

import logging
from collections.abc import Iterable

from rdflib import URIRef

from .correlation import CorrelationTable
from .errors import UnresolvedFriendError
from .models import FriendMode
from .settings import PopulateSettings

logger = logging.getLogger(__name__)


def _is_absolute(ref: str) -> bool:
    return "://" in ref


def resolve_friend(
    ref: str,
    mode: FriendMode,
    settings: PopulateSettings,
    table: CorrelationTable | None = None,
) -> URIRef:
    """Map a friend reference onto a WebID in the target pod namespace.

    LDBC references are source URIs whose last path segment is a person id.
    Synthetic references are account names, or WebIDs kept verbatim.
    """
    if mode is FriendMode.LDBC:
        if table is None:
            raise UnresolvedFriendError(ref, "no correlation table")
        source_id = ref.rstrip("/").rsplit("/", 1)[-1]
        account = table.account_for(source_id)
        if account is None:
            raise UnresolvedFriendError(ref, f"person {source_id} has no account")
        return URIRef(settings.profile_uri(account))

    if _is_absolute(ref):
        return URIRef(ref)
    if not ref:
        raise UnresolvedFriendError(ref, "empty account name")
    return URIRef(settings.profile_uri(ref))


def resolve_friends(
    refs: Iterable[str],
    mode: FriendMode,
    settings: PopulateSettings,
    table: CorrelationTable | None = None,
) -> tuple[list[URIRef], list[str]]:
    """Resolve every reference; unresolvable ones are logged and returned apart."""
    resolved: list[URIRef] = []
    skipped: list[str] = []
    for ref in refs:
        try:
            resolved.append(resolve_friend(ref, mode, settings, table))
        except UnresolvedFriendError as e:
            logger.error(str(e))
            skipped.append(ref)
    return resolved, skipped
