"""rdflib glue: load person fragments and profiles, write profiles back."""

from __future__ import annotations

import logging

from rdflib import Dataset, Graph, URIRef
from rdflib.graph import DATASET_DEFAULT_GRAPH_ID

from .vocab import PROFILE_PREFIXES

logger = logging.getLogger(__name__)

# Subjects that stand for "this document" rather than a real resource.
_PLACEHOLDER_SUBJECTS = frozenset({URIRef(""), DATASET_DEFAULT_GRAPH_ID})


def read_source_graph(path: str) -> Dataset:
    """Parse an LDBC N-Quads person file; lookups span all of its graphs."""
    ds = Dataset(default_union=True)
    ds.parse(path, format="nquads")
    return ds


def read_profile(path: str, document_uri: str) -> Graph:
    """Parse a Turtle profile, resolving relative IRIs against ``document_uri``."""
    g = Graph(bind_namespaces="core")
    g.parse(path, format="turtle", publicID=document_uri)
    return g


def anchor_default_subjects(graph: Graph, subject: URIRef) -> int:
    """Rewrite statements whose subject is a placeholder to ``subject``.

    Returns the number of statements rewritten.
    """
    stale = [t for t in graph if t[0] in _PLACEHOLDER_SUBJECTS]
    for s, p, o in stale:
        graph.remove((s, p, o))
        graph.add((subject, p, o))
    if stale:
        logger.debug(f"Anchored {len(stale)} placeholder statements to {subject}")
    return len(stale)


def write_profile(graph: Graph, path: str, subject: URIRef) -> None:
    """Serialise ``graph`` as Turtle over ``path``."""
    anchor_default_subjects(graph, subject)
    for prefix, ns in PROFILE_PREFIXES.items():
        graph.bind(prefix, ns, override=True, replace=True)
    data = graph.serialize(format="turtle")
    with open(path, "w", encoding="utf-8") as f:
        f.write(data)
