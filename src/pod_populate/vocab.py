from __future__ import annotations

from rdflib import Namespace
from rdflib.namespace import FOAF

SOLID = Namespace("http://www.w3.org/ns/solid/terms#")
VCARD = Namespace("http://www.w3.org/2006/vcard/ns#")

# Prefixes declared in every profile we write back.
PROFILE_PREFIXES = {
    "foaf": FOAF,
    "solid": SOLID,
    "vcard": VCARD,
}

__all__ = ["FOAF", "PROFILE_PREFIXES", "SOLID", "VCARD"]
