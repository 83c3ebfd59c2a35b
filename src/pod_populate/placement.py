"""Static pod content: the LDBC person file and per-account extras, each with an ACL."""

from __future__ import annotations

import logging
import os
import shutil

from .settings import PopulateSettings

logger = logging.getLogger(__name__)

PERSON_FILE_NAME = "person.nq"

_ACL_TEMPLATE = """@prefix acl: <http://www.w3.org/ns/auth/acl#>.
@prefix foaf: <http://xmlns.com/foaf/0.1/>.

<#public>
    a acl:Authorization;
    acl:accessTo <{resource}>;
    acl:agentClass foaf:Agent;
    acl:mode acl:Read.

<#owner>
    a acl:Authorization;
    acl:accessTo <{resource}>;{default}
    acl:agent <{owner}>;
    acl:mode acl:Read, acl:Write, acl:Control.
"""


def acl_document(resource: str, owner: str, *, container: bool = False) -> str:
    """Public read plus owner read/write/control on ``resource``.

    Containers also pass the owner grant down to their members.
    """
    default = f"\n    acl:default <{resource}>;" if container else ""
    return _ACL_TEMPLATE.format(resource=resource, owner=owner, default=default)


def _write(path: str, text: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)


def copy_person_file(settings: PopulateSettings, account: str, source_path: str) -> str:
    """Copy an LDBC person file into the pod as ``person.nq`` with its ACL."""
    target = os.path.join(settings.pod_dir(account), PERSON_FILE_NAME)
    shutil.copyfile(source_path, target)
    logger.info(f"   cp {source_path} {target}")

    acl_path = f"{target}.acl"
    _write(acl_path, acl_document(f"./{PERSON_FILE_NAME}", settings.profile_uri(account)))
    logger.info(f"   created {acl_path}")
    return target


def put_extra_content(settings: PopulateSettings, account: str, extra_root: str) -> list[str]:
    """Copy ``{extra_root}/{account}/*`` into the pod, one ACL per top-level entry.

    Returns the copied target paths.
    """
    base = os.path.join(extra_root, account)
    if not os.path.isdir(base):
        logger.warning(f"No extra content for {account} at {base}")
        return []

    pod_dir = settings.pod_dir(account)
    owner = settings.profile_uri(account)
    copied: list[str] = []
    for name in sorted(os.listdir(base)):
        source = os.path.join(base, name)
        target = os.path.join(pod_dir, name)
        if os.path.isdir(source):
            shutil.copytree(source, target, dirs_exist_ok=True)
            _write(os.path.join(target, ".acl"), acl_document("./", owner, container=True))
        else:
            shutil.copyfile(source, target)
            _write(f"{target}.acl", acl_document(f"./{name}", owner))
        copied.append(target)
    return copied
