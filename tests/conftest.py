import os

import pytest

from pod_populate.settings import PopulateSettings

BASE_URL = "http://localhost:3000/"
LDBC = "http://localhost:3000/www.ldbc.eu/ldbc_socialnet/1.0"
XSD_LONG = "http://www.w3.org/2001/XMLSchema#long"

PROFILE_TEMPLATE = """@prefix foaf: <http://xmlns.com/foaf/0.1/>.
@prefix solid: <http://www.w3.org/ns/solid/terms#>.

<>
    a foaf:PersonalProfileDocument;
    foaf:maker <#me>;
    foaf:primaryTopic <#me>.

<#me>
    solid:oidcIssuer <{base}>;
    a foaf:Person.
"""


def person_nquads(source_id, first_name=None, last_name=None, pid=None, friends=(), dangling=()):
    """N-Quads for one LDBC person; ``friends`` are source ids reached via knows/hasPerson."""
    s = f"<{LDBC}/data/{source_id}>"
    g = s
    lines = []
    if pid is not None:
        lines.append(f'{s} <{LDBC}/vocabulary/id> "{pid}"^^<{XSD_LONG}> {g} .')
    if first_name is not None:
        lines.append(f'{s} <{LDBC}/vocabulary/firstName> "{first_name}" {g} .')
    if last_name is not None:
        lines.append(f'{s} <{LDBC}/vocabulary/lastName> "{last_name}" {g} .')
    for i, friend in enumerate(friends):
        node = f"_:k{source_id}x{i}"
        lines.append(f"{s} <{LDBC}/vocabulary/knows> {node} {g} .")
        lines.append(f"{node} <{LDBC}/vocabulary/hasPerson> <{LDBC}/data/{friend}> {g} .")
    for i in range(len(dangling)):
        lines.append(f"{s} <{LDBC}/vocabulary/knows> _:d{source_id}x{i} {g} .")
    return "\n".join(lines) + "\n"


@pytest.fixture
def settings(tmp_path):
    return PopulateSettings(base_url=BASE_URL, data_dir=str(tmp_path / "css"))


@pytest.fixture
def generated_root(tmp_path, settings):
    root = tmp_path / "generated"
    os.makedirs(settings.source_data_dir(str(root)))
    return str(root)


@pytest.fixture
def source_dir(settings, generated_root):
    return settings.source_data_dir(generated_root)


@pytest.fixture
def write_person(source_dir):
    def _write(source_id, **kwargs):
        path = os.path.join(source_dir, f"{source_id}.nq")
        with open(path, "w", encoding="utf-8") as f:
            f.write(person_nquads(source_id, **kwargs))
        return path

    return _write


@pytest.fixture
def make_pod(settings):
    """Create the pod directory and a fresh WebID profile, like CSS registration does."""

    def _make(account):
        path = settings.profile_path(account)
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(PROFILE_TEMPLATE.format(base=BASE_URL))
        return path

    return _make


class FakeRegistrar:
    """Stands in for the pod server: registering an account creates its pod."""

    def __init__(self, make_pod, fail=()):
        self.make_pod = make_pod
        self.fail = set(fail)
        self.registered = []

    async def register(self, account):
        self.registered.append(account)
        if account in self.fail:
            return False
        self.make_pod(account)
        return True


@pytest.fixture
def registrar(make_pod):
    return FakeRegistrar(make_pod)
