import os

import pytest
from conftest import FakeRegistrar
from rdflib import URIRef
from rdflib.namespace import FOAF

from pod_populate.errors import SourceDirectoryError
from pod_populate.rdf import read_profile
from pod_populate.runner import Populator
from pod_populate.vocab import VCARD


def _profile(settings, account):
    return read_profile(settings.profile_path(account), settings.profile_document_uri(account))


def _me(settings, account):
    return URIRef(settings.profile_uri(account))


@pytest.mark.asyncio
async def test_ldbc_run_links_only_known_friends(settings, registrar, write_person, generated_root):
    write_person("pers1", first_name="Ann", last_name="Lee", pid=1, friends=["pers2"])
    write_person("pers2", first_name="Bob", last_name="Ray", pid=2)
    write_person("pers3", first_name="Cat", last_name="Kim", pid=3)

    report = await Populator(settings, registrar).run_ldbc(generated_root)

    assert [o.account for o in report.outcomes] == ["user0", "user1", "user2"]
    g = _profile(settings, "user0")
    assert list(g.objects(_me(settings, "user0"), FOAF.knows)) == [_me(settings, "user1")]
    assert not any("user2" in str(term) for triple in g for term in triple)
    assert [str(o) for o in g.objects(_me(settings, "user0"), VCARD.fn)] == ["Ann Lee"]
    assert os.path.exists(os.path.join(settings.pod_dir("user0"), "person.nq.acl"))


@pytest.mark.asyncio
async def test_unknown_friend_skips_only_that_edge(settings, registrar, write_person, generated_root):
    write_person("pers1", first_name="Ann", last_name="Lee", pid=1, friends=["pers2", "pers9"])
    write_person("pers2", first_name="Bob", last_name="Ray", pid=2)

    report = await Populator(settings, registrar).run_ldbc(generated_root)

    outcome = report.outcomes[0]
    assert outcome.merged and outcome.friends_added == 1
    assert any("pers9" in e for e in outcome.errors)
    assert report.outcomes[1].merged


@pytest.mark.asyncio
async def test_incomplete_person_leaves_profile_untouched(
    settings, make_pod, write_person, generated_root
):
    write_person("pers1", first_name="Ann", pid=1)
    write_person("pers2", first_name="Bob", last_name="Ray", pid=2)
    path = make_pod("user0")
    before = open(path, "rb").read()

    class KeepExisting(FakeRegistrar):
        async def register(self, account):
            if account == "user0":
                return True
            return await super().register(account)

    report = await Populator(settings, KeepExisting(make_pod)).run_ldbc(generated_root)

    assert open(path, "rb").read() == before
    assert not report.outcomes[0].merged
    assert report.outcomes[1].merged


@pytest.mark.asyncio
async def test_failed_pod_creation_does_not_stop_run(settings, make_pod, write_person, generated_root):
    write_person("pers1", first_name="Ann", last_name="Lee", pid=1)
    write_person("pers2", first_name="Bob", last_name="Ray", pid=2)

    report = await Populator(settings, FakeRegistrar(make_pod, fail={"user0"})).run_ldbc(
        generated_root
    )

    assert not report.outcomes[0].created
    assert report.outcomes[1].merged


@pytest.mark.asyncio
async def test_ldbc_run_without_source_dir_is_fatal(settings, registrar, tmp_path):
    with pytest.raises(SourceDirectoryError):
        await Populator(settings, registrar).run_ldbc(str(tmp_path / "missing"))
    assert registrar.registered == []


@pytest.mark.asyncio
async def test_full_mesh(settings, registrar):
    n = 4

    report = await Populator(settings, registrar).run_full(n)

    assert len(report.outcomes) == n
    for i in range(n):
        account = settings.account_name(i)
        knows = set(_profile(settings, account).objects(_me(settings, account), FOAF.knows))
        assert len(list(_profile(settings, account).objects(_me(settings, account), FOAF.knows))) == n - 1
        assert _me(settings, account) not in knows
        assert knows == {_me(settings, settings.account_name(j)) for j in range(n) if j != i}


@pytest.mark.asyncio
async def test_full_mesh_with_ldbc_names_and_extras(
    settings, registrar, write_person, generated_root, tmp_path
):
    write_person("pers1", first_name="Ann", last_name="Lee", pid=1, friends=["pers2"])
    write_person("pers2", first_name="Bob", last_name="Ray", pid=2)
    write_person("pers3", first_name="Cat", last_name="Kim", pid=3)
    extra = tmp_path / "extra"
    (extra / "user1").mkdir(parents=True)
    (extra / "user1" / "hello.txt").write_text("hi")

    report = await Populator(settings, registrar).run_full(
        2, generated_root=generated_root, extra_root=str(extra)
    )

    assert [o.account for o in report.outcomes] == ["user0", "user1"]
    g = _profile(settings, "user1")
    assert [str(o) for o in g.objects(_me(settings, "user1"), VCARD.fn)] == ["Bob Ray"]
    assert list(g.objects(_me(settings, "user1"), FOAF.knows)) == [_me(settings, "user0")]
    assert os.path.exists(os.path.join(settings.pod_dir("user1"), "hello.txt.acl"))
    assert not os.path.exists(settings.pod_dir("user2"))
