from click.testing import CliRunner
from conftest import FakeRegistrar

from pod_populate import cli as cli_module


def _fake_registrar(make_pod):
    class _Registrar(FakeRegistrar):
        def __init__(self, settings):
            super().__init__(make_pod)

        async def __aenter__(self):
            return self

        async def __aexit__(self, *exc):
            return None

    return _Registrar


def test_full_command_prints_report(monkeypatch, settings, make_pod):
    monkeypatch.setattr(cli_module, "PodRegistrar", _fake_registrar(make_pod))

    result = CliRunner().invoke(
        cli_module.cli, ["-u", settings.base_url, "-d", settings.data_dir, "full", "-n", "3"]
    )

    assert result.exit_code == 0, result.output
    assert "3/3 profiles merged" in result.output


def test_ldbc_command_fails_on_missing_source_dir(monkeypatch, settings, make_pod, tmp_path):
    monkeypatch.setattr(cli_module, "PodRegistrar", _fake_registrar(make_pod))

    result = CliRunner().invoke(
        cli_module.cli,
        ["-u", settings.base_url, "-d", settings.data_dir, "ldbc", "-g", str(tmp_path / "none")],
    )

    assert result.exit_code == 1


def test_generated_is_required_for_ldbc(settings):
    result = CliRunner().invoke(cli_module.cli, ["-u", settings.base_url, "-d", settings.data_dir, "ldbc"])

    assert result.exit_code == 2
