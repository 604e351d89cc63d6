from pathlib import Path


def test_config_home_defaults_to_dot_folder(monkeypatch):
    from cliconf.paths import config_home, default_config_path

    monkeypatch.delenv("CLICONF_HOME", raising=False)
    assert config_home() == Path.home() / ".cliconf"
    assert default_config_path() == Path.home() / ".cliconf" / "config.json"


def test_config_home_env_override(monkeypatch, tmp_path: Path):
    from cliconf.paths import config_home

    monkeypatch.setenv("CLICONF_HOME", str(tmp_path))
    assert config_home() == tmp_path

    monkeypatch.setenv("CLICONF_HOME", "   ")
    assert config_home() == Path.home() / ".cliconf"

