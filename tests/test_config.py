import pytest

from platform_identity.config import Config, build_store, get_default_config_path, load_config
from platform_identity.exceptions import ConfigurationError


def test_defaults_without_file():
    config = load_config(None)
    assert config == Config()
    assert config.store.include_runtime
    assert config.store.environment_prefix is None
    assert config.logging.level == "WARNING"


def test_missing_file_keeps_defaults(tmp_path):
    assert load_config(str(tmp_path / "absent.yaml")) == Config()


def test_load_yaml(tmp_path):
    path = tmp_path / "platform_identity.yaml"
    path.write_text(
        "store:\n"
        "  include_runtime: false\n"
        "  environment_prefix: PID_\n"
        "  overrides:\n"
        "    os.name: Windows 10\n"
        "    arch.data.model: 32\n"
        "    headless: true\n"
        "logging:\n"
        "  level: DEBUG\n"
        "  verbose: true\n"
    )
    config = load_config(str(path))
    assert not config.store.include_runtime
    assert config.store.environment_prefix == "PID_"
    assert config.store.overrides == {"os.name": "Windows 10", "arch.data.model": "32", "headless": "true"}
    assert config.logging.level == "DEBUG"
    assert config.logging.verbose


def test_empty_file_keeps_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_config(str(path)) == Config()


@pytest.mark.parametrize("content", [
    "store: [unclosed\n",
    "- just\n- a list\n",
    "store: 5\n",
    "store:\n  overrides: [a, b]\n",
    "store:\n  overrides:\n    os.name: [nested]\n",
])
def test_invalid_files_raise(tmp_path, content):
    path = tmp_path / "bad.yaml"
    path.write_text(content)
    with pytest.raises(ConfigurationError):
        load_config(str(path))


def test_build_store_layers(monkeypatch):
    monkeypatch.setenv("PID_TEST_OS_NAME", "FreeBSD")
    monkeypatch.setenv("PID_TEST_OS_ARCH", "amd64")
    config = Config()
    config.store.include_runtime = False
    config.store.environment_prefix = "PID_TEST_"
    config.store.overrides = {"os.name": "Windows 10"}

    store = build_store(config)

    assert store.get_raw("os.name") == "Windows 10"
    assert store.get_raw("os.arch") == "amd64"
    assert store.get_raw("vm.name") is None


def test_build_store_includes_runtime_by_default():
    assert build_store(Config()).get_raw("vm.name")


def test_default_config_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.setenv("USERPROFILE", str(tmp_path / "home"))
    assert get_default_config_path() is None

    (tmp_path / "platform_identity.yml").write_text("")
    assert get_default_config_path() == "platform_identity.yml"
