import json
from pathlib import Path

from descape_py import Config, DefaultResolver, unescape_with


def test_missing_file_gives_defaults(tmp_path: Path) -> None:
    config = Config.load(tmp_path / "missing.json")
    assert config == Config()
    assert config.extended_escapes is True
    assert config.lenient is False


def test_packaged_config_loads() -> None:
    assert Config.load() == Config()


def test_load_converts_camel_case_and_ignores_unknown_keys(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"extendedEscapes": False, "lenient": True, "somethingElse": 1}))
    config = Config.load(path)
    assert config.extended_escapes is False
    assert config.lenient is True


def test_save_writes_camel_case(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    Config(extended_escapes=False).save(path)
    assert json.loads(path.read_text()) == {"extendedEscapes": False, "lenient": False}
    assert Config.load(path) == Config(extended_escapes=False)


def test_resolver_from_config() -> None:
    resolver = DefaultResolver.from_config(Config(extended_escapes=False, lenient=True))
    assert resolver.extended is False
    assert resolver.lenient is True
    # \a is no longer known, so lenient mode keeps it as "a"
    assert unescape_with(r"\a\n", resolver) == "a\n"
