"""Credential lookup tests; every test runs with an isolated HOME and cwd."""

import json
import os
from pathlib import Path

import pytest

from resend_cli.config import API_KEY_ENV, Config, config_path
from resend_cli.core.client import ConfigError


def test_env_var_wins(isolated_home: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config_path().parent.mkdir(parents=True)
    config_path().write_text(json.dumps({"api_key": "re_file"}))
    monkeypatch.setenv(API_KEY_ENV, "re_env")

    assert Config.load().api_key == "re_env"


def test_dotenv_in_working_directory(isolated_home: Path) -> None:
    Path(".env").write_text(f"{API_KEY_ENV}=re_dotenv\n")

    try:
        assert Config.load().api_key == "re_dotenv"
    finally:
        # load_dotenv writes straight into os.environ
        os.environ.pop(API_KEY_ENV, None)


def test_config_file_fallback(isolated_home: Path) -> None:
    path = config_path()
    path.parent.mkdir(parents=True)
    path.write_text(json.dumps({"api_key": "re_file"}))

    assert Config.load().api_key == "re_file"


def test_config_path_under_home(isolated_home: Path) -> None:
    assert config_path() == isolated_home / ".resend-cli" / "config.json"


def test_save_creates_directory(isolated_home: Path) -> None:
    path = Config(api_key="re_saved").save()

    assert path == config_path()
    assert json.loads(path.read_text()) == {"api_key": "re_saved"}
    assert Config.load().api_key == "re_saved"


def test_missing_key_raises_config_error(isolated_home: Path) -> None:
    with pytest.raises(ConfigError) as exc_info:
        Config.load()

    assert "resend config --api-key" in str(exc_info.value)


def test_corrupt_config_file_raises_config_error(isolated_home: Path) -> None:
    path = config_path()
    path.parent.mkdir(parents=True)
    path.write_text("{not json")

    with pytest.raises(ConfigError) as exc_info:
        Config.load()

    assert isinstance(exc_info.value.__cause__, ValueError)


def test_dotenv_in_parent_directory_is_ignored(isolated_home: Path) -> None:
    (Path.cwd().parent / ".env").write_text(f"{API_KEY_ENV}=re_parent\n")

    try:
        with pytest.raises(ConfigError):
            Config.load()
    finally:
        os.environ.pop(API_KEY_ENV, None)
