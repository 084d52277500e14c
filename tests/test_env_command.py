from saffron.env_command import env_delete, env_list, env_set, env_show, env_use
from saffron.storage import Storage

import pytest


@pytest.fixture
def storage(tmp_path):
    return Storage(tmp_path)


def test_env_set_saves_variables(storage, capsys):
    env_set(storage, "dev", [("host", "example.com"), ("port", "8080")])
    stored = storage.load_environment_set().get("dev")
    assert stored.get("host") == "example.com"
    assert stored.get("port") == "8080"
    assert "Environment 'dev' saved" in capsys.readouterr().out


def test_env_list_empty(storage, capsys):
    assert env_list(storage) == []
    assert "No environments found" in capsys.readouterr().out


def test_env_list_names_in_order(storage):
    env_set(storage, "dev", [])
    env_set(storage, "prod", [])
    assert env_list(storage) == ["dev", "prod"]


def test_env_show_returns_environment(storage, capsys):
    env_set(storage, "dev", [("token", "token")])
    capsys.readouterr()
    shown = env_show(storage, "dev")
    assert shown.get("token") == "token"
    assert "token = token" in capsys.readouterr().out


def test_env_show_missing(storage, capsys):
    assert env_show(storage, "ghost") is None
    assert "Environment 'ghost' not found" in capsys.readouterr().err


def test_env_delete_removes(storage, capsys):
    env_set(storage, "dev", [])
    env_set(storage, "prod", [])
    env_delete(storage, "dev")
    remaining = storage.load_environment_set()
    assert remaining.get("dev") is None
    assert remaining.get("prod").name == "prod"
    assert "Environment 'dev' deleted" in capsys.readouterr().out


def test_env_use_sets_active(storage):
    env_set(storage, "dev", [("k", "v")])
    assert env_use(storage, "dev") is True
    active = storage.load_environment_set().get_active()
    assert active.name == "dev"


def test_env_use_missing_leaves_active_unset(storage, capsys):
    env_set(storage, "dev", [])
    assert env_use(storage, "prod") is False
    assert storage.load_environment_set().get_active() is None
    assert "Environment 'prod' not found" in capsys.readouterr().err


def test_env_list_marks_active(storage, capsys):
    env_set(storage, "dev", [])
    env_set(storage, "prod", [])
    env_use(storage, "prod")
    capsys.readouterr()
    env_list(storage)
    lines = capsys.readouterr().out.splitlines()
    prod_line = next(line for line in lines if line.endswith("• prod"))
    dev_line = next(line for line in lines if line.endswith("• dev"))
    assert "*" in prod_line
    assert "*" not in dev_line