
import json
import logging
from wfcount import cli, config

def test_main_prints_every_word(capsys):
    rc = cli.main([])
    lines = capsys.readouterr().out.splitlines()
    assert rc == 0
    assert sorted(lines) == ["four => 4", "one => 1", "three => 3", "two => 2"]

def test_main_sorted(capsys):
    assert cli.main(["--sort"]) == 0
    out = capsys.readouterr().out
    assert out == "four => 4\none => 1\nthree => 3\ntwo => 2\n"

def test_main_json(capsys):
    assert cli.main(["--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["total"] == 10
    assert data["frequencies"] == {"four": 4, "one": 1, "two": 2, "three": 3}

def test_main_title(capsys):
    assert cli.main(["--title", "--sort"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Four, One Two Two Three Three Three Four  Four   Four"
    assert len(lines) == 5

def test_env_sort_default(monkeypatch, capsys):
    monkeypatch.setenv("WFCOUNT_SORT", "1")
    assert cli.main([]) == 0
    assert capsys.readouterr().out.splitlines()[0] == "four => 4"

def test_config_bad_values_fall_back(monkeypatch):
    monkeypatch.setenv("WFCOUNT_JSON", "maybe")
    monkeypatch.setenv("WFCOUNT_LOG_LEVEL", "chatty")
    assert config.json_output() is False
    assert config.log_level() == logging.WARNING

def test_config_log_level(monkeypatch):
    monkeypatch.setenv("WFCOUNT_LOG_LEVEL", "debug")
    assert config.log_level() == logging.DEBUG
