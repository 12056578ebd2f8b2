import logging

from cli_todo import main as main_mod


def capture_basic_config(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
    return calls


def test_log_level_from_env(monkeypatch):
    calls = capture_basic_config(monkeypatch)
    monkeypatch.setenv("TODO_LOG_LEVEL", "debug")

    main_mod.configure_logging()

    assert calls == [{"level": logging.DEBUG, "format": main_mod.LOG_FORMAT}]


def test_log_level_default_and_unknown(monkeypatch):
    calls = capture_basic_config(monkeypatch)
    monkeypatch.delenv("TODO_LOG_LEVEL", raising=False)
    main_mod.configure_logging()
    monkeypatch.setenv("TODO_LOG_LEVEL", "chatty")
    main_mod.configure_logging()

    assert [c["level"] for c in calls] == [logging.WARNING, logging.WARNING]
