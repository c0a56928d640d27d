import logging

from orders_ui.lib import logs


def test_file_paths_use_module_stem():
    log = logs.logger("/srv/app/src/orders_ui/browse/log_stem_check.py")

    assert log.name == "log_stem_check"


def test_handler_is_added_once():
    first = logs.logger("orders_ui_handler_check")
    second = logs.logger("orders_ui_handler_check")

    assert first is second
    assert len(second.handlers) == 1


def test_level_comes_from_environment(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")

    assert logs.logger("orders_ui_level_check").level == logging.DEBUG


def test_unknown_level_defaults_to_info(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")

    assert logs.logger("orders_ui_unknown_level_check").level == logging.INFO
