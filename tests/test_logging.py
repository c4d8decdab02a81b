from __future__ import annotations

import logging

from gedcom_relations.logging import get_logger, list_active_loggers


def test_module_loggers_share_the_base_logger():
    log = get_logger("gedcom_relations.tests.sample")

    assert log.name in list_active_loggers()
    assert log.propagate is True
    assert logging.getLogger("gedcom_relations").handlers


def test_get_logger_is_idempotent():
    first = get_logger("gedcom_relations.tests.repeat")
    handler_count = len(first.handlers)

    second = get_logger("gedcom_relations.tests.repeat")

    assert second is first
    assert len(second.handlers) == handler_count


def test_log_settings_follow_config(tmp_path, monkeypatch):
    from gedcom_relations.config import CONFIG_ENV_VAR, reset_config
    from gedcom_relations.logging.logger import LogSettings

    path = tmp_path / "logcfg.yml"
    path.write_text(
        "debug: true\n"
        "logging:\n  level: WARNING\n  dir: custom_logs\n  rotate: true\n  to_file: false\n",
        encoding="utf-8",
    )
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    reset_config()
    try:
        settings = LogSettings.from_config()
    finally:
        monkeypatch.delenv(CONFIG_ENV_VAR)
        reset_config()

    assert settings.level == logging.DEBUG
    assert settings.log_dir.name == "custom_logs"
    assert settings.rotate is True
    assert settings.to_file is False
