"""Tests for checklist_esp.config - leitura de variáveis de ambiente."""

import importlib
import logging
import os
import sys
from unittest.mock import patch

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import checklist_esp.config as config


def _reload(env):
    with patch.dict(os.environ, env, clear=False):
        return importlib.reload(config)


def teardown_module(module):
    importlib.reload(config)


def test_defaults():
    with patch.dict(os.environ, {}, clear=True):
        cfg = importlib.reload(config)
    assert cfg.LOG_LEVEL == "INFO"
    assert cfg.MIN_TEXT_LENGTH == 100
    assert cfg.MAX_BODY_BYTES == 20 * 1024 * 1024
    assert cfg.EMIT_EVENTS is False
    assert not hasattr(cfg, "LLM_ENABLED")
    assert cfg.validate_config() == (True, "")


def test_flags_booleanas():
    assert _reload({"CHECKLIST_EMIT_EVENTS": "true"}).EMIT_EVENTS is True
    assert _reload({"CHECKLIST_EMIT_EVENTS": "1"}).EMIT_EVENTS is True
    assert _reload({"CHECKLIST_EMIT_EVENTS": "no"}).EMIT_EVENTS is False


def test_nivel_invalido():
    cfg = _reload({"CHECKLIST_LOG_LEVEL": "verboso"})
    ok, msg = cfg.validate_config()
    assert ok is False
    assert "VERBOSO" in msg
    assert cfg.get_log_level() == logging.INFO


def test_nivel_debug():
    cfg = _reload({"CHECKLIST_LOG_LEVEL": "debug"})
    assert cfg.get_log_level() == logging.DEBUG


def test_max_body_invalido():
    cfg = _reload({"CHECKLIST_MAX_BODY_BYTES": "0"})
    ok, msg = cfg.validate_config()
    assert ok is False
    assert "MAX_BODY_BYTES" in msg
