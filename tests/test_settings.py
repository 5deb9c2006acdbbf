from __future__ import annotations

import os

from settings import get_settings


def test_defaults(sandbox_env):
    s = get_settings()
    assert s.log_level == "WARNING"
    assert s.json_indent == 2
    assert s.sort_keys is True


def test_env_overrides(sandbox_env):
    os.environ["KEEBOX_LOG_LEVEL"] = " debug "
    os.environ["KEEBOX_JSON_INDENT"] = "4"
    os.environ["KEEBOX_SORT_KEYS"] = "no"

    s = get_settings()
    assert s.log_level == "DEBUG"
    assert s.json_indent == 4
    assert s.sort_keys is False


def test_bad_indent_falls_back_to_default(sandbox_env):
    os.environ["KEEBOX_JSON_INDENT"] = "wide"
    assert get_settings().json_indent == 2

    os.environ["KEEBOX_JSON_INDENT"] = "-1"
    assert get_settings().json_indent == 2
