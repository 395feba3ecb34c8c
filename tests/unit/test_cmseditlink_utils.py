"""Unit tests for cmseditlink.utils."""

import logging
import os
import subprocess
import sys
from logging.handlers import RotatingFileHandler

import pytest

import cmseditlink.utils.logger as logger_module
from cmseditlink.utils import configure_logging, get_logger, join_links, render_template

pytestmark = pytest.mark.utils


class TestJoinLinks:
    """Test join_links()."""

    def test_single_separator(self):
        assert join_links("admin/", "/security", "EditForm") == "admin/security/EditForm"

    def test_leading_slash_of_first_part_kept(self):
        assert join_links("/admin", "security") == "/admin/security"

    def test_trailing_slash_of_last_part_kept(self):
        assert join_links("admin", "security/") == "admin/security/"

    def test_skips_empty_parts(self):
        assert join_links("", None, "admin", "", "security") == "admin/security"

    def test_numbers(self):
        assert join_links("item", 0, 12) == "item/0/12"

    def test_bools_skipped(self):
        assert join_links("item", False, True, "edit") == "item/edit"

    def test_query_strings_merged(self):
        assert join_links("admin?a=1", "security?b=2", "edit") == "admin/security/edit?a=1&b=2"

    def test_later_query_values_win(self):
        assert join_links("admin?a=1", "edit?a=2") == "admin/edit?a=2"

    def test_fragment_kept_last(self):
        assert join_links("admin#top", "edit") == "admin/edit#top"

    def test_nothing(self):
        assert join_links() == ""


class TestRenderTemplate:
    """Test render_template()."""

    def test_render(self):
        assert render_template("{{ a }}/{{ b }}", {"a": "x", "b": 1}) == "x/1"

    def test_autoescape(self):
        assert render_template("{{ v }}", {"v": "<b>"}) == "&lt;b&gt;"

    def test_strict_undefined(self):
        from jinja2 import UndefinedError

        with pytest.raises(UndefinedError):
            render_template("{{ missing }}", {})


@pytest.fixture
def restore_logging(monkeypatch):
    """Restore the package logger after a test, keeping its configured state."""
    root_logger = logging.getLogger("cmseditlink")
    saved_handlers = list(root_logger.handlers)
    saved_level = root_logger.level
    monkeypatch.setattr(logger_module, "_CONFIGURED", logger_module._CONFIGURED)
    monkeypatch.setattr(logger_module, "_FILE_HANDLER", logger_module._FILE_HANDLER)
    yield root_logger
    for handler in root_logger.handlers:
        if handler not in saved_handlers:
            handler.close()
    root_logger.handlers = saved_handlers
    root_logger.setLevel(saved_level)


@pytest.fixture
def fresh_logging(restore_logging, monkeypatch):
    """Reset the package logger so configure_logging runs again."""
    monkeypatch.setattr(logger_module, "_CONFIGURED", False)
    monkeypatch.setattr(logger_module, "_FILE_HANDLER", None)
    restore_logging.handlers = []
    restore_logging.setLevel(logging.NOTSET)
    return restore_logging


class TestLogging:
    """Test configure_logging() and get_logger()."""

    def test_get_logger_namespace(self):
        assert get_logger("link.scaffolder").name == "cmseditlink.link.scaffolder"

    def test_null_handler_by_default(self, fresh_logging, monkeypatch):
        monkeypatch.delenv("CMSEDITLINK_LOG_LEVEL", raising=False)
        configure_logging()
        assert fresh_logging.level == logging.WARNING
        assert any(isinstance(h, logging.NullHandler) for h in fresh_logging.handlers)

    def test_level_from_env(self, fresh_logging, monkeypatch):
        monkeypatch.setenv("CMSEDITLINK_LOG_LEVEL", "debug")
        configure_logging()
        assert fresh_logging.level == logging.DEBUG

    def test_unknown_env_level_falls_back_to_warning(self, fresh_logging, monkeypatch, caplog):
        monkeypatch.setenv("CMSEDITLINK_LOG_LEVEL", "verbose")
        with caplog.at_level(logging.WARNING, logger="cmseditlink"):
            configure_logging()
            assert fresh_logging.level == logging.WARNING
        assert "Ignoring unknown CMSEDITLINK_LOG_LEVEL 'verbose'" in caplog.text

    def test_log_file(self, fresh_logging, tmp_path):
        log_file = tmp_path / "logs" / "cmseditlink.log"
        configure_logging(logging.INFO, log_file)
        get_logger("test").info("hello")
        for handler in fresh_logging.handlers:
            handler.flush()
        assert "cmseditlink.test - INFO - hello" in log_file.read_text()

    def test_idempotent(self, fresh_logging):
        configure_logging()
        configure_logging()
        assert len(fresh_logging.handlers) == 1

    def test_get_logger_does_not_configure(self, fresh_logging):
        get_logger("link.scaffolder")
        assert logger_module._CONFIGURED is False
        assert fresh_logging.level == logging.NOTSET

    def test_explicit_configuration_after_defaults(self, restore_logging, tmp_path):
        """Test a host can configure logging after the package has been used."""
        configure_logging()
        log_file = tmp_path / "host.log"
        configure_logging(logging.DEBUG, log_file)
        get_logger("test").debug("after defaults")
        for handler in restore_logging.handlers:
            handler.flush()
        assert restore_logging.level == logging.DEBUG
        assert "cmseditlink.test - DEBUG - after defaults" in log_file.read_text()

    def test_new_log_file_replaces_previous(self, fresh_logging, tmp_path):
        configure_logging(logging.INFO, tmp_path / "first.log")
        configure_logging(logging.INFO, tmp_path / "second.log")
        file_handlers = [h for h in fresh_logging.handlers if isinstance(h, RotatingFileHandler)]
        assert len(file_handlers) == 1
        assert file_handlers[0].baseFilename == str(tmp_path / "second.log")


class TestLoggingAtImport:
    """Test importing the package in a fresh interpreter."""

    @staticmethod
    def run_python(code: str, **env: str) -> subprocess.CompletedProcess:
        return subprocess.run(
            [sys.executable, "-c", code],
            capture_output=True,
            text=True,
            env={**os.environ, **env},
            timeout=60,
        )

    def test_import_then_configure(self, tmp_path):
        log_file = tmp_path / "app.log"
        code = (
            "import logging, pathlib\n"
            "import cmseditlink\n"
            "from cmseditlink.utils import configure_logging, get_logger\n"
            f"configure_logging(logging.DEBUG, pathlib.Path({str(log_file)!r}))\n"
            "get_logger('t').info('hello')\n"
            "print(logging.getLogger('cmseditlink').level)\n"
        )
        result = self.run_python(code)
        assert result.returncode == 0, result.stderr
        assert result.stdout.strip() == str(logging.DEBUG)
        assert "cmseditlink.t - INFO - hello" in log_file.read_text()

    def test_import_with_unknown_env_level(self):
        result = self.run_python("import cmseditlink", CMSEDITLINK_LOG_LEVEL="verbose")
        assert result.returncode == 0, result.stderr
