"""
Unit Tests for the blogdata Entry Point.

The validate subcommand is tested end to end. The serve subcommand starts
a blocking Gunicorn server, so its argument tests patch run_serve and the
logging test builds the Gunicorn arbiter without running it.
"""
import logging
from unittest.mock import patch

import pytest

from blogdata import main
from blogdata.blogdata import build_logconfig_dict, build_parser, configure_logging, run_serve, run_validate


def test_validate_bundled_data(capsys):
    assert main(["validate"]) == 0

    out = capsys.readouterr().out
    assert "Validation passed: 2 post(s), 4 category(ies)" in out


def test_validate_custom_file(write_payload, minimal_payload, capsys):
    path = write_payload(minimal_payload)

    assert main(["validate", str(path)]) == 0
    assert "Validation passed" in capsys.readouterr().out


def test_validate_reports_every_problem(write_payload, minimal_payload, capsys):
    minimal_payload["blogs"][1]["id"] = "caching-basics"
    minimal_payload["blogs"][1]["slug"] = "caching-basics-for-apis"

    assert run_validate(str(write_payload(minimal_payload))) == 1

    out = capsys.readouterr().out
    assert "- blogs[1]: duplicate post id 'caching-basics'" in out
    assert "- blogs[1]: duplicate slug 'caching-basics-for-apis'" in out


def test_validate_strict_categories(write_payload, minimal_payload, capsys):
    minimal_payload["blogs"][0]["category"] = "Databases"
    path = str(write_payload(minimal_payload))

    assert main(["validate", path]) == 0
    assert main(["validate", path, "--strict-categories"]) == 1
    assert "category 'Databases' is not a known category name" in capsys.readouterr().out


def test_validate_missing_file(tmp_path, capsys):
    assert run_validate(str(tmp_path / "missing.json")) == 1
    assert "Blog data file not found" in capsys.readouterr().out


def test_validate_invalid_json(tmp_path, capsys):
    path = tmp_path / "broken.json"
    path.write_text("not json", encoding="utf-8")

    assert run_validate(str(path)) == 1
    assert "Invalid JSON" in capsys.readouterr().out


def test_serve_arguments():
    with patch("blogdata.blogdata.run_serve") as run_serve:
        assert main(["serve", "--debug", "--config", "/etc/blogdata/config.yml"]) == 0

    run_serve.assert_called_once_with(debug=True, config_path="/etc/blogdata/config.yml")


def test_serve_debug_from_environment(monkeypatch):
    monkeypatch.setenv("BLOGDATA_DEBUG", "true")

    with patch("blogdata.blogdata.run_serve") as run_serve:
        main(["serve"])

    run_serve.assert_called_once_with(debug=True, config_path=None)


def test_command_is_required():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_configure_logging(tmp_path):
    root_logger = logging.getLogger()
    saved_handlers = list(root_logger.handlers)
    saved_level = root_logger.level
    log_file = tmp_path / "blogdata.log"

    try:
        configure_logging(debug=True, log_file=str(log_file))

        assert root_logger.level == logging.DEBUG
        assert len(root_logger.handlers) == 2
        logging.getLogger("blogdata.test").debug("hello log file")
        for handler in root_logger.handlers:
            handler.flush()
        assert "hello log file" in log_file.read_text()
    finally:
        for handler in root_logger.handlers:
            handler.close()
        root_logger.handlers[:] = saved_handlers
        root_logger.setLevel(saved_level)


def test_serve_keeps_debug_level_and_log_file(tmp_path):
    """Gunicorn's logging setup keeps the DEBUG level and the rotating log file."""
    from logging.handlers import RotatingFileHandler

    from gunicorn.arbiter import Arbiter

    log_file = tmp_path / "serve.log"
    config_file = tmp_path / "config.yml"
    config_file.write_text(
        f"server:\n  bind: \"127.0.0.1:0\"\nlogging:\n  file: \"{log_file}\"\n",
        encoding="utf-8",
    )
    root_logger = logging.getLogger()
    saved_handlers = list(root_logger.handlers)
    saved_level = root_logger.level
    gunicorn_loggers = [logging.getLogger("gunicorn.error"), logging.getLogger("gunicorn.access")]

    try:
        # Build the arbiter (which applies logconfig_dict) without starting the server
        with patch("gunicorn.app.base.BaseApplication.run", lambda self: Arbiter(self)):
            run_serve(debug=True, config_path=str(config_file))

        assert root_logger.level == logging.DEBUG
        file_handlers = [h for h in root_logger.handlers if isinstance(h, RotatingFileHandler)]
        assert [h.baseFilename for h in file_handlers] == [str(log_file)]
        assert file_handlers[0].maxBytes == 10 * 1024 * 1024
        assert file_handlers[0].backupCount == 3

        logging.getLogger("blogdata.test").debug("debug line after gunicorn setup")
        file_handlers[0].flush()
        assert "debug line after gunicorn setup" in log_file.read_text()
    finally:
        for handler in root_logger.handlers:
            handler.close()
        root_logger.handlers[:] = saved_handlers
        root_logger.setLevel(saved_level)
        for gunicorn_logger in gunicorn_loggers:
            for handler in gunicorn_logger.handlers:
                handler.close()
            gunicorn_logger.handlers.clear()


def test_logconfig_dict_without_log_file():
    logconfig = build_logconfig_dict(debug=False, log_file=None)

    assert logconfig["root"] == {"level": "INFO", "handlers": ["console"]}
    assert "file" not in logconfig["handlers"]
    assert logconfig["loggers"]["gunicorn.error"]["handlers"] == ["error_console"]
