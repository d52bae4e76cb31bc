"""
Unit tests for configuration handling
"""
from datetime import timedelta
import pytest
from academy import create_app
from academy.config import Config


class TestValidate:
    def test_development_needs_nothing(self):
        Config.validate({"IS_PRODUCTION": False})

    @pytest.mark.parametrize("missing", ["SECRET_KEY", "GOOGLE_CLIENT_ID", "GOOGLE_CLIENT_SECRET"])
    def test_production_requires_secrets(self, missing):
        settings = {
            "IS_PRODUCTION": True,
            "SECRET_KEY": "s",
            "GOOGLE_CLIENT_ID": "id",
            "GOOGLE_CLIENT_SECRET": "secret",
        }
        settings[missing] = None
        with pytest.raises(ValueError, match=missing):
            Config.validate(settings)

    def test_production_app_refuses_to_start_without_secret(self, data_dir):
        with pytest.raises(ValueError):
            create_app({"IS_PRODUCTION": True, "SECRET_KEY": None})


def test_session_lifetime_is_seven_days(app):
    assert app.config["PERMANENT_SESSION_LIFETIME"] == timedelta(days=7)
    assert app.config["SESSION_COOKIE_HTTPONLY"] is True


def test_generated_secret_when_unset(data_dir):
    app = create_app({"IS_PRODUCTION": False, "SECRET_KEY": None, "COURSES_FILE": data_dir / "courses.json"})
    assert app.config["SECRET_KEY"]


def test_services_use_configured_paths(app, data_dir):
    assert app.extensions["course_service"].courses_file == data_dir / "courses.json"
    assert app.extensions["message_store"].path == data_dir / "messages.json"


def test_setup_logging_installs_one_colored_handler():
    import logging
    import colorlog
    from academy.utils.logger import setup_logging

    root = setup_logging("DEBUG")
    setup_logging("INFO")

    colored = [h for h in root.handlers if isinstance(h.formatter, colorlog.ColoredFormatter)]
    assert len(colored) == 1
    assert root.level == logging.INFO


class TestSessionCookie:
    def test_production_cookie_is_secure_cross_site(self, data_dir):
        app = create_app({
            "IS_PRODUCTION": True,
            "SECRET_KEY": "s",
            "GOOGLE_CLIENT_ID": "id",
            "GOOGLE_CLIENT_SECRET": "secret",
        })
        assert app.config["SESSION_COOKIE_SECURE"] is True
        assert app.config["SESSION_COOKIE_SAMESITE"] == "None"

    def test_development_cookie_is_lax(self, app):
        assert app.config["SESSION_COOKIE_SECURE"] is False
        assert app.config["SESSION_COOKIE_SAMESITE"] == "Lax"

    def test_production_cookie_attributes_on_response(self, data_dir):
        app = create_app({
            "IS_PRODUCTION": True,
            "SECRET_KEY": "s",
            "GOOGLE_CLIENT_ID": "id",
            "GOOGLE_CLIENT_SECRET": "secret",
            "COURSES_FILE": data_dir / "courses.json",
        })
        client = app.test_client()
        with client.session_transaction() as sess:
            sess["user"] = {"googleId": "1"}
        cookie = client.get_cookie("session")
        assert cookie is not None
        assert cookie.secure is True
        assert cookie.same_site == "None"
        assert cookie.http_only is True


class TestDataDir:
    def test_defaults_to_working_directory(self, tmp_path, monkeypatch):
        from academy.config import default_data_dir
        monkeypatch.delenv("DATA_DIR", raising=False)
        monkeypatch.chdir(tmp_path)
        assert default_data_dir() == tmp_path / "data"

    def test_environment_wins(self, tmp_path, monkeypatch):
        from academy.config import default_data_dir
        monkeypatch.setenv("DATA_DIR", str(tmp_path / "elsewhere"))
        assert default_data_dir() == tmp_path / "elsewhere"
