"""
Pytest configuration and fixtures
"""
import json
import sys
from pathlib import Path
import pytest

# Add project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from academy import create_app  # noqa: E402

SAMPLE_COURSES = [
    {"id": "javascript", "title": "JavaScript desde cero", "description": "Variables y funciones."},
    {"id": "python", "title": "Python para principiantes", "description": "Primeros scripts."},
]

SAMPLE_DETAIL = {
    "id": "javascript",
    "title": "JavaScript desde cero",
    "description": "Variables y funciones.",
    "lessons": [
        {"title": "Introducción", "content": "Qué es JavaScript."},
        {"title": "Funciones", "content": "Funciones flecha."},
    ],
    "meta": {"level": 1, "tags": ["web", "frontend"], "price": None},
}


@pytest.fixture
def data_dir(tmp_path):
    """Temporary data directory with a course list and one course file"""
    courses_dir = tmp_path / "courses"
    courses_dir.mkdir()
    (tmp_path / "courses.json").write_text(json.dumps(SAMPLE_COURSES), encoding="utf-8")
    (courses_dir / "javascript.json").write_text(json.dumps(SAMPLE_DETAIL), encoding="utf-8")
    (courses_dir / "42.json").write_text(json.dumps({"id": 42, "title": "Numbered"}), encoding="utf-8")
    return tmp_path


@pytest.fixture
def app(data_dir):
    """Create the app against the temporary data directory"""
    app = create_app({
        "TESTING": True,
        "IS_PRODUCTION": False,
        "SECRET_KEY": "test-secret",
        "GOOGLE_CLIENT_ID": "test-client-id",
        "GOOGLE_CLIENT_SECRET": "test-client-secret",
        "GOOGLE_CALLBACK_URL": "http://localhost/auth/google/callback",
        "COURSES_FILE": data_dir / "courses.json",
        "COURSES_DIR": data_dir / "courses",
        "MESSAGES_FILE": data_dir / "messages.json",
    })
    return app


@pytest.fixture
def client(app):
    """Create a test client"""
    return app.test_client()


@pytest.fixture
def messages_file(data_dir):
    return data_dir / "messages.json"
