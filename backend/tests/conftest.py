import os
import tempfile

# Env harus di-set sebelum modul app di-import (config dibaca saat import)
_TMP_DIR = tempfile.mkdtemp(prefix="serverpanel-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP_DIR, 'test.db')}"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["FIRST_SUPERUSER"] = "admin"
os.environ["FIRST_SUPERUSER_PASSWORD"] = "changeme"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
from fastapi.testclient import TestClient

from app.system.command_runner import CommandResult
from app.system.dispatcher import ActionDispatcher


class FakeRunner:
    """Pengganti CommandRunner: mencatat command, tidak menjalankan apa-apa."""

    def __init__(self, results=None, default=None):
        self.calls = []
        # prefix command -> CommandResult
        self.results = results or {}
        self.default = default or CommandResult(0, "")

    def run(self, command, privileged=False):
        self.calls.append((command, privileged))
        for prefix, result in self.results.items():
            if command.startswith(prefix):
                return result
        return self.default

    @property
    def commands(self):
        return [command for command, _ in self.calls]


@pytest.fixture
def runner():
    return FakeRunner()


@pytest.fixture
def sites_root(tmp_path):
    root = tmp_path / "sites"
    root.mkdir()
    return root


@pytest.fixture
def nginx_dir(tmp_path):
    path = tmp_path / "nginx"
    (path / "sites-available").mkdir(parents=True)
    (path / "sites-enabled").mkdir()
    return path


@pytest.fixture
def make_dispatcher(sites_root, nginx_dir):
    def _make(runner, **kwargs):
        kwargs.setdefault("sites_root", str(sites_root))
        kwargs.setdefault("nginx_dir", str(nginx_dir))
        kwargs.setdefault("apache_dir", "/etc/apache2")
        kwargs.setdefault("site_config_script", "/opt/panel/site_config.sh")
        kwargs.setdefault("php_switcher_script", "/opt/panel/php_switcher.sh")
        return ActionDispatcher(runner, **kwargs)
    return _make


@pytest.fixture
def client():
    from app.main import app

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(client):
    response = client.post("/auth/token", data={"username": "admin", "password": "changeme"})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['access_token']}"}
