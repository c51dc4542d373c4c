"""Shared fixtures for the Docslingo tests."""

import pytest

from docslingo.config import ProjectConfig
from docslingo.errors import LoginFailed
from docslingo.translate.base import AuthStatus, TranslationResult, Translator

WIDGETS_SPEC = """\
openapi: 3.0.3
info:
  title: Widget API
  description: Manage **widgets**.
  version: 1.0.0
paths:
  /widgets:
    get:
      tags: [Widgets]
      summary: List widgets
      parameters:
        - name: limit
          in: query
          schema:
            type: integer
      responses:
        '200':
          description: A list of widgets
          content:
            application/json:
              schema:
                type: array
                items:
                  $ref: '#/components/schemas/Widget'
components:
  schemas:
    Widget:
      type: object
      properties:
        id:
          type: string
        name:
          type: string
"""


class ScriptedTranslator(Translator):
    """Translator whose answers are scripted per call."""

    def __init__(self, auth=(True,), login_ok=True, runs=(True,)):
        self.auth = list(auth)
        self.login_ok = login_ok
        self.runs = list(runs)
        self.calls = []

    @property
    def name(self) -> str:
        return "scripted"

    def check_auth(self) -> AuthStatus:
        self.calls.append("auth")
        authenticated = self.auth.pop(0) if self.auth else False
        return AuthStatus(authenticated=authenticated)

    def login(self) -> None:
        self.calls.append("login")
        if not self.login_ok:
            raise LoginFailed("Login process exited with code 1")

    def run(self, config: ProjectConfig) -> TranslationResult:
        self.calls.append("run")
        success = self.runs.pop(0) if self.runs else False
        return TranslationResult(success=success, returncode=0 if success else 1)


@pytest.fixture
def project(tmp_path):
    """A ProjectConfig rooted in a temporary directory (not yet created)."""
    return ProjectConfig(root=tmp_path / ".docslingo")


@pytest.fixture
def spec_file(tmp_path):
    path = tmp_path / "spec.yaml"
    path.write_text(WIDGETS_SPEC, encoding="utf-8")
    return path


@pytest.fixture
def no_sleep():
    """Records requested delays instead of sleeping."""
    delays = []
    return delays.append, delays
