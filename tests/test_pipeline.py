"""
Tests for the generate pipeline: auth check, translation retries and
stage sequencing.

Run with: pytest tests/test_pipeline.py -v
"""

import json
import subprocess

import pytest

from docslingo.auth import AuthChecker
from docslingo.errors import AuthVerificationFailed, LoginFailed, NoTargetLanguages, SpecNotFound, TranslationFailed
from docslingo.pipeline import GeneratePipeline
from docslingo.runner import TranslationRunner
from docslingo.translate.base import DummyTranslator, create_translator
from docslingo.translate.lingo import LingoTranslator

from conftest import ScriptedTranslator


class TestAuthChecker:
    """Tests for the authentication flow."""

    def test_already_authenticated(self, no_sleep):
        sleep, delays = no_sleep
        translator = ScriptedTranslator(auth=[True])

        AuthChecker(translator, sleep=sleep).ensure_authenticated()

        assert translator.calls == ["auth"]
        assert delays == []

    def test_login_then_verified(self, no_sleep):
        sleep, delays = no_sleep
        translator = ScriptedTranslator(auth=[False, True])

        AuthChecker(translator, sleep=sleep).ensure_authenticated()

        assert translator.calls == ["auth", "login", "auth"]
        assert delays == [2.0]

    def test_verified_on_last_retry(self, no_sleep):
        sleep, delays = no_sleep
        translator = ScriptedTranslator(auth=[False, False, True])
        messages = []

        AuthChecker(translator, sleep=sleep, notify=lambda level, msg: messages.append((level, msg))).ensure_authenticated()

        assert translator.calls == ["auth", "login", "auth", "auth"]
        assert delays == [2.0, 2.0]
        assert ("warn", "Auth check failed. Retrying (1/2)...") in messages

    def test_never_verified(self, no_sleep):
        sleep, delays = no_sleep
        translator = ScriptedTranslator(auth=[False, False, False])

        with pytest.raises(AuthVerificationFailed) as exc_info:
            AuthChecker(translator, sleep=sleep).ensure_authenticated()

        assert translator.calls.count("auth") == 3
        assert "login" in exc_info.value.hint

    def test_login_failure_is_fatal(self, no_sleep):
        sleep, delays = no_sleep
        translator = ScriptedTranslator(auth=[False], login_ok=False)

        with pytest.raises(LoginFailed):
            AuthChecker(translator, sleep=sleep).ensure_authenticated()

        assert translator.calls == ["auth", "login"]
        assert delays == []


class TestTranslationRunner:
    """Tests for the bounded translation retries."""

    @pytest.mark.parametrize("runs", [[True], [False, True]])
    def test_succeeds_within_two_attempts(self, project, runs):
        translator = ScriptedTranslator(runs=runs)

        result = TranslationRunner(translator, project).run(["es"])

        assert result.success
        assert translator.calls == ["run"] * len(runs)

    def test_fails_after_two_attempts(self, project):
        translator = ScriptedTranslator(runs=[False, False, True])

        with pytest.raises(TranslationFailed) as exc_info:
            TranslationRunner(translator, project).run(["es"])

        assert translator.calls == ["run", "run"]
        assert "npx lingo.dev@latest run" in exc_info.value.hint


class TestGeneratePipeline:
    """Tests for stage sequencing."""

    def test_full_run_with_dummy(self, project, spec_file):
        pipeline = GeneratePipeline(project, DummyTranslator())

        result = pipeline.run(spec_file, "es fr")

        assert result.targets == ["es", "fr"]
        assert result.outputs == [project.spec_path("es"), project.spec_path("fr")]
        for path in result.outputs:
            assert path.read_bytes() == spec_file.read_bytes()
        assert json.loads(project.config_path.read_text())["locale"]["source"] == "en"

    def test_custom_source_language(self, project, spec_file):
        GeneratePipeline(project, DummyTranslator()).run(spec_file, "en", source="de")

        assert project.spec_path("de").exists()
        assert project.spec_path("en").exists()

    def test_auth_failure_stops_before_setup(self, project, spec_file, no_sleep):
        sleep, _ = no_sleep
        translator = ScriptedTranslator(auth=[False, False, False])

        with pytest.raises(AuthVerificationFailed):
            GeneratePipeline(project, translator, sleep=sleep).run(spec_file, "es")

        assert not project.root.exists()
        assert "run" not in translator.calls

    def test_missing_spec_stops_before_config(self, project, tmp_path):
        translator = ScriptedTranslator()

        with pytest.raises(SpecNotFound):
            GeneratePipeline(project, translator).run(tmp_path / "missing.yaml", "es")

        assert not project.config_path.exists()
        assert translator.calls == ["auth"]

    def test_no_languages_stops_before_translation(self, project, spec_file):
        translator = ScriptedTranslator()

        with pytest.raises(NoTargetLanguages):
            GeneratePipeline(project, translator).run(spec_file, " , ")

        assert "run" not in translator.calls

    def test_status_messages(self, project, spec_file):
        messages = []
        pipeline = GeneratePipeline(project, DummyTranslator(), notify=lambda level, msg: messages.append(msg))

        pipeline.run(spec_file, "es,fr")

        assert messages == [
            "Authenticated",
            "Project setup complete",
            "Config generated for: es, fr",
            "Translation complete",
        ]


class TestTranslators:
    """Tests for the translator backends."""

    def test_factory(self):
        assert isinstance(create_translator("lingo"), LingoTranslator)
        assert isinstance(create_translator("lingo.dev"), LingoTranslator)
        assert isinstance(create_translator("dummy"), DummyTranslator)

    def test_factory_unknown(self):
        with pytest.raises(ValueError, match="Available backends"):
            create_translator("babelfish")

    def test_lingo_auth_probe(self, monkeypatch):
        seen = {}

        def fake_run(cmd, **kwargs):
            seen["cmd"] = cmd
            return subprocess.CompletedProcess(cmd, 0, stdout="Authenticated as dev@example.com\n")

        monkeypatch.setattr(subprocess, "run", fake_run)
        status = LingoTranslator(npx="npx").check_auth()

        assert status.authenticated
        assert seen["cmd"] == ["npx", "lingo.dev@latest", "auth"]

    def test_lingo_auth_probe_not_logged_in(self, monkeypatch):
        monkeypatch.setattr(
            subprocess, "run",
            lambda cmd, **kwargs: subprocess.CompletedProcess(cmd, 1, stdout="Not authenticated\n"),
        )

        assert not LingoTranslator(npx="npx").check_auth().authenticated

    def test_lingo_auth_probe_spawn_error(self, monkeypatch):
        def boom(cmd, **kwargs):
            raise FileNotFoundError("npx")

        monkeypatch.setattr(subprocess, "run", boom)

        assert not LingoTranslator(npx="npx").check_auth().authenticated

    def test_lingo_login_non_zero(self, monkeypatch):
        monkeypatch.setattr(subprocess, "call", lambda cmd, **kwargs: 1)

        with pytest.raises(LoginFailed, match="code 1"):
            LingoTranslator(npx="npx").login()

    def test_lingo_run_uses_project_root(self, project, monkeypatch):
        seen = {}

        def fake_call(cmd, **kwargs):
            seen.update(cmd=cmd, **kwargs)
            return 0

        monkeypatch.setattr(subprocess, "call", fake_call)
        result = LingoTranslator(npx="npx").run(project)

        assert result.success
        assert seen["cmd"] == ["npx", "lingo.dev@latest", "run"]
        assert seen["cwd"] == project.root.resolve()

    def test_lingo_run_spawn_error_is_a_failed_attempt(self, project, monkeypatch):
        def boom(cmd, **kwargs):
            raise FileNotFoundError("npx")

        monkeypatch.setattr(subprocess, "call", boom)
        result = LingoTranslator(npx="npx").run(project)

        assert not result.success
        assert result.returncode is None


# Quick test runner
if __name__ == "__main__":
    pytest.main([__file__, "-v"])
