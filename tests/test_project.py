"""
Tests for project setup and locale configuration.

Run with: pytest tests/test_project.py -v
"""

import json

import pytest

from docslingo.config import ProjectConfig
from docslingo.errors import InvalidLocaleConfig, NoTargetLanguages, SpecNotFound
from docslingo.locales import build_locale_config, parse_languages, read_locale_config, write_locale_config
from docslingo.project import setup_spec


class TestParseLanguages:
    """Tests for splitting the --languages argument."""

    @pytest.mark.parametrize("raw", ["es,fr,de", "es fr de", "es, fr  de", " es,,fr\tde\n", "es ,fr, de,"])
    def test_mixed_separators(self, raw):
        assert parse_languages(raw) == ["es", "fr", "de"]

    @pytest.mark.parametrize("raw", ["", "   ", ",", " , ,\t", None])
    def test_empty_input(self, raw):
        assert parse_languages(raw) == []

    def test_order_and_duplicates_kept(self):
        assert parse_languages("fr,es,fr") == ["fr", "es", "fr"]


class TestLocaleConfig:
    """Tests for i18n.json generation."""

    def test_config_shape(self):
        config = build_locale_config(["es", "fr"], "en")

        assert config["$schema"] == "https://lingo.dev/schema/i18n.json"
        assert config["version"] == "1.12"
        assert config["locale"] == {"source": "en", "targets": ["es", "fr"]}
        assert config["buckets"] == {"yaml": {"include": ["i18n/[locale]/*.yaml"]}}

    def test_write_returns_targets(self, project):
        targets = write_locale_config(project, "es, fr", source="de")

        assert targets == ["es", "fr"]
        written = json.loads(project.config_path.read_text())
        assert written["locale"] == {"source": "de", "targets": ["es", "fr"]}
        assert read_locale_config(project) == written

    def test_write_overwrites(self, project):
        write_locale_config(project, "es")
        write_locale_config(project, "pt")

        assert read_locale_config(project)["locale"]["targets"] == ["pt"]

    @pytest.mark.parametrize("content", ["{not json", "[\"es\"]"])
    def test_read_invalid(self, project, content):
        project.root.mkdir(parents=True, exist_ok=True)
        project.config_path.write_text(content)

        with pytest.raises(InvalidLocaleConfig) as exc:
            read_locale_config(project)
        assert exc.value.hint

    @pytest.mark.parametrize("raw", ["", "  ", ", ,"])
    def test_no_targets_writes_nothing(self, project, raw):
        with pytest.raises(NoTargetLanguages):
            write_locale_config(project, raw)

        assert not project.config_path.exists()


class TestSetupSpec:
    """Tests for copying the spec into the project."""

    def test_copies_under_source_language(self, project, spec_file):
        destination = setup_spec(project, spec_file, "en")

        assert destination == project.root / "i18n" / "en" / "api.yaml"
        assert destination.read_bytes() == spec_file.read_bytes()

    def test_idempotent(self, project, spec_file):
        first = setup_spec(project, spec_file, "en").read_bytes()
        second = setup_spec(project, spec_file, "en").read_bytes()

        assert first == second == spec_file.read_bytes()

    def test_rerun_picks_up_changes(self, project, spec_file):
        setup_spec(project, spec_file, "en")
        spec_file.write_text("openapi: 3.1.0\n")

        assert setup_spec(project, spec_file, "en").read_text() == "openapi: 3.1.0\n"

    def test_missing_spec(self, project, tmp_path):
        with pytest.raises(SpecNotFound):
            setup_spec(project, tmp_path / "nope.yaml", "en")

        assert not project.root.exists()

    def test_directory_is_not_a_spec(self, project, tmp_path):
        with pytest.raises(SpecNotFound):
            setup_spec(project, tmp_path, "en")


class TestProjectConfig:
    """Tests for path derivation and environment overrides."""

    def test_defaults(self):
        config = ProjectConfig()

        assert str(config.root) == ".docslingo"
        assert config.viewer_dir == config.root / "viewer"
        assert config.public_dir == config.root / "viewer" / "public" / "trans-spec"

    def test_from_env(self, tmp_path):
        config = ProjectConfig.from_env({"DOCSLINGO_DIR": str(tmp_path / "proj")})

        assert config.root == tmp_path / "proj"
        assert config.spec_path("es") == tmp_path / "proj" / "i18n" / "es" / "api.yaml"

    def test_viewer_dir_override(self, tmp_path):
        config = ProjectConfig.from_env({
            "DOCSLINGO_DIR": str(tmp_path / "proj"),
            "DOCSLINGO_VIEWER_DIR": str(tmp_path / "web"),
        })

        assert config.index_path == tmp_path / "web" / "public" / "trans-spec" / "index.json"


# Quick test runner
if __name__ == "__main__":
    pytest.main([__file__, "-v"])
