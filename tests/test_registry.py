"""Tests for the preset registry and preset files."""

import json

import pytest

from code_presenter.model.style_profile import DEFAULT_PROFILE
from code_presenter.styles import PresetError, PresetLoadError, PresetRegistry


@pytest.fixture
def registry():
    return PresetRegistry.with_builtins()


def _write(path, payload):
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


class TestBuiltins:
    def test_builtin_keys(self, registry):
        for key in ("default", "classic", "dark", "vibrant", "alterations"):
            assert key in registry

    def test_default_and_classic_are_default_profile(self, registry):
        assert registry.get_profile("default") == DEFAULT_PROFILE
        assert registry.get_profile("classic") == DEFAULT_PROFILE

    def test_shipped_alterations_preset(self, registry):
        preset = registry.lookup("alterations")
        assert preset.source == "external"
        assert preset.profile.max_width == 90
        assert preset.profile.colors.comment == "#9bcf9b"

    def test_lookup_is_case_insensitive(self, registry):
        assert registry.lookup(" Dark ").key == "dark"

    def test_builtins_cannot_be_removed(self, registry):
        with pytest.raises(PresetError):
            registry.unregister("dark")


class TestRegister:
    def test_last_write_wins(self):
        registry = PresetRegistry()
        registry.register("mine", {"maxWidth": 60})
        registry.register("mine", {"maxWidth": 70})
        assert registry.get_profile("mine").max_width == 70
        assert len(registry) == 1

    def test_unregister_custom(self):
        registry = PresetRegistry()
        registry.register("tmp", {})
        assert registry.unregister("tmp") is True
        assert registry.unregister("tmp") is False

    def test_find_matching(self, registry):
        assert registry.find_matching({"maxWidth": 90, "colors": {"comment": "#9bcf9b"}}) == "alterations"
        assert registry.find_matching({"maxWidth": 41}) is None

    def test_independent_registries(self):
        a = PresetRegistry()
        b = PresetRegistry()
        a.register("only-a", {})
        assert "only-a" not in b


class TestLoadFile:
    def test_load_json_with_key(self, tmp_path):
        registry = PresetRegistry()
        path = _write(tmp_path / "ocean.json", {"key": "ocean", "displayName": "Ocean", "profile": {"maxWidth": 100}})
        preset = registry.load_file(path)
        assert preset.key == "ocean"
        assert preset.display_name == "Ocean"
        assert preset.profile.max_width == 100

    def test_load_bare_profile_uses_file_stem(self, tmp_path):
        registry = PresetRegistry()
        path = _write(tmp_path / "Wide Layout.json", {"maxWidth": 180})
        preset = registry.load_file(path)
        assert preset.key == "wide-layout"
        assert preset.profile.max_width == 180

    def test_load_yaml(self, tmp_path):
        registry = PresetRegistry()
        path = tmp_path / "forest.yaml"
        path.write_text(
            "name: Forest\nprofile:\n  maxWidth: 70\n  fontStyles:\n    commentItalic: true\n",
            encoding="utf-8",
        )
        preset = registry.load_file(path)
        assert preset.key == "forest"
        assert preset.profile.font_styles.comment_italic is True

    def test_invalid_json_raises(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(PresetLoadError) as exc:
            PresetRegistry().load_file(path)
        assert exc.value.path == path

    def test_schema_violation_raises(self, tmp_path):
        path = _write(tmp_path / "bad.json", {"colors": {"comment": 5}})
        with pytest.raises(PresetLoadError, match="invalid preset structure"):
            PresetRegistry().load_file(path)

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(PresetLoadError):
            PresetRegistry().load_file(tmp_path / "absent.json")

    def test_non_utf8_file_raises(self, tmp_path):
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"name": "Caf\xe9", "profile": {}}')
        with pytest.raises(PresetLoadError) as exc:
            PresetRegistry().load_file(path)
        assert exc.value.path == path

    def test_collision_gets_external_key(self, registry, tmp_path):
        path = _write(tmp_path / "dark.json", {"key": "dark", "profile": {"maxWidth": 50}})
        preset = registry.load_file(path)
        assert preset.key == "external:dark"
        assert registry.get_profile("dark").max_width == 80

        again = registry.load_file(path)
        assert again.key == "external:dark-2"


def test_load_directory_skips_broken_files(tmp_path, caplog):
    _write(tmp_path / "good.json", {"name": "Good", "profile": {"maxWidth": 120}})
    (tmp_path / "bad.json").write_text("[", encoding="utf-8")
    (tmp_path / "latin1.json").write_bytes(b'{"name": "Caf\xe9"}')
    (tmp_path / "notes.txt").write_text("ignored", encoding="utf-8")

    registry = PresetRegistry()
    with caplog.at_level("WARNING"):
        loaded = registry.load_directory(tmp_path)

    assert [p.key for p in loaded] == ["good"]
    assert "bad.json" in caplog.text
    assert "latin1.json" in caplog.text


def test_load_directory_missing_dir(tmp_path):
    assert PresetRegistry().load_directory(tmp_path / "nope") == []


class TestSaveCustom:
    def test_writes_reloadable_file(self, registry, tmp_path):
        out = registry.save_custom("My Style", {"maxWidth": 110}, tmp_path)
        assert out == tmp_path / "my-style.json"
        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["key"] == "my-style"
        assert data["name"] == "My Style"
        assert "createdAt" in data
        assert data["profile"]["maxWidth"] == 110

        fresh = PresetRegistry()
        assert fresh.load_file(out).profile == registry.get_profile("my-style")

    def test_refuses_builtin_key(self, registry, tmp_path):
        with pytest.raises(PresetError):
            registry.save_custom("Dark", {}, tmp_path)

    def test_failed_write_leaves_registry_unchanged(self, registry, tmp_path):
        blocker = tmp_path / "presets"
        blocker.write_text("not a directory", encoding="utf-8")
        with pytest.raises(OSError):
            registry.save_custom("Wide", {"maxWidth": 160}, blocker)
        assert "wide" not in registry
