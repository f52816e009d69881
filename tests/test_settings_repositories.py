"""Tests for the INI and sqlite settings backends."""

import os

import pytest

from gpu_update_checker.settings import SettingsStructureError, build_settings_repository, default_config_path
from gpu_update_checker.settings.ini_repository import IniSettingsRepository, validate_entry
from gpu_update_checker.settings.sqlite_repository import SqliteSettingsRepository


@pytest.fixture(params=["ini", "sqlite"])
def repo(request, tmp_path):
    name = "app.config" if request.param == "ini" else "app.db"
    return build_settings_repository(tmp_path / "cfg" / name, request.param)


class TestBothBackends:
    def test_missing_resource(self, repo):
        assert not repo.exists()
        assert repo.get_pref("Driver type") is None
        assert repo.all_prefs() == {}
        # probing must not create the file
        assert not repo.exists()

    def test_set_creates_resource_and_round_trips(self, repo):
        repo.set_pref("Check for Updates", "true")
        repo.set_pref("Download location", "D:\\Drivers")
        assert repo.exists()
        assert repo.get_pref("Check for Updates") == "true"
        assert repo.all_prefs() == {"Check for Updates": "true", "Download location": "D:\\Drivers"}

    def test_keys_are_case_sensitive(self, repo):
        repo.set_pref("GPU ID", "1")
        assert repo.get_pref("gpu id") is None
        assert repo.get_pref("GPU ID") == "1"

    def test_upsert(self, repo):
        repo.set_pref("Driver type", "grd")
        repo.set_pref("Driver type", "sd")
        assert repo.all_prefs() == {"Driver type": "sd"}

    def test_wipe(self, repo):
        repo.set_pref("Driver type", "grd")
        assert repo.wipe() is True
        assert not repo.exists()
        assert repo.get_pref("Driver type") is None

    def test_wipe_when_absent(self, repo):
        assert repo.wipe() is True

    def test_garbage_file_is_structural(self, repo):
        repo.path.parent.mkdir(parents=True, exist_ok=True)
        repo.path.write_bytes(b"\x00\x01 definitely not settings \xff" * 64)
        with pytest.raises(SettingsStructureError):
            repo.get_pref("Driver type")
        with pytest.raises(SettingsStructureError):
            repo.set_pref("Driver type", "sd")


class TestIniRepository:
    def test_file_layout(self, tmp_path):
        path = tmp_path / "app.config"
        repo = IniSettingsRepository(path)
        repo.set_pref("Minimal install", "false")
        text = path.read_text(encoding="utf-8")
        assert text.startswith("[appSettings]")
        assert "Minimal install = false" in text

    def test_reads_are_cached_until_reload(self, tmp_path):
        path = tmp_path / "app.config"
        repo = IniSettingsRepository(path)
        repo.set_pref("Driver type", "grd")

        path.write_text("[appSettings]\nDriver type = sd\n", encoding="utf-8")
        assert repo.get_pref("Driver type") == "grd"
        repo.reload()
        assert repo.get_pref("Driver type") == "sd"

    def test_write_reparses_current_file(self, tmp_path):
        path = tmp_path / "app.config"
        repo = IniSettingsRepository(path)
        repo.set_pref("Driver type", "grd")

        path.write_text("[appSettings]\nDriver type = grd\nGPU ID = 7\n", encoding="utf-8")
        repo.set_pref("Minimal install", "true")
        assert repo.all_prefs() == {"Driver type": "grd", "GPU ID": "7", "Minimal install": "true"}

    def test_other_sections_are_ignored(self, tmp_path):
        path = tmp_path / "app.config"
        path.write_text("[other]\nDriver type = sd\n", encoding="utf-8")
        assert IniSettingsRepository(path).get_pref("Driver type") is None

    def test_no_temp_file_left_behind(self, tmp_path):
        repo = IniSettingsRepository(tmp_path / "app.config")
        repo.set_pref("Driver type", "grd")
        assert sorted(p.name for p in tmp_path.iterdir()) == ["app.config"]

    def test_failed_write_removes_temp_file(self, tmp_path, monkeypatch):
        repo = IniSettingsRepository(tmp_path / "app.config")
        repo.set_pref("Driver type", "grd")

        def refuse(src, dst):
            raise PermissionError("read-only")

        monkeypatch.setattr(os, "replace", refuse)
        with pytest.raises(PermissionError):
            repo.set_pref("Driver type", "sd")
        assert sorted(p.name for p in tmp_path.iterdir()) == ["app.config"]
        assert IniSettingsRepository(tmp_path / "app.config").get_pref("Driver type") == "grd"

    def test_padded_values_are_quoted(self, tmp_path):
        path = tmp_path / "app.config"
        repo = IniSettingsRepository(path)
        repo.set_pref("Download location", " /tmp/drv ")
        repo.set_pref("Driver type", "sd")

        text = path.read_text(encoding="utf-8")
        assert 'Download location = " /tmp/drv "' in text
        assert "Driver type = sd" in text
        assert IniSettingsRepository(path).get_pref("Download location") == " /tmp/drv "

    def test_hand_quoted_value_is_unquoted(self, tmp_path):
        path = tmp_path / "app.config"
        path.write_text('[appSettings]\nDownload location = "D:\\My Drivers"\n', encoding="utf-8")
        assert IniSettingsRepository(path).get_pref("Download location") == "D:\\My Drivers"

    def test_default_section_is_ignored_and_not_copied(self, tmp_path):
        path = tmp_path / "app.config"
        path.write_text("[DEFAULT]\nGPU ID = 42\n\n[appSettings]\nDriver type = sd\n", encoding="utf-8")
        repo = IniSettingsRepository(path)
        assert repo.get_pref("GPU ID") is None

        repo.set_pref("Minimal install", "true")
        assert repo.all_prefs() == {"Driver type": "sd", "Minimal install": "true"}
        assert "GPU ID" not in path.read_text(encoding="utf-8")

    @pytest.mark.parametrize(
        "key,value",
        [("", "x"), (" padded ", "x"), ("a=b", "x"), ("a:b", "x"), ("[x]", "x"), ("#comment", "x"), ("ok", "two\nlines")],
    )
    def test_unstorable_entries(self, key, value):
        with pytest.raises(ValueError):
            validate_entry(key, value)


class TestSqliteRepository:
    def test_close_then_reopen(self, tmp_path):
        path = tmp_path / "app.db"
        repo = SqliteSettingsRepository(path)
        repo.set_pref("Driver type", "sd")
        repo.close()
        assert SqliteSettingsRepository(path).get_pref("Driver type") == "sd"


class TestFactory:
    def test_default_paths(self, tmp_path, monkeypatch):
        monkeypatch.setenv("LOCALAPPDATA", str(tmp_path))
        assert default_config_path("ini") == tmp_path / "Hawaii_Beach" / "TinyNvidiaUpdateChecker" / "app.config"
        assert default_config_path("sqlite").name == "app.db"

    def test_xdg_fallback(self, tmp_path, monkeypatch):
        monkeypatch.delenv("LOCALAPPDATA", raising=False)
        monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
        assert default_config_path().parent == tmp_path / "Hawaii_Beach" / "TinyNvidiaUpdateChecker"

    def test_unknown_backend(self, tmp_path):
        with pytest.raises(ValueError):
            build_settings_repository(tmp_path / "x", "yaml")
