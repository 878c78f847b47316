"""Tests for module scanning."""

import textwrap
import uuid

from smartdi.di import ModuleScanner, get_container


def write_package(root, name):
    package = root / name
    package.mkdir()
    (package / "__init__.py").write_text("")
    (package / "services.py").write_text(textwrap.dedent("""
        from smartdi import injectable, inject

        @injectable
        class Mailer:
            pass

        @injectable(multiple=True)
        class Notifier:
            mailer = inject(Mailer)
    """))
    sub = package / "storage"
    sub.mkdir()
    (sub / "__init__.py").write_text("")
    (sub / "disk.py").write_text(textwrap.dedent("""
        from smartdi import injectable

        @injectable(name="disk")
        class DiskStore:
            pass
    """))
    return package


class TestModuleScanner:
    """Test package walking and discovery reporting."""

    def test_scan_package(self, tmp_path, monkeypatch):
        """All modules beneath a package are imported."""
        name = f"wiring_{uuid.uuid4().hex}"
        write_package(tmp_path, name)
        monkeypatch.syspath_prepend(str(tmp_path))

        discovered = ModuleScanner(get_container()).scan_package(name)

        assert sorted(entry.name for entry in discovered) == ["Mailer", "Notifier", "disk"]
        assert get_container().get("Notifier").mailer is get_container().get("Mailer")

    def test_scan_module_does_not_walk(self, tmp_path, monkeypatch):
        """scan_module imports only the package itself."""
        name = f"wiring_{uuid.uuid4().hex}"
        write_package(tmp_path, name)
        monkeypatch.syspath_prepend(str(tmp_path))

        scanner = ModuleScanner(get_container())

        assert scanner.scan_module(name) == []
        assert len(scanner.scan_package(name)) == 3

    def test_rescan_finds_nothing_new(self, tmp_path, monkeypatch):
        """Modules already imported register nothing again."""
        name = f"wiring_{uuid.uuid4().hex}"
        write_package(tmp_path, name)
        monkeypatch.syspath_prepend(str(tmp_path))

        scanner = ModuleScanner(get_container())
        scanner.scan_package(name)

        assert scanner.scan_package(name) == []

    def test_single_module(self, tmp_path, monkeypatch):
        """A plain module is imported on its own."""
        name = f"wiring_{uuid.uuid4().hex}"
        write_package(tmp_path, name)
        monkeypatch.syspath_prepend(str(tmp_path))

        discovered = ModuleScanner(get_container()).scan_module(f"{name}.storage.disk")

        assert [entry.name for entry in discovered] == ["disk"]

    def test_scan_modules_walks_packages(self, tmp_path, monkeypatch):
        """scan_modules treats every name as a package."""
        name = f"wiring_{uuid.uuid4().hex}"
        write_package(tmp_path, name)
        monkeypatch.syspath_prepend(str(tmp_path))

        discovered = ModuleScanner(get_container()).scan_modules([name])

        assert len(discovered) == 3

    def test_missing_module(self):
        """An unimportable module is skipped."""
        scanner = ModuleScanner(get_container())

        assert scanner.scan_modules([f"missing_{uuid.uuid4().hex}"]) == []
        assert scanner.scan_module(f"missing_{uuid.uuid4().hex}") == []
