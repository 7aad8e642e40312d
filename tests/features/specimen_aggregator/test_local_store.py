import pytest

from config_ready.core.common.enums import LayoutConvention
from config_ready.features.specimen_aggregator.data import local_store, manifest_writer
from config_ready.features.specimen_aggregator.data.local_store import LocalSpecimenStore
from config_ready.features.specimen_aggregator.data.manifest_writer import FILE_HEADER, PhpManifestWriter, include_line
from config_ready.features.specimen_aggregator.domain.models import Specimen
from config_ready.features.specimen_aggregator.service.api import run


@pytest.fixture
def specimen(tmp_path):
    src = tmp_path / "specimen.php"
    src.write_bytes(b"<?php return ['key' => \"\xc5\xbc\"];\r\n")
    return Specimen.create(src, "acme", "widget")


def test_install_copies_bytes_verbatim(tmp_path, specimen):
    dest = tmp_path / "config"
    dest.mkdir()

    assert LocalSpecimenStore().install(specimen, dest) is True

    assert (dest / ".config.acme.widget.php").read_bytes() == specimen.origin_path.read_bytes()


def test_install_never_overwrites_existing_target(tmp_path, specimen):
    dest = tmp_path / "config"
    dest.mkdir()
    target = dest / ".config.acme.widget.php"
    target.write_text("locally edited")

    assert LocalSpecimenStore().install(specimen, dest) is False
    assert target.read_text() == "locally edited"


def test_failed_copy_leaves_no_partial_target(tmp_path, specimen, monkeypatch):
    dest = tmp_path / "config"
    dest.mkdir()

    def broken_copy(src, dst):
        dst.write(b"<?php")
        raise OSError("disk full")

    monkeypatch.setattr(local_store.shutil, "copyfileobj", broken_copy)

    with pytest.raises(OSError, match="disk full"):
        LocalSpecimenStore().install(specimen, dest)

    assert not (dest / ".config.acme.widget.php").exists()


def test_missing_source_raises_and_cleans_up(tmp_path):
    dest = tmp_path / "config"
    dest.mkdir()
    ghost = Specimen.create(tmp_path / "gone.php", "acme", "ghost")

    with pytest.raises(FileNotFoundError):
        LocalSpecimenStore().install(ghost, dest)

    assert list(dest.iterdir()) == []


def test_ensure_destination_seeds_once(tmp_path, resources_config):
    dest = tmp_path / "config"
    store = LocalSpecimenStore()

    store.ensure_destination(dest, resources_config)
    seed = dest / ".config.php"
    assert seed.read_text() == FILE_HEADER

    seed.write_text("<?php return ['user' => 'edits'];")
    store.ensure_destination(dest, resources_config)
    assert seed.read_text() == "<?php return ['user' => 'edits'];"


def test_ensure_destination_without_manifest_has_no_seed(tmp_path, legacy_config):
    dest = tmp_path / "config"

    LocalSpecimenStore().ensure_destination(dest, legacy_config)

    assert dest.is_dir()
    assert list(dest.iterdir()) == []


def test_manifest_lists_includes_in_given_order(tmp_path, resources_config):
    dest = tmp_path / "config"
    dest.mkdir()
    specimens = [
        Specimen.create(tmp_path / "b.php", "b", "two"),
        Specimen.create(tmp_path / "a.php", "a", "one"),
    ]

    path = PhpManifestWriter().write(specimens, dest, resources_config)

    assert path == dest / ".config.includes.php"
    assert path.read_text() == (
        FILE_HEADER
        + "\n"
        + "require_once __DIR__ . '/.config.b.two.php';\n"
        + "require_once __DIR__ . '/.config.a.one.php';\n"
    )
    assert not (dest / ".config.includes.php.tmp").exists()


def test_manifest_is_rewritten_wholesale(tmp_path, resources_config):
    dest = tmp_path / "config"
    dest.mkdir()
    writer = PhpManifestWriter()
    writer.write([Specimen.create(tmp_path / "a.php", "a", "one")], dest, resources_config)

    path = writer.write([], dest, resources_config)

    assert path.read_text() == FILE_HEADER


def test_include_line_escapes_php_quote_and_backslash():
    assert include_line(".config.acme.o'brien.php") == "require_once __DIR__ . '/.config.acme.o\\'brien.php';"
    assert include_line(".config.acme.a\\b.php") == "require_once __DIR__ . '/.config.acme.a\\\\b.php';"


def test_manifest_with_quoted_package_name(project_root, resources_config, add_specimen):
    add_specimen(project_root, "acme", "o'brien", resources_config)

    summary = run(project_root, LayoutConvention.RESOURCES)

    assert (project_root / "config" / ".config.acme.o'brien.php").exists()
    assert "require_once __DIR__ . '/.config.acme.o\\'brien.php';\n" in summary.manifest_path.read_text()


def test_failed_manifest_replace_leaves_no_tmp(tmp_path, resources_config, monkeypatch):
    dest = tmp_path / "config"
    dest.mkdir()

    def broken_replace(src, dst):
        raise PermissionError("read-only")

    monkeypatch.setattr(manifest_writer.os, "replace", broken_replace)

    with pytest.raises(PermissionError):
        PhpManifestWriter().write([Specimen.create(tmp_path / "a.php", "a", "one")], dest, resources_config)

    assert list(dest.iterdir()) == []
