# tests/unit/application/services/test_export_invoker.py

"""Tests for the export invoker"""

# Standard library imports
from io import BytesIO
from json import dumps
from unittest.mock import patch
from zipfile import ZIP_STORED
from zipfile import ZipFile

# Third party imports
import pytest

# Local imports
from record_export.application.commands import ExportCommand
from record_export.application.services import ExportInvoker
from record_export.core.domain.errors import ArchiveError
from record_export.core.domain.errors import PreconditionError
from record_export.core.domain.errors import RenderError
from record_export.infrastructure.config import ConfigLoader
from tests.fixtures.renderers import FailingRenderer
from tests.fixtures.renderers import StaticRenderer


def static_command(file_name: str, content: bytes | None = None) -> ExportCommand:
    return ExportCommand(StaticRenderer(file_name, content), [])


def read_archive(path) -> dict[str, bytes]:
    with ZipFile(BytesIO(path.read_bytes())) as archive:
        return {name: archive.read(name) for name in archive.namelist()}


class TestRunActive:
    """Test single-command runs"""

    def test_without_command_raises_precondition_error(self, tmp_path, default_config):
        invoker = ExportInvoker(tmp_path, config=default_config)

        with pytest.raises(PreconditionError, match="No command set"):
            invoker.run_active()

        assert list(tmp_path.iterdir()) == []

    def test_runs_active_command(self, tmp_path, default_config):
        invoker = ExportInvoker(tmp_path, config=default_config)
        invoker.set_command(static_command("Product.xlsx", b"xlsx"))

        path = invoker.run_active()

        assert path == tmp_path / "Product.xlsx"
        assert path.read_bytes() == b"xlsx"

    def test_set_command_replaces_previous(self, tmp_path, default_config):
        invoker = ExportInvoker(tmp_path, config=default_config)
        first = static_command("a.bin")
        second = static_command("b.bin")

        invoker.set_command(first)
        invoker.set_command(second)
        invoker.run_active()

        assert invoker.active_command is second
        assert first.renderer.calls == 0
        assert [path.name for path in tmp_path.iterdir()] == ["b.bin"]

    def test_run_active_is_idempotent(self, tmp_path, default_config):
        invoker = ExportInvoker(tmp_path, config=default_config)
        invoker.set_command(static_command("a.bin", b"same"))

        first = invoker.run_active().read_bytes()
        second = invoker.run_active().read_bytes()

        assert first == second == b"same"

    def test_set_command_does_not_register(self, tmp_path, default_config):
        invoker = ExportInvoker(tmp_path, config=default_config)
        invoker.set_command(static_command("a.bin"))

        assert invoker.commands == ()

    def test_output_dir_defaults_to_configured_directory(self, work_dir, default_config):
        invoker = ExportInvoker(config=default_config)
        invoker.set_command(static_command("a.bin"))

        assert invoker.run_active().resolve() == (work_dir / "a.bin").resolve()


class TestRunAllIntoOneArchive:
    """Test batch runs into a single archive"""

    def test_entries_in_registration_order(self, tmp_path, default_config):
        invoker = ExportInvoker(tmp_path, config=default_config)
        invoker.register(static_command("Product.xlsx", b"sheet"))
        invoker.register(static_command("Product.pdf", b"document"))

        path = invoker.run_all_into_one_archive()

        assert path == tmp_path / "files.zip"
        with ZipFile(path) as archive:
            assert archive.namelist() == ["Product.xlsx", "Product.pdf"]
        assert read_archive(path) == {"Product.xlsx": b"sheet", "Product.pdf": b"document"}

    def test_entries_match_standalone_output(self, tmp_path, default_config):
        """Each entry holds the bytes its command writes on its own"""
        commands = [static_command("a.bin"), static_command("b.bin")]
        invoker = ExportInvoker(tmp_path / "batch", config=default_config)
        for command in commands:
            invoker.register(command)

        entries = read_archive(invoker.run_all_into_one_archive())

        for command in commands:
            standalone = command.write_standalone(tmp_path / "single").read_bytes()
            assert entries[command.file_name] == standalone

    def test_empty_registry_gives_empty_archive(self, tmp_path, default_config):
        invoker = ExportInvoker(tmp_path, config=default_config)

        path = invoker.run_all_into_one_archive()

        assert read_archive(path) == {}

    def test_failure_writes_no_archive(self, tmp_path, default_config):
        invoker = ExportInvoker(tmp_path, config=default_config)
        third = static_command("c.bin")
        invoker.register(static_command("a.bin"))
        invoker.register(ExportCommand(FailingRenderer("b.bin"), []))
        invoker.register(third)

        with pytest.raises(RenderError):
            invoker.run_all_into_one_archive()

        assert not (tmp_path / "files.zip").exists()
        assert third.renderer.calls == 0

    def test_failure_keeps_previous_archive(self, tmp_path, default_config):
        previous = tmp_path / "files.zip"
        previous.write_bytes(b"previous archive")
        invoker = ExportInvoker(tmp_path, config=default_config)
        invoker.register(ExportCommand(FailingRenderer("a.bin"), []))

        with pytest.raises(RenderError):
            invoker.run_all_into_one_archive()

        assert previous.read_bytes() == b"previous archive"

    def test_io_failure_propagates(self, tmp_path, default_config):
        invoker = ExportInvoker(tmp_path, config=default_config)
        invoker.register(static_command("a.bin"))

        with patch(
            "record_export.infrastructure.persistence._file_writer.replace",
            side_effect=OSError("no space left"),
        ):
            with pytest.raises(OSError, match="no space left"):
                invoker.run_all_into_one_archive()

        assert list(tmp_path.iterdir()) == []

    def test_duplicate_names_rejected_before_rendering(self, tmp_path, default_config):
        invoker = ExportInvoker(tmp_path, config=default_config)
        first = static_command("Product.pdf")
        invoker.register(first)
        invoker.register(static_command("Product.pdf"))

        with pytest.raises(ArchiveError, match="duplicate archive entries: Product.pdf"):
            invoker.run_all_into_one_archive()

        assert first.renderer.calls == 0
        assert not (tmp_path / "files.zip").exists()

    def test_registry_kept_after_run(self, tmp_path, default_config):
        invoker = ExportInvoker(tmp_path, config=default_config)
        command = static_command("a.bin", b"x")
        invoker.register(command)

        first = read_archive(invoker.run_all_into_one_archive())
        second = read_archive(invoker.run_all_into_one_archive())

        assert invoker.commands == (command,)
        assert first == second

    def test_archive_name_override(self, tmp_path, default_config):
        invoker = ExportInvoker(tmp_path, archive_name="products.zip", config=default_config)

        assert invoker.run_all_into_one_archive() == tmp_path / "products.zip"

    @pytest.mark.parametrize("name", ["../escape.zip", "sub/files.zip", "files.tar", ""])
    def test_archive_name_override_validated(self, tmp_path, default_config, name):
        """Explicit names follow the same rule as configured ones"""
        with pytest.raises(ValueError, match="Archive name"):
            ExportInvoker(tmp_path, archive_name=name, config=default_config)

        assert list(tmp_path.iterdir()) == []

    def test_configured_compression_and_name(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text(
            dumps({"output": {"archive_name": "bundle.zip", "compression": "stored"}})
        )
        invoker = ExportInvoker(tmp_path / "out", config=ConfigLoader(str(config_file)))
        invoker.register(static_command("a.bin", b"abc"))

        path = invoker.run_all_into_one_archive()

        assert path == tmp_path / "out" / "bundle.zip"
        with ZipFile(path) as archive:
            assert archive.getinfo("a.bin").compress_type == ZIP_STORED

    def test_failure_logged(self, tmp_path, default_config, caplog):
        invoker = ExportInvoker(tmp_path, config=default_config)
        invoker.register(ExportCommand(FailingRenderer("a.bin"), []))

        with pytest.raises(RenderError):
            invoker.run_all_into_one_archive()

        assert "Batch export aborted" in caplog.text
