"""Tests for QSettings-backed application settings."""

from pathlib import Path

from factorio_calcdata.settings import AppSettings


class TestDefaults:
    """Test settings defaults on a fresh profile."""

    def test_processing_defaults(self, app_settings: AppSettings) -> None:
        """Test processing options start with their defaults."""
        assert app_settings.language == "en"
        assert app_settings.verbose is False
        assert app_settings.render_sprite_sheet is True
        assert app_settings.icon_size == 32
        assert app_settings.pretty_output is False

    def test_path_defaults(self, app_settings: AppSettings) -> None:
        """Test the input is unset and output goes to ./output."""
        assert app_settings.input_path is None
        assert app_settings.output_dir == Path("output")

    def test_logging_defaults(self, app_settings: AppSettings) -> None:
        """Test console logging is on and file logging off."""
        assert app_settings.console_logging is True
        assert app_settings.console_log_level == "INFO"
        assert app_settings.file_logging is False
        assert app_settings.log_file_path == "logs/factorio_calcdata.csv"


class TestPersistence:
    """Test values survive a new AppSettings instance."""

    def test_values_persist_per_profile(self, app_settings: AppSettings, tmp_path: Path) -> None:
        """Test stored values are read back and profiles are separate."""
        app_settings.language = "de"
        app_settings.icon_size = 64
        app_settings.pretty_output = True
        app_settings.input_path = tmp_path / "dump.json"

        reloaded = AppSettings(profile="pytest")
        assert reloaded.language == "de"
        assert reloaded.icon_size == 64
        assert reloaded.pretty_output is True
        assert reloaded.input_path == tmp_path / "dump.json"

        other = AppSettings(profile="pytest-other")
        assert other.language == "en"
        other.settings.clear()

    def test_invalid_values_are_ignored(self, app_settings: AppSettings) -> None:
        """Test invalid icon sizes and log levels keep the previous value."""
        app_settings.icon_size = 0
        app_settings.console_log_level = "LOUD"

        assert app_settings.icon_size == 32
        assert app_settings.console_log_level == "INFO"

    def test_log_level_is_uppercased(self, app_settings: AppSettings) -> None:
        """Test log levels are normalized."""
        app_settings.console_log_level = "debug"
        assert app_settings.console_log_level == "DEBUG"


class TestValidation:
    """Test configuration validation."""

    def test_missing_input_is_an_error(self, app_settings: AppSettings, tmp_path: Path) -> None:
        """Test a configured but absent dump fails validation."""
        app_settings.input_path = tmp_path / "absent.json"
        result = app_settings.validate()

        assert not result.is_valid
        assert any("does not exist" in error for error in result.errors)

    def test_directory_input_is_an_error(self, app_settings: AppSettings, tmp_path: Path) -> None:
        """Test a directory given as dump fails validation."""
        app_settings.input_path = tmp_path
        result = app_settings.validate()
        assert any("not a file" in error for error in result.errors)

    def test_existing_input_is_valid(self, app_settings: AppSettings, tmp_path: Path) -> None:
        """Test an existing dump passes validation."""
        dump = tmp_path / "dump.json"
        dump.write_text("{}")
        app_settings.input_path = dump

        result = app_settings.validate()
        assert result.is_valid
        assert result.errors == []

    def test_output_file_is_a_warning(self, app_settings: AppSettings, tmp_path: Path) -> None:
        """Test an output path that is a file only warns."""
        blocker = tmp_path / "output"
        blocker.write_text("")
        app_settings.output_dir = blocker

        result = app_settings.validate()
        assert result.is_valid
        assert any("not a directory" in warning for warning in result.warnings)


class TestDiagnosticsVisibility:
    """Test the diagnostics verbosity owned by the logging settings."""

    def test_verbose_is_a_logging_setting(self, app_settings: AppSettings) -> None:
        """Test verbose diagnostics persist under the logging group."""
        app_settings.verbose = True

        assert AppSettings(profile="pytest").verbose is True
        assert app_settings.settings.value("logging/diagnostics_verbose") in (True, "true")

    def test_setup_logging_reads_verbosity(self, app_settings: AppSettings) -> None:
        """Test diagnostics are only let through when verbose is configured."""
        import logging

        from factorio_calcdata.utils import DIAGNOSTICS_LOGGER_NAME, setup_logging

        app_settings.file_logging = False
        diagnostics_logger = logging.getLogger(DIAGNOSTICS_LOGGER_NAME)

        setup_logging(app_settings)
        assert diagnostics_logger.level == logging.WARNING

        app_settings.verbose = True
        setup_logging(app_settings)
        assert diagnostics_logger.level == logging.INFO
