"""Basic unit tests for factorio-calcdata modules."""

from typing import Any

from factorio_calcdata.settings import AppSettings


class TestSettingsInitialization:
    """Test settings initialization and basic operations."""

    def test_app_settings_init(self, app_settings: AppSettings) -> None:
        """Test AppSettings can be initialized."""
        assert app_settings is not None
        assert app_settings.profile == "pytest"

    def test_app_settings_validation(self, app_settings: AppSettings) -> None:
        """Test settings validation returns result."""
        validation = app_settings.validate()
        assert validation is not None
        assert validation.is_valid
        assert "Input dump path not set" in validation.warnings


class TestPrototypeModels:
    """Test raw prototype helpers."""

    def test_raw_table_defaults_to_empty(self) -> None:
        """Test missing prototype types read as empty tables."""
        from factorio_calcdata.prototypes.models import get_raw_table

        content: dict[str, Any] = {"item": {"coal": {"name": "coal"}}}
        assert get_raw_table(content, "item") == {"coal": {"name": "coal"}}
        assert get_raw_table(content, "fluid") == {}

    def test_find_item_prototype_across_types(self) -> None:
        """Test item lookup searches every item-like type."""
        from factorio_calcdata.prototypes.models import find_item_prototype

        content: dict[str, Any] = {
            "fluid": {"water": {"type": "fluid", "name": "water"}},
            "module": {"speed-module": {"type": "module", "name": "speed-module"}},
        }
        assert find_item_prototype(content, "water")["type"] == "fluid"
        assert find_item_prototype(content, "speed-module")["type"] == "module"
        assert find_item_prototype(content, "stone") is None

    def test_single_result_name_forms(self) -> None:
        """Test single output detection for every result form."""
        from factorio_calcdata.prototypes.models import single_result_name

        assert single_result_name({"result": "iron-plate"}) == "iron-plate"
        assert single_result_name({"results": [{"name": "water", "amount": 1}]}) == "water"
        assert single_result_name({"results": [["coal", 2]]}) == "coal"
        assert single_result_name({"results": [["a", 1], ["b", 1]]}) is None
        assert single_result_name({}) is None


class TestRecipeVariantMerge:
    """Test difficulty override merging."""

    def test_merge_does_not_mutate_inputs(self) -> None:
        """Test merging returns a new dict."""
        from factorio_calcdata.prototypes.merge import merge_with_override

        base = {"a": 1, "b": 2}
        override = {"b": 3}
        merged = merge_with_override(base, override, drop_keys=("a",))
        assert merged == {"b": 3}
        assert base == {"a": 1, "b": 2}
        assert override == {"b": 3}

    def test_build_variant_drops_both_variant_keys(self) -> None:
        """Test variant sub-records never leak into the flattened recipe."""
        from factorio_calcdata.prototypes.merge import build_variant

        raw = {
            "name": "gear",
            "energy_required": 1,
            "normal": {"ingredients": [["iron-plate", 2]]},
            "expensive": {"ingredients": [["iron-plate", 4]], "energy_required": 2},
        }
        normal = build_variant(raw, "normal")
        expensive = build_variant(raw, "expensive")

        assert normal == {"name": "gear", "energy_required": 1, "ingredients": [["iron-plate", 2]]}
        assert expensive["ingredients"] == [["iron-plate", 4]]
        assert expensive["energy_required"] == 2
        assert "normal" not in expensive and "expensive" not in expensive

    def test_build_variant_without_override(self) -> None:
        """Test recipes without variant data are copied unchanged."""
        from factorio_calcdata.prototypes.merge import build_variant

        raw = {"name": "plate", "result": "iron-plate"}
        assert build_variant(raw, "expensive") == raw


class TestUtilsLogging:
    """Test logging configuration."""

    def test_logging_setup_with_settings(self, app_settings: AppSettings) -> None:
        """Test logging setup works with settings."""
        from factorio_calcdata.utils.logging_config import setup_logging

        app_settings.file_logging = False
        # setup_logging returns None but should not raise
        setup_logging(app_settings, verbose=True)

    def test_diagnostics_sink_buffers_messages(self) -> None:
        """Test diagnostics are buffered and forwarded to the callback."""
        from factorio_calcdata.utils.diagnostics import DiagnosticsSink

        seen: list[str] = []
        sink = DiagnosticsSink(max_messages=2)
        sink.set_callback(seen.append)
        sink.emit("first")
        sink.emit("second")
        sink.emit("third")

        assert sink.messages == ["second", "third"]
        assert seen == ["first", "second", "third"]
        assert sink.contains("thi")
        sink.clear()
        assert len(sink) == 0
