import os
from pathlib import Path

import pytest

from factorio_calcdata.prototypes import DataProcessingService, DatasetWriter
from factorio_calcdata.utils.diagnostics import DiagnosticsSink

FACTORIO_DUMP = os.environ.get("FACTORIO_DUMP") or "factorio-dump.json"


@pytest.mark.skipif(not Path(FACTORIO_DUMP).exists(), reason="Factorio dump not found")
def test_vanilla_dump_processing():
    diagnostics = DiagnosticsSink()
    dataset = DataProcessingService(diagnostics=diagnostics).process_file(FACTORIO_DUMP)

    assert "iron-plate" in dataset.items
    assert "iron-gear-wheel" in dataset.normal_recipes
    assert dataset.width > 0
    assert "clock" in dataset.sprites["extra"]
    print(f"✓ {len(dataset.items)} items, {len(dataset.atlas)} icons, {len(diagnostics)} diagnostics")


@pytest.mark.skipif(not Path(FACTORIO_DUMP).exists(), reason="Factorio dump not found")
def test_vanilla_dump_output(tmp_path):
    dataset = DataProcessingService().process_file(FACTORIO_DUMP)
    written = DatasetWriter().write(dataset, tmp_path)

    assert (tmp_path / "data.json") in written
    print(f"[output] wrote {[path.name for path in written]}")
