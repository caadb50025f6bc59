# Shared pytest fixtures
from __future__ import annotations

import tempfile
from collections.abc import Callable
from pathlib import Path

import pandas as pd
import pytest

from horas_extras.logging.init import reset_logging

HEADER = ["Fecha", "Hora desde", "Hora hasta", "Detalle"]


@pytest.fixture(autouse=True)
def _clean_logging():
    reset_logging()
    yield
    reset_logging()


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        (p / "logs").mkdir()
        monkeypatch.chdir(p)
        yield p


@pytest.fixture()
def sample_config_yaml() -> str:
    return """source_directory: ./data
input_sheet: Entrada
output_sheet: Salida
validation:
  band_start: "09:00"
  band_end: "16:42"
  band_overlap_is_error: true
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "horas_extras.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


def make_workbook(
    path: Path,
    rows: list[list[object]],
    *,
    input_sheet: str | None = "Entrada",
    output_sheet: str | None = "Salida",
    header: list[str] | None = None,
) -> Path:
    """Create a MisHorasExtras style workbook (header in row 1, data from row 2)."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        if input_sheet is not None:
            df = pd.DataFrame([header or HEADER] + rows)
            df.to_excel(writer, sheet_name=input_sheet, header=False, index=False)
        if output_sheet is not None:
            pd.DataFrame([["Errores"]]).to_excel(writer, sheet_name=output_sheet, header=False, index=False)
        if input_sheet is None and output_sheet is None:
            pd.DataFrame([["x"]]).to_excel(writer, sheet_name="Otra", header=False, index=False)
    return path


@pytest.fixture()
def workbook_factory(temp_workdir: Path) -> Callable[..., Path]:
    def _factory(name: str, rows: list[list[object]], **kwargs) -> Path:
        return make_workbook(temp_workdir / "data" / name, rows, **kwargs)

    return _factory
