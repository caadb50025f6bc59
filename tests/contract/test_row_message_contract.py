from __future__ import annotations

import pytest

from horas_extras.core.validator import validate_row
from horas_extras.models.config_models import ValidationConfig
from horas_extras.models.entry import RawRow

"""Row message texts and order are written into the workbook verbatim."""


@pytest.mark.parametrize(
    "date_text,start,end,expected",
    [
        ("", "", "", "Fecha invalida; Hora desde invalida; Hora hasta invalida"),
        ("08/01/2024", "19:00", "18:00", "Hora desde debe ser menor a Hora hasta"),
        ("08/01/2024", "08:00", "10:00", "Horario superpuesto con la franja de referencia 09:00-16:42"),
        ("08/01/2024", "16:42", "18:00", ""),
        ("08/01/2024", "07:00", "09:00", ""),
        ("31/02/2024", "17:00", "18:00", "Fecha invalida"),
    ],
)
def test_row_text(date_text, start, end, expected):
    result = validate_row(RawRow(2, date_text, start, end))
    assert result.report.text == expected


def test_band_notice_keeps_entry_when_not_an_error():
    cfg = ValidationConfig(band_overlap_is_error=False)
    result = validate_row(RawRow(2, "08/01/2024", "08:00", "10:00"), cfg)
    assert result.report.has_errors is False
    assert result.report.text == "Horario superpuesto con la franja de referencia 09:00-16:42"
    assert result.entry is not None
