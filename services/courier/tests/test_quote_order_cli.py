from __future__ import annotations

import pytest
from scripts.quote_order import main


def test_cli_prints_reference_total(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    for name in ("COURIER_TAX_RATE", "COURIER_DISCOUNT_POLICY", "COURIER_DELIVERY_FEE"):
        monkeypatch.delenv(name, raising=False)

    code = main(["--express", "--line", "burger:2", "--line", "fries:1", "--advance", "3"])

    out = capsys.readouterr().out
    assert code == 0
    assert "[COMPLETED] total=35.90" in out


def test_cli_reports_error_kind(capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["--line", "burger:0"])

    assert code == 2
    assert capsys.readouterr().out.startswith("ERR InvalidQuantity:")


def test_cli_reports_unknown_item(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--line", "caviar:1"]) == 2
    assert "ERR CatalogItemNotFound" in capsys.readouterr().out


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("COURIER_DISCOUNT_POLICY", "bogo"),
        ("COURIER_CATALOG", "nope"),
        ("COURIER_DELIVERY_FEE", "three"),
    ],
)
def test_cli_reports_bad_config(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    name: str,
    value: str,
) -> None:
    monkeypatch.setenv(name, value)

    assert main(["--line", "burger:1"]) == 2
    assert capsys.readouterr().out.startswith("ERR ConfigError: ")
