import pytest
from rich.console import Console

from airdrop_checker.domain.models.result_table import HEADER
from airdrop_checker.infrastructure.cli.display import ConsoleDisplay


@pytest.fixture
def console():
    return Console(record=True, width=160, force_terminal=False)


@pytest.fixture
def console_display(console):
    return ConsoleDisplay(console=console)


def test_display_results_renders_header_and_rows(console_display, console):
    rows = [("0xabc", "Alpha (ALP)", 10, "https://a"), ("0xdef", "Beta (BET)", "2.5", "https://b")]
    console_display.display_results(HEADER, rows)

    text = console.export_text()
    for column in HEADER:
        assert column in text
    assert "Alpha (ALP)" in text
    assert "https://b" in text


def test_display_results_with_no_rows_still_prints_header(console_display, console):
    console_display.display_results(HEADER, [])
    assert "ClaimURL" in console.export_text()


@pytest.mark.parametrize("method, title", [
    ("display_info", "Info"),
    ("display_warning", "Warning"),
    ("display_error", "Error"),
])
def test_message_panels(console_display, console, method, title):
    getattr(console_display, method)("Something happened")
    text = console.export_text()
    assert title in text
    assert "Something happened" in text


def test_progress_lifecycle(console_display):
    console_display.start_progress(3)
    console_display.advance_progress()
    console_display.advance_progress(2)
    console_display.stop_progress()
    # Stopping twice or advancing after stop is harmless
    console_display.stop_progress()
    console_display.advance_progress()
