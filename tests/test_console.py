# -*- coding: utf-8 -*-
# tests/test_console.py
# Task table rendering

from gaiai.console import center_text, format_task_table, strip_ansi


def test_task_table_rows_line_up():
    table = format_task_table([
        {"name": "Daily Check-in", "type": "Checkin", "credit": 10, "completed": True},
        {"name": "A very long task name here", "type": "Prompt", "credit": 0, "completed": False},
        {"name": None},
    ])
    lines = table.splitlines()

    assert len({len(line) for line in lines}) == 1
    assert "| Daily Check-in       | Checkin  | 10    | Complete |" in lines
    assert "| A very long task ... | Prompt   | 0     | Pending  |" in lines
    assert "| Unknown Task         | N/A      | 0     | Pending  |" in lines


def test_center_text_ignores_colour_codes():
    text = "\x1b[31mhi\x1b[0m"
    assert strip_ansi(center_text(text, 6)) == "  hi  "
