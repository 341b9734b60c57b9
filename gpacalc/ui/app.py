from __future__ import annotations

import logging
from typing import Dict

import flet as ft

from gpacalc.domain.logic.grading import evaluate, is_valid_marks
from gpacalc.domain.models.entities import InvalidEntries, Success
from gpacalc.state.form_state import CREDIT_HOUR_OPTIONS, FormState, SubjectRow, format_outcome

logger = logging.getLogger(__name__)

ERROR_BORDER = ft.Colors.RED
NORMAL_BORDER = ft.Colors.GREY_400


class _RowControls:
    def __init__(self, container: ft.Control, marks: ft.TextField, credits: ft.Dropdown, grade: ft.Text) -> None:
        self.container = container
        self.marks = marks
        self.credits = credits
        self.grade = grade


class GpaCalculatorApp:
    def __init__(self, page: ft.Page, state: FormState | None = None) -> None:
        self.page = page
        self.page.title = "GPA Calculator"
        self.page.scroll = ft.ScrollMode.AUTO
        self.state = state or FormState()
        self.controls: Dict[int, _RowControls] = {}
        self.rows_column = ft.Column(spacing=10)
        self.result = ft.Text("--", size=28, weight=ft.FontWeight.BOLD)

    def run(self) -> None:
        self.page.add(
            ft.Column(
                [
                    ft.Text("GPA Calculator", size=32, weight=ft.FontWeight.BOLD),
                    self.rows_column,
                    ft.Row(
                        [
                            ft.ElevatedButton("Add Subject", icon=ft.Icons.ADD, on_click=self.handle_add),
                            ft.OutlinedButton("Clear All", on_click=self.handle_clear),
                            ft.ElevatedButton("Calculate Overall GPA", on_click=lambda _: self.recalculate()),
                        ]
                    ),
                    ft.Divider(),
                    ft.Row([ft.Text("Overall GPA:", size=20), self.result]),
                ],
                width=760,
            )
        )
        self.add_row()
        self.recalculate()

    def add_row(self) -> None:
        row = self.state.add_row()
        self.rows_column.controls.append(self._build_row(row))

    def _build_row(self, row: SubjectRow) -> ft.Control:
        rid = row.row_id
        name = ft.TextField(
            label="Subject Name",
            value=row.name,
            width=200,
            on_change=lambda e: self.state.update_row(rid, name=e.control.value),
        )
        marks = ft.TextField(
            label="Marks (0-100)",
            value=row.marks_text,
            width=140,
            keyboard_type=ft.KeyboardType.NUMBER,
            border_color=NORMAL_BORDER,
            on_change=lambda e: self.handle_marks_change(rid, e.control.value),
        )
        credits = ft.Dropdown(
            label="Credit Hours",
            width=150,
            options=[ft.dropdown.Option(str(c), f"{c} Credit Hour{'s' if c > 1 else ''}") for c in CREDIT_HOUR_OPTIONS],
            value=str(row.credit_hours),
            border_color=NORMAL_BORDER,
            on_change=lambda e: self.handle_credits_change(rid, e.control.value),
        )
        grade = ft.Text(width=90)
        container = ft.Row(
            [
                name,
                marks,
                credits,
                grade,
                ft.IconButton(icon=ft.Icons.DELETE, tooltip="Remove", on_click=lambda _: self.handle_remove(rid)),
            ]
        )
        self.controls[rid] = _RowControls(container, marks, credits, grade)
        return container

    def handle_add(self, _: ft.ControlEvent) -> None:
        self.add_row()
        self.page.update()

    def handle_remove(self, row_id: int) -> None:
        self.state.remove_row(row_id)
        row_controls = self.controls.pop(row_id)
        self.rows_column.controls.remove(row_controls.container)
        self.recalculate()

    def handle_marks_change(self, row_id: int, value: str) -> None:
        self.state.update_row(row_id, marks_text=value)
        self.recalculate()

    def handle_credits_change(self, row_id: int, value: str | None) -> None:
        self.state.update_row(row_id, credit_hours=int(value) if value else 0)
        self.recalculate()

    def handle_clear(self, _: ft.ControlEvent) -> None:
        self.rows_column.controls.clear()
        self.controls.clear()
        row = self.state.clear_all()
        self.rows_column.controls.append(self._build_row(row))
        self.result.value = self.state.status_text()
        self.page.update()

    def recalculate(self) -> None:
        outcome = self.state.calculate()
        bad_fields = set()
        if isinstance(outcome, InvalidEntries):
            bad_fields = {(issue.index, issue.field) for issue in outcome.issues}

        for index, row in enumerate(self.state.rows):
            row_controls = self.controls[row.row_id]
            row_controls.marks.border_color = ERROR_BORDER if (index, "marks") in bad_fields else NORMAL_BORDER
            row_controls.credits.border_color = ERROR_BORDER if (index, "credit_hours") in bad_fields else NORMAL_BORDER
            if isinstance(outcome, Success):
                grade = outcome.grades[index]
                row_controls.grade.value = f"{grade.letter_grade} ({grade.grade_point:.2f})"
            elif is_valid_marks(row.to_entry().marks):
                grade = evaluate(row.to_entry().marks)
                row_controls.grade.value = f"{grade.letter_grade} ({grade.grade_point:.2f})"
            else:
                row_controls.grade.value = ""

        self.result.value = format_outcome(outcome)
        logger.debug("Recalculated: %s", self.result.value)
        self.page.update()


def main(page: ft.Page) -> None:
    GpaCalculatorApp(page).run()
