from pathlib import Path
from openpyxl import Workbook
from openpyxl.styles import Font, Alignment, PatternFill, Border, Side

from core.domain.enums import ProgressStatus
from core.reporting.contexts import ExcelReportContext
from core.reporting.exporters import (
    PROGRESS_COLUMNS,
    TIMELINE_COLUMNS,
    progress_export_rows,
    timeline_export_rows,
)


class ExcelReportRenderer:
    def render(self, ctx: ExcelReportContext, output_path: Path) -> Path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        wb = Workbook()

        header_font = Font(bold=True)
        title_font = Font(bold=True, size=14)
        center = Alignment(horizontal="center")
        thin_border = Border(
            left=Side(style="thin"),
            right=Side(style="thin"),
            top=Side(style="thin"),
            bottom=Side(style="thin"),
        )
        header_fill = PatternFill("solid", fgColor="DDDDDD")
        critical_fill = PatternFill("solid", fgColor="F8D7DA")

        summary = ctx.summary

        # ---------------- Overview ----------------
        ws = wb.active
        ws.title = "Overview"

        ws["A1"] = f"BOQ Progress - {summary.project_name or summary.project_code}"
        ws["A1"].font = title_font

        row = 3

        def kv(key, value):
            nonlocal row
            ws[f"A{row}"] = key
            ws[f"B{row}"] = value
            ws[f"A{row}"].font = header_font
            ws[f"A{row}"].border = thin_border
            ws[f"B{row}"].border = thin_border
            row += 1

        kv("Project code", summary.project_code)
        kv("Project name", summary.project_name)
        kv("As of", ctx.as_of.isoformat())
        kv("Timeline start", summary.timeline_start.isoformat() if summary.timeline_start else "")
        kv("Timeline end", summary.timeline_end.isoformat() if summary.timeline_end else "")

        row += 1
        kv("Activities - total", summary.activities_total)
        kv("Activities - with data", summary.activities_with_data)
        for status in ProgressStatus:
            kv(f"Status - {status.label}", summary.status_counts.get(status.value, 0))
        kv("Critical activities", summary.critical_activities)
        kv("Delayed activities", summary.delayed_activities)
        kv("Unscheduled activities", summary.unscheduled_activities)
        kv("Ambiguous records", summary.ambiguous_records)

        row += 1
        kv("Contract value", round(summary.total_contract_value, 2))
        kv("Planned value", round(summary.total_planned_value, 2))
        kv("Executed value", round(summary.total_earned_value, 2))
        kv("Remaining value", round(summary.remaining_value, 2))
        kv("Value progress (%)", round(summary.value_progress_percent, 1))
        kv("Weighted progress (%)", round(summary.weighted_progress_percent, 1))

        if summary.alerts:
            row += 1
            ws[f"A{row}"] = "Alerts"
            ws[f"A{row}"].font = header_font
            row += 1
            for alert in summary.alerts:
                ws[f"A{row}"] = alert
                row += 1

        ws.column_dimensions["A"].width = 30
        ws.column_dimensions["B"].width = 25

        # ---------------- Activities ----------------
        ws_act = wb.create_sheet("Activities")
        for col_index, h in enumerate(PROGRESS_COLUMNS, start=1):
            cell = ws_act.cell(row=1, column=col_index, value=h)
            cell.font = header_font
            cell.alignment = center
            cell.fill = header_fill
            cell.border = thin_border

        for row_index, values in enumerate(progress_export_rows(ctx.progress_rows, ctx.project), start=2):
            for col_index, h in enumerate(PROGRESS_COLUMNS, start=1):
                ws_act.cell(row=row_index, column=col_index, value=values[h]).border = thin_border

        ws_act.column_dimensions["A"].width = 36
        for col_letter in ("B", "C", "D", "E", "F", "G", "H", "I", "J", "K", "L"):
            ws_act.column_dimensions[col_letter].width = 15

        # ---------------- Timeline ----------------
        ws_tl = wb.create_sheet("Timeline")
        for c, h in enumerate(TIMELINE_COLUMNS, start=1):
            cell = ws_tl.cell(1, c, h)
            cell.font = header_font
            cell.fill = header_fill
            cell.alignment = center
            cell.border = thin_border

        for r, (entry, values) in enumerate(
            zip(ctx.timeline, timeline_export_rows(ctx.timeline, ctx.project)), start=2
        ):
            for c, h in enumerate(TIMELINE_COLUMNS, start=1):
                cell = ws_tl.cell(r, c, values[h])
                cell.border = thin_border
                if entry.span.is_critical:
                    cell.fill = critical_fill

        ws_tl.column_dimensions["A"].width = 36
        for col_letter in ("B", "C", "D", "E", "F", "G", "H", "I", "J"):
            ws_tl.column_dimensions[col_letter].width = 16

        wb.save(output_path)
        return output_path
