"""Generación de Excel formateado con el resumen del dashboard."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Any

import pandas as pd
from openpyxl.styles import Alignment, Border, Font, Side

from health_engine.aggregate import series_to_frame
from health_engine.dashboard import DashboardReport, NutritionSummary
from health_engine.model import Metric, Weekday
from health_engine.suggestions import exercise_burns, meal_plan
from health_engine.weekday import weekday_label

_HEADER_MAP: dict[str, str] = {
    "weekday": "Day",
    "date": "Date",
    "steps": "Steps",
    "weight": "Weight (kg)",
    "heart_rate": "Heart rate (bpm)",
    "sleep": "Sleep (h)",
    "height": "Height (m)",
    "weight_trend": "Weight trend",
}

_COLUMN_WIDTHS: dict[str, int] = {
    "Day": 6,
    "Date": 12,
    "Steps": 12,
    "Weight (kg)": 12,
    "Heart rate (bpm)": 14,
    "Sleep (h)": 10,
    "Height (m)": 10,
    "Weight trend": 12,
    "Metric": 14,
    "Change": 8,
    "Tip": 36,
    "Item": 28,
    "Value": 40,
}

_NUMBER_FORMATS: dict[str, str] = {
    "Date": "dd/mm/yyyy",
    "Steps": "#,##0",
    "Weight (kg)": "0.0",
    "Heart rate (bpm)": "0",
    "Sleep (h)": "0.0",
    "Height (m)": "0.00",
    "Mean": "#,##0.0",
    "Min": "#,##0.0",
    "Max": "#,##0.0",
    "Start (deg)": "0.0",
    "End (deg)": "0.0",
}


@dataclass(frozen=True)
class ExcelLayout:
    """Sheet names of the dashboard workbook."""

    daily_sheet: str = "Daily"
    stats_sheet: str = "Rolling stats"
    weekday_sheet: str = "Weekday steps"
    nutrition_sheet: str = "Nutrition"


def drop_empty_days(df: pd.DataFrame) -> pd.DataFrame:
    """Drop days where every metric column is null/NA."""
    existing = [m.value for m in Metric if m.value in df.columns]
    if df.empty or not existing:
        return df
    mask = df[existing].notna().any(axis=1)
    return df.loc[mask].reset_index(drop=True)


def daily_table(report: DashboardReport) -> pd.DataFrame:
    """One row per day with a column per metric (full outer by date).

    When there is weight data, ``weight_trend`` holds the day-over-day
    direction of each weighed day.
    """
    frames = {
        metric: series_to_frame(summary.series).rename(columns={"value": metric.value})
        for metric, summary in report.metrics.items()
        if summary.series
    }
    if not frames:
        return pd.DataFrame(columns=["date"] + [m.value for m in Metric])

    min_day = min(min(f["date"]) for f in frames.values())
    max_day = max(max(f["date"]) for f in frames.values())
    out = pd.DataFrame({"date": pd.date_range(min_day, max_day, freq="D").date})
    for frame in frames.values():
        out = out.merge(frame, on="date", how="left")

    weight = report.metrics[Metric.WEIGHT].series
    if weight:
        trend = {p.day: d.value for p, d in zip(weight, report.weight_directions)}
        out["weight_trend"] = out["date"].map(trend)
    return drop_empty_days(out.sort_values("date").reset_index(drop=True))


def stats_table(report: DashboardReport) -> pd.DataFrame:
    rows = [
        {
            "Metric": metric.value,
            "Days": summary.stats.count,
            "Mean": summary.stats.mean if summary.stats.has_data else None,
            "Min": summary.stats.minimum,
            "Max": summary.stats.maximum,
            "Change": summary.change.value if summary.change else "",
            "Tip": summary.tip or "",
        }
        for metric, summary in report.metrics.items()
    ]
    return pd.DataFrame(
        rows, columns=["Metric", "Days", "Mean", "Min", "Max", "Change", "Tip"]
    )


def weekday_table(report: DashboardReport) -> pd.DataFrame:
    rows = [
        {
            "Weekday": weekday_label(bucket.weekday),
            "Mean": bucket.mean_value,
            "Days": bucket.count,
            "Start (deg)": piece.start_angle,
            "End (deg)": piece.end_angle,
        }
        for bucket, piece in zip(report.weekday_steps, report.weekday_slices)
    ]
    return pd.DataFrame(
        rows, columns=["Weekday", "Mean", "Days", "Start (deg)", "End (deg)"]
    )


def nutrition_table(summary: NutritionSummary | None) -> pd.DataFrame:
    """Plan, BMI and suggestions as Item/Value rows."""
    if summary is None:
        return pd.DataFrame(columns=["Item", "Value"])

    plan = summary.plan
    low, high = summary.healthy_range
    rows: list[tuple[str, object]] = [
        ("BMR (kcal)", round(plan.bmr, 1)),
        ("Maintenance (kcal)", round(plan.maintenance, 1)),
        ("Daily calories (kcal)", int(plan.daily_calories)),
        ("Goal applied", "yes" if plan.goal_applied else "no"),
        ("Carbs (g)", plan.carbs_grams),
        ("Protein (g)", plan.protein_grams),
        ("Fat (g)", plan.fat_grams),
        ("BMI", round(summary.bmi, 1)),
        ("Healthy weight (kg)", f"{low:.1f} - {high:.1f}"),
        (
            "Recommended adjustment",
            f"{summary.adjustment.direction.value} {summary.adjustment.amount_kg:.1f} kg",
        ),
    ]
    for meal, options in meal_plan(plan.daily_calories, summary.profile.vegetarian).items():
        rows.append((f"Meal: {meal}", " / ".join(options)))
    rows.append(("Target burn (kcal/day)", int(plan.daily_adjustment)))
    for burn in exercise_burns(summary.profile.weight_kg):
        text = ", ".join(f"{m} min ~{k} kcal" for m, k in burn.kcal_by_minutes.items())
        if burn.exercise.reps_per_100_kcal:
            text += f" (~{burn.exercise.reps_per_100_kcal} reps = 100 kcal)"
        rows.append((f"Exercise: {burn.exercise.name}", text))
    return pd.DataFrame(rows, columns=["Item", "Value"])


def _add_weekday_column(export_df: pd.DataFrame) -> pd.DataFrame:
    """Añade columna weekday (Day) a partir de date."""
    if "date" not in export_df.columns or export_df.empty:
        return export_df
    export_df = export_df.copy()
    export_df["weekday"] = [
        weekday_label(Weekday(d.weekday()), short=True) if isinstance(d, date) else ""
        for d in export_df["date"]
    ]
    cols = ["weekday"] + [c for c in export_df.columns if c != "weekday"]
    return export_df[cols]


def write_dashboard_xlsx(
    report: DashboardReport, out_path: Path, layout: ExcelLayout
) -> None:
    """Write a formatted Excel workbook with the dashboard snapshot.

    Args:
        report: Dashboard snapshot.
        out_path: Output path for the XLSX file.
        layout: Sheet names.
    """
    out_path.parent.mkdir(parents=True, exist_ok=True)

    daily = _add_weekday_column(daily_table(report)).rename(columns=_HEADER_MAP)
    sheets = [
        (layout.daily_sheet, daily),
        (layout.stats_sheet, stats_table(report)),
        (layout.weekday_sheet, weekday_table(report)),
        (layout.nutrition_sheet, nutrition_table(report.nutrition)),
    ]
    with pd.ExcelWriter(out_path, engine="openpyxl") as writer:
        for name, frame in sheets:
            frame.to_excel(writer, index=False, sheet_name=name)
            _format_sheet(writer.book[name])


def _format_sheet(ws: Any) -> None:
    """Bold centered header, bordered centered cells, widths and number formats.

    Args:
        ws: openpyxl worksheet.
    """
    thin = Side(style="thin")
    border = Border(left=thin, right=thin, top=thin, bottom=thin)
    center = Alignment(horizontal="center", vertical="center", wrap_text=True)
    bold = Font(bold=True)

    col_index = {str(cell.value): cell.column for cell in ws[1]}
    formats = {
        col_index[header] - 1: fmt
        for header, fmt in _NUMBER_FORMATS.items()
        if header in col_index
    }
    for row in ws.iter_rows():
        for i, cell in enumerate(row):
            cell.alignment = center
            cell.border = border
            if cell.row == 1:
                cell.font = bold
            elif i in formats:
                cell.number_format = formats[i]

    for header, width in _COLUMN_WIDTHS.items():
        if header in col_index:
            letter = ws.cell(row=1, column=col_index[header]).column_letter
            ws.column_dimensions[letter].width = width
