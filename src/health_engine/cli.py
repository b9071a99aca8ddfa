"""CLI para generar el resumen del dashboard de salud en Excel."""

from __future__ import annotations

import argparse
import logging
from datetime import datetime
from pathlib import Path

from health_engine.config import EngineConfig
from health_engine.dashboard import build_dashboard
from health_engine.excel_writer import ExcelLayout, write_dashboard_xlsx
from health_engine.model import ActivityLevel, BiometricProfile, Goal
from health_engine.nutrition import parse_activity_factor
from health_engine.sources.health_export import HealthExportPaths, HealthExportSource

logger = logging.getLogger(__name__)

_ACTIVITY_NAMES: dict[str, float] = {
    "sedentary": ActivityLevel.SEDENTARY.value,
    "light": ActivityLevel.LIGHTLY_ACTIVE.value,
    "moderate": ActivityLevel.MODERATELY_ACTIVE.value,
    "very": ActivityLevel.VERY_ACTIVE.value,
    "super": ActivityLevel.SUPER_ACTIVE.value,
}


def _activity_arg(text: str) -> float:
    """Accept a level name or a numeric factor (snapped to a level)."""
    key = text.strip().lower()
    if key in _ACTIVITY_NAMES:
        return _ACTIVITY_NAMES[key]
    try:
        value = float(key)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"expected one of {sorted(_ACTIVITY_NAMES)} or a number"
        ) from exc
    return parse_activity_factor(value)


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Parsed argparse namespace.
    """
    parser = argparse.ArgumentParser(
        description="Health dashboard: daily series, weekday averages and diet plan."
    )
    parser.add_argument(
        "--export-dir",
        default=str(Path.home() / "health" / "export"),
        help="Folder with steps.csv, weight.csv, heart_rate.csv, sleep.csv, height.csv.",
    )
    parser.add_argument(
        "--out-dir",
        default=None,
        help="Output folder (default: <export-dir>/../reports).",
    )
    parser.add_argument(
        "--window", type=int, default=28, help="Rolling window in days (default: 28)."
    )
    parser.add_argument("--timezone", default=None, help="Calendar timezone name.")
    parser.add_argument("--height", type=float, default=170.0, help="Height in cm.")
    parser.add_argument("--weight", type=float, default=65.0, help="Weight in kg.")
    parser.add_argument("--age", type=int, default=25, help="Age in years.")
    parser.add_argument("--sex", choices=["male", "female"], default="male")
    parser.add_argument(
        "--activity",
        type=_activity_arg,
        default=ActivityLevel.LIGHTLY_ACTIVE.value,
        help="sedentary, light, moderate, very, super or a factor (1.2-1.9).",
    )
    parser.add_argument(
        "--goal", choices=[g.value for g in Goal], default=Goal.MAINTAIN.value
    )
    parser.add_argument(
        "--delta", type=float, default=2.0, help="Kg to lose or gain (default: 2)."
    )
    parser.add_argument(
        "--weeks", type=int, default=4, help="Weeks to reach the target (default: 4)."
    )
    parser.add_argument("--vegetarian", action="store_true")
    parser.add_argument("--verbose", action="store_true", help="Debug logging.")
    return parser.parse_args()


def profile_from_args(ns: argparse.Namespace) -> BiometricProfile:
    return BiometricProfile(
        height_cm=ns.height,
        weight_kg=ns.weight,
        age_years=ns.age,
        is_male=ns.sex == "male",
        activity_factor=ns.activity,
        goal=Goal(ns.goal),
        target_delta_kg=ns.delta,
        weeks_to_target=ns.weeks,
        vegetarian=ns.vegetarian,
    )


def main() -> int:
    """Run the dashboard CLI.

    Returns:
        Exit code (0 on success).
    """
    ns = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if ns.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = EngineConfig(window_days=ns.window, timezone=ns.timezone)
    export_dir = Path(ns.export_dir).expanduser().resolve()

    source = HealthExportSource(HealthExportPaths(root=export_dir), config.tzinfo())
    source.validate()
    samples = source.load_all()

    profile = profile_from_args(ns)
    logger.debug("Profile: %s", profile)
    report = build_dashboard(samples, config, profile)

    out_dir = (
        Path(ns.out_dir).expanduser().resolve()
        if ns.out_dir
        else export_dir.parent / "reports"
    )
    ts = datetime.now(tz=config.tzinfo()).strftime("%Y-%m-%d_%H-%M-%S")
    out_path = out_dir / f"health_dashboard_{ts}.xlsx"
    write_dashboard_xlsx(report, out_path, ExcelLayout())

    total = sum(len(s) for s in samples.values())
    print(f"OK: Export dir: {export_dir}")
    print(f"OK: Samples loaded: {total}")
    if report.nutrition is not None:
        print(f"OK: Daily calories: {int(report.nutrition.plan.daily_calories)} kcal")
    print(f"OK: Output: {out_path}")
    return 0
