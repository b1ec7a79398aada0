"""Application entrypoint — record assessments and show the dashboard."""

from __future__ import annotations

import argparse
import asyncio
import sys

from stressless.config import Settings, get_settings
from stressless.dashboard import DashboardView
from stressless.errors import StorageError, SubmissionError
from stressless.logger import setup_logging
from stressless.models import SensorSnapshot, one_decimal
from stressless.scoring.survey import SurveyForm
from stressless.sensors.simulated import SimulatedSensor
from stressless.service import AssessmentService, DashboardService
from stressless.storage.database import SQLiteStore
from stressless.storage.repository import HistoryRepository


def _parse_answer(raw: str) -> tuple[int, int]:
    try:
        question_id, value = raw.split("=", 1)
        return int(question_id), int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected ID=VALUE, got {raw!r}") from None


def _print_dashboard(view: DashboardView) -> None:
    summary = view.summary
    latest = str(one_decimal(summary.latest_score)) if summary.latest_score is not None else "N/A"
    print(f"Current stress level: {latest} ({summary.category.value})")
    print(f"Average stress:       {summary.average_score:.1f}")
    if summary.show_chart:
        print("Recent scores:        " + "  ".join(f"{p.label} {p.score:.1f}" for p in summary.chart))
    print()
    print(summary.message)
    for insight in view.insights:
        print(f"\n{insight.title}\n  {insight.text}")


async def _assess(args: argparse.Namespace, settings: Settings) -> int:
    form = SurveyForm()
    try:
        for question_id, value in args.answer or []:
            form.set_answer(question_id, value)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    store = SQLiteStore(settings.database_url)
    try:
        await store.init()
        repository = HistoryRepository(store, key=settings.storage_key)
        sensor = SimulatedSensor(
            heart_rate=settings.sensor_initial_heart_rate,
            step_count=settings.sensor_step_count,
        )
        snapshot = None
        if args.heart_rate is not None or args.steps is not None:
            snapshot = SensorSnapshot(
                heart_rate=args.heart_rate if args.heart_rate is not None else sensor.heart_rate,
                step_count=args.steps if args.steps is not None else sensor.step_count,
            )

        service = AssessmentService(repository, sensor, settings=settings)
        try:
            entry = await service.submit(form.responses(), snapshot)
        except SubmissionError as exc:
            print(f"Error: {exc.message}", file=sys.stderr)
            return 1

        view = await DashboardService(repository, settings=settings).open(entry)
        _print_dashboard(view)
        return 0
    finally:
        await store.close()


async def _dashboard(settings: Settings) -> int:
    store = SQLiteStore(settings.database_url)
    try:
        await store.init()
        view = await DashboardService(HistoryRepository(store, key=settings.storage_key), settings=settings).open()
        _print_dashboard(view)
        return 0
    finally:
        await store.close()


async def _export(args: argparse.Namespace, settings: Settings) -> int:
    from stressless.research.export import export_history_csv, export_history_json

    store = SQLiteStore(settings.database_url)
    try:
        await store.init()
        history = await HistoryRepository(store, key=settings.storage_key).load()
    finally:
        await store.close()

    writer = export_history_csv if args.format == "csv" else export_history_json
    path = writer(history, args.output)
    print(f"Exported {len(history)} entries to {path}")
    return 0


async def _init_db(settings: Settings) -> int:
    store = SQLiteStore(settings.database_url)
    try:
        await store.init()
    finally:
        await store.close()
    print("Database tables created.")
    return 0


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="stressless",
        description="Track your stress with a short survey and simulated sensor data.",
    )
    sub = parser.add_subparsers(dest="command")

    # ── assess ────────────────────────────────────────────────
    assess_parser = sub.add_parser("assess", help="Answer the survey and record a score.")
    assess_parser.add_argument(
        "--answer", action="append", type=_parse_answer, metavar="ID=VALUE",
        help="Slider answer, e.g. --answer 3=8 (unanswered questions default to 5).",
    )
    assess_parser.add_argument("--heart-rate", type=float, default=None)
    assess_parser.add_argument("--steps", type=int, default=None)

    # ── dashboard ─────────────────────────────────────────────
    sub.add_parser("dashboard", help="Show the latest score, averages and insights.")

    # ── export ────────────────────────────────────────────────
    export_parser = sub.add_parser("export", help="Export the history to a file.")
    export_parser.add_argument("output")
    export_parser.add_argument("--format", choices=("csv", "json"), default="csv")

    # ── init-db ───────────────────────────────────────────────
    sub.add_parser("init-db", help="Create database tables.")

    args = parser.parse_args(argv)
    settings = get_settings()
    setup_logging(settings.log_level)

    try:
        if args.command == "assess":
            code = asyncio.run(_assess(args, settings))
        elif args.command == "dashboard":
            code = asyncio.run(_dashboard(settings))
        elif args.command == "export":
            code = asyncio.run(_export(args, settings))
        elif args.command == "init-db":
            code = asyncio.run(_init_db(settings))
        else:
            parser.print_help()
            code = 1
    except StorageError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        code = 1
    sys.exit(code)


if __name__ == "__main__":
    main()
