"""Template generation entrypoint — fills the template store.

Usage:
    python -m scheduler.generate                     # generate missing templates
    python -m scheduler.generate --dry-run           # report what would be created
    python -m scheduler.generate --category 2        # one sport category only
    python -m scheduler.generate --status            # stored vs expected counts
    python -m scheduler.generate --preview 1-GPP-NOVICE-w1-d1
    python -m scheduler.generate --regenerate 1-GPP-NOVICE-w1-d1
    python -m scheduler.generate --scale 1-GPP-NOVICE-w1-d1 --intensity High
    python -m scheduler.generate --scale 1-GPP-NOVICE-w1-d1 --max back_squat=225
    python -m scheduler.generate --scale 1-GPP-NOVICE-w1-d1 --athlete a-1 \
        --age-group 14-17 --experience 3
    python -m scheduler.generate --clear --yes       # delete every template
    python -m scheduler.generate --daemon            # nightly backfill via APScheduler
"""

from __future__ import annotations

import argparse
import logging
import sys

from exercise_registry import InMemoryExerciseRegistry
from prescription_engine.exceptions import EngineError, ValidationError
from prescription_engine.generator import TemplateGenerator
from prescription_engine.models.batch import BatchResult
from prescription_engine.models.coordinate import TrainingCoordinate, coerce_enum
from prescription_engine.models.enums import ScheduleMode
from prescription_engine.program_builder.assembler import PrescriptionAssembler
from prescription_engine.scaling.service import ScalingService
from prescription_engine.serialization import scaled_to_json_string, template_to_json_string
from prescription_engine.storage import InMemoryOneRepMaxProvider, JsonTemplateStore

from scheduler.config import (
    BACKFILL_HOUR,
    BACKFILL_MINUTE,
    GENERATOR_WORKERS,
    LOG_LEVEL,
    ONE_REP_MAX_FILE,
    SCHEDULE_MODE,
    TEMPLATE_STORE_DIR,
)

logger = logging.getLogger(__name__)


def build_generator(
    store: JsonTemplateStore | None = None,
    mode: ScheduleMode | str = SCHEDULE_MODE,
    workers: int = GENERATOR_WORKERS,
) -> TemplateGenerator:
    """Wire the catalog registry, assembler and store into a generator."""
    registry = InMemoryExerciseRegistry.default()
    assembler = PrescriptionAssembler(
        registry, mode=coerce_enum(ScheduleMode, mode, "schedule mode")
    )
    return TemplateGenerator(
        assembler,
        store if store is not None else JsonTemplateStore(TEMPLATE_STORE_DIR),
        max_workers=workers,
    )


CLI_ATHLETE = "cli"


def build_maxes(
    athlete_id: str, overrides: list[str] | None = None
) -> InMemoryOneRepMaxProvider:
    """One-rep maxes from ONE_REP_MAX_FILE, then ``SLUG=WEIGHT`` overrides."""
    if ONE_REP_MAX_FILE is not None:
        provider = InMemoryOneRepMaxProvider.from_json_file(ONE_REP_MAX_FILE)
    else:
        provider = InMemoryOneRepMaxProvider()
    for item in overrides or []:
        slug, _, value = item.partition("=")
        try:
            weight = float(value)
        except ValueError:
            weight = 0.0
        if not slug.strip() or not weight > 0:
            raise ValidationError(f"--max expects SLUG=WEIGHT, got {item!r}")
        provider.set_max(athlete_id, slug.strip(), weight)
    return provider


def _report(result: BatchResult) -> None:
    verb = "Would create" if result.dry_run else "Created"
    print(f"{verb} {result.created}, skipped {result.skipped}, failed {result.failed} "
          f"(of {result.total})")
    if result.errors:
        print(result.errors_frame().to_string(index=False))


def backfill_job() -> None:
    """Generate any templates missing from the store."""
    logger.info("Starting backfill job")
    result = build_generator().generate_all()
    if result.errors:
        logger.warning("Backfill finished with %d failures", result.failed)
    logger.info("Backfill job complete")


def _run_daemon() -> None:
    from apscheduler.schedulers.blocking import BlockingScheduler

    scheduler = BlockingScheduler()
    scheduler.add_job(
        backfill_job,
        "cron",
        hour=BACKFILL_HOUR,
        minute=BACKFILL_MINUTE,
        id="backfill_job",
    )
    logger.info(
        "Scheduler started — backfill job at %02d:%02d",
        BACKFILL_HOUR,
        BACKFILL_MINUTE,
    )
    try:
        scheduler.start()
    except (KeyboardInterrupt, SystemExit):
        logger.info("Scheduler stopped")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Training template generator")
    parser.add_argument("--mode", default=SCHEDULE_MODE, help="SEVEN_DAY or THREE_DAY")
    parser.add_argument("--dry-run", action="store_true", help="Check without writing")
    parser.add_argument("--category", type=int, help="Only this sport category (1-4)")
    parser.add_argument("--intensity", default="Moderate", help="Intensity for --scale")
    parser.add_argument("--athlete", metavar="ID", help="Athlete whose maxes --scale uses")
    parser.add_argument(
        "--max", action="append", metavar="SLUG=WEIGHT", help="One-rep max for --scale"
    )
    parser.add_argument("--age-group", help="10-13, 14-17 or 18+ for --scale")
    parser.add_argument(
        "--experience", type=float, metavar="YEARS",
        help="Training years; with --age-group, scales from the category tables",
    )
    parser.add_argument("--yes", action="store_true", help="Confirm --clear")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--status", action="store_true", help="Show generation progress")
    group.add_argument("--preview", metavar="KEY", help="Print one template without saving")
    group.add_argument("--regenerate", metavar="KEY", help="Rebuild and overwrite one template")
    group.add_argument("--scale", metavar="KEY", help="Print a stored template, scaled")
    group.add_argument("--clear", action="store_true", help="Delete every stored template")
    group.add_argument("--daemon", action="store_true", help="Run as APScheduler daemon")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.daemon:
        _run_daemon()
        return 0

    try:
        generator = build_generator(mode=args.mode)
        if args.status:
            status = generator.status()
            print(f"{status.existing}/{status.expected} templates "
                  f"({status.percent_complete}%), {status.remaining} remaining")
            for category, count in sorted(status.by_category.items()):
                print(f"  category {category}: {count}")
            for phase, count in sorted(status.by_phase.items()):
                print(f"  {phase}: {count}")
        elif args.preview:
            template = generator.preview_one(TrainingCoordinate.from_key(args.preview))
            print(template_to_json_string(template))
        elif args.regenerate:
            template_id = generator.regenerate(TrainingCoordinate.from_key(args.regenerate))
            print(f"Regenerated {template_id}")
        elif args.scale:
            athlete_id = args.athlete or CLI_ATHLETE
            service = ScalingService(
                JsonTemplateStore(TEMPLATE_STORE_DIR),
                InMemoryExerciseRegistry.default(),
                build_maxes(athlete_id, args.max),
            )
            view = service.get_scaled(
                args.scale,
                args.intensity,
                athlete_id=athlete_id,
                age_group=args.age_group,
                years_of_experience=args.experience,
            )
            print(scaled_to_json_string(view))
        elif args.clear:
            removed = generator.clear_all(confirm=args.yes)
            print(f"Removed {removed} templates")
        elif args.category is not None:
            _report(generator.generate_for_category(args.category, dry_run=args.dry_run))
        else:
            _report(generator.generate_all(dry_run=args.dry_run))
    except EngineError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
