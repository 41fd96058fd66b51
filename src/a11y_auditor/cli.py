# src/a11y_auditor/cli.py
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from bs4 import UnicodeDammit
from tqdm import tqdm

from a11y_auditor.controllers.audit_controller import AnalysisError, AuditController
from a11y_auditor.dom.registry import RuleRegistry
from a11y_auditor.managers.report_manager import ReportManager
from a11y_auditor.utils.config_loader import get_nested_config
from a11y_auditor.utils.configure_logging import configure_logger
from a11y_auditor.utils.render import render_report
from a11y_auditor.utils.samples import SAMPLE_HTML

logger = logging.getLogger(__name__)

EMPTY_INPUT_MESSAGE = "Please enter some HTML code to analyze."


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="a11y-audit",
        description="Report accessibility defects in HTML markup, with suggested fixes."
    )
    parser.add_argument("paths", nargs="*", help="HTML files to audit ('-' or nothing reads stdin).")
    parser.add_argument("--sample", action="store_true", help="Audit the built-in sample page.")
    parser.add_argument("--json", action="store_true", help="Print the JSON report instead of cards.")
    parser.add_argument(
        "--save", nargs="?", const="", default=None, metavar="DIR",
        help="Save the JSON report as a11y-report-<date>.json (default dir from settings.json)."
    )
    parser.add_argument("--list-rules", action="store_true", help="List the rules in execution order.")
    parser.add_argument("--log-level", default=None, help="Logging level (overrides settings.json).")
    return parser


def _read_sources(args: argparse.Namespace) -> List[Tuple[str, str]]:
    if args.sample:
        return [("sample", SAMPLE_HTML)]
    if not args.paths or args.paths == ["-"]:
        return [("stdin", sys.stdin.read())]
    return [(path, _read_markup_file(Path(path))) for path in args.paths]


def _read_markup_file(path: Path) -> str:
    """Reads an HTML file, detecting its encoding (meta charset, BOM, then guesses)."""
    dammit = UnicodeDammit(path.read_bytes(), is_html=True)
    if dammit.unicode_markup is None:
        raise ValueError(f"Could not detect the encoding of {path}")
    logger.debug("Decoded %s as %s", path, dammit.original_encoding)
    return dammit.unicode_markup


def _list_rules() -> int:
    RuleRegistry.discover()
    for definition in RuleRegistry.get_all_definitions():
        print(f"{definition.order}. {definition.name}: {', '.join(definition.codes)}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logger(
        args.log_level or get_nested_config("debug.level", "WARNING"),
        module_specific_levels=get_nested_config("debug.module_levels", {}),
        silenced_loggers=get_nested_config("debug.silenced", {})
    )

    if args.list_rules:
        return _list_rules()

    try:
        sources = _read_sources(args)
    except (OSError, ValueError) as e:
        print(f"❌ Could not read input: {e}")
        return 1

    if args.save is not None and len(sources) > 1:
        parser.error("--save accepts a single input")

    controller = AuditController()
    manager = ReportManager()
    exit_code = 0

    for label, source in tqdm(sources, desc="Auditing", unit="file", disable=len(sources) < 2):
        # Whitespace-only input never reaches the rule engine
        if not source.strip():
            tqdm.write(f"❌ {label}: {EMPTY_INPUT_MESSAGE}")
            exit_code = 1
            continue

        try:
            report = controller.analyze(source)
        except AnalysisError as e:
            tqdm.write(f"❌ {label}: {e} Please try again.")
            exit_code = 1
            continue

        if args.json:
            tqdm.write(manager.to_json(report))
        else:
            tqdm.write(render_report(report, label if len(sources) > 1 else ""))

        if args.save is not None:
            try:
                path = manager.save(report, Path(args.save) if args.save else None)
            except OSError as e:
                tqdm.write(f"❌ Could not save report: {e}")
                exit_code = 1
                continue
            tqdm.write(f"💾 Report saved to {path}")

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
