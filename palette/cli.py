"""
Command-line host for the Palette launcher.

Usage:
  palette resolve "workflow:notes.txt && shell:echo hi"
  palette run "shell:echo hi"
  palette search note --filter Shortcuts
  palette filters
"""

import argparse
import sys
from pathlib import Path

from loguru import logger

from palette.actions import ActionExecutor, resolve
from palette.launcher import LauncherModel
from palette.services import ConfigurationService, ShortcutIndexService
from palette.utils.helpers import load_settings, setup_logging


def _build_model(args, settings: dict) -> LauncherModel:
    config_path = Path(args.config or settings["launcher"]["config_path"])
    configuration = ConfigurationService(config_path).load_configuration()

    model = LauncherModel(ActionExecutor.from_settings(settings))
    model.apply_configuration(configuration)
    model.update_applications(ShortcutIndexService.from_settings(settings).build_index())
    return model


def cmd_resolve(args, settings: dict) -> int:
    print(resolve(args.command))
    return 0


def cmd_run(args, settings: dict) -> int:
    executor = ActionExecutor.from_settings(settings)
    action = resolve(args.command)
    if not executor.can_execute(action):
        logger.warning(f"Precondition does not hold for {action}")
    executor.execute(action)
    return 0


def cmd_search(args, settings: dict) -> int:
    model = _build_model(args, settings)

    if args.filter and not model.select_filter_by_name(args.filter):
        logger.error(f"Unknown filter: {args.filter}")
        return 1

    model.search_text = args.text

    print(f"{model.search_results_header}:")
    for result in model.search_results:
        print(f"  [{result.category}] {result.title} - {result.subtitle}")

    print(f"Applications ({model.selected_filter.name}):")
    for app in model.filtered_applications:
        print(f"  {app.title}")
    return 0


def cmd_filters(args, settings: dict) -> int:
    model = _build_model(args, settings)
    for app_filter in model.app_filters:
        print(f"{app_filter.name}: {app_filter.predicate or 'all'}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="palette", description="Command-palette launcher")
    parser.add_argument("--config", help="Launcher JSON document (overrides settings)")
    parser.add_argument("--settings", help="Settings TOML file")
    parser.add_argument("--log-level", help="Log level (overrides settings)")

    subparsers = parser.add_subparsers(dest="subcommand", required=True)

    resolve_parser = subparsers.add_parser("resolve", help="Print the action a command resolves to")
    resolve_parser.add_argument("command")
    resolve_parser.set_defaults(handler=cmd_resolve)

    run_parser = subparsers.add_parser("run", help="Resolve and execute a command")
    run_parser.add_argument("command")
    run_parser.set_defaults(handler=cmd_run)

    search_parser = subparsers.add_parser("search", help="Search applications and pinned actions")
    search_parser.add_argument("text")
    search_parser.add_argument("--filter", help="App filter name")
    search_parser.set_defaults(handler=cmd_search)

    filters_parser = subparsers.add_parser("filters", help="List configured app filters")
    filters_parser.set_defaults(handler=cmd_filters)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    settings = load_settings(Path(args.settings) if args.settings else None)
    setup_logging(args.log_level or settings["logging"]["level"])
    return args.handler(args, settings)


if __name__ == "__main__":
    sys.exit(main())
