"""CLI for PassMeter: score, watch, levels, rules, config."""

import argparse
import json
import logging
import sys
from getpass import getpass

from rich import print, print_json
from rich.markup import escape
from rich.panel import Panel
from rich.progress_bar import ProgressBar
from rich.table import Table

from .config import DEFAULTS, AnalyzerConfig, build_config, load_config, save_config
from .errors import ConfigError, PassmeterError
from .evaluator import evaluate
from .levels import range_label
from .suggestions import suggest
from .timefmt import format_combinations, format_duration
from .validator import validate

logger = logging.getLogger(__name__)


def _analyzer_config(args) -> AnalyzerConfig:
    config = build_config(load_config(args.config))
    logger.debug("Using %d strength levels, %s attempts/s", len(config.levels), config.attempts_per_second)
    return config


def _styled(text: str, tag: str) -> str:
    text = escape(text)
    return f"[{tag}]{text}[/{tag}]" if tag else text


def render_report(password: str, config: AnalyzerConfig) -> None:
    result = evaluate(password, config)
    errors = validate(password, config)
    level = result.strength_level

    header = f"Score: {result.score} / {config.max_score} — [bold]{_styled(level.name, level.tag)}[/bold]"
    body = (
        f"Estimated time to crack: {format_duration(result.seconds_to_crack)}\n"
        f"Character set size: {result.char_set_size}\n"
        f"Length: {result.length}\n"
        f"Attempts per second: {config.attempts_per_second:,}\n"
        f"Total combinations: {format_combinations(result.possible_combinations)}"
    )
    print(Panel(body, title=header))
    bar_style = level.tag or "bar.complete"
    print(ProgressBar(total=config.max_score, completed=result.score, width=40, complete_style=bar_style))
    if result.categories < config.min_categories:
        print(
            f"[yellow]Fewer than {config.min_categories} character categories: "
            "the crack-time estimate has been reduced.[/yellow]"
        )
    if errors:
        print("[bold]Problems:[/bold]")
        for e in errors:
            print(f" • [red]{e}[/red]")
    print(f"\n[bold]Suggestion:[/bold] {suggest(password, config)}")


def cmd_score(args):
    config = _analyzer_config(args)
    pw = args.password
    if pw is None:
        pw = getpass("Password to evaluate (input hidden): ")
    render_report(pw, config)


def cmd_watch(args):
    """Re-evaluate every entered password until a blank line or EOF."""
    config = _analyzer_config(args)
    print("[cyan]Enter passwords to evaluate; leave blank to quit.[/cyan]")
    while True:
        try:
            pw = getpass("Password: ")
        except EOFError:
            break
        if not pw:
            break
        render_report(pw, config)


def cmd_levels(args):
    config = _analyzer_config(args)
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Level")
    table.add_column("Score")
    for i, level in enumerate(config.levels):
        table.add_row(_styled(level.name, level.tag), range_label(config.levels, i))
    print(table)


def cmd_rules(args):
    config = _analyzer_config(args)
    rules = [
        f"Passwords must be at least {config.min_length} characters long.",
        f"Use at least {config.min_categories} of: uppercase letters, lowercase letters, numbers and symbols.",
        "Obvious patterns and repeated characters are penalized.",
        "Strength considers length, character diversity and distinct characters.",
        f"Crack time assumes a brute-force attack at {config.attempts_per_second:,} attempts per second.",
    ]
    print("[bold]Rules:[/bold]")
    for r in rules:
        print(f" • {r}")


def _parse_setting(item: str):
    key, sep, raw = item.partition("=")
    if not sep or not key:
        raise ConfigError(f"expected KEY=VALUE, got {item!r}")
    if key not in DEFAULTS:
        raise ConfigError(f"unknown setting {key!r}")
    try:
        value = json.loads(raw)
    except ValueError:
        # bare strings need no quoting
        value = raw
    return key, value


def cmd_config(args):
    """Show the settings, or update them with --set KEY=VALUE (VALUE is JSON)."""
    cfg = load_config(args.config)
    if not args.set:
        print_json(data=cfg)
        return
    for item in args.set:
        key, value = _parse_setting(item)
        cfg[key] = value
    build_config(cfg)
    written = save_config(cfg, args.config)
    print(f"[green]Saved settings to:[/green] {escape(written)}")


def main(argv=None):
    parser = argparse.ArgumentParser(prog="passmeter")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="cmd", required=True)

    sc = sub.add_parser("score", help="Score a password and show suggestions")
    sc.add_argument("password", type=str, nargs="?", help="Password to evaluate (prompted if omitted)")
    sc.set_defaults(func=cmd_score)

    w = sub.add_parser("watch", help="Evaluate passwords interactively, one per line")
    w.set_defaults(func=cmd_watch)

    lv = sub.add_parser("levels", help="Show the strength level table")
    lv.set_defaults(func=cmd_levels)

    ru = sub.add_parser("rules", help="Show the scoring rules")
    ru.set_defaults(func=cmd_rules)

    cf = sub.add_parser("config", help="Show or change the settings file")
    cf.add_argument("--set", action="append", metavar="KEY=VALUE", help="Setting to change (repeatable)")
    cf.set_defaults(func=cmd_config)

    for p in (sc, w, lv, ru, cf):
        p.add_argument("--config", "-c", type=str, help="Path to settings JSON file")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    try:
        args.func(args)
    except PassmeterError as e:
        print(f"[red]{escape(str(e))}[/red]")
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
