# === semi-lint/cli.py ===

import sys
import click
import logging

from semi_lint.config_loader import ConfigError, build_config
from semi_lint.file_discovery import default_scan_root, filter_candidates, gather_candidates
from semi_lint.report_generator import (
    NO_FILES_MESSAGE,
    render_report,
    run_succeeded,
    write_yaml_report
)
from semi_lint.scanner import lint_files

MODE_WORDS = ("check", "fix")


def split_mode_words(args):
    """
    `check` / `fix` may appear anywhere among the positionals; the last one
    wins. Everything else is a file.
    """
    fix_mode = False
    files = []
    for arg in args:
        if arg == "fix":
            fix_mode = True
        elif arg == "check":
            fix_mode = False
        else:
            files.append(arg)
    return fix_mode, files


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("args", nargs=-1)
@click.option("--staged", "--cached", "staged", is_flag=True, default=False,
              help="Only lint staged *.js files (ignored when files are given)")
@click.option("--allow-return-no-semi", is_flag=True, default=False,
              help="Do NOT require semicolons after `return`")
@click.option("--config", "config_path", type=click.Path(dir_okay=False), default=None,
              help="YAML file with lint options (require_return_terminator)")
@click.option("--report", "report_path", type=click.Path(dir_okay=False), default=None,
              help="Also write the violations to this YAML file")
@click.option("--root", "root_dir", type=click.Path(file_okay=False), default=None,
              help="Directory to walk when no files are given (default: ../scripts next to the executable)")
@click.option("--verbose", "-v", is_flag=True, default=False,
              help="Enable verbose (DEBUG) logging")
def main(args, staged, allow_return_no_semi, config_path, report_path, root_dir, verbose):
    """
    Heuristic missing-semicolon linter for JavaScript.

    \b
      semi-lint [check]                # report, non-zero exit on violations
      semi-lint fix                    # insert missing trailing semicolons
      semi-lint --staged               # only staged *.js files
      semi-lint fix --staged           # auto-fix only staged *.js files
      semi-lint check a.js b.js        # limit to specific files
    """
    log_level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s: %(message)s",
        datefmt="%H:%M:%S"
    )
    logger = logging.getLogger(__name__)

    fix_mode, files = split_mode_words(args)

    try:
        config = build_config(config_path, allow_return_no_semi)
    except ConfigError as e:
        raise click.UsageError(str(e))
    logger.debug(f"Mode: {'fix' if fix_mode else 'check'}, {config}")

    # 1) Resolve the candidate list
    if files:
        staged = False
    if root_dir is None:
        root_dir = default_scan_root(sys.argv[0])
    candidates = gather_candidates(files, staged, root_dir)
    if not candidates:
        click.echo(NO_FILES_MESSAGE, err=True)
        sys.exit(0)

    # 2) Keep existing *.js files only
    js_files = filter_candidates(candidates)
    if not js_files:
        click.echo(NO_FILES_MESSAGE, err=True)
        sys.exit(0)
    logger.debug(f"Linting {len(js_files)} file(s).")

    # 3) Scan (and rewrite, in fix mode)
    violations = lint_files(js_files, config, fix_mode)

    # 4) Report
    if report_path:
        logger.debug(f"Writing YAML report to `{report_path}` …")
        write_yaml_report(violations, fix_mode, report_path)
    click.echo(render_report(violations, fix_mode), err=True)

    sys.exit(0 if run_succeeded(violations, fix_mode) else 1)


if __name__ == "__main__":
    main()
