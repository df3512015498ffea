"""Command line entry point for the skill installer."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from skill_installer import __version__
from skill_installer.config import SKILL_NAME, InstallerConfig, validate_skill_name
from skill_installer.errors import InstallerError, SafetyError
from skill_installer.installer import install_all
from skill_installer.platforms import Scope
from skill_installer.source import Source, stage_bundle

logger = logging.getLogger(__name__)

EPILOG = """\
Examples:
  # Install for every tool found under your home directory
  chrome-extension-skill
  # Or, if you have the sources locally
  chrome-extension-skill --self --local
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chrome-extension-skill",
        description=(
            f"Install the {SKILL_NAME} skill for OpenCode, Gemini CLI, Claude, "
            "FactoryAI Droid, Agents, and Antigravity."
        ),
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-g",
        "--global",
        dest="scope",
        action="store_const",
        const=Scope.GLOBAL,
        default=Scope.GLOBAL,
        help="Install globally (user scope) [default]",
    )
    parser.add_argument(
        "-l",
        "--local",
        dest="scope",
        action="store_const",
        const=Scope.LOCAL,
        help="Install locally (.opencode/skills/, .gemini/skills/, etc.)",
    )
    parser.add_argument(
        "-s",
        "--self",
        dest="source",
        action="store_const",
        const=Source.SELF,
        default=Source.REMOTE,
        help="Install from local filesystem (for testing/dev)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(
    argv: Optional[List[str]] = None, config: Optional[InstallerConfig] = None
) -> int:
    """Run the installer and return the process exit status."""

    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if config is None:
        try:
            config = InstallerConfig.from_env()
        except OSError as e:
            Console(stderr=True).print(
                f"[bold red]Error:[/bold red] {escape(str(e))}"
            )
            return 1

    console = Console(no_color=config.no_color, highlight=False, soft_wrap=True)
    err_console = Console(
        stderr=True, no_color=config.no_color, highlight=False, soft_wrap=True
    )

    try:
        validate_skill_name(config.skill_name)

        console.print(f"Installing {config.skill_name} skill ({args.scope.value})...")
        if args.source is Source.SELF:
            console.print(f"Using local source: {escape(str(config.self_root))}")
        else:
            console.print(f"Fetching skill from {escape(config.repo_url)}...")

        with stage_bundle(args.source, config) as bundle:
            results = install_all(bundle, args.scope, config)
    except SafetyError as e:
        err_console.print(f"[bold red]Safety Error:[/bold red] {escape(str(e))}")
        return 1
    except (InstallerError, OSError) as e:
        logger.debug("Install aborted", exc_info=True)
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        return 1

    for result in results:
        suffix = " (updated)" if result.was_update else ""
        console.print(f"Installed to {result.platform}{suffix}")
        if result.command_path is not None:
            console.print(
                f"  Command installed to: {escape(str(result.command_path))}"
            )
        console.print(f"  Skill installed to: {escape(str(result.skill_path))}")

    if not results:
        console.print(
            "[yellow]No supported tools found. Use --local to install into "
            "the current project.[/yellow]"
        )
    console.print("Done.")
    return 0


def run() -> None:
    sys.exit(main())
