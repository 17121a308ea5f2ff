"""Command-line entry point for scm-prompt"""

import os
import sys
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from scm_prompt.cli.args import pairs_to_dict, parse_args
from scm_prompt.config import SegmentConfig
from scm_prompt.core import ScmSegment
from scm_prompt.exceptions import NotARepositoryError
from scm_prompt.logging_config import setup_logging

console = Console(highlight=False, soft_wrap=True)
error_console = Console(stderr=True)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    parsed_args = None
    try:
        parsed_args = parse_args(argv)

        setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug)

        config = SegmentConfig(
            branch_max_length=parsed_args.branch_max_length,
            truncate_symbol=parsed_args.truncate_symbol,
            full_branch_path=not parsed_args.no_full_branch_path,
            branch_patterns=parsed_args.branch_pattern,
            mapped_branches=pairs_to_dict(parsed_args.map_branch),
            status_formats=pairs_to_dict(parsed_args.status_format),
            native_fallback=parsed_args.native_fallback,
            fetch_status=not parsed_args.no_status,
            verbose=parsed_args.verbose,
            debug=parsed_args.debug,
        )

        if parsed_args.debug:
            error_console.print("[yellow]Configuration:[/yellow]")
            for key, value in config.to_dict().items():
                error_console.print(f"  {key}: {value}", markup=False)

        repo_path = parsed_args.path or os.getcwd()
        segment = ScmSegment(repo_path, config)
        console.print(segment.render(), markup=False)
        return 0
    except NotARepositoryError as e:
        if parsed_args is not None and parsed_args.verbose:
            error_console.print(f"[yellow]{escape(str(e))}[/yellow]")
        return 1
    except KeyboardInterrupt:
        error_console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    except Exception as e:
        error_console.print(f"[red]Error: {escape(str(e))}[/red]")
        if parsed_args is not None and parsed_args.debug:
            error_console.print_exception()
        return 1


if __name__ == "__main__":
    sys.exit(main())
