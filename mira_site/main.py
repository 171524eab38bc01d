"""Main CLI entry point for mira-site.

This module provides the minimal entry point for the command-line
interface, delegating all functionality to specialized command
handlers and CLI components.
"""

import sys

import uvloop

from .cli import CLIRunner


async def async_main() -> None:
    """Run the CLI asynchronously."""
    runner = CLIRunner()
    await runner.run()


def main() -> None:
    """Run the CLI application.

    Run the CLI asynchronously on the uvloop event loop.

    Raises:
        SystemExit: With code 1 on cancellation or unexpected errors

    """
    try:
        uvloop.run(async_main())
    except KeyboardInterrupt:
        print("\n⏹️  Operation cancelled by user")
        sys.exit(1)
    except Exception as e:
        print(f"❌ Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
