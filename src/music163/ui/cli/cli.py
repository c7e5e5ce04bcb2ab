"""Command line interface for music163."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from dataclasses import replace
from typing import Any, final

from pydantic import BaseModel
from rich.console import Console

from music163.api.dispatch import Transport
from music163.client import Client
from music163.config import ClientConfig
from music163.errors import ConfigError, Music163Error
from music163.platform.logging import logger, setup_logger
from music163.ui.cli.args import ArgumentParser, CLIArgs

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


@final
class CommandProcessor:
    """Run one CLI command against the API and print its result."""

    @staticmethod
    def process_command(
        args_list: Sequence[str] | None = None,
        *,
        transport: Transport | None = None,
        console: Console | None = None,
    ) -> int:
        """Process command line arguments.

        Args:
            args_list: Arguments to parse (defaults to ``sys.argv[1:]``).
            transport: Session to use instead of a fresh ``requests.Session``.
            console: Output console; stdout by default.

        Returns:
            int: Process exit code.
        """
        args = ArgumentParser.process_args(args_list)
        _ = setup_logger(
            log_file=args.log_file,
            console_level=logging.DEBUG if args.verbose else logging.WARNING,
        )
        out = console or Console()

        try:
            config = ClientConfig.load(args.config_path)
            if args.timeout is not None:
                config = replace(config, timeout=args.timeout)
            with Client(transport=transport, config=config) as client:
                result = CommandProcessor._run(client, args)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return EXIT_INTERRUPTED
        except ConfigError as e:
            logger.error("Configuration error: %s", e)
            return EXIT_FAILURE
        except Music163Error as e:
            logger.error("%s", e)
            return EXIT_FAILURE

        out.print_json(data=CommandProcessor._to_json(result))
        return EXIT_OK

    @staticmethod
    def _run(client: Client, args: CLIArgs) -> BaseModel:
        match args.command:
            case "search":
                result, _ = client.search.suggest(args.keyword or "", limit=args.limit)
            case "album":
                result, _ = client.album.get(args.ids[0])
            case "song":
                result, _ = client.detail.get(args.ids)
            case "playlist":
                result, _ = client.playlist.get(args.ids[0])
            case "dj":
                result, _ = client.dj.get(args.ids[0])
            case _:
                raise ValueError(f"unknown command {args.command!r}")
        return result

    @staticmethod
    def _to_json(result: BaseModel) -> Any:
        return result.model_dump(mode="json", by_alias=True, exclude_none=True)


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success).
    """
    return CommandProcessor.process_command(argv)


if __name__ == "__main__":
    sys.exit(main())
