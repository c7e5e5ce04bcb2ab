"""Command line argument parser."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import final

from music163.config.paths import default_log_file


@dataclass(slots=True)
class CLIArgs:
    """Parsed command line arguments."""

    command: str
    keyword: str | None = None
    ids: list[int] = field(default_factory=list)
    limit: int = 10
    config_path: Path | None = None
    timeout: float | None = None
    verbose: bool = False
    log_file: Path | None = None


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="music163",
            description="Query the NetEase Cloud Music web API and print JSON results.",
        )
        _ = parser.add_argument(
            "--config",
            type=Path,
            dest="config_path",
            metavar="PATH",
            help="TOML configuration file (defaults to $MUSIC163_CONFIG or config/config.toml)",
        )
        _ = parser.add_argument(
            "--timeout",
            type=float,
            metavar="SECONDS",
            help="Per-request timeout overriding the configured value",
        )
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Log every request and response status",
        )
        _ = parser.add_argument(
            "--log-file",
            type=Path,
            nargs="?",
            const=default_log_file(),
            metavar="PATH",
            help="Also write debug logs to PATH (default: logs/music163.log)",
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        search_parser = subparsers.add_parser("search", help="Suggest songs, albums and artists for a keyword")
        _ = search_parser.add_argument("keyword", type=str, metavar="KEYWORD")
        _ = search_parser.add_argument(
            "--limit",
            type=int,
            default=10,
            help="Maximum number of suggestions per category",
        )

        album_parser = subparsers.add_parser("album", help="Show album details")
        _ = album_parser.add_argument("ids", type=int, nargs=1, metavar="ALBUM_ID")

        song_parser = subparsers.add_parser("song", help="Show song details")
        _ = song_parser.add_argument("ids", type=int, nargs="+", metavar="SONG_ID")

        playlist_parser = subparsers.add_parser("playlist", help="Show playlist details")
        _ = playlist_parser.add_argument("ids", type=int, nargs=1, metavar="PLAYLIST_ID")

        dj_parser = subparsers.add_parser("dj", help="Show radio program details")
        _ = dj_parser.add_argument("ids", type=int, nargs=1, metavar="PROGRAM_ID")

        return parser

    @staticmethod
    def process_args(args: Sequence[str] | None = None) -> CLIArgs:
        """Parse ``args`` (defaults to ``sys.argv[1:]``).

        Raises:
            SystemExit: With status 2 on invalid usage.
        """
        parser = ArgumentParser.create_parser()
        namespace = parser.parse_args(args)

        limit: int = getattr(namespace, "limit", 10)
        if limit <= 0:
            parser.error("--limit must be positive")
        timeout: float | None = namespace.timeout
        if timeout is not None and timeout <= 0:
            parser.error("--timeout must be positive")

        return CLIArgs(
            command=namespace.command,
            keyword=getattr(namespace, "keyword", None),
            ids=list(getattr(namespace, "ids", []) or []),
            limit=limit,
            config_path=namespace.config_path,
            timeout=timeout,
            verbose=namespace.verbose,
            log_file=namespace.log_file,
        )


__all__ = ["ArgumentParser", "CLIArgs"]
