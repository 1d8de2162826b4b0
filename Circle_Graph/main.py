# main.py

"""Entry point for the circle graph traversal console."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import dataclass
from typing import Iterable, TextIO

from Circle_Graph.config import Config, ConfigError, load_config

QUIT_KEY = "q"


def _configure_logging(level: str | None = None) -> None:
    """Configure application logging and capture uncaught exceptions."""

    logging.basicConfig(
        level=getattr(logging, (level or Config.log_level).upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    def _log_excepthook(exc_type, exc, tb) -> None:
        logging.getLogger(__name__).exception(
            "Uncaught exception", exc_info=(exc_type, exc, tb)
        )

    sys.excepthook = _log_excepthook


def _parse_vector(text: str) -> list[int]:
    try:
        return [int(part) for part in text.split(",") if part.strip()]
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid config vector {text!r}") from exc


def format_status(app, result=None) -> str:
    """Return a one-line description of the current traversal state."""

    mode = "directed" if app.directed else "undirected"
    state = app.engine.state
    line = (
        f"[{mode}] {app.status.value} visited={state.visited_count}/{state.n} "
        f"frontier={len(app.engine.frontier)}"
    )
    if result is not None:
        edge = result.edge
        tag = " (new component)" if result.restarted else ""
        line += f" last={edge.source + 1}->{edge.target + 1}{tag}"
    return line


@dataclass
class MainService:
    """Handle CLI parsing and the key-driven command loop."""

    argv: list[str] | None = None
    stdin: TextIO | None = None
    stdout: TextIO | None = None

    def run(self) -> int:
        args = self._parse_args()
        _configure_logging(args.log_level)
        out = self.stdout or sys.stdout
        try:
            self._apply_args(args)
        except ConfigError as exc:
            sys.stderr.write(f"configuration error: {exc}\n")
            return 2

        from Circle_Graph.app import GraphApp
        from Circle_Graph.command_stack import CommandStack
        from Circle_Graph.graph.io import dump_matrices

        app = GraphApp.from_config()
        if not args.quiet:
            dump_matrices(app.view, out)
            out.write(f"\ncomponents: {app.matrix.component_count()}\n")
        stack = CommandStack()
        keys = args.keys if args.keys is not None else self._read_keys()
        self._run_keys(app, stack, keys, out)
        return 0

    # ------------------------------------------------------------------
    def _parse_args(self) -> argparse.Namespace:
        parser = argparse.ArgumentParser(
            prog="circle-graph",
            description="Step through BFS/DFS on a seeded random graph",
        )
        parser.add_argument(
            "--config",
            default=None,
            help="Path to JSON configuration file",
        )
        parser.add_argument("--seed", type=int, default=None, help="PRNG seed")
        parser.add_argument(
            "--vector",
            type=_parse_vector,
            default=None,
            help="Comma-separated configuration vector deriving N and density",
        )
        parser.add_argument("--n", type=int, default=None, help="Node count override")
        parser.add_argument(
            "--density", type=float, default=None, help="Density override in [0, 1]"
        )
        parser.add_argument(
            "--undirected",
            action="store_true",
            help="Start in undirected mode",
        )
        parser.add_argument(
            "--keys",
            default=None,
            help="Key script to run instead of reading stdin (' ', s, b, d, q)",
        )
        parser.add_argument("--log-level", default=None, help="Logging level")
        parser.add_argument(
            "--trace",
            action="store_true",
            help="Write traversal events as JSON lines to the output directory",
        )
        parser.add_argument(
            "--output-dir", default=None, help="Directory for trace files"
        )
        parser.add_argument(
            "--quiet", action="store_true", help="Skip the matrix dump at startup"
        )
        return parser.parse_args(self.argv)

    @staticmethod
    def _apply_args(args: argparse.Namespace) -> None:
        """Apply CLI overrides onto :class:`Config`."""

        if args.config:
            load_config(args.config)
        elif os.path.exists(Config.config_file):
            load_config(Config.config_file)
        if args.vector is not None:
            Config.apply_vector(args.vector)
        if args.seed is not None:
            Config.seed = args.seed
        if args.n is not None:
            Config.n = args.n
        if args.density is not None:
            Config.density = args.density
        if args.undirected:
            Config.directed = False
        if args.trace:
            Config.log_traversal = True
        if args.output_dir:
            Config.output_dir = os.path.abspath(args.output_dir)
        Config.validate()

    def _read_keys(self) -> Iterable[str]:
        stream = self.stdin or sys.stdin
        for line in stream:
            # an empty line stands for the space key
            yield from line.rstrip("\n") or " "

    @staticmethod
    def _run_keys(app, stack, keys: Iterable[str], out: TextIO) -> None:
        from Circle_Graph.command_stack import command_for_key
        from Circle_Graph.engine.traversal import StepResult

        for key in keys:
            if key == QUIT_KEY:
                break
            command = command_for_key(key, app)
            if command is None:
                continue
            result = stack.do(command)
            step = result if isinstance(result, StepResult) else None
            out.write(f"{command.name}: {format_status(app, step)}\n")


def main(argv: list[str] | None = None) -> None:
    """Entry point for external callers."""
    sys.exit(MainService(argv=argv).run())


if __name__ == "__main__":
    main()
