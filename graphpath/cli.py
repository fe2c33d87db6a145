"""Command-line interface for running a shortest-path query.

    graphpath [--data-dir DIR] [--quiet-edges] [--log-level LEVEL] SOURCE DEST

The positional tokens are handed to the query as its argument stream, so
a missing id is reported by the query itself rather than by argparse.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .config import AppConfig, configure_logging, get_config
from .container import Container
from .domain.errors import ConfigurationError, HostGraphError
from .services import ShortestPathQuery


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="graphpath",
        description="Shortest path between two vertices of a weighted host graph",
    )
    p.add_argument(
        "ids",
        nargs="*",
        metavar="ID",
        help="Source and destination vertex ids",
    )
    p.add_argument(
        "--data-dir",
        type=str,
        default=None,
        help="Directory holding vertices.csv and edges.csv",
    )
    p.add_argument(
        "--quiet-edges",
        action="store_true",
        help="Do not print each host edge while building the graph",
    )
    p.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level for diagnostics on stderr (e.g. DEBUG, INFO)",
    )
    return p


def _apply_overrides(config: AppConfig, args: argparse.Namespace) -> AppConfig:
    graph = config.graph
    if args.data_dir is not None:
        graph = graph.model_copy(update={"data_dir": Path(args.data_dir)})
    query = config.query
    if args.quiet_edges:
        query = query.model_copy(update={"echo_edges": False})
    observability = config.observability
    if args.log_level is not None:
        observability = observability.model_copy(update={"level": args.log_level})
    return config.model_copy(
        update={"graph": graph, "query": query, "observability": observability}
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = _apply_overrides(get_config(), args)

    try:
        configure_logging(config.observability)
        container = Container.create_default(config)
        query = container.resolve(ShortestPathQuery)
    except (ConfigurationError, HostGraphError) as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 1

    query.execute(args.ids)
    return 0


if __name__ == "__main__":
    sys.exit(main())
