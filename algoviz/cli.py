"""Command-line entry point: generate a timeline, print it, optionally autoplay it."""

from __future__ import annotations

import argparse
import asyncio
import dataclasses
import json
import logging
import random
import sys

from . import constants
from .api import (
    dump_timeline,
    format_snapshot,
    generate_bst_timeline,
    generate_mst_timeline,
    generate_sort_timeline,
    generate_traversal_timeline,
)
from .bst import build_tree
from .graph_types import GraphEdge
from .playback import PlaybackController
from .random_inputs import random_array, random_graph
from .run_types import PlaybackConfig
from .scheduler import AsyncioTickScheduler
from .timeline_types import Timeline

logger = logging.getLogger(__name__)


def _parse_edge(text: str) -> GraphEdge:
    """Parse ``A-B:W`` into a GraphEdge."""
    try:
        ends, weight = text.split(":")
        node1, node2 = ends.split("-")
        return GraphEdge(node1=int(node1), node2=int(node2), weight=int(weight))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"Invalid edge {text!r} (expected A-B:W): {exc}"
        ) from exc


def _parse_operation(text: str) -> tuple[str, int]:
    """Parse ``+5`` / ``-5`` into an insert/remove operation."""
    if len(text) < 2 or text[0] not in "+-":
        raise argparse.ArgumentTypeError(
            f"Invalid operation {text!r} (expected +N or -N)"
        )
    try:
        value = int(text[1:])
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Invalid operation {text!r}") from exc
    return ("insert" if text[0] == "+" else "remove", value)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="algoviz",
        description="Record algorithm runs as replayable step timelines",
    )
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for random inputs")
    output = parser.add_mutually_exclusive_group()
    output.add_argument("--json", action="store_true",
                        help="Print the timeline as JSON")
    output.add_argument("--play", action="store_true",
                        help="Autoplay the timeline in the terminal")
    parser.add_argument("--stats", action="store_true",
                        help="Print generation statistics")
    parser.add_argument("--interval", type=float, default=None,
                        help="Override the autoplay interval (seconds)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Log generation progress")
    commands = parser.add_subparsers(dest="command", required=True)

    sort = commands.add_parser("sort", help="Record a comparison sort")
    sort.add_argument("--algorithm", "-a", default="insertion",
                      choices=["insertion", "merge"])
    sort.add_argument("values", nargs="*", type=int,
                      help="Values to sort (default: random array)")

    mst = commands.add_parser("mst", help="Record a minimum spanning tree build")
    mst.add_argument("--algorithm", "-a", default="kruskal",
                     choices=["kruskal", "prim"])
    mst.add_argument("--nodes", "-n", type=int,
                     default=constants.RANDOM_GRAPH_NODE_COUNT,
                     help="Node count (default: 6)")
    mst.add_argument("--edge", "-e", dest="edges", action="append", type=_parse_edge,
                     default=[],
                     help="Edge as A-B:W; repeatable (default: random graph)")
    mst.add_argument("--start", type=int, default=constants.DEFAULT_START_NODE,
                     help="Prim start node (default: 0)")

    traverse = commands.add_parser("traverse", help="Record a BST traversal")
    traverse.add_argument("--order", "-o", default="inorder",
                          choices=["inorder", "preorder", "postorder", "levelorder"])
    traverse.add_argument("values", nargs="*", type=int,
                          help="Values inserted into the tree, in order")

    ops = commands.add_parser("bst", help="Record BST insert/remove operations")
    ops.add_argument("operations", nargs="+", type=_parse_operation,
                     help="+N inserts N, -N removes N")
    return parser


def _generate(args: argparse.Namespace, rng: random.Random) -> Timeline:
    if args.command == "sort":
        values = args.values or random_array(rng)
        return generate_sort_timeline(args.algorithm, values)
    if args.command == "mst":
        edges = args.edges or random_graph(rng, node_count=args.nodes)
        return generate_mst_timeline(
            args.algorithm, args.nodes, edges, start_node=args.start
        )
    if args.command == "traverse":
        values = args.values or random_array(rng, length=7)
        return generate_traversal_timeline(build_tree(values), args.order)
    return generate_bst_timeline(args.operations)


async def _autoplay(timeline: Timeline, config: PlaybackConfig) -> None:
    controller = PlaybackController(
        AsyncioTickScheduler(),
        config,
        on_change=lambda snapshot: print(format_snapshot(snapshot), flush=True),
    )
    controller.reset(timeline)
    controller.toggle_play()
    while controller.is_playing:
        await asyncio.sleep(0.05)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(name)s: %(message)s",
    )

    rng = random.Random(args.seed)
    try:
        timeline = _generate(args, rng)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.play:
        config = PlaybackConfig()
        if args.interval is not None:
            config = dataclasses.replace(
                config,
                **{f.name: args.interval for f in dataclasses.fields(config)},
            )
        asyncio.run(_autoplay(timeline, config))
    elif args.json:
        print(json.dumps(timeline.to_dict(), indent=2, default=str))
    else:
        print(dump_timeline(timeline))

    if args.stats:
        print()
        print(timeline.stats.report())
    return 0


if __name__ == "__main__":
    sys.exit(main())
