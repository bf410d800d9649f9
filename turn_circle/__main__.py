from __future__ import annotations

import argparse
import sys

from turn_circle.circle import TurnCircle
from turn_circle.event_sink import InMemoryEventSink
from turn_circle.events import Event
from turn_circle.trace import TurnTrace, run_rounds


def _demo_players() -> list[str]:
    # deterministic demo table
    return ["North", "East", "South", "West"]


def _render_turns(log: list[TurnTrace[str]]) -> str:
    lines: list[str] = []
    for entry in log:
        lines.append(f"Round {entry.round} | turn {entry.turn} | {entry.player}")
    return "\n".join(lines) + "\n" if lines else ""


def _render_events(events: list[Event]) -> str:
    lines = ["", "Events:"]
    for e in events:
        player = e.player if e.player is not None else "-"
        extra = " ".join(f"{k}={v}" for k, v in sorted(e.data.items()))
        lines.append(f"  [{e.round}.{e.seq}] {e.type.value:<16s} {player} {extra}".rstrip())
    return "\n".join(lines) + "\n"


def _cmd_run(args: argparse.Namespace) -> int:
    chosen = sum(1 for v in [bool(args.demo), bool(args.players)] if v)
    if chosen != 1:
        print("ERROR: choose exactly one of --demo or --players.", file=sys.stderr)
        return 2

    names = _demo_players() if args.demo else list(args.players)

    sink = InMemoryEventSink()
    circle: TurnCircle[str] = TurnCircle(event_sink=sink)
    if not circle.insert_all(names):
        print("WARNING: duplicate players dropped.", file=sys.stderr)

    for name in args.remove or []:
        if not circle.remove(name):
            print(f"ERROR: cannot remove {name!r}: not in the circle.", file=sys.stderr)
            return 2

    if args.first is not None and not circle.designate_first(args.first):
        print(f"ERROR: cannot make {args.first!r} first: not in the circle.", file=sys.stderr)
        return 2

    try:
        log = run_rounds(circle, int(args.rounds), event_sink=sink)
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    sys.stdout.write(_render_turns(log))
    if args.events:
        sys.stdout.write(_render_events(sink.events))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser: argparse.ArgumentParser = argparse.ArgumentParser(
        prog="turn_circle",
        description=(
            "Turn Circle: user harness.\n"
            "\n"
            "Builds a circle of players and prints who acts, round by round."
        ),
    )

    sub = parser.add_subparsers(dest="command", required=True)

    run = sub.add_parser("run", help="Walk a circle of players and print each turn.")
    run.add_argument("--demo", action="store_true", help="Use the built-in four-player demo table.")
    run.add_argument("--players", nargs="+", metavar="NAME", help="Players in turn order.")
    run.add_argument("--first", type=str, default=None, help="Player to designate as first.")
    run.add_argument(
        "--remove",
        action="append",
        metavar="NAME",
        help="Remove a player before the walk. May be given more than once.",
    )
    run.add_argument("--rounds", type=int, default=1, help="Number of full rounds to walk.")
    run.add_argument("--events", action="store_true", help="Also print the event log.")
    run.set_defaults(func=_cmd_run)

    return parser


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
