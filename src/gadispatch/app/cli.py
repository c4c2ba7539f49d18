from __future__ import annotations

import argparse
import sys

from gadispatch.app.runner import replay_file


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="gadispatch")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_replay = sub.add_parser("replay", help="Dispatch events from a JSON-lines file")
    p_replay.add_argument("--config", default="config/dispatcher.yaml")
    p_replay.add_argument("events", help="JSON-lines file, one event per line")

    args = parser.parse_args(argv)

    if args.cmd == "replay":
        try:
            result = replay_file(args.config, args.events, sys.stdout)
        except ValueError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 2
        # minimal stderr signal, stdout carries the hits
        print(f"dispatched={result.dispatched} dropped={result.dropped}", file=sys.stderr)
        return 0

    return 1


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
