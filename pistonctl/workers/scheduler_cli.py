from __future__ import annotations

import argparse
import logging

from pistonctl.config import load_config, setup_logging
from pistonctl.domain.exceptions import ConfigurationError
from pistonctl.services.container import PistonContainer

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pistonctl-run",
        description="Run the piston control loop against a simulated world and print the status block.",
    )
    parser.add_argument("--world", help="JSON world file (default: $PISTONCTL_WORLD_FILE)")
    parser.add_argument("--ticks", type=int, default=600, help="Base ticks to run (default: 600, 10s at 60 Hz)")
    parser.add_argument(
        "--command",
        action="append",
        default=[],
        metavar="ARG",
        help="Terminal argument issued after the initial scan (repeatable)",
    )
    parser.add_argument("--no-simulate", action="store_true", help="Do not move pistons between ticks")
    parser.add_argument("--quiet", action="store_true", help="Only log warnings")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the control loop synchronously for a fixed number of ticks."""
    args = build_parser().parse_args(argv)
    if args.ticks < 1:
        print("--ticks must be at least 1")
        return 2

    config = load_config()
    if args.world:
        config.world_file = args.world
    if args.no_simulate:
        config.simulate_motion = False
    config.audit_log_path = ""

    setup_logging(debug=config.DEBUG, log_file=None)
    if args.quiet:
        logging.getLogger().setLevel(logging.WARNING)

    try:
        container = PistonContainer.build(config)
    except ConfigurationError as e:
        print(f"Failed to load world: {e}")
        return 2

    runner = container.runner
    # Initial scan happens on the first base tick
    runner.step()
    for argument in args.command:
        container.run_command(argument, actor="cli")
    runner.run_ticks(args.ticks - 1)

    print(container.program.output)
    for piston in container.grid.get_pistons():
        state = piston.to_dict()
        print(f"  {state['name']}: {state['status']} at {state['position']:.2f} m, velocity {state['velocity']:+.2f} m/s")
    return 0


if __name__ == "__main__":
    import sys

    raise SystemExit(main(sys.argv[1:]))
