# main.py
import argparse
import json
import logging
import sys
from typing import Dict, List, Optional

from config import config, ConfigurationError
from catalog_query import fetch_planets
from info_panel import format_elapsed, format_info_lines, format_result_line
from planetary_system import create_simulation_from_record
from selection_store import SelectionError, load_selected_record, save_selected_record

def build_query_input(args: argparse.Namespace) -> Dict[str, str]:
    """Maps `--<column> MIN MAX` arguments onto the `<column>_min/_max` keys of the query builder."""
    query_input: Dict[str, str] = {}
    for column, min_key, max_key in config.Catalog.RANGE_FILTERS:
        bounds = getattr(args, column, None)
        if bounds:
            query_input[min_key], query_input[max_key] = bounds
    return query_input

def run_search(args: argparse.Namespace) -> int:
    result = fetch_planets(build_query_input(args))
    if not result.ok:
        logging.error(f"Catalog search failed: {result.error}")
        print(f"Error: {result.error or 'Could not load data.'}")
        return 1
    rows = result.data
    if not rows:
        print("No planets match. Widen filters.")
        return 0

    print(f"{len(rows)} result(s).")
    for index, row in enumerate(rows, start=1):
        print(f"{index:4d}. {format_result_line(row)}")

    if args.select is not None:
        if not (1 <= args.select <= len(rows)):
            print(f"Error: --select must be between 1 and {len(rows)}.")
            return 1
        chosen = rows[args.select - 1]
        save_selected_record(chosen, args.store)
        print(f"Selected {format_result_line(chosen)}. Run 'view' to visualize.")
    return 0

def _load_record(args: argparse.Namespace) -> Dict:
    if getattr(args, "record_json", None):
        try:
            record = json.loads(args.record_json)
        except ValueError as e:
            raise SelectionError(f"--record-json is not valid JSON: {e}") from e
        if not isinstance(record, dict):
            raise SelectionError("--record-json must be a JSON object.")
        return record
    return load_selected_record(args.store)

def run_show(args: argparse.Namespace) -> int:
    state = create_simulation_from_record(_load_record(args))
    print("\n".join(format_info_lines(state)))
    return 0

def run_view(args: argparse.Namespace) -> int:
    state = create_simulation_from_record(_load_record(args))
    print("\n".join(format_info_lines(state)))

    if args.headless:
        step = config.Visualization.PHASE_STEP_PER_FRAME
        for _ in range(args.frames):
            state.update(step)
        x, y, z = state.get_planet_position()
        print(f"After {args.frames} frames: position ({x:.4f}, {y:.4f}, {z:.4f}) AU, "
              f"r = {state.radius_at_phase(state.phase):.4f} AU")
        print(format_elapsed(state))
        return 0

    # Imported lazily so searching and headless runs never open a display
    from visualization import SystemVisualization
    SystemVisualization(state).run(max_frames=args.frames)
    return 0

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Search the NASA Exoplanet Archive and animate a planet against its habitable zone."
    )
    parser.add_argument("--store", default=None,
                        help=f"Selected-record file (default: {config.Selection.STORE_PATH}).")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    search = subparsers.add_parser("search", help="Range search over stellar and orbital parameters.")
    for column, _, _ in config.Catalog.RANGE_FILTERS:
        search.add_argument(f"--{column.replace('_', '-')}", dest=column, nargs=2,
                            metavar=("MIN", "MAX"), help=f"Inclusive range for {column}.")
    search.add_argument("--select", type=int, default=None,
                        help="Store result N (1-based) as the selected planet.")
    search.set_defaults(handler=run_search)

    show = subparsers.add_parser("show", help="Print the info panel for the selected planet.")
    show.add_argument("--record-json", default=None, help="Use this JSON row instead of the stored selection.")
    show.set_defaults(handler=run_show)

    view = subparsers.add_parser("view", help="Animate the selected planet.")
    view.add_argument("--record-json", default=None, help="Use this JSON row instead of the stored selection.")
    view.add_argument("--headless", action="store_true", help="Advance the simulation without opening a window.")
    view.add_argument("--frames", type=int, default=None,
                      help="Stop after N frames (required with --headless).")
    view.set_defaults(handler=run_view)
    return parser

def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    if args.command == "view" and args.headless and args.frames is None:
        parser.error("--headless requires --frames N")

    try:
        return args.handler(args)
    except SelectionError as e_selection:
        logging.error(f"No usable selection: {e_selection}")
        print(f"Error: {e_selection}")
        return 1
    except ConfigurationError as e_config_main:
        logging.critical(f"Could not run due to a ConfigurationError: {e_config_main}", exc_info=True)
        print(f"FATAL CONFIGURATION ERROR: {e_config_main}. Check logs for details.")
        return 1

if __name__ == "__main__":
    sys.exit(main())
