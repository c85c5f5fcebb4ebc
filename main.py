#!/usr/bin/env python3

import argparse
import json
import logging

from derived_wind.config import create_engine, load_config, parse_log_level
from derived_wind.scenario import parse_events, replay
from derived_wind.services.delta_service import DeltaSink


def print_delta(delta):
    print(json.dumps(delta))


def main():
    """Replay a recorded scenario through the wind engine"""
    parser = argparse.ArgumentParser(description="Derived Wind Calculator")
    parser.add_argument(
        "--config", required=True, help="Path to YAML configuration file"
    )
    # Optional command-line overrides
    parser.add_argument(
        "--loglevel",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override logging level",
    )
    parser.add_argument("--source", help="Override source tag of published values")
    parser.add_argument("--context", help="Override SignalK context of deltas")

    args = parser.parse_args()

    # Load configuration
    config = load_config(args.config)

    # Command-line arguments override config file
    if args.loglevel:
        config["loglevel"] = args.loglevel
    if args.source:
        config["source"] = args.source
    if args.context:
        config["context"] = args.context

    # Set up logging
    logging.basicConfig(
        level=parse_log_level(config["loglevel"]),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    engine = create_engine(config)
    engine.add_sink(DeltaSink(print_delta, context=config["context"]))

    events = parse_events(config["events"])

    logging.info(f"Starting replay of {len(events)} events...")
    replay(engine, events)


if __name__ == "__main__":
    main()
