#!/usr/bin/env python3
"""Convenience runner for the waypoint planner event replay.

Usage:
    python run.py events.json
"""
import logging
from waypoint_planner.main import main

if __name__ == "__main__":
    if not logging.getLogger().hasHandlers():
        logging.basicConfig(level=logging.INFO, format="[%(asctime)s] %(levelname)s %(name)s: %(message)s")
    raise SystemExit(main())
