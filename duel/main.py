#!/usr/bin/env python3
"""
Duel - Self-Test Entry Point
============================

Run with: python -m duel.main [--all-tests] [--verbose]

Builds a fresh Player and a fresh Level and checks their starting state.
A failed check raises AssertionError and ends the process with a
non-zero status.
"""
import argparse
import sys
from typing import Any, List, Optional

from duel.core.config import PLAYER_START_HEALTH, LEVEL_PLAYER_COUNT, LEVEL_TILE_COUNT
from duel.core.events import event_bus, CheckPassedEvent, SelfTestCompletedEvent
from duel.core.level import Level
from duel.core.player import Player
from duel.core.reporting import LoggerHandler


def check(name: str, actual: Any, expected: Any) -> None:
    """Raise AssertionError unless actual == expected."""
    # Explicit raise so checks survive python -O
    if actual != expected:
        raise AssertionError(f"{name}: expected {expected!r}, got {actual!r}")
    event_bus.publish(CheckPassedEvent(name=name, expected=expected, actual=actual))


def run_checks() -> int:
    """Run every self-test check. Returns the number of checks run."""
    checks = 0

    # Player starting health
    player = Player()
    check("player health", player.health, PLAYER_START_HEALTH)
    checks += 1

    # Level size
    level = Level()
    check("level tiles", len(level.tiles), LEVEL_TILE_COUNT)
    check("level players", len(level.players), LEVEL_PLAYER_COUNT)
    checks += 2
    for i, level_player in enumerate(level.players):
        check(f"level player {i} health", level_player.health, PLAYER_START_HEALTH)
        checks += 1

    event_bus.publish(SelfTestCompletedEvent(checks=checks))
    return checks


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Duel - data model self-test")
    parser.add_argument('--all-tests', action='store_true',
                       help='Run all checks (always the case; kept for build scripts)')
    parser.add_argument('--verbose', action='store_true',
                       help='Print each passed check to console')
    args = parser.parse_args(argv)

    logger = LoggerHandler(verbose=args.verbose)
    try:
        run_checks()
    finally:
        logger.detach()
    return 0


if __name__ == "__main__":
    sys.exit(main())
