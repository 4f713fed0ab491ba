"""
Simple Thief Chase Terminal Game

A terminal-based police versus thieves game on a diagonal checkerboard.
Play the thieves yourself or watch the computer play both sides.

Usage:
    thief-chase                          # Interactive game, you move the thieves
    thief-chase --thief-mode escape      # Watch an automatic game
    thief-chase --batch N                # Play N automatic games
"""
from typing import List, Optional

from simple_play.display_utils import VerbosityLevel
from simple_play.game_utils import (
    config_from_arguments,
    configure_logging,
    play_multiple_games,
    play_single_game,
    parse_arguments
)


def main(argv: Optional[List[str]] = None):
    """Main entry point"""
    args = parse_arguments(argv)
    configure_logging(args.log_level)

    try:
        config = config_from_arguments(args)
    except ValueError as e:
        print(f"❌ Invalid configuration: {e}")
        return 2

    if args.batch:
        print(f"🤖 Batch mode: Playing {args.batch} automatic games")
        play_multiple_games(args.batch, config, verbosity=min(args.verbosity, VerbosityLevel.BASIC))
        return 0

    print("👮 THIEF CHASE - SIMPLE TERMINAL GAME 🦹")
    print("=" * 60)
    try:
        status = play_single_game(config, verbosity=args.verbosity, delay=args.delay)
    except KeyboardInterrupt:
        print("\n\n👋 Game interrupted by user. Goodbye!")
        return 1

    if status is None:
        print("\n👋 Game ended early. Thanks for playing!")
    else:
        print("\nThanks for playing Thief Chase! 🎮")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
