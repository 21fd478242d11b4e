#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--size N] [--mines M] [--seed S]
    python main.py evaluate [--games N] [--size N] [--mines M]
"""
import argparse

from minesweeper import BoardConfig, GameSession, GameState
from minesweeper.agents import RandomAgent
from minesweeper.evaluation import Evaluator


def play(args: argparse.Namespace) -> None:
    """Play an interactive game in the terminal."""
    session = GameSession(size=args.size, num_mines=args.mines, seed=args.seed)
    try:
        state = session.run()
    except (EOFError, KeyboardInterrupt):
        print("\nGame abandoned.")
        return
    if state == GameState.LOST:
        raise SystemExit(1)


def evaluate(args: argparse.Namespace) -> None:
    """Evaluate the random agent and print results."""
    mines = args.mines if args.mines else 10
    config = BoardConfig(size=args.size, num_mines=mines)
    evaluator = Evaluator(config, num_episodes=args.games, seed=args.seed)
    agent = RandomAgent(args.size, seed=args.seed)

    print(f"\nEvaluating Random over {args.games} games...")
    results = evaluator.evaluate(agent)

    print("Results for Random:")
    print(f"  Win rate: {results['win_rate']:.1%}")
    print(f"  Avg reward: {results['avg_reward']:.2f}")
    print(f"  Avg steps: {results['avg_steps']:.1f}")
    print(f"  Avg revealed: {results['avg_revealed']:.1f} cells")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minesweeper - Play in the terminal or evaluate agents"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play a game")
    play_parser.add_argument(
        "--size", type=int, default=9, help="Board size (NxN)"
    )
    play_parser.add_argument(
        "--mines", type=int, default=None,
        help="Number of mines (asked interactively if omitted)",
    )
    play_parser.add_argument(
        "--seed", type=int, default=None, help="Seed for mine placement"
    )

    # Evaluate command
    eval_parser = subparsers.add_parser(
        "evaluate", help="Evaluate the random agent"
    )
    eval_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )
    eval_parser.add_argument(
        "--size", type=int, default=9, help="Board size (NxN)"
    )
    eval_parser.add_argument(
        "--mines", type=int, default=None, help="Number of mines (default: 10)"
    )
    eval_parser.add_argument(
        "--seed", type=int, default=None, help="Random seed"
    )

    args = parser.parse_args()

    if args.command == "play":
        play(args)
    elif args.command == "evaluate":
        evaluate(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
