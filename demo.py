#!/usr/bin/env python3
"""
Watch a random player work through Minesweeper boards move by move.

Each frame shows the board, the last move with its outcome, the mines
left to flag and how many safe cells are open. A tally of outcomes is
printed after every game.
"""
import argparse
import os
import time
from collections import Counter
from typing import Dict, Optional, Tuple

from minesweeper import BoardConfig, MinesweeperEnv
from minesweeper.agents import RandomAgent


def clear_screen() -> None:
    os.system("cls" if os.name == "nt" else "clear")


def default_mine_count(size: int) -> int:
    """About a fifth of the board, capped by the safe-zone limit."""
    return max(1, min(int(size * size * 0.2), size * size - 10))


def status_line(env: MinesweeperEnv, action: int, info: Dict) -> str:
    """One-line summary of a step."""
    move = env.action_to_move(action)
    return (
        f"{move.action.value:<6} ({move.row + 1}, {move.col + 1}) "
        f"-> {info['outcome']:<16} "
        f"mines left {info['mines_remaining']:>3}  "
        f"opened {info['revealed']}/{info['total_safe']}"
    )


def show(title: str, line: str, env: MinesweeperEnv) -> None:
    clear_screen()
    print(title)
    print(line + "\n")
    print(env.render())


def play_episode(
    env: MinesweeperEnv,
    agent: RandomAgent,
    title: str,
    delay: float,
    seed: Optional[int] = None,
) -> Tuple[str, Counter]:
    """
    Play one game on screen.

    Returns:
        Final game state name and a count of move outcomes.
    """
    observation, info = env.reset(seed=seed)
    agent.reset()
    outcomes: Counter = Counter()
    max_steps = 4 * env.config.size * env.config.size

    show(title, "new board", env)
    time.sleep(delay)

    for _ in range(max_steps):
        action = agent.select_action(observation, env.get_action_mask())
        observation, _, terminated, _, info = env.step(action)
        outcomes[info["outcome"]] += 1

        show(title, status_line(env, action, info), env)
        time.sleep(delay)
        if terminated:
            break

    return info["game_state"], outcomes


def demo(
    delay: float = 0.3,
    games: int = 5,
    size: int = 9,
    mines: Optional[int] = None,
    flag_rate: float = 0.1,
    seed: Optional[int] = None,
) -> None:
    """Run demo games with visualization."""
    mines = mines or default_mine_count(size)
    env = MinesweeperEnv(BoardConfig(size=size, num_mines=mines), render_mode="ansi")
    agent = RandomAgent(size, seed=seed, flag_rate=flag_rate)
    results: Counter = Counter()

    for game in range(games):
        title = f"=== Game {game + 1}/{games} | {size}x{size}, {mines} mines | {dict(results)} ==="
        state, outcomes = play_episode(
            env, agent, title, delay, seed=seed if game == 0 else None
        )
        results[state] += 1

        print(f"\n*** {state} ***")
        for outcome, count in outcomes.most_common():
            print(f"  {outcome:<16} {count}")
        time.sleep(1.0)

    print(f"\n=== Final: {results['WON']}/{games} won, {results['LOST']} lost ===")


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--delay", type=float, default=0.3, help="Seconds between moves")
    parser.add_argument("--games", type=int, default=5, help="Number of games")
    parser.add_argument("--size", type=int, default=9, help="Board size (NxN)")
    parser.add_argument("--mines", type=int, default=None, help="Number of mines (default: ~20%% of cells)")
    parser.add_argument("--flag-rate", type=float, default=0.1, help="Chance of a flag toggle per move")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    args = parser.parse_args()

    demo(args.delay, args.games, args.size, args.mines, args.flag_rate, args.seed)


if __name__ == "__main__":
    main()
