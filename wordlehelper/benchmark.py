"""
Self-play benchmark - the solver plays games against random targets
through the same Session API a chat front end would drive
"""

import json
import logging
import random
import time
from typing import Optional

try:
    import wandb
    HAS_WANDB = True
except ImportError:
    HAS_WANDB = False

from wordlehelper.classes.Dictionary import Dictionary
from wordlehelper.classes.Feedback import simulate
from wordlehelper.classes.Session import Session
from wordlehelper.constants import LOG_DIR, NUM_GUESSES, NUM_RUNS, STARTERS, SUGGESTION_LIMIT, WANDB_PROJECT
from wordlehelper.words import WORDS


def enter_feedback(session: Session, guess: str, target: str):
    """Type guess into the grid and click each cell until it shows the colour
    the game would give, like a user copying the board"""
    session.enter_word(guess)
    for pos, wanted in enumerate(simulate(guess, target)):
        while session.row.cells[pos].feedback != wanted:
            session.cycle_feedback(pos)
    return session.confirm_row()


def pick_guess(session: Session) -> str:
    if not session.guesses:
        for starter in STARTERS:
            if starter in session.dictionary:
                return starter
    return session.suggestions(limit=SUGGESTION_LIMIT)[0][0]


def run_game(session: Session, target: str, run_id: int, logging: bool = True):
    if logging:
        print(f"\n{'='*40}")
        print(f"Starting run {run_id + 1}")
        print(f"{'='*40}")

    session.reset()
    game_start = time.time()

    while not session.solved and len(session.guesses) < NUM_GUESSES:
        guess = enter_feedback(session, pick_guess(session), target)
        if logging:
            print(f"  {guess}  ({len(session.candidates)} left)")

    game_time = time.time() - game_start

    if logging:
        print(f"\n--- Run {run_id + 1} Results ---")
        print(f"Success: {'✅ YES' if session.solved else '❌ NO'}")
        print(f"Tries: {len(session.guesses)}")
        print(f"Target was: {target}")
        print(f"Game latency: {game_time:.2f}s")

    return {
        'success': session.solved,
        'tries': len(session.guesses),
        'target': target,
        'latency': game_time,
    }


def main(num_runs: int = NUM_RUNS, seed: Optional[int] = None, logging: bool = True):
    print(f"\n{'#'*50}")
    print(f"# WORDLE HELPER SELF-PLAY BENCHMARK")
    print(f"# Words: {len(WORDS)}")
    print(f"# Games: {num_runs}")
    print(f"{'#'*50}")

    if HAS_WANDB:
        wandb.init(project=WANDB_PROJECT, name=f"self-play-{num_runs}")

    dictionary = Dictionary.load(WORDS)
    session = Session(dictionary)
    rng = random.Random(seed)

    results = []
    total_wins = 0
    total_tries = 0
    total_latency = 0

    for i in range(num_runs):
        r = run_game(session, rng.choice(WORDS), i, logging=logging)
        results.append(r)

        if r['success']:
            total_wins += 1
        total_tries += r['tries']
        total_latency += r['latency']

        n = i + 1
        print(f"\n--- Rolling Averages ---")
        print(f"Win rate: {total_wins/n:.1%}")
        print(f"Avg tries: {total_tries/n:.2f}")

    win_rate = total_wins / num_runs
    avg_tries = total_tries / num_runs
    avg_latency = total_latency / num_runs

    print(f"\n{'='*50}")
    print(f"  SELF-PLAY - FINAL RESULTS")
    print(f"{'='*50}")
    print(f"  Games:           {num_runs}")
    print(f"  Win Rate:        {win_rate:.1%} ({total_wins}/{num_runs})")
    print(f"  Average Tries:   {avg_tries:.2f}")
    print(f"  Average Latency: {avg_latency:.2f}s")
    print(f"{'='*50}")

    output = {
        'num_words': len(dictionary),
        'num_games': num_runs,
        'win_rate': win_rate,
        'avg_tries': avg_tries,
        'avg_latency': avg_latency,
        'games': results
    }

    LOG_DIR.mkdir(parents=True, exist_ok=True)
    log_file = LOG_DIR / "self_play_results.json"
    with open(log_file, 'w') as f:
        json.dump(output, f, indent=2)
    print(f"\nResults saved to: {log_file}")

    if HAS_WANDB:
        wandb.log({"win_rate": win_rate, "avg_tries": avg_tries})
        wandb.finish()

    return output


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    main()
