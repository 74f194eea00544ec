"""Entry point for playing the artillery duel."""

import argparse
import logging

from artillery_game import run_pygame


def main() -> None:
    parser = argparse.ArgumentParser(description="Two-player artillery duel")
    parser.add_argument("--seed", type=int, default=None, help="seed for terrain and wind")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="print additional debug information to the console",
    )
    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run_pygame(seed=args.seed)


if __name__ == "__main__":
    main()
