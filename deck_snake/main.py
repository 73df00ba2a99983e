# deck_snake/main.py
import argparse
import logging

from deck_snake.config import AppConfig
from deck_snake.errors import ConfigurationError
from deck_snake.runners.run_game import main as play
from deck_snake.runners.run_autopilot import main as autopilot

DEFAULTS = AppConfig()

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="deck-snake")
    p.add_argument("mode", nargs="?", default="play", choices=["play", "autopilot"])
    p.add_argument("--grid-size", type=int, default=DEFAULTS.grid_size)
    p.add_argument("--tile-px", type=int, default=DEFAULTS.render_cell)
    p.add_argument("--speed", type=int, default=DEFAULTS.game_speed_ms, help="ms per tick")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--score-file", default=DEFAULTS.score_file)
    p.add_argument("--run-log", default=None, help="append finished runs to this CSV")
    p.add_argument("--assets", default=DEFAULTS.asset_dir)
    p.add_argument("--record-dir", default=None, help="save every frame as PNG here")
    p.add_argument("--mute", action="store_true")
    p.add_argument("--avoid-snake", action="store_true", help="never spawn food under the snake")
    p.add_argument("--runs", type=int, default=5)
    p.add_argument("--max-ticks", type=int, default=2000)
    p.add_argument("-v", "--verbose", action="store_true",
                   help="debug logging; autopilot also prints each final board")
    return p

def parse_args(argv=None):
    return build_parser().parse_args(argv)

def config_from_args(args) -> AppConfig:
    return AppConfig().with_(
        grid_size=args.grid_size,
        render_cell=args.tile_px,
        game_speed_ms=args.speed,
        seed=args.seed,
        score_file=args.score_file,
        run_log_path=args.run_log,
        asset_dir=args.assets,
        render_record_dir=args.record_dir,
        audio_enabled=not args.mute,
        avoid_snake=args.avoid_snake,
    )

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    cfg = config_from_args(args)
    try:
        if args.mode == "play":
            play(cfg)
        elif args.mode == "autopilot":
            autopilot(cfg, runs=args.runs, max_ticks=args.max_ticks,
                      show_board=args.verbose)
    except ConfigurationError as e:
        parser.error(str(e))

if __name__ == "__main__":
    main()
