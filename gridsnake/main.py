# gridsnake/main.py
import argparse

from gridsnake.config import AppConfig
from gridsnake.core.persistence import JsonFileStore, MemoryStore
from gridsnake.core.session_log import CSVLogger

DEFAULTS = AppConfig()


def parse_args(argv=None):
    p = argparse.ArgumentParser(prog="gridsnake", description="Grid snake with a fixed-timestep loop.")
    p.add_argument("mode", nargs="?", default="play", choices=["play", "headless"])
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--tile", type=int, default=DEFAULTS.tile)
    p.add_argument("--width", type=int, default=DEFAULTS.canvas_w, help="canvas width in px")
    p.add_argument("--height", type=int, default=DEFAULTS.canvas_h, help="canvas height in px")
    p.add_argument("--fps", type=int, default=DEFAULTS.fps)
    p.add_argument("--best-file", default=DEFAULTS.best_path)
    p.add_argument("--no-save", action="store_true", help="keep the best score in memory only")
    p.add_argument("--log-csv", default=None, help="append one row per finished game")
    p.add_argument("--record-dir", default=None, help="save every drawn frame as PNG")
    p.add_argument("--games", type=int, default=1, help="headless: games to play")
    p.add_argument("--max-frames", type=int, default=100_000, help="headless: frame cap per game")
    return p.parse_args(argv)


def build_config(args) -> AppConfig:
    return AppConfig().with_(
        seed=args.seed,
        tile=args.tile,
        canvas_w=args.width,
        canvas_h=args.height,
        fps=args.fps,
        best_path=args.best_file,
        log_path=args.log_csv,
        render_record_dir=args.record_dir,
    )


def main(argv=None):
    args = parse_args(argv)
    cfg = build_config(args)
    store = MemoryStore() if args.no_save else JsonFileStore(cfg.best_path)
    logger = CSVLogger(cfg.log_path) if cfg.log_path else None

    if args.mode == "play":
        from gridsnake.runners.run_snake import main as play
        play(cfg, store, logger)
    elif args.mode == "headless":
        from gridsnake.runners.run_headless import main as headless
        headless(cfg, store, logger, games=args.games, max_frames=args.max_frames)


if __name__ == "__main__":
    main()
