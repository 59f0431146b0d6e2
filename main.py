import argparse

from config import AppConfig
from runners.run_snake import main as snake

def parse_args():
    p = argparse.ArgumentParser()
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--log-csv", default=None, help="append one row per finished round to this CSV")
    p.add_argument("--quiet", action="store_true", help="no per-round console lines")
    return p.parse_args()

def main():
    args = parse_args()
    cfg = AppConfig().with_(seed=args.seed, log_csv=args.log_csv, log_console=not args.quiet)
    snake(cfg)

if __name__ == "__main__":
    main()
