from __future__ import annotations

import argparse
import json
import logging
from typing import Any

from dotenv import load_dotenv

from .config import options_from_env
from .engine import build_style_map
from .normalize import (
    load_sample_records,
    records_from_json,
    records_from_player_stats,
    records_to_json,
)
from .render import render_text


def _read_json(path: str) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Champion style map builder")
    parser.add_argument("--input", default=None, help="Path to champion records JSON")
    parser.add_argument(
        "--player",
        action="store_true",
        help="Treat --input as a player stats payload (topChampions, avgGameDuration)",
    )
    parser.add_argument("--sample", action="store_true", help="Use the bundled demo champion pool")
    parser.add_argument("--min-games", type=int, default=None, help="Minimum games to include a champion")
    parser.add_argument("--game-duration", type=float, default=None, help="Average game length in minutes")
    parser.add_argument("--width", type=float, default=None, help="Canvas width")
    parser.add_argument("--height", type=float, default=None, help="Canvas height")
    parser.add_argument("--save-normalized", default=None, help="Path to save normalized champion records JSON")
    parser.add_argument("--output", default=None, help="Path to output map JSON/text")
    parser.add_argument(
        "--output-format", choices=["json", "text"], default="json", help="Output format"
    )
    parser.add_argument("--debug", action="store_true", help="Print debug logs")
    return parser.parse_args()


def main() -> None:
    load_dotenv()
    args = _parse_args()

    if args.debug:
        logging.basicConfig(level=logging.DEBUG)

    options = options_from_env()
    duration = args.game_duration

    if args.sample:
        records = load_sample_records()
    elif args.input:
        raw = _read_json(args.input)
        if args.player:
            records, player_duration = records_from_player_stats(raw)
            if duration is None:
                duration = player_duration
        else:
            records = records_from_json(raw.get("records") if isinstance(raw, dict) else raw)
    else:
        raise SystemExit("Provide --input PATH or --sample.")

    if args.save_normalized:
        with open(args.save_normalized, "w", encoding="utf-8") as f:
            json.dump(records_to_json(records), f, indent=2)

    options = options.merged(
        average_game_duration=duration,
        min_games=args.min_games,
        width=args.width,
        height=args.height,
    )
    result = build_style_map(records, options).to_dict()

    if args.output_format == "json":
        output_text = json.dumps(result, indent=2)
    else:
        output_text = render_text(result)

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(output_text)
    else:
        print(output_text)


if __name__ == "__main__":
    main()
