#!/usr/bin/env python3
"""
Command line entry point: train on a corpus file and print generated text.

Usage:
    window-lm corpus.txt -w 3 -t "The" -n 200            # random text
    window-lm corpus.txt -w 3 -t "The" -n 200 --seed 20  # repeatable text
    window-lm corpus.txt -w 2 --show-model               # also dump the model
"""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from .config import ModelConfig
from .exceptions import InvalidConfigurationError
from .model import LanguageModel
from .text_cleaning import CleanTextConfig

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="window-lm",
        description="Character-level sliding-window language model",
    )

    parser.add_argument("corpus", type=str, help="Path to the training text file")

    parser.add_argument(
        "--window-length", "-w",
        type=int,
        help="Number of preceding characters used as context",
    )

    parser.add_argument(
        "--initial-text", "-t",
        type=str,
        help="Text to start generating from",
    )

    parser.add_argument(
        "--length", "-n",
        type=int,
        dest="text_length",
        help="Length of the generated text, including the initial text",
    )

    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for repeatable output",
    )

    parser.add_argument(
        "--config", "-c",
        type=str,
        help="Path to configuration JSON file",
    )

    parser.add_argument(
        "--lowercase",
        action="store_true",
        help="Lowercase the corpus before training",
    )

    parser.add_argument(
        "--show-model",
        action="store_true",
        help="Print every window with its follow-character list",
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )

    return parser


def load_config(args: argparse.Namespace) -> ModelConfig:
    """Read the JSON config (if any) and apply command line overrides."""
    if args.config:
        with open(args.config, "r", encoding="utf-8") as f:
            config = ModelConfig.from_dict(json.load(f))
    else:
        config = ModelConfig()

    overrides = {
        name: getattr(args, name)
        for name in ("window_length", "initial_text", "text_length", "seed")
        if getattr(args, name) is not None
    }
    return replace(config, **overrides)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        config = load_config(args)
    except InvalidConfigurationError as e:
        parser.error(str(e))
    except (OSError, json.JSONDecodeError) as e:
        parser.error(f"could not load config {args.config}: {e}")

    model = LanguageModel.from_config(config)
    cleaning = CleanTextConfig(lowercase=True, remove_control_chars=False) if args.lowercase else None

    try:
        model.train_file(Path(args.corpus), encoding=config.encoding, cleaning=cleaning)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Could not read corpus {args.corpus}: {e}")
        return 1

    if args.show_model:
        print(model, end="")

    print(model.generate(config.initial_text, config.text_length))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
