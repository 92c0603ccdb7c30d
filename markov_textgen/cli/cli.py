"""
cli.py - command line front end for the character Markov text generator
Features:
- Trains a LanguageModel on a corpus file and prints generated text
- "random" mode for fresh text every run, "fixed" mode for reproducible text
- Optional table dump of the learned contexts
- Save/load of trained models
- Uses Rich for tables and error output
"""

import argparse
import sys
from typing import List, Optional

# ui styling with Rich
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text
from rich import box

from markov_textgen.core.errors import InvalidInput
from markov_textgen.core.language_model import LanguageModel
from markov_textgen.utils.config_manager import DEFAULT_CONFIG_PATH, Config
from markov_textgen.utils.logger_utils import Log
from markov_textgen.utils.model_store import load_model, save_model

# initialise consoles for rich output
console = Console()
err_console = Console(stderr=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="markov-textgen",
        description="Train a character-level Markov model on a corpus and generate text.",
    )
    parser.add_argument("window_length", type=int, help="number of preceding characters used as context")
    parser.add_argument("initial_text", help="text to start from; its last WINDOW_LENGTH characters seed generation")
    parser.add_argument("length", type=int, help="number of characters to generate beyond the seed window")
    parser.add_argument("mode", choices=["random", "fixed"], help="'fixed' uses a constant seed for reproducible output")
    parser.add_argument("corpus", help="corpus file to train on ('-' when --load-model is given)")
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="JSON config file")
    parser.add_argument("--encoding", default=None, help="corpus file encoding (overrides config)")
    parser.add_argument("--describe", action="store_true", help="also print the learned contexts")
    parser.add_argument("--save-model", metavar="PATH", help="write the trained model to PATH")
    parser.add_argument("--load-model", metavar="PATH", help="skip training and load a saved model")
    return parser


class CLI:
    """Runs one train + generate pass according to parsed arguments."""

    def __init__(self, args: argparse.Namespace):
        self.args = args
        self.cfg = Config(args.config)
        self.log = Log(path=self.cfg.get("log_path"), use_color=True,
                       echo=bool(self.cfg.get("log_to_console")))

    def run(self) -> int:
        self.log.debug(
            f"window={self.args.window_length} length={self.args.length} "
            f"mode={self.args.mode} corpus={self.args.corpus}"
        )
        if len(self.args.initial_text) < self.args.window_length:
            self.log.warning(
                f"initial text has {len(self.args.initial_text)} characters, "
                f"window needs {self.args.window_length}; echoing it unchanged"
            )
        try:
            lm = self._build_model()
            with self.log.time_block("generate"):
                text = lm.generate(self.args.initial_text, self.args.length)
        except (OSError, UnicodeDecodeError, InvalidInput) as e:
            self.log.error(str(e))
            err_console.print(f"[red]error:[/red] {escape(str(e))}", highlight=False)
            return 1

        self.log.info(f"generated {len(text)} characters")
        if self.args.describe:
            self._show_contexts(lm)
        console.out(text, highlight=False)
        return 0

    # MODEL -------------------------------------------------------------------------
    def _build_model(self) -> LanguageModel:
        if self.args.load_model:
            lm = load_model(self.args.load_model)
            if lm.window_length != self.args.window_length:
                raise InvalidInput(
                    f"saved model has window length {lm.window_length}, "
                    f"got {self.args.window_length}"
                )
            self.log.info(f"loaded model from {self.args.load_model} ({len(lm)} contexts)")
        else:
            seed = None if self.args.mode == "random" else int(self.cfg.get("fixed_seed"))
            lm = LanguageModel(self.args.window_length, seed=seed)
            encoding = self.args.encoding or self.cfg.get("encoding")
            with self.log.time_block("train"):
                lm.train_file(self.args.corpus, encoding=encoding)
            self.log.info(f"trained on {self.args.corpus} ({len(lm)} contexts)")

        if self.args.save_model:
            save_model(lm, self.args.save_model)
            self.log.info(f"saved model to {self.args.save_model}")
        return lm

    # DISPLAY -------------------------------------------------------------------------
    def _show_contexts(self, lm: LanguageModel):
        """Print every context with its (char, count, p, cp) entries, in training order."""
        table = Table(title="Contexts", box=box.SIMPLE, show_edge=False)
        table.add_column("Window", style="bold")
        table.add_column("Char", style="cyan")
        table.add_column("Count", justify="right")
        table.add_column("p", justify="right", style="magenta")
        table.add_column("cp", justify="right", style="magenta")

        for window, rows in lm.rows().items():
            for i, row in enumerate(rows):
                table.add_row(
                    Text(repr(window) if i == 0 else ""),
                    Text(repr(row["character"])),
                    str(row["count"]),
                    f"{row['p']:.3f}",
                    f"{row['cp']:.3f}",
                )
        console.print(table)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    return CLI(args).run()


if __name__ == "__main__":
    sys.exit(main())
