"""Command-line interface for online-bayes.

Provides ``repl`` and ``run`` commands that feed training and
classification command lines into a :class:`BayesClassifier`, with rich
terminal output using the ``click`` and ``rich`` libraries.

Command lines are whitespace separated::

    t <category> <feature> [<feature> ...]   train an example
    c <feature> [<feature> ...]              classify a feature set
    r                                        reset the classifier

Usage::

    online-bayes repl
    online-bayes run --detailed session.txt
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Iterable

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .classifier import BayesClassifier
from .models import Classification
from .preprocessing import Tokenizer

console = Console()

PROMPT = "> "


class CommandSession:
    """Executes command lines against one classifier instance."""

    def __init__(
        self,
        classifier: BayesClassifier,
        tokenizer: Tokenizer,
        detailed: bool = False,
    ) -> None:
        self.classifier = classifier
        self.tokenizer = tokenizer
        self.detailed = detailed

    def execute(self, line: str) -> None:
        """Run a single command line, reporting problems on the console."""
        tokens = self.tokenizer.tokenize(line)
        if not tokens:
            return

        command = tokens[0].lower()
        if command.startswith("t"):
            if len(tokens) < 3:
                console.print("not enough params")
                return
            self.classifier.train(tokens[1], tokens[2:])
        elif command.startswith("c"):
            if len(tokens) < 2:
                console.print("not enough params")
                return
            self._classify(tokens[1:])
        elif command.startswith("r"):
            self.classifier.reset()
            console.print("[dim]Classifier reset[/]")
        else:
            console.print(f"[bold red]Error:[/] unknown command {escape(tokens[0])!r}")

    def run(self, lines: Iterable[str], prompt: bool = False) -> None:
        if prompt:
            console.print(PROMPT, end="")
        for line in lines:
            self.execute(line)
            if prompt:
                console.print(PROMPT, end="")

    def _classify(self, features: list[str]) -> None:
        results = self.classifier.classify_detailed(features)
        if self.detailed:
            _render_results(results)
        if results:
            console.print(f"Classified as [bold green]{escape(str(results[0].category))}[/]")
        else:
            console.print("No results")


def _build_session(
    weight: float,
    assumed_probability: float,
    lowercase: bool,
    detailed: bool,
) -> CommandSession:
    try:
        classifier = BayesClassifier(weight=weight, assumed_probability=assumed_probability)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e
    return CommandSession(classifier, Tokenizer(lowercase=lowercase), detailed=detailed)


@click.group()
@click.version_option(package_name="online-bayes")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def main(verbose: bool) -> None:
    """Online naive Bayes classifier.

    Train categories from labeled feature sets and classify new ones,
    one command line at a time.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@main.command()
@click.option("--weight", type=float, default=1.0, show_default=True,
              help="Weight of the assumed probability, in observations.")
@click.option("--assumed-probability", type=float, default=0.5, show_default=True,
              help="Feature probability assumed when there is no evidence.")
@click.option("--lowercase", "-l", is_flag=True,
              help="Lowercase features before training and classifying.")
@click.option("--detailed", "-d", is_flag=True,
              help="Print the full ranked results for every classification.")
def repl(weight: float, assumed_probability: float, lowercase: bool, detailed: bool) -> None:
    """Read command lines interactively from standard input.

    Example: echo "t positive I love sunny days" | online-bayes repl
    """
    session = _build_session(weight, assumed_probability, lowercase, detailed)
    stdin = click.get_text_stream("stdin")
    session.run(stdin, prompt=sys.stdin.isatty())


@main.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--weight", type=float, default=1.0, show_default=True,
              help="Weight of the assumed probability, in observations.")
@click.option("--assumed-probability", type=float, default=0.5, show_default=True,
              help="Feature probability assumed when there is no evidence.")
@click.option("--lowercase", "-l", is_flag=True,
              help="Lowercase features before training and classifying.")
@click.option("--detailed", "-d", is_flag=True,
              help="Print the full ranked results for every classification.")
def run(
    file: Path,
    weight: float,
    assumed_probability: float,
    lowercase: bool,
    detailed: bool,
) -> None:
    """Execute the command lines in FILE.

    Example: online-bayes run --detailed session.txt
    """
    session = _build_session(weight, assumed_probability, lowercase, detailed)
    with open(file, "r", encoding="utf-8") as f:
        session.run(f)


# ------------------------------------------------------------------
# Rich rendering helpers
# ------------------------------------------------------------------

def _render_results(results: list[Classification]) -> None:
    """Render ranked classification results as a rich table."""
    table = Table(title="Results")
    table.add_column("#", justify="right", width=4)
    table.add_column("Category", style="cyan")
    table.add_column("Score", justify="right")

    for i, result in enumerate(results, 1):
        table.add_row(str(i), escape(str(result.category)), f"{result.probability:.6g}")

    console.print(table)


if __name__ == "__main__":
    main()
