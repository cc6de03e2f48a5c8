"""Command-line pattern generation.

Usage:
    patgen corpus.jsonl --label DRUG --config patterns.properties
    patgen corpus.jsonl --label DRUG --threads 4 --show 20 --trace-file trace.log
"""

from __future__ import annotations

import dataclasses
import logging
import sys
from pathlib import Path

import click

from patgen.config import PatternConfig, load_config
from patgen.corpus.loader import load_corpus
from patgen.errors import PatternGenerationError
from patgen.patterns.driver import CorpusPatterns, get_all_patterns
from patgen.patterns.generator import PatternGenerator
from patgen.patterns.types import SurfacePattern
from patgen.shared.logger import RunLogger


def _distinct(patterns: CorpusPatterns) -> tuple[set[SurfacePattern], set[SurfacePattern], set[SurfacePattern]]:
    left: set[SurfacePattern] = set()
    right: set[SurfacePattern] = set()
    combined: set[SurfacePattern] = set()
    for by_token in patterns.values():
        for triple in by_token.values():
            left |= triple.left
            right |= triple.right
            combined |= triple.combined
    return left, right, combined


def _format_patterns(title: str, patterns: set[SurfacePattern], limit: int) -> str:
    lines = [f"{title} ({len(patterns)})"]
    for pat in sorted(patterns, key=SurfacePattern.to_string)[:limit]:
        lines.append(f"  {pat.to_readable():<40}  {pat.to_string()}")
    return "\n".join(lines)


@click.command()
@click.argument(
    "corpus",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option("--label", required=True, help="Label whose context patterns are generated")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Options as .json or .properties (default: built-in defaults)",
)
@click.option("--threads", type=int, default=None, help="Override the worker count")
@click.option("--log-file", type=click.Path(path_type=Path), default=None, help="INFO+ log file")
@click.option("--trace-file", type=click.Path(path_type=Path), default=None, help="Full detail log file")
@click.option("--show", default=0, type=int, help="Print up to N distinct patterns of each kind")
def main(
    corpus: Path,
    label: str,
    config_path: Path | None,
    threads: int | None,
    log_file: Path | None,
    trace_file: Path | None,
    show: int,
) -> None:
    """Generate surface patterns around tokens of CORPUS (JSONL)."""
    log = RunLogger(log_file=log_file, trace_file=trace_file)
    log.install_stdlib_bridge(root_logger="patgen", level=logging.DEBUG)
    try:
        if config_path is not None:
            config = load_config(config_path)
        else:
            config = PatternConfig(answer_classes={label: label})
        if threads is not None:
            config = dataclasses.replace(config, num_threads=threads)
        config.answer_key(label)

        log.section("Pattern generation")
        log.info(f"Corpus:  {corpus}")
        log.info(f"Label:   {label}")
        log.info(f"Config:  {config_path or 'defaults'}")
        log.info(f"Threads: {config.num_threads}")

        sentences = load_corpus(corpus)
        log.metric("sentences", len(sentences))

        with log.timer("get_all_patterns"):
            patterns = get_all_patterns(PatternGenerator(config), label, sentences)

        tokens_with_patterns = sum(
            1 for by_token in patterns.values() for triple in by_token.values() if not triple.is_empty()
        )
        left, right, combined = _distinct(patterns)
        log.metric("tokens_with_patterns", tokens_with_patterns)
        log.metric("distinct_left", len(left))
        log.metric("distinct_right", len(right))
        log.metric("distinct_combined", len(combined))

        if show > 0:
            for title, pats in (("Left", left), ("Right", right), ("Combined", combined)):
                click.echo(_format_patterns(title, pats, show))

        log.summary()
    except PatternGenerationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    finally:
        log.remove_stdlib_bridge(root_logger="patgen")
        log.close()


if __name__ == "__main__":
    main()
