"""Bulk loading of signing credentials from a metadata directory."""

from __future__ import annotations

import asyncio
import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable, Union

from .core.model import Candidate, Failure, ParseOutcome, SigningCredential, Success
from .core.parser_base import SignerParser
from .core.util import root_cause_message
from .io.scan import scan_directory

_LOGGER = logging.getLogger(__name__)


class ParseTask:
    """One candidate file bound to the parser that will read it."""

    def __init__(self, candidate: Candidate, parser: SignerParser):
        self.candidate = candidate
        self.parser = parser

    def __call__(self) -> ParseOutcome:
        try:
            return Success(self.candidate, self.parser.parse(self.candidate.path))
        except Exception as e:
            return Failure(self.candidate, e)


class ResultAggregator:
    """Thread-safe accumulator of successfully loaded credentials."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._items: list[SigningCredential] = []

    def add(self, credential: SigningCredential) -> None:
        with self._lock:
            self._items.append(credential)

    def collect(self, outcomes: Iterable[ParseOutcome]) -> list[SigningCredential]:
        for outcome in outcomes:
            if outcome.success:
                self.add(outcome.credential)
        return self.results()

    def results(self) -> list[SigningCredential]:
        with self._lock:
            return list(self._items)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)


def report_failure(outcome: Failure, log: logging.Logger | None = None) -> None:
    """Log the root cause of a failed parse; wrapping exceptions are not shown."""
    (log or _LOGGER).error(
        "Error loading signer metadata file %s: %s",
        outcome.candidate.path,
        root_cause_message(outcome.error),
    )


def _run(task: ParseTask, aggregator: ResultAggregator, log: logging.Logger) -> ParseOutcome:
    outcome = task()
    if outcome.success:
        aggregator.add(outcome.credential)
    else:
        report_failure(outcome, log)
    return outcome


async def load_async(
    directory: Union[Path, str],
    extension: str,
    parser: SignerParser,
    *,
    logger: logging.Logger | None = None,
) -> list[SigningCredential]:
    """Load every parseable metadata file in `directory`, parsing in worker threads."""
    log = logger or _LOGGER
    candidates = scan_directory(directory, extension)
    aggregator = ResultAggregator()
    tasks = [asyncio.to_thread(_run, ParseTask(c, parser), aggregator, log) for c in candidates]
    results = await asyncio.gather(*tasks, return_exceptions=True)
    for c, res in zip(candidates, results):
        if isinstance(res, Exception):
            report_failure(Failure(c, res), log)
    log.info("Loaded %d signer(s) from %d metadata file(s) in %s", len(aggregator), len(candidates), directory)
    return aggregator.results()


def load(
    directory: Union[Path, str],
    extension: str,
    parser: SignerParser,
    *,
    logger: logging.Logger | None = None,
    concurrent: bool = True,
    max_workers: int | None = None,
) -> list[SigningCredential]:
    """Load signing credentials from the metadata files in `directory`.

    Files are selected by case-insensitive `extension` match; hidden files are
    ignored. Each file is handed to `parser` independently and a failure is
    logged with its root cause rather than raised, so the result holds every
    credential that could be loaded, in no particular order. Identifiers are
    not deduplicated.

    With `concurrent` the files are parsed on a thread pool; the call never
    touches an event loop, so it is safe from inside a running one.
    """
    log = logger or _LOGGER
    candidates = scan_directory(directory, extension)

    if concurrent:
        aggregator = ResultAggregator()
        with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="signerload") as pool:
            futures = [pool.submit(_run, ParseTask(c, parser), aggregator, log) for c in candidates]
        for c, fut in zip(candidates, futures):
            if isinstance(exc := fut.exception(), Exception):
                report_failure(Failure(c, exc), log)
    else:
        outcomes = [ParseTask(c, parser)() for c in candidates]
        for outcome in outcomes:
            if not outcome.success:
                report_failure(outcome, log)
        aggregator = ResultAggregator()
        aggregator.collect(outcomes)

    log.info("Loaded %d signer(s) from %d metadata file(s) in %s", len(aggregator), len(candidates), directory)
    return aggregator.results()
