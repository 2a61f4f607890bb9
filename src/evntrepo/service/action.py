"""Top-level runs: the full repository action and the standalone check task."""

from __future__ import annotations

import logging
from pathlib import Path

from evntrepo import __version__
from evntrepo.reporting.sink import AnnotationSink
from evntrepo.service.index import build_index, write_index, write_listings
from evntrepo.service.pipeline import ValidationPipeline, ValidationSummary
from evntrepo.service.walker import walk_events
from evntrepo.settings import Settings

logger = logging.getLogger("evntrepo.action")


async def run_action(
    settings: Settings,
    sink: AnnotationSink,
    index_path: Path | None = None,
    with_index: bool = True,
) -> ValidationSummary | None:
    """Validate all events, write listings and the index, and set the outcome.

    With ``with_index=False`` the manifest is not written and the
    repository coordinates are not needed.

    Never raises: an exception escaping any step fails the run with its
    message. Returns ``None`` in that case.
    """
    try:
        sink.info(f"evntrepo {__version__} is running")
        root = Path(settings.events_path)
        walk = walk_events(root, settings.listing_file)
        sink.info(f"Found {len(walk.files)} events.")

        summary = await ValidationPipeline(sink).run(root, walk.files)

        for directory in write_listings(root, walk.directories, settings.listing_file):
            sink.info(f"Listed directory: {directory.as_posix()}")

        if with_index:
            repository = settings.repository
            pages_url = settings.effective_pages_url
            sink.info(f"Repository: {repository.slug}")
            sink.info(f"Pages URL: {pages_url}")

            index = build_index(repository.slug, pages_url, summary.events)
            write_index(index, index_path or Path(settings.index_file))

        if not summary.passed:
            sink.set_failed(
                f"Event data validation failed for {summary.failure_count} event(s)."
            )
            return summary

        sink.info("Complete")
        return summary
    except Exception as exc:
        logger.debug("Run aborted", exc_info=True)
        sink.set_failed(str(exc) or type(exc).__name__)
        return None


async def check_events(root: Path, sink: AnnotationSink) -> ValidationSummary:
    """Validate the events under ``root`` without writing any artifacts."""
    walk = walk_events(root)
    summary = await ValidationPipeline(sink).run(root, walk.files)
    if not summary.passed:
        sink.set_failed(f"Validation failed for {summary.failure_count} file(s)!")
    return summary
