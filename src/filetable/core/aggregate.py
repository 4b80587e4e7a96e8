import asyncio
import logging

from filetable.core.parser import parse_csv_content
from filetable.core.ports.file_source import FileSource
from filetable.models import FileResult

logger = logging.getLogger(__name__)


async def fetch_file_result(source: FileSource, file_name: str) -> FileResult | None:
    """Download and parse one file. Returns ``None`` when it has no valid lines."""
    content = await source.download_file_content(file_name)
    if content is None:
        return None
    lines = parse_csv_content(content, file_name)
    if not lines:
        return None
    return FileResult(file=file_name, lines=lines)


async def collect_files_data(source: FileSource, file_name: str | None = None) -> list[FileResult]:
    """Fetch and parse every requested file concurrently.

    Without ``file_name`` all files from ``source.list_files()`` are processed;
    a listing failure propagates. Per-file failures only drop that file.
    Results follow the listing order.
    """
    file_names = [file_name] if file_name else await source.list_files()
    if not file_names:
        return []

    settled = await asyncio.gather(
        *(fetch_file_result(source, name) for name in file_names),
        return_exceptions=True,
    )

    results: list[FileResult] = []
    for name, outcome in zip(file_names, settled):
        if isinstance(outcome, BaseException):
            logger.error("Critical error processing file %s: %s", name, outcome)
            continue
        if outcome is not None:
            results.append(outcome)
    return results
