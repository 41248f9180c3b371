"""Flat-file storage of feed descriptors.

One descriptor per line, either ``<kind>:<location>`` or a bare location,
which is an xml feed. The file is only ever appended to.
"""

from pathlib import Path

import structlog

from rssreader.exceptions import StorageError
from rssreader.models.feed import FeedDescriptor, FeedKind

logger = structlog.get_logger()

_KINDS = {kind.value: kind for kind in FeedKind}


def parse_line(line: str) -> FeedDescriptor:
    """Parse one stored line into a descriptor.

    "json:https://x" is a json feed at https://x; "https://x" has no kind
    prefix ("https" is not a kind) and is an xml feed.
    """
    prefix, sep, rest = line.partition(":")
    if sep and prefix in _KINDS:
        return FeedDescriptor(location=rest, kind=_KINDS[prefix])
    return FeedDescriptor(location=line, kind=FeedKind.XML)


def format_line(location: str, kind: FeedKind | None = None) -> str:
    """Encode a descriptor as a stored line (without newline)."""
    if kind is None:
        return location
    return f"{kind.value}:{location}"


class FileFeedStorage:
    """Feed descriptors kept in a flat text file.

    Reason: A line-per-feed file is easy to edit by hand and is only ever
    appended to, so no locking or migrations are needed.
    """

    def __init__(self, path: Path):
        """Initialize file storage.

        Args:
            path: Path of the feeds file.
        """
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def initialize(self) -> bool:
        """Create the feeds file if it does not exist.

        Returns:
            True if a new file was created.

        Raises:
            StorageError: If the file cannot be created.
        """
        if self._path.exists():
            return False

        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.touch()
        except OSError as e:
            raise StorageError(str(self._path), f"can't create the file: {e}") from e

        logger.info("New feeds collection has been created", path=str(self._path))
        return True

    def read(self) -> list[FeedDescriptor]:
        """Read all descriptors in file order.

        Raises:
            StorageError: If the file cannot be read.
        """
        try:
            with self._path.open(encoding="utf-8") as f:
                lines = f.read().splitlines()
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(str(self._path), f"can't read the file: {e}") from e

        return [parse_line(line) for line in lines if line.strip()]

    def save(self, location: str, kind: FeedKind | None = None) -> FeedDescriptor:
        """Append a feed to the file.

        Args:
            location: Feed URL.
            kind: Feed kind; stored without prefix (xml) when None.

        Returns:
            The descriptor as it will be read back.

        Raises:
            StorageError: If the location is empty or the file cannot be written.
        """
        location = location.strip()
        if not location:
            raise StorageError(str(self._path), "can't save an empty feed location")

        line = format_line(location, kind)
        try:
            with self._path.open("a", encoding="utf-8") as f:
                f.write(line + "\n")
        except OSError as e:
            raise StorageError(str(self._path), f"can't open the file: {e}") from e

        logger.info("Feed saved", location=location, kind=(kind or FeedKind.XML).value)
        return parse_line(line)
