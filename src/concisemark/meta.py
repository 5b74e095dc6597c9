"""Front matter extraction.

A document may open with an HTML comment whose body is TOML:

    <!---
    title = "Your title"
    subtitle = "Your subtitle"
    date = "2021-10-13 00:00:00"
    authors = ["name <example@gmail.com>"]
    tags = ["demo", "example"]
    -->

The block is parsed into ``Meta`` and the parser starts after it. An invalid
block is logged and then treated as ordinary content.

"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from datetime import UTC, datetime

from concisemark.errors import MetaError
from concisemark.utils.logger import get_logger

logger = get_logger(__name__)

META_START_MARK = "<!---\n"
META_END_MARK = "-->\n"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True, slots=True)
class Meta:
    """Page metadata from the front matter block.

    Attributes:
        date: Publication date (UTC)
        title: Page title
        subtitle: Optional subtitle
        authors: Optional author list
        tags: Optional tag list

    """

    date: datetime
    title: str
    subtitle: str | None = None
    authors: tuple[str, ...] | None = None
    tags: tuple[str, ...] | None = None

    @classmethod
    def from_dict(cls, data: dict) -> Meta:
        """Build Meta from parsed TOML.

        Raises:
            MetaError: If a required field is missing or a field has the
                wrong type.
        """
        try:
            date = _parse_date(data["date"])
            title = data["title"]
        except KeyError as e:
            raise MetaError(f"missing required field {e.args[0]!r}") from e
        if not isinstance(title, str):
            raise MetaError(f"title must be a string, got {type(title).__name__}")

        subtitle = data.get("subtitle")
        if subtitle is not None and not isinstance(subtitle, str):
            raise MetaError(f"subtitle must be a string, got {type(subtitle).__name__}")

        return cls(
            date=date,
            title=title,
            subtitle=subtitle,
            authors=_string_list(data, "authors"),
            tags=_string_list(data, "tags"),
        )

    def to_dict(self) -> dict:
        """Convert to the TOML-shaped dict (dates formatted back to text)."""
        data: dict = {"date": self.date.strftime(DATE_FORMAT), "title": self.title}
        if self.subtitle is not None:
            data["subtitle"] = self.subtitle
        if self.authors is not None:
            data["authors"] = list(self.authors)
        if self.tags is not None:
            data["tags"] = list(self.tags)
        return data


def _parse_date(value: object) -> datetime:
    if isinstance(value, datetime):
        # TOML native datetimes are accepted too
        return value if value.tzinfo else value.replace(tzinfo=UTC)
    if not isinstance(value, str):
        raise MetaError(f"date must be a string, got {type(value).__name__}")
    try:
        return datetime.strptime(value, DATE_FORMAT).replace(tzinfo=UTC)
    except ValueError as e:
        raise MetaError(f"date {value!r} does not match {DATE_FORMAT!r}") from e


def _string_list(data: dict, key: str) -> tuple[str, ...] | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise MetaError(f"{key} must be a list of strings")
    return tuple(value)


def extract_meta(source: str) -> tuple[Meta | None, int]:
    """Extract the front matter block from the start of ``source``.

    Leading whitespace before the block is allowed.

    Returns:
        (meta, offset): ``offset`` is where the document body begins. When
        there is no valid block the result is ``(None, 0)``.

    Example:
        >>> meta, offset = extract_meta('<!---\\ntitle = "T"\\ndate = "2021-10-13 00:00:00"\\n-->\\n# T\\n')
        >>> meta.title, offset
        ('T', 51)

    """
    text = source.lstrip()
    if not text.startswith(META_START_MARK):
        return None, 0

    start = len(source) - len(text)
    end_mark = text.find(META_END_MARK, len(META_START_MARK))
    if end_mark == -1:
        return None, 0

    body = source[start + len(META_START_MARK) : start + end_mark]
    try:
        meta = Meta.from_dict(tomllib.loads(body))
    except (tomllib.TOMLDecodeError, MetaError) as e:
        logger.error("failed to parse meta text: %s (%s)", body, e)
        return None, 0
    return meta, start + end_mark + len(META_END_MARK)
