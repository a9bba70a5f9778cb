"""Filter box: visible subset of the store for a free-text pattern."""
import logging
import re
from typing import List, Sequence

from recordcrate.models.record import Record

logger = logging.getLogger(__name__)


def visible(records: Sequence[Record], filter_text: str) -> List[Record]:
    """Records with any field matching filter_text (case-insensitive regex search).

    An empty filter returns every record. The filter is not escaped, so an
    invalid pattern (e.g. a lone "(" while typing) matches nothing.
    """
    if not filter_text:
        return list(records)
    try:
        pattern = re.compile(filter_text, re.IGNORECASE)
    except re.error as e:
        logger.debug("Filter %r is not a valid pattern: %s", filter_text, e)
        return []
    return [
        r for r in records
        if any(value and pattern.search(value) for value in r.values())
    ]
