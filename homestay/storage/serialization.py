"""
Codec for list-valued attributes (tags, images, amenities).

The store keeps each list as a single JSON array in a text column. Only the
repositories in this package call these functions; everything above them
sees plain Python lists.
"""
import json
import logging
from typing import List, NamedTuple, Optional

logger = logging.getLogger(__name__)


def encode_list(values: Optional[List[str]]) -> Optional[str]:
    """Serialize a list for storage. ``None`` stays ``None`` (column left empty)."""
    if values is None:
        return None
    return json.dumps(list(values), ensure_ascii=False)


def decode_list(blob: Optional[str], owner: str = "record") -> List[str]:
    """
    Parse a stored list back into a list of strings.

    An empty column reads as ``[]``. Text that is not a JSON array of strings
    also reads as ``[]``; the problem is logged instead of raised so a single
    corrupt row cannot break a listing.
    """
    if blob is None or blob == "":
        return []
    try:
        values = json.loads(blob)
    except (TypeError, ValueError):
        logger.warning(f"Malformed list value on {owner}, reading as empty: {blob!r}")
        return []
    if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
        logger.warning(f"Unexpected list value on {owner}, reading as empty: {blob!r}")
        return []
    return values


class ListField(NamedTuple):
    """A list-valued column, named by its owning entity for diagnostics."""

    entity: str
    name: str

    @property
    def owner(self):
        return f"{self.entity}.{self.name}"

    def encode(self, values):
        return encode_list(values)

    def decode(self, blob):
        return decode_list(blob, owner=self.owner)
