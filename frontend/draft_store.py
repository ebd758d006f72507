"""
Server-side store for in-progress form drafts.

Parsed job postings carry page-sized descriptions, which do not fit in a
cookie session. The session only holds a draft id; the draft itself
lives here, in process memory, and is lost on restart.
"""

import copy
import logging
import threading
import uuid
from collections import OrderedDict
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

# Oldest drafts are evicted beyond this many
MAX_DRAFTS = 1000


class DraftStore:
    """Thread-safe, size-bounded map of draft id -> draft dict."""

    def __init__(self, max_drafts: int = MAX_DRAFTS):
        self.max_drafts = max_drafts
        self._drafts: "OrderedDict[str, Dict[str, Any]]" = OrderedDict()
        self._lock = threading.Lock()

    def get(self, draft_id: Optional[str]) -> Optional[Dict[str, Any]]:
        """The stored draft, or None for a missing or evicted id."""
        if not draft_id:
            return None
        with self._lock:
            draft = self._drafts.get(draft_id)
            if draft is None:
                return None
            self._drafts.move_to_end(draft_id)
            return copy.deepcopy(draft)

    def save(self, draft_id: Optional[str], draft: Dict[str, Any]) -> str:
        """Store the draft and return its id, allocating one when needed."""
        draft_id = draft_id or uuid.uuid4().hex
        with self._lock:
            self._drafts[draft_id] = copy.deepcopy(draft)
            self._drafts.move_to_end(draft_id)
            while len(self._drafts) > self.max_drafts:
                evicted, _ = self._drafts.popitem(last=False)
                logger.info(f"Evicted form draft {evicted}")
        return draft_id

    def __len__(self) -> int:
        with self._lock:
            return len(self._drafts)
