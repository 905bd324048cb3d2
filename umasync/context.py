from dataclasses import dataclass
from typing import Any, Optional

from umasync.page_index import PageIndex


@dataclass
class RunContext:
    """Everything one command invocation works with."""

    db: Any
    wiki: Any
    dry_run: bool = False
    page_index: Optional[PageIndex] = None
