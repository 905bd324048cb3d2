"""Map entity ids to wiki page titles using the wiki's cargo tables."""

import logging

from umasync.log import VERBOSE

logger = logging.getLogger(__name__)


class PageIndex:
    def __init__(self, pages=None):
        self.pages = dict(pages or {})

    @classmethod
    def fetch(cls, wiki, table):
        logger.log(VERBOSE, f"=> Fetching id:page map from cargo table {table}…")
        pages = {}
        for entry in wiki.cargo_query(table, "_pageName=name,id"):
            try:
                pages[int(entry["id"])] = entry["name"]
            except (KeyError, TypeError, ValueError):
                logger.debug(f" > skipping cargo row {entry!r}")
        logger.log(VERBOSE, f"=> {len(pages)} pages indexed")
        return cls(pages)

    def __len__(self):
        return len(self.pages)

    def resolve(self, record_id):
        """Title of the page for ``record_id``, or the id itself as fallback."""
        page = self.pages.get(int(record_id))
        if page:
            logger.info(f'===> Found page "{page}" for id "{record_id}"')
            return page

        logger.warning(f"Failed to find page for id {record_id}")
        logger.warning(f"Using id {record_id} as page name")
        return str(record_id)
