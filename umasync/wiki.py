"""Wiki access: page text, edits and cargo queries."""

import logging

import mwclient
import requests

from umasync.errors import CargoError
from umasync.log import VERBOSE

logger = logging.getLogger(__name__)

CARGO_LIMIT = 500


class WikiClient:
    def __init__(self, site, api_url, session=None, user_agent=None):
        self.site = site
        self.api_url = api_url
        self.last_page = None
        self.session = session or requests.Session()
        if user_agent:
            self.session.headers["User-Agent"] = user_agent

    @classmethod
    def connect(cls, config):
        logger.log(VERBOSE, "=> Initializing wiki client…")
        scheme, host, path = config.site_args()
        site = mwclient.Site(
            host,
            path=path,
            scheme=scheme,
            clients_useragent=config.user_agent,
        )
        if config.has_credentials:
            site.login(config.username, config.password)
            logger.log(VERBOSE, f"=> Logged in as {config.username}")
        else:
            logger.warning("No wiki credentials set; continuing anonymously")
        return cls(site, config.api_url, user_agent=config.user_agent)

    def fetch_page(self, title):
        """Current wikitext of ``title``; "" if the page does not exist.

        The Page object is kept so a later edit carries its base and start
        timestamps and mwclient reports an edit conflict.
        """
        logger.debug(f" > fetching [[{title}]]")
        page = self.site.pages[title]
        self.last_page = (title, page)
        return page.text()

    def submit_edit(self, title, text, summary):
        fetched_title, page = self.last_page or (None, None)
        if fetched_title != title:
            page = self.site.pages[title]
        self.last_page = None
        return page.edit(text, summary=summary, bot=True)

    def cargo_query(self, tables, fields, limit=CARGO_LIMIT):
        """Yield every row dict of a cargo query, following offsets."""
        offset = 0
        while True:
            params = {
                "action": "cargoquery",
                "tables": tables,
                "fields": fields,
                "format": "json",
                "limit": limit,
                "offset": offset,
            }
            logger.log(VERBOSE, "=> Talking to cargo…")
            logger.debug(f" > {self.api_url} {params}")
            r = self.session.get(self.api_url, params=params, timeout=30)
            r.raise_for_status()
            data = r.json()
            if "error" in data:
                err = data["error"]
                raise CargoError(f"{err.get('code')}: {err.get('info')}")

            batch = data.get("cargoquery", [])
            for entry in batch:
                yield entry.get("title", {})
            if len(batch) < limit:
                break
            offset += limit
