"""Fetch a page, merge master.mdb values into its template and write it back.

One record goes through:

    fetch page -> locate template -> map parameters -> serialize
        -> dry-run diff | edit

A page without the expected template ends as ``Status.NOT_FOUND`` and is
reported as a warning instead of being saved unchanged.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Optional

from umasync import log
from umasync.templates import find_template, parse, replace_params, template_params

logger = logging.getLogger(__name__)


class Status(str, enum.Enum):
    UPDATED = "updated"
    UNCHANGED = "unchanged"
    DRY_RUN = "dry-run"
    NOT_FOUND = "not-found"
    FAILED = "failed"


@dataclass
class SyncResult:
    record_id: Optional[int]
    title: str
    status: Status
    error: Optional[BaseException] = None

    @property
    def ok(self):
        return self.status is not Status.FAILED


def sync_record(ctx, kind, row):
    record_id = row["id"]
    title = ctx.page_index.resolve(record_id)
    before = ctx.wiki.fetch_page(title)

    code = parse(before)
    tpl = find_template(code, kind.template)
    if tpl is None:
        logger.warning(f"===> No {{{{{kind.template}}}}} template on [[{title}]]; skipping")
        return SyncResult(record_id, title, Status.NOT_FOUND)

    params = kind.map(row, template_params(tpl), ctx.db.text)
    replace_params(tpl, params)
    return write_page(ctx, title, before, str(code), kind.summary, record_id)


def write_page(ctx, title, before, after, summary, record_id=None):
    if ctx.dry_run:
        log.diff(before, after)
        logger.info("===> Dry-run mode; skipping edit!")
        return SyncResult(record_id, title, Status.DRY_RUN)

    if after == before:
        logger.info(f"===> [[{title}]] already up-to-date")
        return SyncResult(record_id, title, Status.UNCHANGED)

    logger.info("===> Submitting changes…")
    ctx.wiki.submit_edit(title, after, summary)
    logger.info("===> … Done!")
    return SyncResult(record_id, title, Status.UPDATED)
