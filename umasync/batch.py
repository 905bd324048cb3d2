"""Run the driver for one record or for every record of an entity kind."""

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import List

from umasync.driver import Status, SyncResult, sync_record
from umasync.errors import RecordNotFound

logger = logging.getLogger(__name__)


@dataclass
class BatchReport:
    results: List[SyncResult] = field(default_factory=list)

    def add(self, result):
        self.results.append(result)

    @property
    def total(self):
        return len(self.results)

    @property
    def failures(self):
        return [r for r in self.results if not r.ok]

    def counts(self):
        return Counter(r.status for r in self.results)


def run_one(ctx, kind, record_id):
    """Synchronize a single record. Errors propagate to the caller."""
    logger.info(f"==> Synchronizing {kind.label} id {record_id}…")
    row = kind.fetch_one(ctx.db, record_id)
    if row is None:
        raise RecordNotFound(f"no {kind.label} with id {record_id} in master.mdb")
    return sync_record(ctx, kind, row)


def run_all(ctx, kind):
    """Synchronize every record; a failing record is logged and skipped."""
    logger.info(f"==> Synchronizing all {kind.label} records…")
    rows = kind.fetch_all(ctx.db)
    report = BatchReport()

    for i, row in enumerate(rows, start=1):
        logger.info(f"===> Synchronizing {i}/{len(rows)}…")
        try:
            result = sync_record(ctx, kind, row)
        except Exception as e:
            logger.error(f"===> Failed {kind.label} id {row.get('id')}: {e}")
            logger.debug("", exc_info=True)
            result = SyncResult(row.get("id"), "", Status.FAILED, e)
        report.add(result)

    counts = report.counts()
    summary = ", ".join(f"{counts[s]} {s.value}" for s in Status if counts[s])
    logger.info(f"==> Processed {report.total} {kind.label} records ({summary or 'none'})")
    if report.failures:
        failed = ", ".join(str(r.record_id) for r in report.failures)
        logger.error(f"==> {len(report.failures)} of {report.total} failed: {failed}")
    return report
