"""
Shared fixtures for umasync tests.

Provides:
  - a tiny in-memory master.mdb with just the tables the commands read
  - FakeWiki, an in-process stand-in for WikiClient that records edits
  - a RunContext factory wiring the two together
"""

import logging
import sqlite3

import pytest

from umasync.context import RunContext
from umasync.database import MasterDatabase
from umasync.page_index import PageIndex


SCHEMA = """
CREATE TABLE text_data (category INTEGER, "index" INTEGER, text TEXT);
CREATE TABLE item_data (id INTEGER PRIMARY KEY, item_category INTEGER);
CREATE TABLE support_card_data (id INTEGER PRIMARY KEY, chara_id INTEGER, rarity INTEGER, command_id INTEGER);
CREATE TABLE race_instance (id INTEGER PRIMARY KEY, race_id INTEGER);
CREATE TABLE race (id INTEGER PRIMARY KEY, "group" INTEGER, grade INTEGER, course_set INTEGER, entry_num INTEGER);
CREATE TABLE race_course_set (id INTEGER PRIMARY KEY, race_track_id INTEGER, distance INTEGER,
                              ground INTEGER, inout INTEGER, turn INTEGER);
CREATE TABLE single_mode_program (id INTEGER PRIMARY KEY, race_instance_id INTEGER, base_program_id INTEGER,
                                  month INTEGER, half INTEGER, need_fan_count INTEGER,
                                  race_permission INTEGER, fan_set_id INTEGER);
CREATE TABLE single_mode_fan_count (fan_set_id INTEGER, "order" INTEGER, fan_count INTEGER);
CREATE TABLE single_mode_route_race (id INTEGER PRIMARY KEY, race_set_id INTEGER, target_type INTEGER,
                                     turn INTEGER, condition_id INTEGER);
"""

TEXT_DATA = [
    (23, 1, "にんじん"),
    (24, 1, "体力を回復する"),
    (76, 10006, "[超特急！フルカラー特殊PP]"),
    (88, 10006, "エピソード"),
    (28, 100101, "有馬記念"),
    (35, 10005, "中山"),
]


# ─── Database ────────────────────────────────────────────────────────────────

@pytest.fixture
def conn():
    conn = sqlite3.connect(":memory:")
    conn.executescript(SCHEMA)
    conn.executemany('INSERT INTO text_data VALUES (?, ?, ?)', TEXT_DATA)
    conn.executemany("INSERT INTO item_data VALUES (?, ?)", [(1, 1), (2, 3), (3, 1)])
    conn.execute("INSERT INTO support_card_data VALUES (10006, 1006, 2, 101)")
    yield conn
    conn.close()


@pytest.fixture
def db(conn):
    return MasterDatabase(conn)


# ─── Wiki ────────────────────────────────────────────────────────────────────

class FakeWiki:
    """Records fetches and edits instead of talking to a wiki."""

    def __init__(self, pages=None, cargo=None):
        self.pages = dict(pages or {})
        self.cargo = {k: list(v) for k, v in (cargo or {}).items()}
        self.fetched = []
        self.edits = []

    def fetch_page(self, title):
        self.fetched.append(title)
        return self.pages.get(title, "")

    def submit_edit(self, title, text, summary):
        self.edits.append((title, text, summary))
        self.pages[title] = text

    def cargo_query(self, tables, fields):
        yield from self.cargo.get(tables, [])


@pytest.fixture
def wiki():
    return FakeWiki()


@pytest.fixture
def make_ctx(db):
    def make(wiki, pages=None, dry_run=False):
        return RunContext(db=db, wiki=wiki, dry_run=dry_run, page_index=PageIndex(pages))
    return make


# ─── Logging ─────────────────────────────────────────────────────────────────

@pytest.fixture(autouse=True)
def reset_logger():
    """CLI tests install handlers and levels on the package logger."""
    yield
    logger = logging.getLogger("umasync")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
