"""Entity kind definition shared by all template-backed commands."""

from dataclasses import dataclass
from typing import Callable, Sequence, Tuple

from umasync.fields import map_params

Rule = Callable[..., str]


@dataclass(frozen=True)
class EntityKind:
    name: str
    label: str
    template: str
    cargo_table: str
    fields: Sequence[Tuple[str, Rule]]
    select_all: str
    select_one: str
    aliases: Tuple[str, ...] = ()

    @property
    def keys(self):
        return [key for key, _ in self.fields]

    def fetch_all(self, db):
        return db.query(self.select_all)

    def fetch_one(self, db, record_id):
        return db.query_one(self.select_one, (int(record_id),))

    def map(self, row, existing, lookup):
        return map_params(self.fields, row, existing, lookup)

    @property
    def summary(self):
        return f"Bot: sync {{{{{self.template}}}}} from master.mdb"
