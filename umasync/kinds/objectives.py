"""Module:ObjectiveData: a Lua dump of the career objective table.

Unlike the template commands this rewrites the whole module page from
single_mode_route_race; nothing on the page is preserved.
"""

import logging

from umasync.driver import write_page

logger = logging.getLogger(__name__)

MODULE_NAME = "ObjectiveData"
OBJECTIVE_QUERY = """
SELECT route.*, race_instance_id
FROM single_mode_route_race AS route
LEFT OUTER JOIN single_mode_program ON single_mode_program."id" = condition_id"""


def lua_value(value):
    """Lua literal for a column value; empty, null and zero become 0."""
    if not value:
        return "0"
    if isinstance(value, str):
        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    return str(value)


def build_dump(rows):
    entries = []
    for row in rows:
        lines = [f"\t\t{column} = {lua_value(value)}," for column, value in row.items()]
        entries.append("\t{\n" + "\n".join(lines) + "\n\t},")
    body = "\n".join(entries)
    return f"local objectives = {{\n{body}\n}}\n\nreturn objectives\n"


def fetch_rows(db):
    return db.query(OBJECTIVE_QUERY)


def sync_objectives(ctx):
    logger.info("==> Synchronizing objectives dump…")
    dump = build_dump(fetch_rows(ctx.db))
    title = f"Module:{MODULE_NAME}"
    before = ctx.wiki.fetch_page(title)
    return write_page(ctx, title, before, dump, "Bot: regenerate objective data from master.mdb")
