"""Field rules that turn a master.mdb row into template parameters.

Every entity kind declares its template parameters as an ordered list of
``(key, rule)`` pairs. A rule is called as ``rule(key, row, existing, lookup)``
and returns the string to write:

* ``row``      the database record
* ``existing`` parameters currently on the page (stripped strings)
* ``lookup``   ``lookup(category, index) -> str`` into text_data

The output always contains exactly the declared keys, in declaration order;
parameters on the page that are not declared are dropped.
"""

from umasync.errors import MappingError


def render(value):
    if value is None:
        return ""
    return str(value)


def column(name):
    """Copy a database column verbatim."""
    def rule(key, row, existing, lookup):
        return render(row[name])
    return rule


def optional(name):
    """Copy a column that may be missing for unused records; falsy -> ""."""
    def rule(key, row, existing, lookup):
        value = row[name]
        return render(value) if value else ""
    return rule


def keep():
    """Editorial field: keep what editors wrote, default to ""."""
    def rule(key, row, existing, lookup):
        return existing.get(key) or ""
    return rule


def text(category, strip_brackets=False, index=None):
    """Localized text from text_data.

    Looked up by the row id, or by the ``index`` column when given.
    Titles are stored as "[Title]"; ``strip_brackets`` drops the first
    "[" and the first "]".
    """
    def rule(key, row, existing, lookup):
        idx = row["id"] if index is None else row[index]
        if idx is None:
            return ""
        value = lookup(category, idx) or ""
        if strip_brackets:
            value = value.replace("[", "", 1).replace("]", "", 1)
        return value
    return rule


def label(table, name, keep_existing=False):
    """Translate a numeric code into its wiki label.

    Unknown codes give "" or, with ``keep_existing``, the current page value.
    """
    def rule(key, row, existing, lookup):
        value = table.get(row[name])
        if value is None:
            return (existing.get(key) or "") if keep_existing else ""
        return value
    return rule


def map_params(fields, row, existing, lookup):
    params = {}
    for key, rule in fields:
        try:
            params[key] = rule(key, row, existing, lookup)
        except KeyError as e:
            raise MappingError(f"{key}: row has no column {e}") from e
    return params
