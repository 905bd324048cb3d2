"""{{Item}}: inventory items (item_data)."""

from umasync.entity import EntityKind
from umasync.fields import column, keep, text

FIELDS = [
    ("id", column("id")),
    ("icon", keep()),
    ("name", keep()),
    ("name_jp", text(23)),
    ("description", keep()),
    ("description_jp", text(24)),
    ("category", column("item_category")),
    ("uses", keep()),
    ("obtain", keep()),
]

ITEM = EntityKind(
    name="item",
    label="item",
    template="Item",
    cargo_table="items",
    fields=FIELDS,
    select_all="SELECT * FROM item_data",
    select_one="SELECT * FROM item_data WHERE item_data.id = ? LIMIT 1",
    aliases=("i",),
)
