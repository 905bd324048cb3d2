"""{{Support}}: support cards (support_card_data)."""

from umasync.entity import EntityKind
from umasync.fields import column, keep, label, text

RARITIES = {
    1: "R",
    2: "SR",
    3: "SSR",
}

FIELDS = [
    ("id", column("id")),
    ("chara_id", column("chara_id")),
    ("icon", keep()),
    ("art", keep()),
    ("title", keep()),
    ("title_jp", text(76, strip_brackets=True)),
    ("rarity", label(RARITIES, "rarity", keep_existing=True)),
    ("type", column("command_id")),
    ("series", keep()),
    ("obtain", keep()),
    ("release_date", keep()),
    ("limited", keep()),
    ("link_gamewith", keep()),
    ("link_kamigame", keep()),
    ("unique_bonus", keep()),
    ("effects", keep()),
    ("skills", keep()),
    ("events", keep()),
    ("episode", keep()),
    ("episode_jp", text(88)),
]

SUPPORT_CARD = EntityKind(
    name="supportcard",
    label="support card",
    template="Support",
    cargo_table="supports",
    fields=FIELDS,
    select_all="SELECT * FROM support_card_data",
    select_one="SELECT * FROM support_card_data WHERE support_card_data.id = ? LIMIT 1",
    aliases=("sc",),
)
