"""{{CharacterBiography}}: per-character profile data (chara_data)."""

from umasync.entity import EntityKind
from umasync.fields import column, keep, text

# ui colors are copied straight from chara_data
COLOR_COLUMNS = (
    "image_color_main", "image_color_sub",
    "ui_color_main", "ui_color_sub",
    "ui_training_color_1", "ui_training_color_2",
    "ui_border_color",
    "ui_num_color_1", "ui_num_color_2",
    "ui_turn_color",
    "ui_wipe_color_1", "ui_wipe_color_2", "ui_wipe_color_3",
    "ui_speech_color_1", "ui_speech_color_2",
    "ui_nameplate_color_1", "ui_nameplate_color_2",
)

FIELDS = [
    ("id", column("id")),
    ("icon", keep()),
    ("art", keep()),
    ("name", keep()),
    ("name_jp", text(6)),
    ("va", keep()),
    ("va_jp", text(7)),
    ("birth_year", column("birth_year")),
    ("birth_month", column("birth_month")),
    ("birth_day", column("birth_day")),
    ("birth_place", keep()),
    ("height", column("scale")),
    ("bust", keep()),
    ("waist", keep()),
    ("hip", keep()),
    ("weight", keep()),
    ("weight_jp", text(9)),
    ("talent", keep()),
    ("talent_jp", text(164)),
    ("weakpoint", keep()),
    ("weakpoint_jp", text(165)),
    ("ear_detail", keep()),
    ("ear_detail_jp", text(166)),
    ("tail_detail", keep()),
    ("tail_detail_jp", text(167)),
    ("shoe_size", keep()),
    ("shoe_size_jp", text(168)),
    ("family_detail", keep()),
    ("family_detail_jp", text(169)),
    ("skin", column("skin")),
    ("socks", column("socks")),
    ("team", keep()),
    *[(name, column(name)) for name in COLOR_COLUMNS],
]

CHARACTER_BIO = EntityKind(
    name="characterbio",
    label="character biography",
    template="CharacterBiography",
    cargo_table="character_biographies",
    fields=FIELDS,
    select_all="SELECT * FROM chara_data",
    select_one="SELECT * FROM chara_data WHERE chara_data.id = ? LIMIT 1",
    aliases=("cb",),
)
