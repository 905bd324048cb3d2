"""{{Character}}: trainable character cards (card_data)."""

from umasync.entity import EntityKind
from umasync.fields import column, keep, optional, text

CHARACTER_QUERY = """
SELECT card_data."id" AS id, card_data."chara_id" AS chara_id, default_rarity,
talent_speed, talent_stamina, talent_pow, talent_guts, talent_wiz, limited_chara,
r1.speed AS speed1, r1.stamina AS stamina1, r1.pow AS power1, r1.guts AS guts1, r1.wiz AS wisdom1,
r2.speed AS speed2, r2.stamina AS stamina2, r2.pow AS power2, r2.guts AS guts2, r2.wiz AS wisdom2,
r3.speed AS speed3, r3.stamina AS stamina3, r3.pow AS power3, r3.guts AS guts3, r3.wiz AS wisdom3,
r4.speed AS speed4, r4.stamina AS stamina4, r4.pow AS power4, r4.guts AS guts4, r4.wiz AS wisdom4,
r5.speed AS speed5, r5.stamina AS stamina5, r5.pow AS power5, r5.guts AS guts5, r5.wiz AS wisdom5,
r5.proper_ground_turf AS aptitude_turf, r5.proper_ground_dirt AS aptitude_dirt,
r5.proper_distance_short AS aptitude_short, r5.proper_distance_mile AS aptitude_mile,
r5.proper_distance_middle AS aptitude_middle, r5.proper_distance_long AS aptitude_long,
r5.proper_running_style_nige AS aptitude_runner, r5.proper_running_style_senko AS aptitude_leader,
r5.proper_running_style_sashi AS aptitude_betweener, r5.proper_running_style_oikomi AS aptitude_chaser
FROM card_data
LEFT OUTER JOIN card_rarity_data AS r1 ON r1.card_id = card_data.id AND r1.rarity = 1
LEFT OUTER JOIN card_rarity_data AS r2 ON r2.card_id = card_data.id AND r2.rarity = 2
LEFT OUTER JOIN card_rarity_data AS r3 ON r3.card_id = card_data.id AND r3.rarity = 3
LEFT OUTER JOIN card_rarity_data AS r4 ON r4.card_id = card_data.id AND r4.rarity = 4
LEFT OUTER JOIN card_rarity_data AS r5 ON r5.card_id = card_data.id AND r5.rarity = 5"""

STATS = ("speed", "stamina", "power", "guts", "wisdom")
GROWTH_COLUMNS = {
    "speed": "talent_speed",
    "stamina": "talent_stamina",
    "power": "talent_pow",
    "guts": "talent_guts",
    "wisdom": "talent_wiz",
}


def _stat_fields():
    fields = []
    for stat in STATS:
        for star in range(1, 6):
            key = f"{stat}{star}"
            # cards starting at 3 stars have no 1/2-star rows
            fields.append((key, optional(key) if star < 3 else column(key)))
    return fields


FIELDS = [
    ("id", column("id")),
    ("chara_id", column("chara_id")),
    ("icon", keep()),
    ("art", keep()),
    ("title", keep()),
    ("title_jp", text(5, strip_brackets=True)),
    ("base_star", column("default_rarity")),
    ("series", keep()),
    ("obtain", keep()),
    ("release_date", keep()),
    ("limited", column("limited_chara")),
    ("link_gamewith", keep()),
    ("link_kamigame", keep()),
    *_stat_fields(),
    *[(f"{stat}_growth_bonus", column(col)) for stat, col in GROWTH_COLUMNS.items()],
    ("unique_skill", keep()),
    ("unique_skill_evolved", keep()),
    ("aptitude_turf", column("aptitude_turf")),
    ("aptitude_dirt", column("aptitude_dirt")),
    ("aptitude_short", column("aptitude_short")),
    ("aptitude_mile", column("aptitude_mile")),
    ("aptitude_medium", column("aptitude_middle")),
    ("aptitude_long", column("aptitude_long")),
    ("aptitude_runner", column("aptitude_runner")),
    ("aptitude_leader", column("aptitude_leader")),
    ("aptitude_betweener", column("aptitude_betweener")),
    ("aptitude_chaser", column("aptitude_chaser")),
    ("skills", keep()),
    ("awakening_materials", keep()),
    ("awakening1", keep()),
    ("awakening2", keep()),
    ("awakening3", keep()),
    ("awakening4", keep()),
    ("events", keep()),
    ("ura_objectives", keep()),
    ("model_file", keep()),
    ("model_texture", keep()),
]

CHARACTER = EntityKind(
    name="character",
    label="character",
    template="Character",
    cargo_table="characters",
    fields=FIELDS,
    select_all=CHARACTER_QUERY,
    select_one=f'{CHARACTER_QUERY} WHERE card_data."id" = ? LIMIT 1',
    aliases=("c",),
)
