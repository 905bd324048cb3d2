"""{{Race}}: race instances with their course and career program data."""

from umasync.entity import EntityKind
from umasync.errors import MappingError
from umasync.fields import column, keep, label, optional, text

RACE_TRACKS = {
    10001: "Sapporo",    # 札幌
    10002: "Hakodate",   # 函館
    10003: "Niigata",    # 新潟
    10004: "Fukushima",  # 福島
    10005: "Nakayama",   # 中山
    10006: "Tokyo",      # 東京
    10007: "Chukyo",     # 中京
    10008: "Kyoto",      # 京都
    10009: "Hanshin",    # 阪神
    10010: "Kokura",     # 小倉
    10101: "Ooi",        # 大井
}

# race.group -> race.grade -> label shown in game
RACE_GRADES = {
    1: {  # regular races
        100: "G1",
        200: "G2",
        300: "G3",
        400: "OP",
        700: "Pre-OP",
    },
    2: {  # daily races, shown as EX
        999: "EX",
    },
    7: {  # career mode only
        100: "EX",  # URA Finals
        800: "Maiden",
        900: "Debut",
    },
    8: {  # legend races
        100: "EX",
    },
    9: {  # team stadium
        100: "G1",
    },
    61: {  # custom G1 races
        100: "G1",
    },
}

RACE_TERRAIN = {
    1: "Turf",
    2: "Dirt",
}

RACE_DIRECTION = {
    1: "Right",
    2: "Left",
    3: "Straight Right",
    4: "Straight Left",
}

RACE_COURSE = {
    1: "",
    2: "Inner",
    3: "Outer",
    4: "Outer to Inner",
}

RACE_QUERY = """
SELECT race_instance.id AS id, race_instance.race_id AS race_id,
race."group" AS "group", race.grade AS grade, race.course_set AS course_set, race.entry_num,
course.race_track_id AS race_track_id, course.distance AS distance,
course.ground AS terrain, course.inout AS course, course.turn AS direction,
program.month AS month, program.half AS half, program.need_fan_count AS required_fans,
program.race_permission AS class, fan_sets.fan_count AS fan_count
FROM race_instance
LEFT OUTER JOIN race ON race.id = race_instance.race_id
LEFT OUTER JOIN race_course_set AS course ON course.id = course_set
LEFT OUTER JOIN single_mode_program AS program ON program.race_instance_id = race_instance."id" AND program.base_program_id = 0
LEFT OUTER JOIN single_mode_fan_count AS fan_sets ON program.fan_set_id = fan_sets.fan_set_id AND fan_sets."order" = 1"""

# Instances >= 580001 are URA finals, maiden, team stadium and story copies
# with duplicated names; they are maintained by hand. The four ids below
# duplicate 101201, 101501, 100601 and 201001.
RACE_BLACKLIST = """
WHERE race_instance.id < 580001 AND (
race_instance.id IS NOT 102501 AND
race_instance.id IS NOT 102601 AND
race_instance.id IS NOT 102701 AND
race_instance.id IS NOT 203501
)"""


def grade(key, row, existing, lookup):
    group, code = row["group"], row["grade"]
    try:
        return RACE_GRADES[group][code]
    except KeyError:
        raise MappingError(f"unknown race grade {code!r} in group {group!r}") from None


def track(key, row, existing, lookup):
    return RACE_TRACKS.get(row["race_track_id"], "")


FIELDS = [
    ("id", column("id")),
    ("race_id", column("race_id")),
    ("banner", keep()),
    ("name", keep()),
    ("name_jp", text(28)),
    ("track", track),
    ("track_jp", text(35, index="race_track_id")),
    ("grade", grade),
    ("trophy", keep()),  # G3 and above only
    ("terrain", label(RACE_TERRAIN, "terrain")),
    ("length", column("distance")),
    ("direction", label(RACE_DIRECTION, "direction")),
    ("track_course", label(RACE_COURSE, "course")),
    # no program row when the race is unused in career mode
    ("class", optional("class")),
    ("month", optional("month")),
    ("month_half", optional("half")),
    ("fans", optional("fan_count")),
    ("required_fans", optional("required_fans")),
    ("participants", column("entry_num")),
]

RACE = EntityKind(
    name="race",
    label="race",
    template="Race",
    cargo_table="races",
    fields=FIELDS,
    select_all=f"{RACE_QUERY} {RACE_BLACKLIST}",
    select_one=f"{RACE_QUERY} WHERE race_instance.id = ? LIMIT 1",
    aliases=("r",),
)
