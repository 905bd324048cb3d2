from umasync.kinds.character import CHARACTER
from umasync.kinds.characterbio import CHARACTER_BIO
from umasync.kinds.item import ITEM
from umasync.kinds.race import RACE
from umasync.kinds.supportcard import SUPPORT_CARD

KINDS = {kind.name: kind for kind in (CHARACTER, CHARACTER_BIO, ITEM, RACE, SUPPORT_CARD)}
