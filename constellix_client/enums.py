#
#
#

from enum import Enum


class Continent(Enum):
    AFRICA = 'AF'
    ANTARCTICA = 'AN'
    ASIA = 'AS'
    EUROPE = 'EU'
    NORTH_AMERICA = 'NA'
    OCEANIA = 'OC'
    SOUTH_AMERICA = 'SA'
