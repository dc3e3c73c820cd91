"""Constants for AwairAIO"""

from .str_enum import StrEnum
from .__version__ import __version__ as version


class Endpoint(StrEnum):

    AIR_DATA = '/air-data/latest'
    CONFIG = '/settings/config/data'


class Header(StrEnum):

    ACCEPT = 'application/json'
    USER_AGENT = f'AwairAIO/{version}'


TIMEOUT = 10
