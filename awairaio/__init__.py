"""Init file for AwairAIO"""

from .constants import (Endpoint, Header, TIMEOUT,)
from .awair_client import (AwairClient, LOGGER,)
from .exceptions import (AwairError, InvalidBase, InvalidUrl, RequestError,)
from .air_model import (AirSample, DeviceConfig, LedConfig,)
from .str_enum import StrEnum
from .__version__ import __version__

__all__ = ['AirSample', 'AwairClient', 'AwairError', 'DeviceConfig', 'Endpoint',
           'Header', 'InvalidBase', 'InvalidUrl', 'LedConfig', 'LOGGER',
           'RequestError', 'StrEnum', 'TIMEOUT', '__version__']
