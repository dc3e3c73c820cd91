"""Data classes for the Awair Local API."""
from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
import re
from typing import Any, Callable


U32_MAX = 0xFFFFFFFF
SCORE_MAX = 100

_FRACTION = re.compile(r'\.(\d+)')


def _string(key: str, value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f'Field {key!r} must be a string, got {value!r}')
    return value


def _unsigned(maximum: int = U32_MAX) -> Callable[[str, Any], int]:
    """Parser for a JSON integer in the range 0..maximum."""

    def parse(key: str, value: Any) -> int:
        # bool is an int subclass, but true/false is never a valid reading
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f'Field {key!r} must be an integer, got {value!r}')
        if not 0 <= value <= maximum:
            raise ValueError(f'Field {key!r} must be between 0 and {maximum}, got {value!r}')
        return value

    return parse


def _number(key: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f'Field {key!r} must be a number, got {value!r}')
    return float(value)


def _timestamp(key: str, value: Any) -> datetime:
    value = _string(key, value)
    if value[-1:] in ('Z', 'z'):
        value = f'{value[:-1]}+00:00'
    # fromisoformat before 3.11 only takes 3 or 6 fractional digits
    value = _FRACTION.sub(lambda match: f'.{match.group(1)[:6]:0<6}', value, count=1)
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError as err:
        raise ValueError(f'Field {key!r} is not an ISO-8601 timestamp: {value!r}') from err
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def _dump_timestamp(value: datetime) -> str:
    # The device reports milliseconds; keep anything finer
    timespec = 'milliseconds' if value.microsecond % 1000 == 0 else 'microseconds'
    return value.isoformat(timespec=timespec).replace('+00:00', 'Z')


def _wire(
    parse: Callable[[str, Any], Any],
    name: str | None = None,
    dump: Callable[[Any], Any] | None = None,
) -> Any:
    """Describe how a field is named and typed in the device's JSON."""

    return field(metadata={'wire': name, 'parse': parse, 'dump': dump})


def _wire_name(item: Any) -> str:
    return item.metadata['wire'] or item.name


def _decode(cls: type, payload: Any) -> Any:
    if not isinstance(payload, dict):
        raise TypeError(
            f'Expected a JSON object for {cls.__name__}, got {type(payload).__name__}'
        )
    values: dict[str, Any] = {}
    for item in fields(cls):
        key = _wire_name(item)
        if key not in payload:
            raise KeyError(f'Missing field {key!r} for {cls.__name__}')
        values[item.name] = item.metadata['parse'](key, payload[key])
    return cls(**values)


def _encode(record: Any) -> dict[str, Any]:
    data: dict[str, Any] = {}
    for item in fields(record):
        value = getattr(record, item.name)
        dump = item.metadata['dump']
        data[_wire_name(item)] = dump(value) if dump else value
    return data


@dataclass(frozen=True)
class AirSample:
    """Air quality sample taken from an Awair device.

    timestamp: time reported by the device's internal clock, in UTC
    score: Awair Score, 0-100
    dew_point, temperature: degrees Celsius
    humidity: relative humidity, percent
    absolute_humidity: absolute humidity, grams per cubic meter
    co2, estimated_co2: parts per million (measured, and estimated by the VOC sensor)
    estimated_co2_baseline: VOC sensor's CO2 baseline (unitless)
    voc: total VOC, parts per billion
    voc_baseline, voc_h2_raw, voc_ethanol_raw: raw TVOC sensor values (unitless)
    pm25, estimated_pm10: micrograms per cubic meter
    """

    timestamp: datetime = _wire(_timestamp, dump=_dump_timestamp)
    score: int = _wire(_unsigned(SCORE_MAX))
    dew_point: float = _wire(_number)
    temperature: float = _wire(_number, 'temp')
    humidity: float = _wire(_number, 'humid')
    absolute_humidity: float = _wire(_number, 'abs_humid')
    co2: int = _wire(_unsigned())
    estimated_co2: int = _wire(_unsigned(), 'co2_est')
    estimated_co2_baseline: int = _wire(_unsigned(), 'co2_est_baseline')
    voc: int = _wire(_unsigned())
    voc_baseline: int = _wire(_unsigned())
    voc_h2_raw: int = _wire(_unsigned())
    voc_ethanol_raw: int = _wire(_unsigned())
    pm25: int = _wire(_unsigned())
    estimated_pm10: int = _wire(_unsigned(), 'pm10_est')

    @classmethod
    def from_dict(cls, payload: Any) -> AirSample:
        """Build a sample from the decoded /air-data/latest JSON."""

        return _decode(cls, payload)

    def to_dict(self) -> dict[str, Any]:
        """Return the sample keyed by the device's field names."""

        return _encode(self)


@dataclass(frozen=True)
class LedConfig:
    """Dataclass for the Awair LED configuration"""

    mode: str = _wire(_string)
    # Units are not documented by Awair
    brightness: int = _wire(_unsigned())

    @classmethod
    def from_dict(cls, payload: Any) -> LedConfig:
        return _decode(cls, payload)

    def to_dict(self) -> dict[str, Any]:
        return _encode(self)


def _led(key: str, value: Any) -> LedConfig:
    return LedConfig.from_dict(value)


@dataclass(frozen=True)
class DeviceConfig:
    """Active configuration of an Awair device.

    The device calls its identifier ``device_uuid``, but it is not formatted
    as a UUID and nothing suggests it is universally unique, so it is exposed
    as ``device_id``.
    """

    device_id: str = _wire(_string, 'device_uuid')
    wifi_mac: str = _wire(_string)
    ssid: str = _wire(_string)
    ip: str = _wire(_string)
    netmask: str = _wire(_string)
    gateway: str = _wire(_string)
    firmware_version: str = _wire(_string, 'fw_version')
    # TZ database name
    timezone: str = _wire(_string)
    display: str = _wire(_string)
    led: LedConfig = _wire(_led, dump=LedConfig.to_dict)
    voc_feature_set: int = _wire(_unsigned())

    @classmethod
    def from_dict(cls, payload: Any) -> DeviceConfig:
        """Build a config from the decoded /settings/config/data JSON."""

        return _decode(cls, payload)

    def to_dict(self) -> dict[str, Any]:
        """Return the config keyed by the device's field names."""

        return _encode(self)
