"""Decoded METAR data models."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union, Dict, Any


class WindSeverity(Enum):
    """
    Wind strength tier used for display highlighting.

    Ordered from calmest to worst: NONE < BREEZY < STRONG < SEVERE.

    Thresholds (knots, inclusive lower bound):
        SEVERE:  >= 55
        STRONG:  >= 40
        BREEZY:  >= 25
        NONE:    below 25
    """

    NONE = "none"
    BREEZY = "breezy"
    STRONG = "strong"
    SEVERE = "severe"

    @property
    def order(self) -> int:
        """Numeric ordering from calmest (0) to worst (3)."""
        return _SEVERITY_ORDER[self]

    def __lt__(self, other: 'WindSeverity') -> bool:
        if not isinstance(other, WindSeverity):
            return NotImplemented
        return self.order < other.order

    def __le__(self, other: 'WindSeverity') -> bool:
        if not isinstance(other, WindSeverity):
            return NotImplemented
        return self.order <= other.order

    def __gt__(self, other: 'WindSeverity') -> bool:
        if not isinstance(other, WindSeverity):
            return NotImplemented
        return self.order > other.order

    def __ge__(self, other: 'WindSeverity') -> bool:
        if not isinstance(other, WindSeverity):
            return NotImplemented
        return self.order >= other.order


_SEVERITY_ORDER = {
    WindSeverity.NONE: 0,
    WindSeverity.BREEZY: 1,
    WindSeverity.STRONG: 2,
    WindSeverity.SEVERE: 3,
}


class CloudCoverage(Enum):
    """Cloud amount codes, values are the coded METAR abbreviations."""

    FEW = "FEW"
    SCT = "SCT"
    BKN = "BKN"
    OVC = "OVC"

    @property
    def label(self) -> str:
        return _COVERAGE_LABELS[self]


_COVERAGE_LABELS = {
    CloudCoverage.FEW: "Few",
    CloudCoverage.SCT: "Scattered",
    CloudCoverage.BKN: "Broken",
    CloudCoverage.OVC: "Overcast",
}


class WeatherPhenomenon(Enum):
    """Precipitation phenomena recognised by the decoder."""

    LIGHT_RAIN = "-RA"
    HEAVY_RAIN = "+RA"
    RAIN = "RA"
    RECENT_RAIN = "RERA"

    @property
    def label(self) -> str:
        return _PHENOMENON_LABELS[self]


_PHENOMENON_LABELS = {
    WeatherPhenomenon.LIGHT_RAIN: "Light rain",
    WeatherPhenomenon.HEAVY_RAIN: "Heavy rain",
    WeatherPhenomenon.RAIN: "Rain",
    WeatherPhenomenon.RECENT_RAIN: "Recent rain",
}


class NoClouds(Enum):
    """Sentinel for a report carrying NCD and no cloud layers."""

    DETECTED = "NCD"

    @property
    def label(self) -> str:
        return "No clouds detected"


NO_CLOUDS_DETECTED = NoClouds.DETECTED


@dataclass(frozen=True)
class Wind:
    """Surface wind group, e.g. ``28015G25KT``."""

    direction_deg: int
    speed_kt: int
    gust_kt: Optional[int] = None
    severity: WindSeverity = WindSeverity.NONE

    @property
    def compass(self) -> str:
        from metar_decoder.classifiers import degrees_to_compass
        return degrees_to_compass(self.direction_deg)

    def to_dict(self) -> dict:
        return {
            'direction_deg': self.direction_deg,
            'speed_kt': self.speed_kt,
            'gust_kt': self.gust_kt,
            'severity': self.severity.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Wind':
        return cls(
            direction_deg=data.get('direction_deg', 0),
            speed_kt=data.get('speed_kt', 0),
            gust_kt=data.get('gust_kt'),
            severity=WindSeverity(data.get('severity', 'none')),
        )


@dataclass(frozen=True)
class StationWind:
    """
    Wind reading from a named local sensor embedded in the report.

    The gust is never stored; severity comes from the sustained speed.
    """

    name: str
    direction_deg: int
    speed_kt: int
    severity: WindSeverity = WindSeverity.NONE

    @property
    def compass(self) -> str:
        from metar_decoder.classifiers import degrees_to_compass
        return degrees_to_compass(self.direction_deg)

    def to_dict(self) -> dict:
        return {
            'name': self.name,
            'direction_deg': self.direction_deg,
            'speed_kt': self.speed_kt,
            'severity': self.severity.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'StationWind':
        return cls(
            name=data.get('name', ''),
            direction_deg=data.get('direction_deg', 0),
            speed_kt=data.get('speed_kt', 0),
            severity=WindSeverity(data.get('severity', 'none')),
        )


@dataclass(frozen=True)
class CloudLayer:
    coverage: CloudCoverage
    height_ft: int

    def to_dict(self) -> dict:
        return {'coverage': self.coverage.value, 'height_ft': self.height_ft}


Clouds = Union[Tuple[CloudLayer, ...], NoClouds]


@dataclass(frozen=True)
class DecodedReport:
    """
    Structured result of decoding one METAR.

    Every field is None when its pattern was not found in the raw text.
    An entirely empty report is a valid result, not an error.

    Attributes:
        wind: Surface wind
        visibility_meters: Horizontal visibility in meters
        weather: Rain phenomena, current rain first then recent rain
        clouds: Cloud layers in text order, or NO_CLOUDS_DETECTED
        temperature_c: Air temperature in Celsius
        dew_point_c: Dew point in Celsius
        qnh_hpa: Altimeter setting in hectopascals
        station_wind: Local sensor wind reading
    """

    wind: Optional[Wind] = None
    visibility_meters: Optional[int] = None
    weather: Optional[Tuple[WeatherPhenomenon, ...]] = None
    clouds: Optional[Clouds] = None
    temperature_c: Optional[int] = None
    dew_point_c: Optional[int] = None
    qnh_hpa: Optional[int] = None
    station_wind: Optional[StationWind] = None

    @property
    def visibility_km(self) -> Optional[float]:
        """Visibility in kilometers, truncated to one decimal (9999 -> 9.9)."""
        if self.visibility_meters is None:
            return None
        return (self.visibility_meters // 100) / 10

    @property
    def no_clouds_detected(self) -> bool:
        return self.clouds is NO_CLOUDS_DETECTED

    @property
    def is_empty(self) -> bool:
        return all(
            value is None for value in (
                self.wind, self.visibility_meters, self.weather, self.clouds,
                self.temperature_c, self.dew_point_c, self.qnh_hpa, self.station_wind,
            )
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary for JSON export."""
        if self.clouds is None:
            clouds = None
        elif self.clouds is NO_CLOUDS_DETECTED:
            clouds = NO_CLOUDS_DETECTED.value
        else:
            clouds = [layer.to_dict() for layer in self.clouds]

        return {
            'wind': self.wind.to_dict() if self.wind else None,
            'visibility_meters': self.visibility_meters,
            'weather': [w.value for w in self.weather] if self.weather else None,
            'clouds': clouds,
            'temperature_c': self.temperature_c,
            'dew_point_c': self.dew_point_c,
            'qnh_hpa': self.qnh_hpa,
            'station_wind': self.station_wind.to_dict() if self.station_wind else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'DecodedReport':
        """Create DecodedReport from dictionary."""
        clouds = data.get('clouds')
        if clouds == NO_CLOUDS_DETECTED.value:
            clouds = NO_CLOUDS_DETECTED
        elif clouds is not None:
            clouds = tuple(
                CloudLayer(CloudCoverage(c['coverage']), c['height_ft']) for c in clouds
            )

        weather = data.get('weather')
        if weather is not None:
            weather = tuple(WeatherPhenomenon(w) for w in weather)

        wind = data.get('wind')
        station_wind = data.get('station_wind')

        return cls(
            wind=Wind.from_dict(wind) if wind else None,
            visibility_meters=data.get('visibility_meters'),
            weather=weather,
            clouds=clouds,
            temperature_c=data.get('temperature_c'),
            dew_point_c=data.get('dew_point_c'),
            qnh_hpa=data.get('qnh_hpa'),
            station_wind=StationWind.from_dict(station_wind) if station_wind else None,
        )
