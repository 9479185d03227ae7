"""METAR text sources."""

from metar_decoder.sources.vatsim import VatsimMetarSource, StationBulletin, MetarFetchError

__all__ = ['VatsimMetarSource', 'StationBulletin', 'MetarFetchError']
