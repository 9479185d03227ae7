"""VATSIM METAR service (metar.vatsim.net) source for live station reports."""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

import requests
from dateutil import tz

from metar_decoder.classifiers import resolve_report_time
from metar_decoder.decoder import MetarDecoder, find_issue_token, is_automated
from metar_decoder.models import DecodedReport

logger = logging.getLogger(__name__)

KNOWN_STATIONS = ["NZWN", "NZAA"]
DEFAULT_STATION = "NZWN"


class MetarFetchError(Exception):
    """Raised when a station's METAR could not be retrieved."""

    def __init__(self, station: str, message: str, status_code: Optional[int] = None):
        super().__init__(f"{station}: {message}")
        self.station = station
        self.status_code = status_code


@dataclass(frozen=True)
class StationBulletin:
    """
    One fetched METAR together with its decoded form.

    Attributes:
        station: ICAO code the report was requested for
        raw_text: Trimmed report text (empty if the service had none)
        decoded: DecodedReport for raw_text
        issued_at: Issuance time resolved against fetched_at, if present
        automated: True for AUTO reports
        fetched_at: UTC time of retrieval
        source_url: URL the text came from
    """

    station: str
    raw_text: str
    decoded: DecodedReport
    issued_at: Optional[datetime]
    automated: bool
    fetched_at: datetime
    source_url: str

    @property
    def source_label(self) -> str:
        """Display label, e.g. "metar.vatsim.net/nzwn"."""
        return self.source_url.split("://", 1)[-1]

    def to_dict(self) -> dict:
        return {
            'station': self.station,
            'raw_text': self.raw_text,
            'decoded': self.decoded.to_dict(),
            'issued_at': self.issued_at.isoformat() if self.issued_at else None,
            'automated': self.automated,
            'fetched_at': self.fetched_at.isoformat(),
            'source_url': self.source_url,
        }


class VatsimMetarSource:
    """
    Fetch the current METAR for a station from metar.vatsim.net.

    The service returns the bare report as plain text, one station per
    request.

    Example:
        source = VatsimMetarSource()
        bulletin = source.fetch_bulletin("NZWN")
        print(bulletin.decoded.qnh_hpa)
    """

    BASE_URL = "https://metar.vatsim.net"
    DEFAULT_TIMEOUT = 15
    USER_AGENT = "metar-decoder/1.0 (metar display tool)"

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: int = DEFAULT_TIMEOUT,
        decoder: Optional[MetarDecoder] = None,
    ):
        """
        Args:
            session: Optional requests.Session for dependency injection (testing).
            timeout: HTTP request timeout in seconds.
            decoder: Decoder to use; defaults to one for the KAUKAU sensor.
        """
        self._session = session or requests.Session()
        self._timeout = timeout
        self._decoder = decoder or MetarDecoder()
        self._session.headers.setdefault("User-Agent", self.USER_AGENT)

    def url_for(self, station: str) -> str:
        return f"{self.BASE_URL}/{station.strip().lower()}"

    def fetch_raw(self, station: str) -> str:
        """
        Fetch the raw METAR text for one station.

        Handles 204 (no data) by returning empty string.

        Raises:
            MetarFetchError: On network errors or HTTP error status
        """
        station = station.strip().upper()
        url = self.url_for(station)
        try:
            response = self._session.get(url, timeout=self._timeout)
        except requests.RequestException as e:
            logger.warning("METAR fetch failed for %s: %s", station, e)
            raise MetarFetchError(station, str(e)) from e

        if response.status_code == 204:
            return ""
        if response.status_code >= 400:
            logger.warning("METAR fetch for %s returned HTTP %d", station, response.status_code)
            raise MetarFetchError(station, f"HTTP {response.status_code}", response.status_code)
        return response.text.strip()

    def fetch_bulletin(self, station: str, now: Optional[datetime] = None) -> StationBulletin:
        """
        Fetch and decode the current METAR for a station.

        Args:
            station: ICAO code (case-insensitive)
            now: Reference time for resolving the issue time (defaults to now, UTC)

        Returns:
            StationBulletin
        """
        station = station.strip().upper()
        raw = self.fetch_raw(station)
        fetched_at = now or datetime.now(tz.UTC)

        issued_at = None
        token = find_issue_token(raw)
        if token:
            issued_at = resolve_report_time(token, fetched_at)

        if not raw:
            logger.info("No METAR received for %s", station)

        return StationBulletin(
            station=station,
            raw_text=raw,
            decoded=self._decoder.decode(raw),
            issued_at=issued_at,
            automated=is_automated(raw),
            fetched_at=fetched_at,
            source_url=self.url_for(station),
        )
