import pytest
from datetime import datetime

from dateutil import tz


@pytest.fixture
def wellington_metar() -> str:
    """Wellington report with gusts, light rain and two cloud layers."""
    return "251150Z 28015G25KT 9999 -RA FEW020 BKN035 18/12 Q1015"


@pytest.fixture
def kaukau_metar() -> str:
    """Report carrying a Mt Kaukau sensor wind group."""
    return "NZWN 251150Z 18010KT 9999 SCT030 14/08 Q1008 KAUKAU 30045G60KT"


@pytest.fixture
def auto_ncd_metar() -> str:
    """Automated Auckland report with no clouds detected."""
    return "NZAA 020000Z AUTO 36010KT 9999 NCD M02/M05 Q1020"


@pytest.fixture
def reference_time() -> datetime:
    return datetime(2026, 10, 25, 12, 0, tzinfo=tz.UTC)
