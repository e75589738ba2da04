from datetime import datetime, timedelta, timezone

# Scan dates count days from this instant (day 1 == 1970-01-01).
NEXRAD_EPOCH = datetime(1969, 12, 31, tzinfo=timezone.utc)

NM_TO_KM = 6076.1 / 3281.0
MS_TO_KTS = 1.94384


def milli_deg(v: int) -> float:
    """Station coordinates are stored as thousandths of a degree."""
    return v / 1000.0


def nexrad_to_datetime(days: int, seconds: int) -> datetime:
    return NEXRAD_EPOCH + timedelta(days=days, seconds=seconds)


def nm_to_km(v: float) -> float:
    return v * NM_TO_KM


def ms_to_kts(v: float) -> float:
    return v * MS_TO_KTS
