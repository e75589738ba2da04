from datetime import datetime, timedelta, timezone

from vwp48.sources import (
    DEFAULT_FRESHNESS, ByteSource, BytesSource, PathSource, decode_source, is_fresh,
)

from builders import vwp_message


def test_sources_decode(tmp_path):
    data = vwp_message()
    path = tmp_path / "KAMA.vwp"
    path.write_bytes(data)

    for src in (BytesSource(data), PathSource(path)):
        assert isinstance(src, ByteSource)
        vwp = decode_source(src)
        assert len(vwp.profile) == 3


def test_is_fresh():
    now = datetime(2023, 5, 26, 22, 40, tzinfo=timezone.utc)
    assert DEFAULT_FRESHNESS == timedelta(minutes=20)
    assert is_fresh(now - timedelta(minutes=5), now=now)
    assert is_fresh(now - timedelta(minutes=20), now=now)
    assert not is_fresh(now - timedelta(minutes=21), now=now)
    assert is_fresh(now - timedelta(hours=2), timedelta(hours=3), now=now)
