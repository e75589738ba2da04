import json

from vwp48.cli import main

from builders import VAD_PAGE, vwp_message


def _write(tmp_path, data, name="sn.last"):
    p = tmp_path / name
    p.write_bytes(data)
    return str(p)


def test_info(tmp_path, capsys):
    path = _write(tmp_path, vwp_message())
    assert main(["info", path]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["station"] == {"lat_deg": 35.123, "lon_deg": -101.234}
    assert len(out["profile"]["observations"]) == 3


def test_kinematics_short_profile(tmp_path, capsys):
    path = _write(tmp_path, vwp_message())
    assert main(["kinematics", path]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["observations"] == 3
    # highest observation is near 1 km, so the 0-6 km layer is undefined
    assert out["mean_wind"] is None
    assert out["bunkers_right"] is None


def test_kinematics_shallow_layer(tmp_path, capsys):
    page = VAD_PAGE[:3] + [
        "   010   0 0 NA  180   10   1.0   NA    2.00   1.5",
        "   300   0 0 NA  270   40   1.0   NA   60.00  10.0",
    ]
    path = _write(tmp_path, vwp_message(pages=[page]))
    assert main(["kinematics", path, "--top", "3"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["mean_wind"] is not None
    assert "/" in out["shear"]
    assert out["bunkers_right"] is not None


def test_pages(tmp_path, capsys):
    path = _write(tmp_path, vwp_message())
    assert main(["pages", path]) == 0
    out = capsys.readouterr().out
    assert "VAD Algorithm Output" in out
    assert "page 1/1" in out


def test_stale_product(tmp_path, capsys):
    path = _write(tmp_path, vwp_message())
    assert main(["--max-age", "20", "info", path]) == 1


def test_decode_error_exit_status(tmp_path, capsys):
    path = _write(tmp_path, vwp_message(code=19))
    assert main(["info", path]) == 2
    assert "product code" in capsys.readouterr().err


def test_kinematics_nan_top(tmp_path, capsys):
    path = _write(tmp_path, vwp_message())
    assert main(["kinematics", path, "--top", "nan"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["mean_wind"] is None
    assert out["shear"] is None
