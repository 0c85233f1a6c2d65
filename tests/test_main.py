from sensor_tour.__main__ import main


def test_main_writes_output(tmp_path, capsys):
    src = tmp_path / "sensors.txt"
    src.write_text("0,0,0,0\n10,0,0,0\n1,0,0,0\n")
    out = tmp_path / "path.txt"
    assert main([str(src), "-o", str(out), "--start", "0", "--quiet"]) == 0
    assert out.read_text().splitlines() == ["0.0,0.0,0.0,0.0", "1.0,0.0,0.0,0.0", "10.0,0.0,0.0,0.0"]
    assert capsys.readouterr().out == ""


def test_main_reports_errors(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt"), "--quiet"]) == 1
    assert "error" in capsys.readouterr().err

    empty = tmp_path / "empty.txt"
    empty.write_text("")
    assert main([str(empty), "--quiet"]) == 1

    bad = tmp_path / "bad.txt"
    bad.write_text("0,0\n1,0\n")
    assert main([str(bad), "-o", str(tmp_path / "p.txt"), "--start", "7", "--quiet"]) == 1
