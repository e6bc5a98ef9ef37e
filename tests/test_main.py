import pytest

from ppm_samples import p6_bytes
from ppmview.main import main


def test_prints_header_summary(write_ppm, capsys):
    path = write_ppm(p6_bytes(2, 1, [1, 2, 3, 4, 5, 6], max_val=200))
    assert main([str(path), "--no-window"]) == 0
    out = capsys.readouterr().out
    assert "Magic number: P6" in out
    assert "Image width: 2" in out
    assert "Image height: 1" in out
    assert "Max value: 200" in out
    assert "Duration: " in out


def test_decode_error_exits_non_zero(write_ppm, capsys):
    path = write_ppm(b"P2\n1 1\n255\n0\n")
    assert main([str(path), "--no-window"]) == 1
    captured = capsys.readouterr()
    assert captured.err.startswith("error: ")
    assert "P2" in captured.err
    assert captured.out == ""


def test_missing_file_exits_non_zero(tmp_path, capsys):
    assert main([str(tmp_path / "nope.ppm"), "--no-window"]) == 1
    assert "error: " in capsys.readouterr().err


def test_zero_sized_image_cannot_be_shown(write_ppm, capsys):
    path = write_ppm(b"P6\n0 0\n255\n")
    assert main([str(path)]) == 1
    assert "error: " in capsys.readouterr().err


def test_missing_argument_is_usage_error():
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2


def test_verbose_logs_go_to_stderr(write_ppm, capsys):
    path = write_ppm(p6_bytes(1, 1, [1, 2, 3]))
    assert main([str(path), "--no-window", "--verbose"]) == 0
    captured = capsys.readouterr()
    assert captured.out.startswith("Magic number: P6")
    assert "Decoding" in captured.err


def test_log_file_and_workers_options(write_ppm, tmp_path, capsys):
    path = write_ppm(p6_bytes(2, 2, range(12)))
    log_path = tmp_path / "x.log"
    assert main([str(path), "--no-window", "--verbose", "--workers", "2", "--log-file", str(log_path)]) == 0
    assert "Image width: 2" in capsys.readouterr().out
    assert "Decoding" in log_path.read_text(encoding="utf-8")
