import pytest

from retrovram.binconv import convert, main

SOURCE = b"\xfe" + b"ABCD" + b"EF" + b"payload"


def test_convert_keeps_addresses_and_body(tmp_path):
    source = tmp_path / "in.bin"
    target = tmp_path / "out.bin"
    source.write_bytes(SOURCE)
    written = convert(source, target)
    assert target.read_bytes() == b"ABCD" + b"payload"
    assert written == len(b"ABCDpayload")


def test_convert_missing_source(tmp_path):
    target = tmp_path / "out.bin"
    with pytest.raises(FileNotFoundError):
        convert(tmp_path / "absent.bin", target)
    assert not target.exists()


def test_main_needs_two_arguments(tmp_path):
    assert main([]) == 1
    assert main([str(tmp_path / "in.bin")]) == 1


def test_main_converts(tmp_path):
    source = tmp_path / "in.bin"
    target = tmp_path / "out.bin"
    source.write_bytes(SOURCE)
    assert main([str(source), str(target)]) == 0
    assert target.read_bytes() == b"ABCDpayload"


def test_main_reports_missing_file(tmp_path, capsys):
    missing = tmp_path / "absent.bin"
    assert main([str(missing), str(tmp_path / "out.bin")]) == 1
    assert "Can't open file" in capsys.readouterr().err