import hashlib
import io
import re

from ftssl.base64codec import encode
from ftssl.cli import handle_inputs, main, read_files
from ftssl.commands import supported_text


def _call(argv, data=b""):
    out, err = io.StringIO(), io.StringIO()
    status = handle_inputs(argv, io.BytesIO(data), out, err)
    return status, out.getvalue(), err.getvalue()


def test_digest_command():
    status, out, _ = _call(["sha224", "-s", "abc"])
    assert status == 0
    assert out == f'SHA224 ("abc") = {hashlib.sha224(b"abc").hexdigest()}\n'


def test_invalid_command():
    status, out, err = _call(["nope"])
    assert status == 1
    assert out == ""
    assert err == "ft_ssl: Error: 'nope' is an invalid command.\n\n" + supported_text()


def test_quit_does_nothing():
    assert _call(["quit"]) == (0, "", "")


def test_version():
    status, out, _ = _call(["version"])
    assert status == 0
    assert out.startswith("Ft_ssl, version 1.2a-release")


def test_base64_encode_to_text_stream():
    status, out, _ = _call(["base64"], b"hello world")
    assert status == 0
    assert out == encode(b"hello world")


def test_base64_decode_to_binary_stream():
    raw = bytes(range(256))
    out = io.TextIOWrapper(io.BytesIO(), encoding="utf-8")
    err = io.StringIO()
    status = handle_inputs(["base64", "-d"], io.BytesIO(encode(raw).encode()), out, err)
    assert status == 0
    assert out.buffer.getvalue() == raw


def test_base64_bad_option():
    status, _, err = _call(["base64", "-z"])
    assert status == 1
    assert "invalid option: 'z'" in err


def test_rand_hex():
    status, out, _ = _call(["rand", "-hex", "4"])
    assert status == 0
    assert re.fullmatch(r"[0-9a-f]{8}\n", out)
    assert int(out, 16) >= 1 << 24


def test_cipher_not_available():
    status, out, err = _call(["des"])
    assert status == 1
    assert out == ""
    assert "'des'" in err


def test_read_files(tmp_path):
    good = tmp_path / "good"
    good.write_bytes(b"content")
    missing = tmp_path / "missing"
    err = io.StringIO()
    loaded = read_files([str(good), str(missing), str(tmp_path)], err, "md5")
    assert loaded == [(str(good), b"content")]
    lines = err.getvalue().splitlines()
    assert lines[0].startswith(f"md5: {missing}: ")
    assert lines[1] == f"md5: {tmp_path}: Is a directory"


def test_main_one_shot(capsys):
    status = main(["md5", "-q", "-s", "foo"])
    assert status == 0
    assert capsys.readouterr().out == hashlib.md5(b"foo").hexdigest() + "\n"


def test_main_interactive(monkeypatch, capsys):
    fake_stdin = io.TextIOWrapper(io.BytesIO(b"\nmd5 -s foo\nquit\nmd5 -s bar\n"))
    monkeypatch.setattr("sys.stdin", fake_stdin)
    status = main([])
    assert status == 0
    expected = "ft_ssl> ft_ssl> " + f'MD5 ("foo") = {hashlib.md5(b"foo").hexdigest()}\n' + "ft_ssl> "
    assert capsys.readouterr().out == expected


def test_main_interactive_ends_at_eof(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(b"bogus\n")))
    assert main([]) == 0
    captured = capsys.readouterr()
    assert captured.out == "ft_ssl> ft_ssl> "
    assert "'bogus' is an invalid command." in captured.err