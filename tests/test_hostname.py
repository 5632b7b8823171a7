import socket

from promptparts.hostname import get_hostname, trim_hostname


def test_trim_at_first_dot():
    assert trim_hostname("box.lan.example.com", ".") == "box"


def test_trim_at_multi_character_marker():
    assert trim_hostname("box.lan.example.com", ".example") == "box.lan"


def test_empty_trim_keeps_host():
    assert trim_hostname("box.lan", "") == "box.lan"


def test_missing_marker_keeps_host():
    assert trim_hostname("box", ".") == "box"


def test_marker_at_start_gives_empty():
    assert trim_hostname(".box", ".") == ""


def test_trim_result_is_prefix():
    host = "alpha-beta-gamma"
    result = trim_hostname(host, "-")
    assert host.startswith(result)
    assert "-" not in result


def test_get_hostname_matches_system():
    assert get_hostname() == socket.gethostname()