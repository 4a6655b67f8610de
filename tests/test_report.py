import pytest

from hoptrace.report import elapsed_ms, format_hop_index, format_start_message, format_time


def test_start_message_format():
    assert (
        format_start_message("example.com", "127.0.0.1", 64)
        == "traceroute to example.com (127.0.0.1), 64 hops max\n"
    )


def test_hop_index_first_hop_is_padded():
    assert format_hop_index(1, 1) == "  1  "


def test_hop_index_counts_from_start_ttl():
    assert format_hop_index(10, 5) == format_hop_index(6, 1)


def test_format_time_three_decimals():
    assert format_time(1.5) == " 1.500ms "


def test_elapsed_is_zero_for_same_instant():
    assert elapsed_ms(12.5, 12.5) == 0


def test_elapsed_in_milliseconds():
    assert elapsed_ms(1.0, 1.25) == pytest.approx(250.0)


def test_elapsed_is_antisymmetric():
    assert elapsed_ms(3.0, 4.5) == pytest.approx(-elapsed_ms(4.5, 3.0))