from hoptrace.cli import EX_USAGE, main


def test_no_arguments_returns_one():
    assert main([]) == 1


def test_help_exits_cleanly(capsys):
    assert main(["--help"]) == 0
    out = capsys.readouterr().out
    assert "--first-hop" in out
    assert "--resolve-hostnames" in out


def test_version_exits_cleanly(capsys):
    assert main(["--version"]) == 0
    assert "hoptrace" in capsys.readouterr().out


def test_value_too_big_is_usage_error(capsys):
    assert main(["-q", "11", "host"]) == EX_USAGE
    assert "option value too big: 11" in capsys.readouterr().err


def test_invalid_number_is_usage_error(capsys):
    assert main(["-p", "12x", "host"]) == EX_USAGE
    assert "invalid value" in capsys.readouterr().err


def test_unresolvable_host_fails(capsys):
    assert main(["no-such-host.invalid"]) == 1
    assert "getaddrinfo" in capsys.readouterr().err