import pytest

from icmpprobe.args import HelpRequested, Options, UsageError, parse_args, usage_text


def test_hostname_only():
    assert parse_args(["example.com"]) == Options(hostname="example.com", verbose=False)


def test_verbose_flag_before_host():
    opts = parse_args(["-v", "example.com"])
    assert opts.verbose is True
    assert opts.hostname == "example.com"


def test_verbose_flag_after_host():
    assert parse_args(["example.com", "-v"]).verbose is True


def test_last_destination_wins():
    assert parse_args(["first.example.com", "second.example.com"]).hostname == "second.example.com"


def test_no_arguments_shows_usage():
    with pytest.raises(UsageError) as info:
        parse_args([])
    assert info.value.show_usage is True
    assert str(info.value) == usage_text()


def test_only_flag_without_destination():
    with pytest.raises(UsageError) as info:
        parse_args(["-v"])
    assert info.value.show_usage is True


def test_unknown_option():
    with pytest.raises(UsageError) as info:
        parse_args(["-x", "example.com"])
    assert str(info.value) == "Unknown option: -x"
    assert info.value.show_usage is False


@pytest.mark.parametrize("flag", ["-?", "-h", "--help"])
def test_help_flags(flag):
    with pytest.raises(HelpRequested):
        parse_args([flag])


def test_help_after_destination():
    with pytest.raises(HelpRequested):
        parse_args(["example.com", "-h"])


def test_unknown_option_before_help_is_reported_first():
    with pytest.raises(UsageError):
        parse_args(["-z", "-h"])


def test_usage_text_mentions_options():
    text = usage_text()
    assert "ping [options] <destination>" in text
    assert "  -v                 verbose output" in text