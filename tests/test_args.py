import pytest

from barstatus.args import Options, UsageError, VersionRequested, parse_args


def test_no_arguments_gives_defaults():
    assert parse_args([]) == Options(to_stdout=False, once=False)


def test_s_flag_sets_stdout():
    assert parse_args(["-s"]) == Options(to_stdout=True, once=False)


def test_one_flag_implies_stdout():
    assert parse_args(["-1"]) == Options(to_stdout=True, once=True)


def test_combined_flags():
    assert parse_args(["-s1"]) == Options(to_stdout=True, once=True)


def test_separate_flags():
    assert parse_args(["-s", "-1"]) == Options(to_stdout=True, once=True)


def test_version_flag_raises():
    with pytest.raises(VersionRequested):
        parse_args(["-v"])


def test_version_flag_after_other_flags():
    with pytest.raises(VersionRequested):
        parse_args(["-sv"])


def test_unknown_flag_raises_usage():
    with pytest.raises(UsageError):
        parse_args(["-x"])


def test_unknown_flag_before_version_is_usage():
    with pytest.raises(UsageError):
        parse_args(["-x", "-v"])


def test_positional_argument_raises_usage():
    with pytest.raises(UsageError):
        parse_args(["extra"])


def test_double_dash_ends_options():
    assert parse_args(["-s", "--"]) == Options(to_stdout=True, once=False)


def test_argument_after_double_dash_raises_usage():
    with pytest.raises(UsageError):
        parse_args(["--", "-s"])


def test_lone_dash_is_positional():
    with pytest.raises(UsageError):
        parse_args(["-"])