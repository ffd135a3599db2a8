import os
import pwd
import socket
import time

from barstatus import basic


def test_cat_returns_first_line(tmp_path):
    path = tmp_path / "f"
    path.write_text("line one\nline two\n")
    assert basic.cat(str(path)) == "line one"


def test_cat_empty_file(tmp_path):
    path = tmp_path / "f"
    path.write_text("\n")
    assert basic.cat(str(path)) is None


def test_cat_missing_file(tmp_path):
    assert basic.cat(str(tmp_path / "missing")) is None


def test_datetime_plain_text_is_unchanged():
    assert basic.datetime("status") == "status"


def test_datetime_empty_result_is_none():
    assert basic.datetime("") is None


def test_datetime_year_is_digits():
    result = basic.datetime("%Y")
    assert len(result) == 4
    assert result.isdigit()
    assert abs(int(result) - int(time.strftime("%Y"))) <= 1


def test_disk_values_for_existing_path(tmp_path):
    path = str(tmp_path)
    for func in (basic.disk_free, basic.disk_total, basic.disk_used):
        number, _unit = func(path).split(" ")
        assert float(number) >= 0.0
    assert 0 <= int(basic.disk_perc(path)) <= 100


def test_disk_missing_path(tmp_path):
    missing = str(tmp_path / "missing")
    assert basic.disk_free(missing) is None
    assert basic.disk_perc(missing) is None
    assert basic.disk_total(missing) is None
    assert basic.disk_used(missing) is None


def test_entropy_is_count_or_infinity():
    result = basic.entropy(None)
    assert result is None or result.isdigit() or result == "\u221e"


def test_hostname_matches_socket():
    assert basic.hostname(None) == socket.gethostname()


def test_kernel_release_matches_uname():
    assert basic.kernel_release(None) == os.uname().release


def test_load_avg_has_three_values():
    parts = basic.load_avg(None).split(" ")
    assert len(parts) == 3
    for part in parts:
        whole, fraction = part.split(".")
        assert whole.isdigit()
        assert len(fraction) == 2
        assert fraction.isdigit()


def test_num_files_counts_entries(tmp_path):
    names = ["a", "b", "c"]
    for name in names:
        (tmp_path / name).write_text("")
    (tmp_path / "sub").mkdir()
    assert basic.num_files(str(tmp_path)) == str(len(names) + 1)


def test_num_files_empty_dir(tmp_path):
    assert basic.num_files(str(tmp_path)) == "0"


def test_num_files_missing(tmp_path):
    assert basic.num_files(str(tmp_path / "missing")) is None


def test_run_command_output():
    assert basic.run_command("echo hello") == "hello"


def test_run_command_first_line_only():
    assert basic.run_command("printf 'first\\nsecond\\n'") == "first"


def test_run_command_no_output():
    assert basic.run_command("true") is None


def test_uptime_format():
    parts = basic.uptime(None).split(" ")
    assert len(parts) == 2
    hours, minutes = parts
    assert hours[-1] == "h"
    assert minutes[-1] == "m"
    assert int(hours[:-1]) >= 0
    assert int(minutes[:-1]) >= 0


def test_uptime_minutes_below_sixty():
    minutes = int(basic.uptime(None).split(" ")[1].rstrip("m"))
    assert 0 <= minutes < 60


def test_ids_match_process():
    assert basic.uid(None) == str(os.geteuid())
    assert basic.gid(None) == str(os.getgid())


def test_username_matches_passwd():
    assert basic.username(None) == pwd.getpwuid(os.geteuid()).pw_name