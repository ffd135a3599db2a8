import pytest

from barstatus.netspeeds import NetSpeed
from barstatus.util import fmt_human


def _counter(root, interface, name, value):
    stats = root / interface / "statistics"
    stats.mkdir(parents=True, exist_ok=True)
    (stats / name).write_text(f"{value}\n")


def _meter(root, direction, interval=1000):
    meter = NetSpeed(direction, interval)
    meter.sysfs_root = str(root)
    return meter


def test_first_call_returns_none(tmp_path):
    _counter(tmp_path, "eth0", "rx_bytes", 5000)
    assert _meter(tmp_path, "rx")("eth0") is None


def test_rx_rate(tmp_path):
    _counter(tmp_path, "eth0", "rx_bytes", 5000)
    meter = _meter(tmp_path, "rx")
    meter("eth0")
    _counter(tmp_path, "eth0", "rx_bytes", 5000 + 2048)
    assert meter("eth0") == fmt_human(2048, 1024)


def test_tx_rate_uses_tx_counter(tmp_path):
    _counter(tmp_path, "wlan0", "tx_bytes", 100)
    _counter(tmp_path, "wlan0", "rx_bytes", 1)
    meter = _meter(tmp_path, "tx")
    meter("wlan0")
    _counter(tmp_path, "wlan0", "tx_bytes", 100 + 4096)
    _counter(tmp_path, "wlan0", "rx_bytes", 999999)
    assert meter("wlan0") == fmt_human(4096, 1024)


def test_longer_interval_halves_rate(tmp_path):
    _counter(tmp_path, "eth0", "rx_bytes", 10)
    fast = _meter(tmp_path, "rx", 1000)
    slow = _meter(tmp_path, "rx", 2000)
    fast("eth0")
    slow("eth0")
    _counter(tmp_path, "eth0", "rx_bytes", 10 + 4096)
    assert fast("eth0") == fmt_human(4096, 1024)
    assert slow("eth0") == fmt_human(2048, 1024)


def test_zero_previous_counter_returns_none(tmp_path):
    _counter(tmp_path, "eth0", "rx_bytes", 0)
    meter = _meter(tmp_path, "rx")
    meter("eth0")
    _counter(tmp_path, "eth0", "rx_bytes", 500)
    assert meter("eth0") is None


def test_missing_interface_returns_none(tmp_path):
    assert _meter(tmp_path, "rx")("nope0") is None


def test_invalid_direction():
    with pytest.raises(ValueError):
        NetSpeed("up", 1000)


def test_invalid_interval():
    with pytest.raises(ValueError):
        NetSpeed("rx", 0)