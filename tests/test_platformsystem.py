import sys

import pytest

from ttkcommon import platformsystem
from ttkcommon.platformsystem import (
    System,
    logical_dots_per_inch,
    logical_dots_per_inch_x,
    logical_dots_per_inch_y,
    parse_lsb_release,
    system_name,
)


@pytest.mark.parametrize(
    ("distrib", "expected"),
    [
        ("Ubuntu", System.LINUX_UBUNTU),
        ("debian", System.LINUX_DEBIAN),
        ("Arch", System.LINUX_ARCH),
        ("CentOS", System.LINUX_CENTOS),
        ("Fedora", System.LINUX),
    ],
)
def test_parse_lsb_release_distributions(distrib, expected):
    text = f"DISTRIB_ID={distrib}\nDISTRIB_RELEASE=1.0\n"
    assert parse_lsb_release(text) is expected


def test_parse_lsb_release_without_id_is_plain_linux():
    assert parse_lsb_release("DISTRIB_RELEASE=22.04\n") is System.LINUX


def test_parse_lsb_release_uses_first_id():
    text = "DISTRIB_ID=Debian\nDISTRIB_ID=Ubuntu\n"
    assert parse_lsb_release(text) is System.LINUX_DEBIAN


def test_system_name_linux_reads_lsb_release(tmp_path, monkeypatch):
    release = tmp_path / "lsb-release"
    release.write_text("DISTRIB_ID=Ubuntu\n", encoding="utf-8")
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.setattr(platformsystem, "LSB_RELEASE_PATH", str(release))
    assert system_name() is System.LINUX_UBUNTU


def test_system_name_linux_without_release_file(tmp_path, monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.setattr(platformsystem, "LSB_RELEASE_PATH", str(tmp_path / "missing"))
    assert system_name() is System.LINUX


def test_system_name_mac(monkeypatch):
    monkeypatch.setattr(sys, "platform", "darwin")
    assert system_name() is System.MAC


def test_system_name_other_unix_is_unknown(monkeypatch):
    monkeypatch.setattr(sys, "platform", "sunos5")
    assert system_name() is System.UNKNOWN


def test_dpi_average_lies_between_axes():
    x = logical_dots_per_inch_x()
    y = logical_dots_per_inch_y()
    combined = logical_dots_per_inch()
    assert min(x, y) <= combined <= max(x, y)


def test_dpi_values_are_positive():
    assert logical_dots_per_inch() > 0
    assert logical_dots_per_inch_x() > 0
    assert logical_dots_per_inch_y() > 0