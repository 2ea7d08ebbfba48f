"""Screen DPI and operating-system identification."""

from __future__ import annotations

import enum
import platform
import re
import sys

__all__ = [
    "DEFAULT_DPI",
    "LSB_RELEASE_PATH",
    "System",
    "logical_dots_per_inch",
    "logical_dots_per_inch_x",
    "logical_dots_per_inch_y",
    "parse_lsb_release",
    "system_name",
]

DEFAULT_DPI = 96
LSB_RELEASE_PATH = "/etc/lsb-release"

_DISTRIB_ID = re.compile(r"DISTRIB_ID=(\w+)")

_VER_PLATFORM_WIN32_WINDOWS = 1
_VER_PLATFORM_WIN32_NT = 2
_VER_NT_WORKSTATION = 1
_WIN11_BUILD = 22000


class System(enum.Enum):
    """Operating systems that can be told apart."""

    WIN11 = enum.auto()
    WIN10 = enum.auto()
    WIN81 = enum.auto()
    WIN8 = enum.auto()
    WIN7 = enum.auto()
    WIN_VISTA = enum.auto()
    WIN_XP = enum.auto()
    WIN_XP_PROFESSIONAL_EDITION = enum.auto()
    WIN2000 = enum.auto()
    WIN_NT40 = enum.auto()
    WIN95 = enum.auto()
    WIN98 = enum.auto()
    WIN_ME = enum.auto()
    WIN_SERVER2003 = enum.auto()
    WIN_SERVER2003_R2 = enum.auto()
    WIN_SERVER2008 = enum.auto()
    WIN_SERVER2008_R2 = enum.auto()
    WIN_SERVER2012 = enum.auto()
    LINUX = enum.auto()
    LINUX_UBUNTU = enum.auto()
    LINUX_DEBIAN = enum.auto()
    LINUX_ARCH = enum.auto()
    LINUX_CENTOS = enum.auto()
    MAC = enum.auto()
    UNKNOWN = enum.auto()


def _dpi_value() -> tuple[int, int]:
    """Return the horizontal and vertical DPI of the primary screen."""
    default = (DEFAULT_DPI, DEFAULT_DPI)
    try:
        import tkinter
    except ImportError:
        return default

    try:
        root = tkinter.Tk()
    except tkinter.TclError:
        return default

    try:
        root.withdraw()
        width_mm = root.winfo_screenmmwidth()
        height_mm = root.winfo_screenmmheight()
        if width_mm <= 0 or height_mm <= 0:
            return default
        x = root.winfo_screenwidth() * 25.4 / width_mm
        y = root.winfo_screenheight() * 25.4 / height_mm
        return int(x + 0.5), int(y + 0.5)
    except tkinter.TclError:
        return default
    finally:
        root.destroy()


def logical_dots_per_inch_x() -> int:
    """Horizontal DPI of the primary screen, or 96 if it cannot be read."""
    return _dpi_value()[0]


def logical_dots_per_inch_y() -> int:
    """Vertical DPI of the primary screen, or 96 if it cannot be read."""
    return _dpi_value()[1]


def logical_dots_per_inch() -> int:
    """Mean of the horizontal and vertical DPI."""
    x, y = _dpi_value()
    return (x + y) // 2


_DISTRIBUTIONS = {
    "ubuntu": System.LINUX_UBUNTU,
    "debian": System.LINUX_DEBIAN,
    "arch": System.LINUX_ARCH,
    "centos": System.LINUX_CENTOS,
}


def parse_lsb_release(text: str) -> System:
    """Identify the Linux distribution from ``lsb-release`` content."""
    match = _DISTRIB_ID.search(text)
    if match is None:
        return System.LINUX
    return _DISTRIBUTIONS.get(match.group(1).lower(), System.LINUX)


def _linux_system() -> System:
    try:
        with open(LSB_RELEASE_PATH, encoding="utf-8", errors="replace") as handle:
            text = handle.read()
    except OSError:
        return System.LINUX
    return parse_lsb_release(text)


def _windows_legacy(major: int, minor: int, platform_id: int, product_type: int,
                    amd64: bool, server_r2: bool) -> System:
    workstation = product_type == _VER_NT_WORKSTATION
    if major == 4:
        if minor == 0:
            if platform_id == _VER_PLATFORM_WIN32_NT:
                return System.WIN_NT40
            if platform_id == _VER_PLATFORM_WIN32_WINDOWS:
                return System.WIN95
        elif minor == 10:
            return System.WIN98
        elif minor == 90:
            return System.WIN_ME
    elif major == 5:
        if minor == 0:
            return System.WIN2000
        if minor == 1:
            return System.WIN_XP
        if minor == 2:
            if workstation and amd64:
                return System.WIN_XP_PROFESSIONAL_EDITION
            return System.WIN_SERVER2003_R2 if server_r2 else System.WIN_SERVER2003
    elif major == 6:
        if minor == 0:
            return System.WIN_VISTA if workstation else System.WIN_SERVER2008
        if minor == 1:
            return System.WIN7 if workstation else System.WIN_SERVER2008_R2
        if minor == 2:
            return System.WIN8 if workstation else System.WIN_SERVER2012
    return System.UNKNOWN


def _windows_system() -> System:
    info = sys.getwindowsversion()  # type: ignore[attr-defined]
    major, minor, build = getattr(info, "platform_version", (info.major, info.minor, info.build))
    if (major, minor) == (6, 1):
        return System.WIN7
    if (major, minor) == (6, 2):
        return System.WIN8
    if (major, minor) == (6, 3):
        return System.WIN81
    if (major, minor) == (10, 0):
        return System.WIN10 if build < _WIN11_BUILD else System.WIN11
    return _windows_legacy(
        info.major,
        info.minor,
        info.platform,
        info.product_type,
        platform.machine().upper() == "AMD64",
        "R2" in platform.release().upper(),
    )


def system_name() -> System:
    """Identify the running operating system."""
    if sys.platform == "win32":
        return _windows_system()
    if sys.platform.startswith("linux"):
        return _linux_system()
    if sys.platform == "darwin":
        return System.MAC
    return System.UNKNOWN