"""Day/hour/minute/second/millisecond time values, timestamps and random helpers.

Format strings follow the Qt date-time pattern language: ``d``/``dd``/``ddd``/
``dddd``, ``M``/``MM``/``MMM``/``MMMM``, ``yy``/``yyyy``, ``h``/``hh`` (12-hour
when an AM/PM marker is present), ``H``/``HH``, ``m``/``mm``, ``s``/``ss``,
``z``/``zzz``, ``AP``/``A`` and ``ap``/``a``. Text inside single quotes is
literal and ``''`` stands for a single quote.
"""

from __future__ import annotations

import random
import re
import time as _time
from datetime import datetime

__all__ = [
    "RAND_MAX",
    "Time",
    "current_timestamp",
    "format_duration",
    "init_random",
    "msecs_to_string",
    "parse_duration",
    "random_int",
    "timestamp_from_string",
    "timestamp_to_string",
]

RAND_MAX = 2147483647

_S2MS = 1000
_M2S = 60
_H2S = 60 * _M2S
_D2S = 24 * _H2S
_H2MS = _H2S * _S2MS
_H2M = 60
_D2M = 24 * _H2M

_DAY_SHORT = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
_DAY_LONG = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
_MONTH_SHORT = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]
_MONTH_LONG = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

_LITERAL = "lit"
_NAME = "(?i:[a-z]+)"
_AMPM = "(?i:am|pm)"
_PATTERNS = {
    ("d", 1): r"\d{1,2}", ("d", 2): r"\d{2}", ("d", 3): _NAME, ("d", 4): _NAME,
    ("M", 1): r"\d{1,2}", ("M", 2): r"\d{2}", ("M", 3): _NAME, ("M", 4): _NAME,
    ("y", 2): r"\d{2}", ("y", 4): r"\d{4}",
    ("h", 1): r"\d{1,2}", ("h", 2): r"\d{2}",
    ("H", 1): r"\d{1,2}", ("H", 2): r"\d{2}",
    ("m", 1): r"\d{1,2}", ("m", 2): r"\d{2}",
    ("s", 1): r"\d{1,2}", ("s", 2): r"\d{2}",
    ("z", 1): r"\d{1,3}", ("z", 3): r"\d{3}",
    ("A", 1): _AMPM, ("A", 2): _AMPM, ("a", 1): _AMPM, ("a", 2): _AMPM,
}

Token = tuple[str, object]


def _tokenize(fmt: str, *, with_date: bool, with_time: bool) -> list[Token]:
    """Split a format string into field tokens and literal text."""
    tokens: list[Token] = []
    literal: list[str] = []

    def flush() -> None:
        if literal:
            tokens.append((_LITERAL, "".join(literal)))
            literal.clear()

    i, n = 0, len(fmt)
    while i < n:
        c = fmt[i]
        if c == "'":
            if fmt.startswith("''", i):
                literal.append("'")
                i += 2
                continue
            j = i + 1
            while j < n:
                if fmt[j] == "'":
                    if fmt.startswith("''", j):
                        literal.append("'")
                        j += 2
                        continue
                    break
                literal.append(fmt[j])
                j += 1
            i = j + 1
            continue

        rest = fmt[i:]
        run = len(rest) - len(rest.lstrip(c))
        token: tuple[str, int] | None = None
        if with_date and c in "dM":
            token = (c, min(run, 4))
        elif with_date and c == "y":
            if run >= 4:
                token = ("y", 4)
            elif run >= 2:
                token = ("y", 2)
        elif with_time and c in "hHms":
            token = (c, min(run, 2))
        elif with_time and c == "z":
            token = ("z", 3 if run >= 3 else 1)
        elif with_time and c in "Aa":
            token = (c, 2 if fmt[i + 1:i + 2] in ("P", "p") else 1)

        if token is None:
            literal.append(c)
            i += 1
            continue
        flush()
        tokens.append(token)
        i += token[1]
    flush()
    return tokens


def _uses_ampm(tokens: list[Token]) -> bool:
    return any(kind in ("A", "a") for kind, _ in tokens)


def _number(value: int, width: int) -> str:
    return f"{value:02d}" if width == 2 else str(value)


def _render(tokens: list[Token], fields: dict[str, int]) -> str:
    twelve = _uses_ampm(tokens)
    hour = fields["hour"]
    parts: list[str] = []
    for kind, arg in tokens:
        match kind:
            case "lit":
                parts.append(str(arg))
            case "d":
                if arg == 3:
                    parts.append(_DAY_SHORT[fields["weekday"]])
                elif arg == 4:
                    parts.append(_DAY_LONG[fields["weekday"]])
                else:
                    parts.append(_number(fields["day"], arg))
            case "M":
                if arg == 3:
                    parts.append(_MONTH_SHORT[fields["month"] - 1])
                elif arg == 4:
                    parts.append(_MONTH_LONG[fields["month"] - 1])
                else:
                    parts.append(_number(fields["month"], arg))
            case "y":
                year = fields["year"]
                parts.append(f"{year:04d}" if arg == 4 else f"{year % 100:02d}")
            case "h":
                shown = (hour % 12 or 12) if twelve else hour
                parts.append(_number(shown, arg))
            case "H":
                parts.append(_number(hour, arg))
            case "m":
                parts.append(_number(fields["minute"], arg))
            case "s":
                parts.append(_number(fields["second"], arg))
            case "z":
                msec = fields["msec"]
                parts.append(f"{msec:03d}" if arg == 3 else str(msec))
            case "A":
                parts.append("AM" if hour < 12 else "PM")
            case "a":
                parts.append("am" if hour < 12 else "pm")
    return "".join(parts)


def _lookup_name(raw: str, names: list[str]) -> int:
    title = raw.title()
    if title not in names:
        raise ValueError(f"unknown name {raw!r}")
    return names.index(title)


def _parse(text: str, tokens: list[Token]) -> dict[str, int]:
    """Parse *text* against *tokens*; raise ValueError if it does not fit."""
    pieces: list[str] = []
    kinds: list[tuple[str, int]] = []
    for kind, arg in tokens:
        if kind == _LITERAL:
            pieces.append(re.escape(str(arg)))
        else:
            pieces.append(f"({_PATTERNS[(kind, arg)]})")
            kinds.append((kind, arg))

    match = re.fullmatch("".join(pieces), text)
    if match is None:
        raise ValueError(f"{text!r} does not match the format")

    values = {"year": 1900, "month": 1, "day": 1, "hour": 0, "minute": 0, "second": 0, "msec": 0}
    meridiem: str | None = None
    for (kind, arg), raw in zip(kinds, match.groups()):
        match kind:
            case "d":
                if arg == 3:
                    _lookup_name(raw, _DAY_SHORT)
                elif arg == 4:
                    _lookup_name(raw, _DAY_LONG)
                else:
                    values["day"] = int(raw)
            case "M":
                if arg == 3:
                    values["month"] = _lookup_name(raw, _MONTH_SHORT) + 1
                elif arg == 4:
                    values["month"] = _lookup_name(raw, _MONTH_LONG) + 1
                else:
                    values["month"] = int(raw)
            case "y":
                values["year"] = int(raw) if arg == 4 else 1900 + int(raw)
            case "h" | "H":
                values["hour"] = int(raw)
            case "m":
                values["minute"] = int(raw)
            case "s":
                values["second"] = int(raw)
            case "z":
                values["msec"] = int(raw)
            case "A" | "a":
                meridiem = raw.lower()

    if meridiem is not None:
        if not 1 <= values["hour"] <= 12:
            raise ValueError("hour out of range for a 12-hour clock")
        values["hour"] = values["hour"] % 12 + (12 if meridiem == "pm" else 0)

    limits = {"hour": 24, "minute": 60, "second": 60, "msec": 1000}
    for name, limit in limits.items():
        if not 0 <= values[name] < limit:
            raise ValueError(f"{name} out of range")
    return values


class Time:
    """A span of days, hours, minutes, seconds and milliseconds."""

    __slots__ = ("day", "hour", "minute", "second", "msecond")

    def __init__(self, day: int = 0, hour: int = 0, minute: int = 0,
                 second: int = 0, msecond: int = 0) -> None:
        self.day = 0
        self.hour = 0
        self.minute = 0
        self.second = 0
        self.msecond = 0
        self.set_value(day, hour, minute, second, msecond)

    @classmethod
    def from_msecs(cls, value: int) -> Time:
        """Build a time from a total in milliseconds; negative totals give a null time."""
        result = cls()
        result.set_msecs(value)
        return result

    @classmethod
    def from_string(cls, time: str, format: str) -> Time:
        """Parse *time* with a time format; text that does not fit gives a null time."""
        tokens = _tokenize(format, with_date=False, with_time=True)
        try:
            values = _parse(time, tokens)
        except ValueError:
            return cls()
        return cls(0, values["hour"], values["minute"], values["second"], values["msec"])

    def is_null(self) -> bool:
        """True when hour, minute, second and millisecond are all zero."""
        return self.hour == 0 and self.minute == 0 and self.second == 0 and self.msecond == 0

    def is_valid(self) -> bool:
        return not self.is_null()

    def set_value(self, day: int, hour: int, minute: int, second: int, msecond: int = 0) -> None:
        """Set all parts at once; out-of-range values leave the time unchanged."""
        if (day < 0 or not 0 <= hour <= 24 or not 0 <= minute <= 60
                or not 0 <= second <= 60 or not 0 <= msecond <= 1000):
            return
        self.day = day
        self.hour = hour
        self.minute = minute
        self.second = second
        self.msecond = msecond

    def set_msecs(self, value: int) -> None:
        """Split a total in milliseconds into parts; negative totals are ignored."""
        if value < 0:
            return
        value, self.msecond = divmod(value, _S2MS)
        self.day, value = divmod(value, _D2S)
        self.hour, value = divmod(value, _H2S)
        self.minute, self.second = divmod(value, _M2S)

    def to_msecs(self) -> int:
        return ((self.day * _D2S + self.hour * _H2S + self.minute * _M2S + self.second)
                * _S2MS + self.msecond)

    def to_string(self, format: str) -> str:
        """Format the clock part of the time; an out-of-range clock gives ``""``."""
        if not (0 <= self.hour < 24 and 0 <= self.minute < 60
                and 0 <= self.second < 60 and 0 <= self.msecond < 1000):
            return ""
        fields = {
            "year": 0, "month": 1, "day": 1, "weekday": 0,
            "hour": self.hour, "minute": self.minute,
            "second": self.second, "msec": self.msecond,
        }
        return _render(_tokenize(format, with_date=False, with_time=True), fields)

    @staticmethod
    def _msecs_of(other: Time | int) -> int:
        if isinstance(other, Time):
            return other.to_msecs()
        if isinstance(other, int):
            return other
        raise TypeError(f"unsupported operand type: {type(other).__name__}")

    def __add__(self, other: Time | int) -> Time:
        if not isinstance(other, (Time, int)):
            return NotImplemented
        return Time.from_msecs(self.to_msecs() + self._msecs_of(other))

    def __sub__(self, other: Time | int) -> Time:
        if not isinstance(other, (Time, int)):
            return NotImplemented
        return Time.from_msecs(self.to_msecs() - self._msecs_of(other))

    def __mul__(self, other: int) -> Time:
        if not isinstance(other, int):
            return NotImplemented
        return Time.from_msecs(self.to_msecs() * other)

    def __floordiv__(self, other: int) -> Time:
        if not isinstance(other, int):
            return NotImplemented
        return Time.from_msecs(self.to_msecs() // other)

    def __iadd__(self, other: Time | int) -> Time:
        self.set_msecs(self.to_msecs() + self._msecs_of(other))
        return self

    def __isub__(self, other: Time | int) -> Time:
        self.set_msecs(self.to_msecs() - self._msecs_of(other))
        return self

    def __imul__(self, other: int) -> Time:
        self.set_msecs(self.to_msecs() * other)
        return self

    def __ifloordiv__(self, other: int) -> Time:
        self.set_msecs(self.to_msecs() // other)
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self.to_msecs() == other.to_msecs()

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return (f"Time(day={self.day}, hour={self.hour}, minute={self.minute}, "
                f"second={self.second}, msecond={self.msecond})")


def msecs_to_string(time: int, format: str) -> str:
    """Format a total in milliseconds with a time format."""
    return Time.from_msecs(time).to_string(format)


def parse_duration(text: str) -> int:
    """Turn ``mm:ss`` text into milliseconds."""
    return Time.from_string(text, "mm:ss").to_msecs()


def format_duration(msecs: int) -> str:
    """Turn milliseconds into ``mm:ss``; minutes keep counting past one hour."""
    t = Time.from_msecs(msecs)
    if msecs < _H2MS:
        return t.to_string("mm:ss")
    minutes = t.day * _D2M + t.hour * _H2M + t.minute
    return f"{minutes:02d}:{t.second:02d}"


def current_timestamp() -> int:
    """Milliseconds since the epoch."""
    return _time.time_ns() // 1_000_000


def timestamp_from_string(time: str, format: str) -> str:
    """Parse local date-time text and return its epoch milliseconds as a string."""
    values = _parse(time, _tokenize(format, with_date=True, with_time=True))
    moment = datetime(values["year"], values["month"], values["day"],
                      values["hour"], values["minute"], values["second"])
    return str(int(moment.timestamp()) * _S2MS + values["msec"])


def timestamp_to_string(time: int, format: str) -> str:
    """Format epoch milliseconds as local date-time text."""
    seconds, msec = divmod(time, _S2MS)
    moment = datetime.fromtimestamp(seconds)
    fields = {
        "year": moment.year, "month": moment.month, "day": moment.day,
        "weekday": moment.weekday(), "hour": moment.hour, "minute": moment.minute,
        "second": moment.second, "msec": msec,
    }
    return _render(_tokenize(format, with_date=True, with_time=True), fields)


_rng = random.Random()


def init_random() -> None:
    """Seed the random generator from the current time."""
    _rng.seed(current_timestamp())


def random_int(value: int = RAND_MAX) -> int:
    """Return a random integer in ``[0, value)``."""
    if value <= 0:
        raise ValueError("upper bound must be positive")
    return _rng.randrange(value)