# ttkcommon

This package collects general-purpose helpers. It uses only the standard library.

## Modules

- `ttkcommon.compat`
  - `strlcpy(src, size)` copies `src` into a buffer of `size` units.
  - `strlcat(dst, src, size)` appends `src` to `dst`, where `size` is the full size of the buffer.
  - Both functions accept `str` or `bytes`.
  - Both return `(content, length)`. `length` is the length of the string the call tried to create, so a value `>= size` means the result was truncated.
  - A NUL ends a string.

- `ttkcommon.superenum`
  - `SuperEnum(spec)` builds a key/name table from a spec such as `"A, B = 5, C"`. Values may be decimal or `0x` hexadecimal.
  - `key_to_string` returns `"Null"` for -1 and `"Invalid"` for an unknown key.
  - `string_to_key` returns -1 for `"Null"` or for an unknown name.
  - `super_enum(name, spec)` creates a `SuperEnumValue` subclass. The class has one integer constant per name, and its values convert to and from names.

- `ttkcommon.ttktime`
  - `Time(day, hour, minute, second, msecond)` holds a time span. Parts that are out of range are ignored.
  - Constructors: `Time.from_msecs` and `Time.from_string`. `from_string` returns a null time when the text does not match the format.
  - Methods: `to_msecs`, `to_string`, `set_value`, `set_msecs`, `is_null` and `is_valid`.
  - Arithmetic: `+`, `-` with another `Time` or an int, and `*`, `//` with an int.
  - Formats use Qt-style patterns such as `hh:mm:ss.zzz` and `mm:ss`.
  - Helpers:
    - `msecs_to_string`
    - `parse_duration`
    - `format_duration`: minutes keep counting past an hour.
    - `current_timestamp`
    - `timestamp_from_string`
    - `timestamp_to_string`
    - `init_random`
    - `random_int`

- `ttkcommon.int128`
  - `Int128` and `UInt128` are fixed-width 128-bit integers. Arithmetic wraps modulo 2**128.
  - `/` and `//` truncate toward zero, and `%` keeps the sign of the dividend.
  - A shift count uses only its low seven bits.
  - Other members:
    - `from_parts(high, low)` builds a value from its two 64-bit halves.
    - `high` and `low` give those halves.
    - `MIN` and `MAX` are the limits of each type.
  - `count_leading_zeros(value)` counts the leading zero bits of a value.
  - `parse_int128` and `parse_uint128` read decimal, `0` octal, `0x` hex and `0b` binary literals.

- `ttkcommon.int128format`
  - `format_int128(value, base, showbase, showpos, uppercase, width, fill, adjust, grouping, thousands_sep)` renders a value in base 8, 10 or 16.
  - It supports padding, digit grouping and `Adjust.LEFT` / `RIGHT` / `INTERNAL`.

- `ttkcommon.dispatch`
  - `DispatchManager` queues `DispatchItem`s and handles one per interval on a background thread, newest first.
  - Control the thread with `start` / `stop`, or use the manager as a context manager.
  - `active_functions()` handles one item by hand.
  - `DispatchModule.FILE_REMOVE` removes a file. A failed item is retried until it has failed more than `MAX_RETRIES` (5) times.
  - `DispatchManager.instance()` returns a shared running manager.

- `ttkcommon.logoutput`
  - `LogOutputHandler(directory, max_size)` is a `logging.Handler`. It writes to `<directory>/<YYYY-MM-DD>_<n>.log` and moves to a new file when the current one reaches `max_size` bytes (5 MiB by default) or when the date changes.
  - `install_log_handler` attaches the handler to the root logger, and `remove_log_handler` detaches it.

- `ttkcommon.platformsystem`
  - `system_name()` returns a `System` member for the running operating system. On Linux it reads `/etc/lsb-release`. `parse_lsb_release(text)` parses content of that kind.
  - `logical_dots_per_inch_x`, `logical_dots_per_inch_y` and `logical_dots_per_inch` read the screen's DPI through tkinter. They return 96 when that is not possible.

- `ttkcommon.runobject`
  - `RunObject(app_file_name, version, service_name)` starts `<launcher dir>/<version>/<service_name>` with the given arguments, quoted.
  - Arguments that end with `app_file_name` are dropped.
  - `build_arguments` and `service_path` show what would be run.

## Examples

```python
from ttkcommon.compat import strlcpy
from ttkcommon.superenum import SuperEnum
from ttkcommon.ttktime import format_duration
from ttkcommon.int128 import UInt128

text, needed = strlcpy("hello", 3)         # ("he", 5)

colors = SuperEnum("Red, Green = 0x10, Blue")
colors.key_to_string(17)                   # "Blue"
colors.string_to_key("Green")              # 16

format_duration(125_000)                   # "02:05"

int(UInt128(0) - UInt128(1)) == 2**128 - 1 # True
```

## What it does not do

This is a library only:

- It has no command-line entry point and no windowed interface.
- The dispatch manager knows one kind of work, removing files.
- `RunObject` only starts a service executable that is already in place. It does not provide that executable.

Tests use pytest; install the `test` extra to get it.