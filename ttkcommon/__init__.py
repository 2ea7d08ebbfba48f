"""General helpers: bounded string copies, spec-defined enums, time values, 128-bit integers and their formatting, deferred dispatch, dated log files, platform detection and a service launcher."""

__version__ = "2.8.0"