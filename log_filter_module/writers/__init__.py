"""Writers module - sinks for accepted log events"""

from log_filter_module.writers.console_writer import ConsoleWriter

__all__ = ["ConsoleWriter"]
