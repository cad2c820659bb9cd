"""Console writer"""

import sys
from log_filter_module.core.log_event import LoggingEvent


class ConsoleWriter:
    """Write accepted events to a text stream, one line each."""

    def __init__(self, stream=None):
        """
        Initialize console writer.

        Args:
            stream: Output stream (default: sys.stderr)
        """
        self.stream = stream or sys.stderr

    def write(self, event: LoggingEvent):
        """Write log event to the stream."""
        line = str(event)
        if event.ndc:
            line = f"{line} <{event.ndc}>"
        self.stream.write(line + "\n")

    def flush(self):
        """Flush stream."""
        self.stream.flush()
