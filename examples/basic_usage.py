#!/usr/bin/env python3
"""Basic usage example"""

from log_filter_module import LoggerBuilder, LogLevel, NDC, MDC, Properties
from log_filter_module.filters import (
    DenyAllFilter,
    LogLevelRangeFilter,
    MDCMatchFilter,
    StringMatchFilter,
)

CONFIG = """
Name = configured
Level = DEBUG
filters.1 = StringMatchFilter
filters.1.StringToMatch = heartbeat
filters.1.AcceptOnMatch = false
filters.2 = LogLevelRangeFilter
filters.2.LogLevelMin = INFO
"""

def main():
    # Build the chain in code
    logger = (LoggerBuilder()
        .with_name("example")
        .with_level(LogLevel.DEBUG)
        .with_console()
        .with_filter(StringMatchFilter(string_to_match="heartbeat", accept_on_match=False))
        .with_filter(MDCMatchFilter(mdc_key_to_match="tenant", mdc_value_to_match="acme"))
        .with_filter(LogLevelRangeFilter(log_level_min=LogLevel.WARN))
        .with_filter(DenyAllFilter())
        .build())

    logger.debug("Dropped: below WARN")
    logger.warn("Kept: WARN and above")
    logger.error("Dropped: heartbeat failed")

    with MDC.scope("tenant", "acme"), NDC.scope("request-17"):
        logger.debug("Kept: tenant acme")

    # Or from properties
    configured = LoggerBuilder().with_properties(Properties.from_string(CONFIG)).with_console().build()
    configured.debug("Dropped: below INFO")
    configured.info("Kept")
    configured.info("Dropped: heartbeat")

    print(logger.get_metrics(), configured.get_metrics())

if __name__ == "__main__":
    main()
