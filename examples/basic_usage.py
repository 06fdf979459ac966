#!/usr/bin/env python3
"""Basic usage example"""

from phyros_logging import LogEntry, LoggingConfig, add_phyros_logger


def main():
    # Register the process-wide pipeline with a console provider
    writer = add_phyros_logger(
        lambda builder: builder.use_console(LoggingConfig.debug_config())
    )

    writer.log(LogEntry.debug("Debug details {step}", "init"))
    writer.log(
        LogEntry.information("User {id} logged in", 42)
        .add_property("tenant", "acme")
        .add_properties({"roles": ["admin", "ops"]})
    )
    writer.warning("Disk usage at {percent}%", 91, mount="/var")

    try:
        raise ValueError("unexpected input")
    except ValueError as e:
        writer.log(LogEntry.error("Failed to parse {file}", e, "orders.csv"))

    # Shutdown releases the provider
    writer.shutdown()


if __name__ == "__main__":
    main()
