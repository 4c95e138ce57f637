"""Demo entry point: sends sample log records through the splitting syslog handler."""

import argparse
import dataclasses
import logging
import random
import sys

from syslog_splitter.config import load_config, load_yaml_config
from syslog_splitter.handler import SplittingSysLogHandler
from syslog_splitter.layout import SimpleLayout

SAMPLE_MESSAGES = [
    "Application started successfully",
    "Processing user request",
    "Database query completed",
    "Cache miss for key: user_session",
    "Failed to connect to external API",
    "Disk usage above 90%",
]


def main(argv=None):
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        stream=sys.stderr,
    )

    parser = argparse.ArgumentParser(description="Send sample logs to a syslog server")
    parser.add_argument("--config", default=None, help="YAML config file (defaults to $CONFIG_PATH)")
    parser.add_argument("--host", default=None, help="Syslog host")
    parser.add_argument("--port", type=int, default=None, help="Syslog port")
    parser.add_argument("--protocol", choices=("udp", "tcp"), default=None)
    parser.add_argument("--count", type=int, default=5, help="Number of sample logs to send")
    parser.add_argument("--long-length", type=int, default=3000,
                        help="Length of the oversized message that gets split")
    args = parser.parse_args(argv)

    config = load_config(load_yaml_config(args.config))
    overrides = {k: v for k, v in (("host", args.host), ("port", args.port),
                                    ("protocol", args.protocol)) if v is not None}
    if overrides:
        config = dataclasses.replace(config, **overrides)

    handler = SplittingSysLogHandler.from_config(
        config, layout=SimpleLayout(header="--- demo session start ---",
                                    footer="--- demo session end ---"))
    demo = logging.getLogger("demo")
    demo.propagate = False
    demo.setLevel(logging.DEBUG)
    demo.addHandler(handler)

    log = logging.getLogger(__name__)
    log.info("Sending to %s:%d over %s", config.host, config.port, config.protocol)
    try:
        for _ in range(args.count):
            demo.info(random.choice(SAMPLE_MESSAGES))
        demo.warning("Oversized payload: %s", "x" * args.long_length)
        try:
            raise RuntimeError("sample failure")
        except RuntimeError:
            demo.exception("Request handling failed")
    finally:
        demo.removeHandler(handler)
        handler.close()
    log.info("Done")


if __name__ == "__main__":
    main()
