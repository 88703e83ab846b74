"""Command-line flags configuring log level and format."""

from __future__ import annotations

import argparse

from promkit.promlog import AllowedFormat, AllowedLevel, Config

LEVEL_FLAG_NAME = "log.level"
LEVEL_FLAG_HELP = (
    "Only log messages with the given severity or above. One of: [debug, info, warn, error]"
)
FORMAT_FLAG_NAME = "log.format"
FORMAT_FLAG_HELP = "Output format of log messages. One of: [logfmt, json]"


def _setter(config: Config, attr: str) -> type[argparse.Action]:
    class _SetAction(argparse.Action):
        def __call__(self, parser, namespace, values, option_string=None):
            target = getattr(config, attr)
            try:
                target.set(values)
            except ValueError as err:
                raise argparse.ArgumentError(self, str(err)) from err
            setattr(namespace, self.dest, target)

    return _SetAction


def add_flags(parser: argparse.ArgumentParser, config: Config) -> None:
    """Add --log.level and --log.format to ``parser``, storing into ``config``."""
    config.level = AllowedLevel("info")
    parser.add_argument(
        "--" + LEVEL_FLAG_NAME,
        dest="log_level",
        default=config.level,
        help=LEVEL_FLAG_HELP,
        action=_setter(config, "level"),
    )
    config.format = AllowedFormat("logfmt")
    parser.add_argument(
        "--" + FORMAT_FLAG_NAME,
        dest="log_format",
        default=config.format,
        help=FORMAT_FLAG_HELP,
        action=_setter(config, "format"),
    )