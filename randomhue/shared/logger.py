#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: randomhue/shared/logger.py

import sys
import argparse

from randomhue.core import config as c


def log(level: str, message: str) -> None:
    level = str(level).lower()
    stream = sys.stdout if level in ["info", "success"] else sys.stderr
    tag_color = c.MSG_BOLD_COLORS.get(level, c.RESET)
    msg_color = c.MSG_COLORS.get(level, c.RESET)
    print(f"{tag_color}[{level}]{c.RESET} {msg_color}{message}{c.RESET}", file=stream)


class NullSink:
    """Discards trace entries."""

    def debug(self, message: str, *context) -> None:
        pass


class ConsoleSink:
    """Writes trace entries to stderr, context values after the message."""

    def __init__(self, stream=None):
        self.stream = stream

    def debug(self, message: str, *context) -> None:
        stream = self.stream if self.stream is not None else sys.stderr
        extra = " ".join(repr(item) for item in context)
        line = f"{message} {extra}" if extra else message
        print(f"{c.MSG_COLORS['debug']}{line}{c.RESET}", file=stream)


class RandomHueArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        """
        Overrides the default error method to use our color-coded logger,
        then exits the program with the standard CLI error code 2.
        """
        log('error', message)
        sys.exit(2)
