"""Logging setup.

The rest of the code gets the logger through this module rather than
``logging.getLogger`` to make sure that it is configured.

Logging levels are used for specific purposes:

- warnings are used for input the caller should know about, including
  invalid selectors and unknown options;
- debug messages are used for skipped declarations and dropped tokens, as
  malformed blocks are supposed to degrade silently.

"""

import contextlib
import logging

LOGGER = logging.getLogger('cssruleset')
if not LOGGER.handlers:  # pragma: no cover
    LOGGER.setLevel(logging.WARNING)
    LOGGER.addHandler(logging.NullHandler())


class MessagesHandler(logging.Handler):
    """A logging handler keeping ``'LEVEL: message'`` strings in a list."""
    def __init__(self, level=logging.NOTSET):
        super().__init__(level)
        self.messages = []

    def emit(self, record):
        self.messages.append(f'{record.levelname}: {record.getMessage()}')


@contextlib.contextmanager
def capture_logs(level=logging.INFO):
    """Capture the messages of :data:`LOGGER` in a list.

    Messages below ``level`` are not kept: skipped declarations and dropped
    shorthand words are only captured with ``level=logging.DEBUG``. Handlers
    and level of the logger are restored on exit.

    """
    handler = MessagesHandler(level)
    previous_handlers, previous_level = LOGGER.handlers, LOGGER.level
    LOGGER.handlers = [handler]
    LOGGER.setLevel(logging.DEBUG)
    try:
        yield handler.messages
    finally:
        LOGGER.handlers = previous_handlers
        LOGGER.setLevel(previous_level)
