"""
errors.py — Input Errors
========================
The one user-facing error channel.  Anything raised from here aborts a
run before a single frame is drawn; the web layer turns it into an
alert.

    InputError
      ├── ParseError       – text is not in the expected format
      └── ValidationError  – text parses but makes no sense for the algorithm

A graph that fails Fleury's odd-degree check is NOT an error — that is a
legitimate outcome and goes through the output log instead.
"""


class InputError(Exception):
    """Base class.  `alert` is the short message shown to the user."""

    alert: str = "invalid data"

    def __init__(self, detail: str, alert: str = None):
        super().__init__(detail)
        self.detail = detail
        if alert is not None:
            self.alert = alert


class ParseError(InputError):
    pass


class ValidationError(InputError):
    pass
