"""
Exception types raised inside the parsers.

These never escape the public operations: the retrieval layer converts
them into failure results carrying a direct link to the source.
"""


class LegislationError(Exception):
    """Base class for structuring failures."""


class OutlineParseError(LegislationError):
    """The outline document did not contain a Contents root."""


class FragmentParseError(LegislationError):
    """A provision fragment did not contain a Body or Schedules root."""


class MissingDocumentUriError(LegislationError):
    """A TOC node has no resolvable document URI."""
