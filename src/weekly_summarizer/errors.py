"""
Exceptions raised by the weekly summarizer.

Every failure a run can hit is a subclass of WeeklySummarizerError, so
main() can catch them all in one place and print a single message.

Taxonomy:
- ConfigurationError: no API key set (raised before any I/O)
- NoDataError:        no daily notes in the window (raised before the API call)
- StoreError:         reading/writing the vault failed
- ServiceError:       the Claude API call failed
- RunInProgressError: another run holds the vault lock
"""


class WeeklySummarizerError(Exception):
    """Base class for all errors surfaced to the user."""


class ConfigurationError(WeeklySummarizerError):
    """Settings are missing something a run needs (usually the API key)."""


class NoDataError(WeeklySummarizerError):
    """No non-empty daily notes were found in the window."""


class StoreError(WeeklySummarizerError):
    """A vault read, write, list or stat failed."""


class NotFoundError(StoreError):
    """The requested path does not exist in the vault."""


class FolderExistsError(StoreError):
    """create_folder() was called for a folder that already exists."""


class NoteExistsError(StoreError):
    """The weekly note already exists and overwriting is disabled."""


class ServiceError(WeeklySummarizerError):
    """The remote summarization call failed (auth, network, bad response)."""


class RunInProgressError(WeeklySummarizerError):
    """Another run is already working on this vault."""
