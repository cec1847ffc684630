"""Custom exception hierarchy for treescan.

All application-specific exceptions inherit from TreeScanError,
allowing callers to catch broad or narrow as needed.
"""


class TreeScanError(Exception):
    """Base exception for all treescan errors."""


class DirectoryListError(TreeScanError, OSError):
    """A directory could not be listed during the walk (fatal in strict mode)."""


class ScanRootError(DirectoryListError):
    """The scan root is missing, not a directory, or cannot be listed."""


class ScanConfigError(TreeScanError, ValueError):
    """Invalid scan options (chunk size, worker count)."""


class AccumulatorFinalizedError(TreeScanError, RuntimeError):
    """A digest accumulator set was used after it was finalized."""


class ReportWriteError(TreeScanError):
    """The output document could not be written to its destination."""
