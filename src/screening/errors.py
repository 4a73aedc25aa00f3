"""Error kinds surfaced by the screening pipeline.

All errors are terminal for the current invocation; callers decide how to
message them and whether to retry with corrected input. Numeric coercion
failures are never errors (see `screening.coerce`).
"""

from __future__ import annotations


class ScreeningError(RuntimeError):
    """Base class for pipeline failures."""

    pass


class EmptySheetError(ScreeningError):
    """Raised when a required table has no rows at all."""

    pass


class MissingWorksheetError(ScreeningError):
    """Raised when no usable worksheet was found in a lookup workbook."""

    def __init__(self, source: str, target: str | None = None):
        self.source = source
        self.target = target
        detail = f" named like '{target}'" if target else ""
        super().__init__(
            f"Could not find a usable worksheet in the {source} file. Please ensure it "
            f"contains a sheet{detail} or that the data is in the first sheet."
        )


class MissingColumnError(ScreeningError):
    """Raised when a derived column (e.g. Dup_VLOOKUP) is absent from the header."""

    def __init__(self, column: str):
        self.column = column
        super().__init__(f"'{column}' column not found. Cannot perform filtering.")
