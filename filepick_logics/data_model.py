from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

import pandas as pd


PREVIEW_ROWS = 6                                  # Data rows parsed for the preview
AUTO_ADDED_HEADER = "Auto_Added_Header"           # Injected when the label column has no header


class FileLocation(str, Enum):
    """Where a file may be picked from."""

    LOCAL = "Local"
    SERVER = "Server"
    BOTH = "Both"


class DataType(str, Enum):
    TABLE = "Table"
    MATRIX = "Matrix"

    @property
    def label(self):
        return DATA_TYPE_LABELS[self]


DATA_TYPE_LABELS = {
    DataType.TABLE: "Table (can contain string values)",
    DataType.MATRIX: "Matrix (numeric values only)",
}


class Separator(str, Enum):
    TAB = "Tab"
    COMMA = "Comma"

    @property
    def char(self):
        return "\t" if self is Separator.TAB else ","


class ImportState(Enum):
    NO_FILE = "no file"
    FILE_SELECTED_NO_PREVIEW = "file selected"
    PREVIEW_READY = "preview ready"
    IMPORTING = "importing"
    IMPORTED = "imported"
    IMPORT_FAILED = "import failed"


@dataclass(frozen=True)
class SelectedFile:
    """
    A file (or folder) picked by the user.

    Local picks carry the path chosen in the open dialog; server picks also
    remember the root alias and the path relative to that root.
    """

    path: str
    name: str
    size: Optional[int]
    origin: FileLocation
    root: Optional[str] = None
    relative: Optional[str] = None


@dataclass(frozen=True)
class ImportConfig:
    data_type: DataType = DataType.TABLE
    has_header: bool = True
    separator: Separator = Separator.TAB


@dataclass
class ImportResult:
    """Outcome of one confirmed import."""

    data: pd.DataFrame
    type: DataType
    name: str
    size: Tuple[int, int]
