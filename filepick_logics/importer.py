import os
import traceback
from dataclasses import dataclass, replace
from typing import Optional

from filepick_logics.data_model import (
    PREVIEW_ROWS,
    DataType,
    ImportConfig,
    ImportResult,
    ImportState,
    SelectedFile,
    Separator,
)
from filepick_logics.errors import FilePickError, ImportValidationError
from filepick_logics.file_handler import read_table


@dataclass(frozen=True)
class ImportRequest:
    """File and options captured when the user pressed Import."""

    file: SelectedFile
    config: ImportConfig
    max_rows: Optional[int] = None


class FileImporter:
    """
    State machine behind the file import widget.

    Flow:
        NO_FILE -> FILE_SELECTED_NO_PREVIEW   a file is picked
        -> PREVIEW_READY                      the 6-row preview parses
        -> IMPORTING                          the user confirms
        -> IMPORTED | IMPORT_FAILED           full read finished

    Changing the file or any option recomputes the preview straight away. The
    full import only happens on start_import()/run_import(). `result` keeps
    the last successful import until another one succeeds.

    Args:
        selection: FileSelection providing the picked file.
        data_type: initial DataType.
        data_type_editable: whether the user may change the data type.
        max_rows: import at most this many data rows (None = all).
    """

    def __init__(self, selection, data_type=DataType.TABLE, data_type_editable=True, max_rows=None):
        if max_rows is not None and max_rows < 1:
            raise ValueError("max_rows must be a positive number of rows")
        self.selection = selection
        self.data_type_editable = data_type_editable
        self.max_rows = max_rows
        self.config = ImportConfig(data_type=DataType(data_type))

        self.state = ImportState.NO_FILE
        self.preview = None                         # DataFrame of at most PREVIEW_ROWS rows
        self.status = ""                            # Message shown under the preview
        self.result = None                          # Last successful ImportResult
        self.importing = False

        self._state_callbacks = []
        self._result_callbacks = []

        selection.on_change(lambda _selected: self.refresh_preview())
        self.refresh_preview()

    # ── Options ───────────────────────────────────────────────

    def set_has_header(self, has_header):
        self._update_config(has_header=bool(has_header))

    def set_separator(self, separator):
        self._update_config(separator=Separator(separator))

    def set_data_type(self, data_type):
        if not self.data_type_editable:
            print(f"[IMPORT] Data type is fixed to {self.config.data_type.value}")
            return
        self._update_config(data_type=DataType(data_type))

    def _update_config(self, **changes):
        config = replace(self.config, **changes)
        if config == self.config:
            return
        self.config = config
        self.refresh_preview()

    # ── Preview ───────────────────────────────────────────────

    @property
    def can_import(self):
        return self.preview is not None and not self.importing

    def refresh_preview(self):
        """Re-read the first rows of the selected file under the current options."""
        selected = self.selection.selected
        self.preview = None
        if selected is None:
            self.status = ""
            self._set_state(ImportState.NO_FILE)
            return

        self.status = ""
        self._set_state(ImportState.FILE_SELECTED_NO_PREVIEW)
        try:
            self.preview = read_table(selected.path, self.config, max_rows=PREVIEW_ROWS)
        except (ImportValidationError, OSError) as e:
            self.status = str(e)
            print(f"[IMPORT] Preview of {selected.name} failed: {e}")
            self._notify_state()
            return
        self._set_state(ImportState.PREVIEW_READY)

    # ── Import ────────────────────────────────────────────────

    def start_import(self):
        """
        Capture the file and options for a full import and enter IMPORTING.

        Returns:
            ImportRequest, or None when importing is not possible right now.
        """
        if not self.can_import:
            return None
        request = ImportRequest(self.selection.selected, self.config, self.max_rows)
        self.importing = True
        self.status = ""
        print(f"[IMPORT] Importing {request.file.name} as {request.config.data_type.value}")
        self._set_state(ImportState.IMPORTING)
        return request

    @staticmethod
    def read_full(request, progress_callback=None):
        """Read the whole file for a request. Safe to call off the UI thread."""
        return read_table(
            request.file.path,
            request.config,
            max_rows=request.max_rows,
            progress_callback=progress_callback,
        )

    def finish_import(self, request, data=None, error=None):
        """Record the outcome of read_full() and leave IMPORTING."""
        self.importing = False
        if error is not None:
            self.status = str(error)
            print(f"[IMPORT] Import of {request.file.name} failed: {error}")
            self._set_state(ImportState.IMPORT_FAILED)
            return None

        self.result = ImportResult(
            data=data,
            type=request.config.data_type,
            name=os.path.splitext(request.file.name)[0],
            size=data.shape,
        )
        self.status = f"Imported {data.shape[0]} rows and {data.shape[1]} columns"
        print(f"[IMPORT] {self.result.name}: {self.result.size}")
        self._set_state(ImportState.IMPORTED)
        for callback in list(self._result_callbacks):
            callback(self.result)
        return self.result

    def run_import(self, progress_callback=None):
        """
        Run a full import synchronously.

        Returns:
            The new ImportResult, or None when the import failed or was not possible.
        """
        request = self.start_import()
        if request is None:
            return None
        try:
            data = self.read_full(request, progress_callback)
        except (FilePickError, OSError) as e:
            return self.finish_import(request, error=e)
        except Exception as e:
            traceback.print_exc()
            self.finish_import(request, error=e)
            raise
        return self.finish_import(request, data=data)

    # ── Observers ─────────────────────────────────────────────

    def on_state_change(self, callback):
        """Register callback(state) called after every state or status change."""
        self._state_callbacks.append(callback)

    def on_result(self, callback):
        """Register callback(ImportResult) called after each successful import."""
        self._result_callbacks.append(callback)

    def _set_state(self, state):
        self.state = state
        self._notify_state()

    def _notify_state(self):
        for callback in list(self._state_callbacks):
            callback(self.state)
