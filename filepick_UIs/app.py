import tkinter as tk
from tkinter import ttk, scrolledtext

from filepick_logics.data_model import DataType, FileLocation
from filepick_logics.file_select import FileSelection
from filepick_logics.importer import FileImporter

from filepick_UIs.file_import_widget import FileImportWidget
from filepick_UIs.file_select_widget import FileSelectWidget


class ImportDemoApp:
    """Demo window: a file import widget and a folder picker, with a debug pane."""

    def __init__(self, root, *, location=FileLocation.BOTH, server_roots=None,
                 data_type=DataType.TABLE, data_type_editable=True, max_rows=None):
        self.root = root
        self.root.title("File import widgets")
        self.root.geometry("760x820")

        selection = FileSelection(location, server_roots)
        self.importer = FileImporter(
            selection,
            data_type=data_type,
            data_type_editable=data_type_editable,
            max_rows=max_rows,
        )
        self.folder_selection = FileSelection(location, server_roots, kind='folder')

        self._build_ui()

        selection.on_change(lambda selected: self._log(f"Selected file: {selected}"))
        self.folder_selection.on_change(lambda selected: self._log(f"Selected folder: {selected}"))
        self.importer.on_result(self._on_imported)

    def _build_ui(self):
        notebook = ttk.Notebook(self.root)
        notebook.pack(fill='both', expand=True, padx=10, pady=10)

        import_tab = ttk.Frame(notebook, padding=10)
        FileImportWidget(import_tab, self.importer, label="Data file").pack(fill='both', expand=True)
        notebook.add(import_tab, text="Import")

        folder_tab = ttk.Frame(notebook, padding=10)
        FileSelectWidget(folder_tab, self.folder_selection, label="Output folder").pack(fill='x')
        notebook.add(folder_tab, text="Folder")

        tk.Label(self.root, text="Debug").pack(anchor='w', padx=10)
        self._debug = scrolledtext.ScrolledText(self.root, height=10, state='disabled')
        self._debug.pack(fill='both', padx=10, pady=(0, 10))

    # ── Callbacks ─────────────────────────────────────────────

    def _on_imported(self, result):
        self._log(
            f"Imported '{result.name}' as {result.type.value}, size={result.size}\n"
            f"{result.data.head()}"
        )

    def _log(self, text):
        self._debug.configure(state='normal')
        self._debug.insert(tk.END, text + "\n")
        self._debug.see(tk.END)
        self._debug.configure(state='disabled')
