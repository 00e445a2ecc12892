import tkinter as tk
from tkinter import ttk

from filepick_logics.data_model import DATA_TYPE_LABELS, ImportState, Separator
from filepick_UIs.file_select_widget import FileSelectWidget
from filepick_UIs.progress_dialog import ProgressDialog
from filepick_UIs.widgets import PreviewTable


class FileImportWidget(ttk.Frame):
    """
    Select a file, choose how to parse it, preview it and import it.

    The preview follows every change of file or option. The Import button is
    only enabled while the preview is valid and no import is running.

    Args:
        parent: Parent widget.
        importer: FileImporter holding the state.
        label: Optional descriptive label for the file selector.
    """

    def __init__(self, parent, importer, label=None):
        super().__init__(parent)
        self.importer = importer

        self._build_ui(label)
        self._render(importer.state)

        importer.on_state_change(self._render)

    def _build_ui(self, label):
        FileSelectWidget(self, self.importer.selection, label=label).pack(fill='x', anchor='w')

        # Data type
        type_frame = ttk.Frame(self)
        type_frame.pack(fill='x', pady=4)
        tk.Label(type_frame, text="Import as").pack(side='left')
        self._label_to_type = {v: k for k, v in DATA_TYPE_LABELS.items()}
        self._type_combo = ttk.Combobox(
            type_frame, values=list(DATA_TYPE_LABELS.values()), state='readonly', width=35
        )
        self._type_combo.set(self.importer.config.data_type.label)
        self._type_combo.pack(side='left', padx=5)
        self._type_combo.bind('<<ComboboxSelected>>', self._on_type_selected)
        if not self.importer.data_type_editable:
            self._type_combo.configure(state='disabled')

        # Header
        self._header_var = tk.BooleanVar(value=self.importer.config.has_header)
        ttk.Checkbutton(
            self,
            text="Data has column headers",
            variable=self._header_var,
            command=self._on_header_toggled,
        ).pack(anchor='w', pady=2)
        self._header_notice = tk.Label(
            self,
            text="Column headers will be cleaned (lower case, '_' between words)",
            fg="#9F6000",
        )

        # Separator
        self._sep_frame = ttk.Frame(self)
        self._sep_frame.pack(fill='x', pady=4)
        tk.Label(self._sep_frame, text="File Separator").pack(side='left')
        self._sep_combo = ttk.Combobox(
            self._sep_frame, values=[s.value for s in Separator], state='readonly', width=10
        )
        self._sep_combo.set(self.importer.config.separator.value)
        self._sep_combo.pack(side='left', padx=5)
        self._sep_combo.bind('<<ComboboxSelected>>', self._on_separator_selected)

        self._preview = PreviewTable(self, title="Preview")

        self._status_label = tk.Label(self, text="", fg="#B00020", wraplength=500, justify='left')
        self._status_label.pack(anchor='w', pady=4)

        self._import_button = ttk.Button(self, text="Import", command=self._on_import_clicked)
        self._import_button.pack(anchor='w', pady=6)

    # ── Option callbacks ──────────────────────────────────────

    def _on_type_selected(self, _event=None):
        self.importer.set_data_type(self._label_to_type[self._type_combo.get()])

    def _on_header_toggled(self):
        self.importer.set_has_header(self._header_var.get())

    def _on_separator_selected(self, _event=None):
        self.importer.set_separator(self._sep_combo.get())

    # ── Import ────────────────────────────────────────────────

    def _on_import_clicked(self):
        request = self.importer.start_import()
        if request is None:
            return
        ProgressDialog(self.winfo_toplevel(), "Importing file").run(
            lambda progress_cb: self.importer.read_full(request, progress_cb),
            on_success=lambda data: self.importer.finish_import(request, data=data),
            on_error=lambda err: self.importer.finish_import(request, error=err),
        )

    # ── Rendering ─────────────────────────────────────────────

    def _render(self, state):
        if self._header_var.get():
            self._header_notice.pack(anchor='w', before=self._sep_frame)
        else:
            self._header_notice.pack_forget()

        if state is ImportState.NO_FILE:
            self._preview.pack_forget()
        else:
            self._preview.pack(fill='both', expand=True, pady=4, before=self._status_label)
        self._preview.show(self.importer.preview)

        color = "#1B5E20" if state is ImportState.IMPORTED else "#B00020"
        self._status_label.config(text=self.importer.status, fg=color)
        self._import_button.state(['!disabled'] if self.importer.can_import else ['disabled'])
