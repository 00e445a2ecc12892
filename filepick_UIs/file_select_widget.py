import tkinter as tk
from tkinter import ttk, filedialog, messagebox

from filepick_logics.data_model import FileLocation
from filepick_logics.errors import FilePickError
from filepick_UIs.server_file_dialog import ServerFileDialog


class FileSelectWidget(ttk.Frame):
    """
    Pick a file (or folder) either on this machine or under a server directory.

    The Server/Local radio buttons only appear when both origins are allowed.
    Switching origin hides the other row instead of destroying it, so the
    previous pick of each origin stays visible when switching back.

    Args:
        parent: Parent widget.
        selection: FileSelection holding the state.
        label: Optional descriptive label shown above the controls.
        filetypes: filetypes for the local open dialog.
    """

    def __init__(self, parent, selection, label=None, filetypes=None):
        super().__init__(parent)
        self.selection = selection
        self._filetypes = filetypes or [("Delimited text", "*.csv *.tsv *.txt"), ("All files", "*.*")]
        self._rows = {}

        self._build_ui(label)
        self._show_active_row()

        selection.location.on_change(lambda _choice: self._show_active_row())

    def _build_ui(self, label):
        if label:
            tk.Label(self, text=label, font=("Arial", 10, "bold")).pack(anchor='w')

        location = self.selection.location
        self._location_var = tk.StringVar(value=location.choice.value)
        if location.visible:
            radio_frame = ttk.Frame(self)
            radio_frame.pack(anchor='w', pady=2)
            tk.Label(radio_frame, text="File Location").pack(side='left')
            for option in location.options():
                ttk.Radiobutton(
                    radio_frame,
                    text=option.value,
                    value=option.value,
                    variable=self._location_var,
                    command=self._on_location_clicked,
                ).pack(side='left', padx=5)

        noun = self.selection.kind
        # only the origins that are allowed get a row at all
        if FileLocation.SERVER in location.options():
            self._rows[FileLocation.SERVER] = self._build_row(
                f"Browse server {noun}...", self._browse_server
            )
        if FileLocation.LOCAL in location.options():
            self._rows[FileLocation.LOCAL] = self._build_row(
                f"Browse local {noun}...", self._browse_local
            )

    def _build_row(self, button_text, command):
        row = ttk.Frame(self)
        ttk.Button(row, text=button_text, command=command).pack(side='left')
        row.path_label = tk.Label(row, text=f"No {self.selection.kind} selected", fg="gray")
        row.path_label.pack(side='left', padx=8)
        return row

    # ── Callbacks ─────────────────────────────────────────────

    def _on_location_clicked(self):
        self.selection.set_location(self._location_var.get())

    def _show_active_row(self):
        active = self.selection.location.choice
        self._location_var.set(active.value)
        for origin, row in self._rows.items():
            if origin is active:
                row.pack(anchor='w', pady=4, fill='x')
            else:
                row.pack_forget()

    def _browse_local(self):
        if self.selection.kind == 'folder':
            path = filedialog.askdirectory(parent=self)
        else:
            path = filedialog.askopenfilename(parent=self, filetypes=self._filetypes)
        if not path:
            return
        try:
            self.selection.set_local(path)
        except (FilePickError, OSError) as e:
            messagebox.showerror("Cannot select", str(e), parent=self)
            return
        self._rows[FileLocation.LOCAL].path_label.config(text=path, fg="green")

    def _browse_server(self):
        picked = ServerFileDialog(
            self.winfo_toplevel(), self.selection.resolver, kind=self.selection.kind
        ).show()
        if not picked:
            return
        alias, relative = picked
        try:
            self.selection.set_server(alias, relative)
        except (FilePickError, OSError) as e:
            messagebox.showerror("Cannot select", str(e), parent=self)
            return
        self._rows[FileLocation.SERVER].path_label.config(text=f"{alias}:/{relative}", fg="green")
