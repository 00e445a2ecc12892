import tkinter as tk
from tkinter import ttk, messagebox
from pathlib import PurePosixPath

from filepick_logics.errors import PathOutsideRootError


class ServerFileDialog:
    """
    Modal browser over the allow-listed server directories.

    Navigation never leaves the selected root: the listing comes from
    ServerPathResolver, which refuses anything outside it.

    Usage:
        picked = ServerFileDialog(root, resolver).show()
        if picked:
            alias, relative = picked
    """

    def __init__(self, root, resolver, *, kind='file', title=None):
        self._resolver = resolver
        self._kind = kind
        self._alias = resolver.aliases[0]
        self._cwd = PurePosixPath()
        self._picked = None

        self._dialog = tk.Toplevel(root)
        self._dialog.title(title or f"Select a {kind} on the server")
        self._dialog.geometry("520x420")
        self._dialog.transient(root)

        self._build_ui()
        self._refresh()

        self._dialog.grab_set()

    def _build_ui(self):
        top = ttk.Frame(self._dialog)
        top.pack(fill='x', padx=10, pady=(10, 4))

        tk.Label(top, text="Directory:").pack(side='left')
        self._root_combo = ttk.Combobox(top, values=self._resolver.aliases, state='readonly', width=20)
        self._root_combo.set(self._alias)
        self._root_combo.pack(side='left', padx=5)
        self._root_combo.bind('<<ComboboxSelected>>', self._on_root_changed)

        ttk.Button(top, text="Up", command=self._go_up).pack(side='left', padx=5)

        self._path_label = tk.Label(self._dialog, text="", fg="gray", anchor='w')
        self._path_label.pack(fill='x', padx=10)

        self._tree = ttk.Treeview(self._dialog, columns=("Name", "Type"), show="headings", height=14)
        self._tree.heading("Name", text="Name")
        self._tree.heading("Type", text="Type")
        self._tree.column("Name", width=380)
        self._tree.column("Type", width=80)
        self._tree.pack(fill='both', expand=True, padx=10, pady=5)
        self._tree.bind('<Double-1>', self._on_double_click)

        buttons = ttk.Frame(self._dialog)
        buttons.pack(pady=10)
        ttk.Button(buttons, text="Select", command=self._select).pack(side='left', padx=10)
        ttk.Button(buttons, text="Cancel", command=self._dialog.destroy).pack(side='left', padx=10)

    # ── Public API ────────────────────────────────────────────

    def show(self):
        """Block until the dialog closes; return (alias, relative) or None."""
        self._dialog.wait_window()
        return self._picked

    # ── Internals ─────────────────────────────────────────────

    def _refresh(self):
        self._tree.delete(*self._tree.get_children())
        try:
            entries = self._resolver.list_entries(self._alias, str(self._cwd))
        except (PathOutsideRootError, OSError) as e:
            messagebox.showerror("Cannot open folder", str(e), parent=self._dialog)
            self._cwd = PurePosixPath()
            entries = self._resolver.list_entries(self._alias, "")

        for name, is_dir in entries:
            if self._kind == 'folder' and not is_dir:
                continue
            self._tree.insert("", tk.END, iid=name, values=(name, "folder" if is_dir else "file"))
        shown = "" if self._cwd == PurePosixPath() else str(self._cwd)
        self._path_label.config(text=f"{self._alias}:/{shown}")

    def _on_root_changed(self, _event=None):
        self._alias = self._root_combo.get()
        self._cwd = PurePosixPath()
        self._refresh()

    def _go_up(self):
        self._cwd = self._cwd.parent
        self._refresh()

    def _on_double_click(self, _event=None):
        name, is_dir = self._focused()
        if name is None:
            return
        if is_dir:
            self._cwd = self._cwd / name
            self._refresh()
        else:
            self._select()

    def _focused(self):
        item = self._tree.focus()
        if not item:
            return None, False
        name, kind = self._tree.item(item, 'values')
        return name, kind == "folder"

    def _select(self):
        name, is_dir = self._focused()
        if self._kind == 'folder':
            # nothing highlighted means "this folder"
            target = self._cwd / name if name and is_dir else self._cwd
        else:
            if name is None or is_dir:
                messagebox.showwarning("Select a file", "Please select a file.", parent=self._dialog)
                return
            target = self._cwd / name
        self._picked = (self._alias, str(target))
        self._dialog.destroy()
