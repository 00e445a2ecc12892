import tkinter as tk
from tkinter import ttk

import pandas as pd


class PreviewTable(ttk.LabelFrame):
    """
    A labeled frame showing the first rows of a DataFrame in a Treeview.

    Used by the import widget to show how the file will be parsed under the
    current options. Matrices are shown with their row labels as the first
    column.

    Args:
        parent: Parent widget.
        title: LabelFrame title text.
        height: Treeview height in rows.
        column_width: Width in pixels of each column.

    Example:
        table = PreviewTable(frame, title="Preview")
        table.pack(fill='both', expand=True)
        table.show(df.head(6))
    """

    def __init__(self, parent, *, title="Preview", height=6, column_width=110):
        super().__init__(parent, text=title, padding=5)
        self._column_width = column_width

        self._tree = ttk.Treeview(self, show="headings", height=height)
        x_scroll = ttk.Scrollbar(self, orient='horizontal', command=self._tree.xview)
        self._tree.configure(xscrollcommand=x_scroll.set)
        self._tree.pack(fill='both', expand=True)
        x_scroll.pack(fill='x')

    # ── Public API ────────────────────────────────────────────

    def show(self, df):
        """Replace the content with the rows of df. None clears the table."""
        self.clear()
        if df is None:
            return

        has_labels = not isinstance(df.index, pd.RangeIndex)
        columns = list(df.columns)
        headings = ([df.index.name or ""] if has_labels else []) + [str(c) for c in columns]

        ids = [f"c{i}" for i in range(len(headings))]
        self._tree.configure(columns=ids)
        for col_id, heading in zip(ids, headings):
            self._tree.heading(col_id, text=heading)
            self._tree.column(col_id, width=self._column_width, stretch=False)

        for label, row in zip(df.index, df.itertuples(index=False)):
            values = [self._format(v) for v in row]
            if has_labels:
                values.insert(0, self._format(label))
            self._tree.insert("", tk.END, values=values)

    def clear(self):
        self._tree.delete(*self._tree.get_children())
        self._tree.configure(columns=())

    # ── Internals ─────────────────────────────────────────────

    @staticmethod
    def _format(value):
        if pd.isna(value):
            return "NA"
        return str(value)
