"""Smoke tests for the Tk widgets. Skipped when no display is available."""

import pandas as pd
import pytest

tk = pytest.importorskip("tkinter")

from filepick_logics.data_model import FileLocation, ImportState, Separator
from filepick_logics.file_select import FileSelection
from filepick_logics.importer import FileImporter
from filepick_UIs.file_import_widget import FileImportWidget
from filepick_UIs.file_select_widget import FileSelectWidget
from filepick_UIs.widgets import PreviewTable


@pytest.fixture
def tk_root():
    try:
        root = tk.Tk()
    except tk.TclError:
        pytest.skip("no display available")
    root.withdraw()
    yield root
    root.destroy()


def test_local_only_has_no_server_controls(tk_root):
    widget = FileSelectWidget(tk_root, FileSelection(FileLocation.LOCAL))
    assert list(widget._rows) == [FileLocation.LOCAL]


def test_both_keeps_hidden_row_alive(tk_root, tmp_path):
    selection = FileSelection(FileLocation.BOTH, {"wd": str(tmp_path)})
    widget = FileSelectWidget(tk_root, selection)
    server_row = widget._rows[FileLocation.SERVER]

    selection.set_location(FileLocation.LOCAL)
    assert server_row.winfo_exists()
    assert not server_row.winfo_manager()
    assert widget._rows[FileLocation.LOCAL].winfo_manager() == "pack"


def test_import_button_follows_preview(tk_root, ten_row_csv):
    selection = FileSelection(FileLocation.LOCAL)
    importer = FileImporter(selection)
    widget = FileImportWidget(tk_root, importer)
    assert widget._import_button.instate(['disabled'])

    importer.set_separator(Separator.COMMA)
    selection.set_local(ten_row_csv)

    assert importer.state is ImportState.PREVIEW_READY
    assert widget._import_button.instate(['!disabled'])
    assert len(widget._preview._tree.get_children()) == 6


def test_preview_table_shows_matrix_labels(tk_root):
    table = PreviewTable(tk_root)
    df = pd.DataFrame({"s1": [1.0, 2.0]}, index=pd.Index(["g1", "g2"], name="gene"))
    table.show(df)

    first = table._tree.get_children()[0]
    assert table._tree.item(first, 'values')[0] == "g1"

    table.show(None)
    assert table._tree.get_children() == ()
