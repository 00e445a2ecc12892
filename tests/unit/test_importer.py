"""Tests for the import state machine: preview, confirm, result."""

import pytest

from filepick_logics.data_model import DataType, FileLocation, ImportState, Separator
from filepick_logics.file_select import FileSelection
from filepick_logics.importer import FileImporter


@pytest.fixture
def selection():
    return FileSelection(FileLocation.LOCAL)


@pytest.fixture
def importer(selection):
    imp = FileImporter(selection)
    imp.set_separator(Separator.COMMA)
    return imp


@pytest.fixture
def late_bad_csv(make_file):
    # non-numeric value beyond the preview rows
    lines = ["id,val1,val2"] + [f"r{i},{i},{i * 2}" for i in range(1, 11)]
    lines[9] = "r9,9,n/a?"
    return make_file("fileA.csv", "\n".join(lines) + "\n")


def test_starts_without_file(importer):
    assert importer.state is ImportState.NO_FILE
    assert importer.preview is None
    assert not importer.can_import
    assert importer.run_import() is None
    assert importer.result is None


def test_table_import_scenario(selection, importer, ten_row_csv):
    selection.set_local(ten_row_csv)

    assert importer.state is ImportState.PREVIEW_READY
    assert list(importer.preview.columns) == ["id", "val1", "val2"]
    assert len(importer.preview) == 6
    assert importer.can_import

    result = importer.run_import()

    assert importer.state is ImportState.IMPORTED
    assert result is importer.result
    assert result.size == (10, 3)
    assert result.name == "fileA"
    assert result.type is DataType.TABLE
    assert importer.can_import


def test_matrix_import_failure_keeps_previous_result(selection, importer, late_bad_csv):
    selection.set_local(late_bad_csv)
    first = importer.run_import()
    assert first is not None

    importer.set_data_type(DataType.MATRIX)
    assert importer.state is ImportState.PREVIEW_READY

    assert importer.run_import() is None
    assert importer.state is ImportState.IMPORT_FAILED
    assert "Import as 'Table'" in importer.status
    assert importer.result is first
    assert not importer.importing
    assert importer.can_import


def test_invalid_preview_blocks_import(selection, importer, make_file):
    path = make_file("bad.csv", "id,v1\nr1,x\n")
    importer.set_data_type(DataType.MATRIX)
    selection.set_local(path)

    assert importer.state is ImportState.FILE_SELECTED_NO_PREVIEW
    assert "non-numeric" in importer.status
    assert not importer.can_import
    assert importer.start_import() is None


def test_option_changes_recompute_preview(selection, importer, ten_row_csv):
    selection.set_local(ten_row_csv)
    states = []
    importer.on_state_change(states.append)

    importer.set_has_header(False)

    assert list(importer.preview.columns) == ["X1", "X2", "X3"]
    assert importer.preview.iloc[0].tolist() == ["id", "val1", "val2"]
    assert states[-1] is ImportState.PREVIEW_READY

    importer.set_separator(Separator.TAB)
    assert importer.preview.shape[1] == 1

    # unchanged option does not recompute
    count = len(states)
    importer.set_separator("Tab")
    assert len(states) == count


def test_new_file_resets_state_but_not_result(selection, importer, ten_row_csv, make_file):
    selection.set_local(ten_row_csv)
    result = importer.run_import()

    other = make_file("other.csv", "a,b\n1,2\n")
    selection.set_local(other)

    assert importer.state is ImportState.PREVIEW_READY
    assert list(importer.preview.columns) == ["a", "b"]
    assert importer.result is result


def test_max_rows(selection, ten_row_csv):
    importer = FileImporter(selection, max_rows=4)
    importer.set_separator(Separator.COMMA)
    selection.set_local(ten_row_csv)
    assert importer.run_import().size == (4, 3)


def test_invalid_max_rows(selection):
    with pytest.raises(ValueError):
        FileImporter(selection, max_rows=0)


def test_fixed_data_type(selection):
    importer = FileImporter(selection, data_type=DataType.MATRIX, data_type_editable=False)
    importer.set_data_type(DataType.TABLE)
    assert importer.config.data_type is DataType.MATRIX


def test_matrix_result(selection, make_file):
    importer = FileImporter(selection, data_type="Matrix")
    importer.set_separator("Comma")
    selection.set_local(make_file("counts.matrix.csv", "s1,s2\ng1,1,2\ng2,3,4\n"))

    result = importer.run_import()
    assert result.type is DataType.MATRIX
    assert result.size == (2, 2)
    assert result.name == "counts.matrix"
    assert result.data.index.tolist() == ["g1", "g2"]


def test_import_in_flight_blocks_second_start(selection, importer, ten_row_csv):
    selection.set_local(ten_row_csv)
    request = importer.start_import()

    assert importer.state is ImportState.IMPORTING
    assert not importer.can_import
    assert importer.start_import() is None

    data = importer.read_full(request)
    importer.finish_import(request, data=data)
    assert importer.state is ImportState.IMPORTED
    assert importer.can_import


def test_request_snapshot_survives_option_change(selection, importer, ten_row_csv):
    selection.set_local(ten_row_csv)
    request = importer.start_import()
    importer.set_data_type(DataType.MATRIX)

    result = importer.finish_import(request, data=importer.read_full(request))
    assert result.type is DataType.TABLE


def test_result_callback(selection, importer, ten_row_csv):
    seen = []
    importer.on_result(seen.append)
    selection.set_local(ten_row_csv)

    importer.run_import()
    importer.set_has_header(False)

    assert len(seen) == 1
    assert seen[0].size == (10, 3)


def test_unexpected_errors_propagate_and_reset(selection, importer, ten_row_csv, monkeypatch):
    selection.set_local(ten_row_csv)

    def boom(request, progress_callback=None):
        raise RuntimeError("disk on fire")

    monkeypatch.setattr(FileImporter, "read_full", staticmethod(boom))
    with pytest.raises(RuntimeError):
        importer.run_import()
    assert not importer.importing
    assert importer.state is ImportState.IMPORT_FAILED
