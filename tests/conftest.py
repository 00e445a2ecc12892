import pytest


@pytest.fixture
def make_file(tmp_path):
    """Write text to tmp_path/name and return the path as a string."""

    def _make(name, text, encoding="utf-8"):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding=encoding)
        return str(path)

    return _make


@pytest.fixture
def ten_row_csv(make_file):
    lines = ["id,val1,val2"] + [f"r{i},{i},{i * 1.5}" for i in range(1, 11)]
    return make_file("fileA.csv", "\n".join(lines) + "\n")
