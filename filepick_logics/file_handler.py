import os
import re
import unicodedata

import numpy as np
import pandas as pd

from filepick_logics.data_model import AUTO_ADDED_HEADER, DataType, Separator
from filepick_logics.errors import ImportValidationError


# cp1252 can reject bytes that latin-1 always accepts, so latin-1 goes last
ENCODINGS = ['utf-8-sig', 'cp1252', 'latin-1']

MSG_DUPLICATE_HEADERS = "column names have duplicates"
MSG_NO_DATA = (
    "No data can be read. Check if you have chosen the wrong file or not "
    "specified the right file separator or format"
)
MSG_NO_DATA_COLUMNS = "There are no more data columns. Please check your data and importing configs"
MSG_NON_NUMERIC = (
    "There are non-numeric values in your data. Import as 'Table' if you "
    "intended to import a data table with strings"
)


def clean_names(names):
    """
    Clean column names for programmatic use.

    Rules (same spirit as janitor's make_clean_names):
        - accents are transliterated to ASCII
        - '%' becomes 'percent', '#' becomes 'number'
        - camelCase is split into snake_case
        - any run of other characters becomes a single '_'
        - lower-cased, leading/trailing '_' removed
        - empty names become 'x'; names starting with a digit get an 'x' prefix

    Duplicates are NOT made unique here, callers decide how to report them.
    Cleaning an already clean list returns it unchanged.

    Example:
        clean_names(["Sample ID", "% GC", "readCount"])
        # ['sample_id', 'percent_gc', 'read_count']
    """
    return [_clean_name(n) for n in names]


def _clean_name(name):
    text = '' if name is None or (isinstance(name, float) and np.isnan(name)) else str(name)
    text = unicodedata.normalize('NFKD', text).encode('ascii', 'ignore').decode('ascii')
    text = text.replace('%', '_percent_').replace('#', '_number_')
    text = re.sub(r'([A-Z]+)([A-Z][a-z])', r'\1_\2', text)
    text = re.sub(r'([a-z0-9])([A-Z])', r'\1_\2', text)
    text = re.sub(r'[^A-Za-z0-9]+', '_', text).strip('_').lower()
    if not text:
        return 'x'
    if text[0].isdigit():
        return 'x' + text
    return text


def read_delimited(path, separator, nrows=None, skiprows=0, as_text=False):
    """
    Read a tab or comma separated file without treating any row as header.

    Surrounding whitespace is trimmed from every cell and text columns that
    only hold numbers after trimming are converted to numbers. Several
    encodings are tried in turn so files saved by spreadsheet tools load too.

    Args:
        path: file to read.
        separator: Separator (or its value, 'Tab' / 'Comma').
        nrows: read at most this many rows (None = all).
        skiprows: number of leading lines to skip.
        as_text: keep every cell as a string (used for header rows).

    Returns:
        DataFrame with columns X1..Xn; empty when nothing could be read.

    Raises:
        ImportValidationError: the file is not valid delimited text.
    """
    sep = Separator(separator).char
    filename = os.path.basename(path)

    df = None
    for enc in ENCODINGS:
        try:
            df = pd.read_csv(
                path,
                sep=sep,
                header=None,
                nrows=nrows,
                skiprows=skiprows,
                skipinitialspace=True,
                encoding=enc,
                dtype=str if as_text else None,
                keep_default_na=not as_text,
            )
            print(f"[READ] {filename} loaded with encoding: {enc} ({len(df)} rows)")
            break
        except (UnicodeDecodeError, LookupError):
            continue
        except pd.errors.EmptyDataError:
            return pd.DataFrame()
        except pd.errors.ParserError as e:
            raise ImportValidationError(f"Could not parse {filename}: {e}") from e

    if df is None:
        raise ImportValidationError(f"Could not load {filename} with any supported encoding")

    if as_text:
        df = df.apply(lambda col: col.str.strip())
    else:
        for col in df.columns:
            if _is_text(df[col]):
                df[col] = _infer_column(df[col].str.strip())

    df.columns = [f"X{i + 1}" for i in range(df.shape[1])]
    return df


def _infer_column(series):
    try:
        return pd.to_numeric(series)
    except (ValueError, TypeError):
        return series


def _is_text(series):
    # pandas 3 reads text columns as the "str" dtype instead of object
    return pd.api.types.is_object_dtype(series) or pd.api.types.is_string_dtype(series)


def _is_numeric(series):
    return pd.api.types.is_numeric_dtype(series) and not pd.api.types.is_bool_dtype(series)


def read_table(path, config, max_rows=None, progress_callback=None):
    """
    Read and validate a file according to an ImportConfig.

    Used for both the 6-row preview and the full import so both apply the
    same validation.

    Args:
        path: file to read.
        config: ImportConfig (data type, header flag, separator).
        max_rows: read at most this many data rows (None = all).
        progress_callback: Optional callable(fraction, detail) for progress updates.

    Returns:
        DataFrame. For DataType.MATRIX the first column becomes the index and
        the remaining columns are floats.

    Raises:
        ImportValidationError: with a message meant for the user.
    """
    report = progress_callback or (lambda fraction, detail: None)
    separator = config.separator

    report(0.1, "validating")
    if config.has_header:
        report(0.2, "reading column headers")
        header = read_delimited(path, separator, nrows=1, as_text=True)
        col_names = clean_names(header.iloc[0].tolist()) if len(header) else []

        if len(set(col_names)) != len(col_names):
            raise ImportValidationError(MSG_DUPLICATE_HEADERS)

        report(0.3, "reading data")
        df = read_delimited(path, separator, nrows=max_rows, skiprows=1)
        if len(df) == 0:
            raise ImportValidationError(MSG_NO_DATA)

        # the row label column of a matrix often has no header
        if len(col_names) == df.shape[1] - 1:
            col_names = [AUTO_ADDED_HEADER] + col_names
        if len(col_names) != df.shape[1]:
            raise ImportValidationError(
                f"Found {len(col_names)} column headers but {df.shape[1]} data columns. "
                "Check the file separator or untick 'Data has column headers'"
            )
        df.columns = col_names
    else:
        report(0.3, "reading data")
        df = read_delimited(path, separator, nrows=max_rows)

    if len(df) == 0:
        raise ImportValidationError(MSG_NO_DATA)

    if DataType(config.data_type) is DataType.MATRIX:
        df = to_matrix(df)

    report(0.9, "finishing up")
    return df


def to_matrix(df):
    """
    Turn a table into a numeric matrix using the first column as row labels.

    Raises:
        ImportValidationError: fewer than 2 columns, or a non-numeric data column.
    """
    if df.shape[1] < 2:
        raise ImportValidationError(MSG_NO_DATA_COLUMNS)

    data_part = df.iloc[:, 1:]
    non_numeric = [c for c in data_part.columns if not _is_numeric(data_part[c])]
    if non_numeric:
        print(f"[READ] Non-numeric matrix columns: {non_numeric}")
        raise ImportValidationError(MSG_NON_NUMERIC)

    matrix = pd.DataFrame(
        np.asarray(data_part, dtype=float),
        index=pd.Index(df.iloc[:, 0].to_numpy(), name=df.columns[0]),
        columns=data_part.columns,
    )
    return matrix
