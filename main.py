import argparse
import tkinter as tk

from filepick_logics.data_model import DataType, FileLocation
from filepick_UIs.app import ImportDemoApp


def parse_roots(values):
    """Turn ['wd=.', 'data=/srv/data'] into {'wd': '.', 'data': '/srv/data'}."""
    roots = {}
    for value in values:
        alias, sep, path = value.partition('=')
        if not sep or not alias or not path:
            raise argparse.ArgumentTypeError(f"--root expects alias=path, got '{value}'")
        roots[alias] = path
    return roots


def build_parser():
    parser = argparse.ArgumentParser(description="File select / import widget demo")
    parser.add_argument(
        "--location",
        choices=[loc.value for loc in FileLocation],
        default=FileLocation.BOTH.value,
        help="where files may be picked from",
    )
    parser.add_argument(
        "--root",
        action="append",
        default=[],
        metavar="ALIAS=PATH",
        help="server directory the user may browse (repeatable, default wd=.)",
    )
    parser.add_argument("--matrix", action="store_true", help="import as a numeric matrix by default")
    parser.add_argument("--fixed-type", action="store_true", help="do not let the user change the data type")
    parser.add_argument("--max-rows", type=int, default=None, help="import at most this many rows")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        roots = parse_roots(args.root) or {"wd": "."}
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))

    print("[MAIN] Starting GUI...")
    root = tk.Tk()
    ImportDemoApp(
        root,
        location=FileLocation(args.location),
        server_roots=roots,
        data_type=DataType.MATRIX if args.matrix else DataType.TABLE,
        data_type_editable=not args.fixed_type,
        max_rows=args.max_rows,
    )
    root.mainloop()


if __name__ == "__main__":
    main()
