import tkinter as tk
from tkinter import ttk
import threading
import traceback

from filepick_logics.errors import FilePickError


class ProgressDialog:
    """
    Modal progress dialog that runs a task in a background thread.

    Usage:
        def run(progress_cb):
            # progress_cb(fraction, detail) to update the bar, fraction in [0, 1]
            return some_result

        ProgressDialog(root, "Importing file").run(
            run, on_success=lambda result: ..., on_error=lambda err: ...
        )

    Args:
        root: Parent Tk window.
        message: Bold heading shown at the top (also the window title).
    """

    def __init__(self, root, message):
        self._root = root

        self._dialog = tk.Toplevel(root)
        self._dialog.title(message)
        self._dialog.geometry("400x130")
        self._dialog.resizable(False, False)
        self._dialog.transient(root)
        self._dialog.grab_set()

        tk.Label(self._dialog, text=message, font=("Arial", 12, "bold")).pack(pady=10)

        self._detail_label = tk.Label(self._dialog, text="", fg="gray")
        self._detail_label.pack(pady=5)

        self._progress_bar = ttk.Progressbar(self._dialog, mode='determinate', length=300, maximum=1.0)
        self._progress_bar.pack(pady=10, padx=20)

    def run(self, fn, on_success, on_error):
        """
        Execute fn in a background thread, then call on_success or on_error on the main thread.

        Args:
            fn: callable(progress_cb) -> result.
                progress_cb: callable(fraction: float, detail: str).
            on_success: callable(result) invoked on the main thread when fn completes.
            on_error: callable(exception) invoked on the main thread if fn raises.
        """
        def background():
            try:
                def progress_cb(fraction, detail):
                    self._root.after(0, lambda: self._update_ui(fraction, detail))

                result = fn(progress_cb)
                self._root.after(0, lambda: self._finish(on_success, result, None, on_error))
            except Exception as e:
                err = e
                if not isinstance(err, FilePickError):
                    print(f"\n[ERROR] {err}")
                    traceback.print_exc()
                self._root.after(0, lambda: self._finish(on_success, None, err, on_error))

        threading.Thread(target=background, daemon=True).start()

    def _update_ui(self, fraction, detail):
        if self._dialog.winfo_exists():
            self._detail_label.config(text=detail)
            self._progress_bar['value'] = fraction

    def _finish(self, on_success, result, error, on_error):
        if self._dialog.winfo_exists():
            self._dialog.destroy()
        if error is not None:
            on_error(error)
        else:
            on_success(result)
