import os

from filepick_logics.data_model import FileLocation, SelectedFile
from filepick_logics.errors import ConfigurationError
from filepick_logics.location import LocationSelector
from filepick_logics.server_paths import ServerPathResolver


class FileSelection:
    """
    Shared state behind the file select widget.

    Keeps the last local pick and the last server pick in two separate slots.
    `selected` always reflects the slot of the current location choice, so
    switching back to an origin shows whatever was picked there before (even
    if the other origin was used more recently).

    Args:
        location: FileLocation the user may pick from.
        server_roots: alias -> directory mapping; required unless location is LOCAL.
        kind: 'file' or 'folder'.
    """

    def __init__(self, location=FileLocation.BOTH, server_roots=None, kind='file'):
        location = FileLocation(location)
        if kind not in ('file', 'folder'):
            raise ValueError(f"kind must be 'file' or 'folder', not {kind!r}")
        self.kind = kind
        self.location = LocationSelector(location)
        # raises ConfigurationError for missing roots before any widget is built
        self.resolver = None
        if location is not FileLocation.LOCAL:
            self.resolver = ServerPathResolver(server_roots)

        self.local_file = None                      # Last local pick
        self.server_file = None                     # Last server pick
        self._callbacks = []
        self._last_seen = None

        self.location.on_change(lambda _choice: self._notify())

    @property
    def selected(self):
        if self.location.choice is FileLocation.SERVER:
            return self.server_file
        return self.local_file

    def set_location(self, choice):
        self.location.set_choice(choice)

    def set_local(self, path):
        """Store a file chosen on this machine. None (dialog cancelled) is ignored."""
        if not path:
            return
        path = os.path.abspath(path)
        is_dir = os.path.isdir(path)
        if (self.kind == 'folder') != is_dir:
            raise FileNotFoundError(f"Not a {self.kind}: {path}")
        self.local_file = SelectedFile(
            path=path,
            name=os.path.basename(path.rstrip(os.sep)),
            size=None if is_dir else os.path.getsize(path),
            origin=FileLocation.LOCAL,
        )
        print(f"[SELECT] Local {self.kind}: {path}")
        self._notify()

    def set_server(self, alias, relative):
        """Store a file chosen in the server browser. None is ignored."""
        if self.resolver is None:
            raise ConfigurationError("Server selection is not enabled for a local-only file picker")
        picked = self.resolver.resolve(alias, relative, want_dir=self.kind == 'folder')
        if picked is None:
            return
        self.server_file = picked
        self._notify()

    def on_change(self, callback):
        """Register callback(selected) called whenever `selected` changes."""
        self._callbacks.append(callback)

    def _notify(self):
        current = self.selected
        if current is self._last_seen:
            return
        self._last_seen = current
        for callback in list(self._callbacks):
            callback(current)
