import os
from pathlib import Path

from filepick_logics.data_model import FileLocation, SelectedFile
from filepick_logics.errors import ConfigurationError, PathOutsideRootError


class ServerPathResolver:
    """
    Resolve paths picked in the server browser against allow-listed roots.

    Args:
        roots: mapping of alias -> directory on this machine, e.g.
            {"wd": ".", "shared": "/srv/data"}. Must not be empty.

    Example:
        resolver = ServerPathResolver({"wd": "."})
        picked = resolver.resolve("wd", "data/input.csv")
        picked.path   # '/home/me/project/data/input.csv'
        picked.name   # 'input.csv'
    """

    def __init__(self, roots):
        if not roots:
            raise ConfigurationError(
                "Must specify server directories when the file location is not 'Local'"
            )
        self._roots = {}
        for alias, directory in dict(roots).items():
            root_path = Path(directory).expanduser().resolve()
            if not root_path.is_dir():
                raise ConfigurationError(f"Server directory '{alias}' does not exist: {directory}")
            self._roots[str(alias)] = root_path

    # ── Public API ────────────────────────────────────────────

    @property
    def aliases(self):
        return list(self._roots)

    def root_path(self, alias):
        try:
            return self._roots[alias]
        except KeyError:
            raise PathOutsideRootError(alias, "") from None

    def resolve(self, alias, relative, want_dir=False):
        """
        Return the SelectedFile for `relative` under root `alias`.

        None (nothing picked yet) resolves to None. A path outside the root,
        or of the wrong kind (file vs folder), raises PathOutsideRootError or
        FileNotFoundError.
        """
        if alias is None or relative is None:
            return None

        target = self._contained(alias, relative)
        if want_dir and not target.is_dir():
            raise FileNotFoundError(f"Not a folder: {target}")
        if not want_dir and not target.is_file():
            raise FileNotFoundError(f"Not a file: {target}")

        size = None if want_dir else target.stat().st_size
        print(f"[SERVER] Resolved {alias}:{relative} -> {target}")
        return SelectedFile(
            path=str(target),
            name=target.name,
            size=size,
            origin=FileLocation.SERVER,
            root=alias,
            relative=str(relative),
        )

    def resolve_many(self, alias, relatives):
        """Resolve several files picked under the same root."""
        if alias is None or not relatives:
            return None
        return [self.resolve(alias, rel) for rel in relatives]

    def list_entries(self, alias, relative=""):
        """
        List a directory under a root as (name, is_dir) pairs.

        Folders come first, then files, each sorted case-insensitively.
        Hidden entries are skipped, as are entries escaping the root.
        """
        directory = self._contained(alias, relative)
        root = self._roots[alias]
        entries = []
        with os.scandir(directory) as it:
            for entry in it:
                if entry.name.startswith('.'):
                    continue
                # symlinks pointing outside the root are not offered
                if not Path(entry.path).resolve().is_relative_to(root):
                    continue
                entries.append((entry.name, entry.is_dir()))
        entries.sort(key=lambda e: (not e[1], e[0].lower()))
        return entries

    # ── Internals ─────────────────────────────────────────────

    def _contained(self, alias, relative):
        root = self.root_path(alias)
        target = (root / str(relative)).resolve()
        if not target.is_relative_to(root):
            raise PathOutsideRootError(alias, relative)
        return target
