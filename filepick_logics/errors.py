"""Exception hierarchy for the file pickers and the importer."""


class FilePickError(Exception):
    """Base exception for all file picking and importing errors."""


class ConfigurationError(FilePickError, ValueError):
    """A widget was set up with an unusable configuration."""


class PathOutsideRootError(FilePickError, ValueError):
    """A server path resolved outside every configured root directory."""

    def __init__(self, root, relative):
        self.root = root
        self.relative = relative
        super().__init__(f"'{relative}' is not inside the server directory '{root}'")


class ImportValidationError(FilePickError, ValueError):
    """The file could not be read under the current import options."""
