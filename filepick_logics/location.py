from filepick_logics.data_model import FileLocation


class LocationSelector:
    """
    Holds the current file location choice (Server or Local).

    When both origins are allowed the choice starts on Server and the user can
    switch. When a single origin is configured the choice is locked to it and
    the selector is not shown.
    """

    def __init__(self, allowed=FileLocation.BOTH):
        self.allowed = FileLocation(allowed)
        if self.allowed is FileLocation.BOTH:
            self._choice = FileLocation.SERVER
        else:
            self._choice = self.allowed
        self._callbacks = []

    @property
    def choice(self):
        return self._choice

    @property
    def visible(self):
        return self.allowed is FileLocation.BOTH

    def options(self):
        """Choices offered to the user, in display order."""
        if self.allowed is FileLocation.BOTH:
            return [FileLocation.SERVER, FileLocation.LOCAL]
        return [self.allowed]

    def set_choice(self, choice):
        choice = FileLocation(choice)
        if choice is FileLocation.BOTH:
            print(f"[SELECT] {choice.value} is not a selectable location; keeping {self._choice.value}")
            return
        if choice not in self.options():
            print(f"[SELECT] Location locked to {self._choice.value}; ignoring {choice.value}")
            return
        if choice is self._choice:
            return
        self._choice = choice
        for callback in list(self._callbacks):
            callback(choice)

    def on_change(self, callback):
        """Register callback(choice) called whenever the choice changes."""
        self._callbacks.append(callback)
