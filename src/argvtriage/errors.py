## argvtriage — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘


class ArgvError(Exception):
    def __init__(self, message: str = "", *, mode=None):
        """Base class for all errors raised by argvtriage."""
        super().__init__(message)
        self.mode = mode

class ArgvModeError(ArgvError, ValueError):
    """Contradictory mode bits, e.g. preferring both flag and parameter for unregistered options."""
    pass
