## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘


class ArgsError(Exception):
    def __init__(self, message: str = "", *, token=None, argument=None):
        """Base class for all errors raised while declaring or parsing arguments."""
        super().__init__(message)
        self.token: str = token
        self.argument: object = argument

class ArgsUnrecognized(ArgsError, LookupError):
    def __init__(self, token: str):
        super().__init__(f"Unrecognized argument {token}", token=token)

class ArgsMissingValue(ArgsError, ValueError):
    """A required key=value argument was the last token, so it has no value."""
    def __init__(self, token: str, argument=None):
        super().__init__(f"Missing value for argument {token}", token=token, argument=argument)

class ArgsMissingRequired(ArgsError, ValueError):
    def __init__(self, name: str, argument=None):
        super().__init__(f"Missing required argument {name}", token=name, argument=argument)


class ArgsDefinitionError(ArgsError, ValueError):
    """Declaration-time problems, raised directly from `ArgParser.add()`."""
    pass
