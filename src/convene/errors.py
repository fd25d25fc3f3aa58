# src/convene/errors.py


class ConfigurationError(ValueError):
    """A convention setting is invalid, missing, or cannot be materialized.

    Always fatal to the consuming build step. The message names the
    offending key (or resource) and the value that was rejected.
    """

    def __init__(self, message: str, *, key: str | None = None) -> None:
        super().__init__(message)
        self.key = key
