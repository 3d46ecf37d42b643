"""User-facing error types with actionable messages."""


class TabTintError(ValueError):
    """Base class for user-facing color and configuration errors."""


class InvalidColorError(TabTintError):
    """Raised when a color token is neither a preset nor a 6-digit hex string."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(
            f"Invalid color '{token}'. Use a preset name (see `tab colors`) or a "
            "6-digit hex value such as 3498DB or #3498DB."
        )


class ConfigError(TabTintError):
    """Raised when the user palette file cannot be used."""

    def __init__(self, details: str) -> None:
        super().__init__(f"Palette configuration error: {details}")
