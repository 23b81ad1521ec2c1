# Custom exceptions for Brain Teasers

class BrainTeasersError(Exception):
    """Base exception for all application-specific errors."""
    pass

class ConfigError(BrainTeasersError):
    """Raised for configuration-related problems."""
    def __init__(self, key: str, value, message: str):
        self.key = key
        self.value = value
        super().__init__(f"Invalid value for {key}: {value!r}. {message}")

class InvalidCharError(BrainTeasersError, ValueError):
    """Raised when a Char is built from anything but a single character."""
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Char requires exactly one character, got {len(value)}: {value!r}")
