"""Errors raised while decoding Freesound resources."""


class DecodeError(ValueError):
    """A Freesound resource could not be decoded."""


class MalformedPayload(DecodeError):
    """The payload is not valid JSON or not a valid binary record."""


class MissingField(DecodeError):
    """A required field is absent."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Missing required field: {field}")


class TypeMismatch(DecodeError):
    """A field is present, but its value has the wrong type or shape."""

    def __init__(self, field: str, expected: str, value=None):
        self.field = field
        self.expected = expected
        self.value = value
        super().__init__(
            f"Field {field} should be {expected}, not {type(value).__name__}: {value!r}"
        )


class MalformedGeotag(DecodeError):
    """The geotag is not two space-separated numbers."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f'Geotag should be "<latitude> <longitude>": {value!r}')
