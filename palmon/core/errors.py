"""
Error classes for clearer exception sources.
"""
from __future__ import annotations

class PalmonError(Exception):
    pass

class UnknownTemplateError(PalmonError):
    def __init__(self, name: str):
        super().__init__(f"Unknown creature template '{name}'")
        self.name = name

class ValidationError(PalmonError):
    pass

class InvalidInputError(ValidationError):
    def __init__(self, raw: object):
        super().__init__(f"Unrecognised input {raw!r}")
        self.raw = raw
