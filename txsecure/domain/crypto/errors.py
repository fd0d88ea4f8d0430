"""Envelope Encryption Error Taxonomy.

Every failure raised by the crypto core is an EnvelopeError carrying a stable
``code`` so that collaborators (HTTP, CLI) can map it without string matching.
"""


class EnvelopeError(Exception):
    """Base class for all envelope encryption failures."""

    code = "ENVELOPE_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(EnvelopeError):
    """Malformed input detected before any cryptographic primitive runs."""

    code = "VALIDATION_FAILED"


class TamperDetected(EnvelopeError):
    """Common base for failures that must be treated as a security event."""

    code = "TAMPER_DETECTED"


class AuthenticationFailure(TamperDetected):
    """AES-GCM tag verification failed (tampering or wrong key)."""

    code = "AUTH_FAILED"


class IntegrityError(TamperDetected):
    """A layer authenticated but its content is internally inconsistent."""

    code = "INTEGRITY_FAILED"


class FormatError(EnvelopeError):
    """Payload could not be serialized, or recovered bytes could not be parsed."""

    code = "FORMAT_INVALID"


class ConfigurationError(EnvelopeError):
    """Master key is absent from process configuration."""

    code = "CONFIG_MISSING"
