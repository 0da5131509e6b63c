class ZeroLengthVectorError(ValueError):
    """Raised when an operation needs a direction but the vector has zero length."""
