"""
Errors raised by the Playfair engine.
"""


class EncodingError(ValueError):
    """
    The transformed character stream could not be reassembled into text.

    Every substitution draws from the fixed 25-letter alphabet and every
    passthrough character is copied from the input, so this only surfaces
    when a KeySquare has been corrupted.
    """
