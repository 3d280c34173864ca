# entropy_engine/errors.py


class ParameterError(ValueError):
    """Bad request parameter (missing partition, bad page size). Raised before the index is touched."""


class DecodeError(ValueError):
    """A continuation token or an entropy term could not be decoded."""
