class ExportError(Exception):
    """Base class for everything the exchange format raises on purpose."""


class InvalidInputError(ExportError):
    pass


class TruncatedFileError(InvalidInputError):
    """The file ends before the number of entries its header announces."""


class DimensionOverflowError(ExportError):
    pass


class DirectoryNotFoundError(ExportError):
    pass
