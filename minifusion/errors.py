"""Exceptions raised by the merge pipeline.

``str(exc)`` is always the message shown to the user.
"""


class MiniFusionError(Exception):
    pass


class ConfigError(MiniFusionError):
    pass


class NotPdfError(MiniFusionError):
    def __init__(self):
        super().__init__("Only PDF files are allowed.")


class FileLimitError(MiniFusionError):
    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"You can only add up to {limit} PDF files.")


class DocumentLoadError(MiniFusionError):
    def __init__(self, file_name: str):
        self.file_name = file_name
        super().__init__(f'Failed to load "{file_name}". It might be corrupted or encrypted.')


class PageLimitError(MiniFusionError):
    def __init__(self, file_name: str, page_count: int, limit: int):
        self.file_name = file_name
        self.page_count = page_count
        self.limit = limit
        super().__init__(f'"{file_name}" has {page_count} pages. Max allowed is {limit}.')


class MergeError(MiniFusionError):
    def __init__(self, message="An error occurred while merging PDFs."):
        super().__init__(message)
