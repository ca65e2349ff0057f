# icongen/errors.py


class IconPipelineError(Exception):
    """Base error for the icon pipeline. Aborts the run, nothing is rolled back."""

    def __init__(self, path, reason: str = ""):
        self.path = path
        self.reason = reason
        msg = f"{path}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


class SourceNotFound(IconPipelineError):
    """Input image missing or unreadable."""


class DecodeError(IconPipelineError):
    """Input bytes are not a supported bitmap."""


class WriteFailure(IconPipelineError):
    """Output directory or file could not be written."""
