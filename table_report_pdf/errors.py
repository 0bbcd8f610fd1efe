"""
Exception types raised while generating a report.
"""


class ReportError(Exception):
	"""
	Base class for report generation failures.
	"""


class InvalidInputError(ReportError, ValueError):
	"""
	Table data is missing a header row or data rows.
	"""


class ImageStagingError(ReportError, OSError):
	"""
	The image stream could not be read or written to a staged file.
	"""


class RenderError(ReportError, RuntimeError):
	"""
	The rendering engine failed to lay out or serialize the document.
	"""
