"""
Staging of image bytes into a scoped temporary file.
"""

# Standard Library
import contextlib
import os
import pathlib
import tempfile
import typing

# local repo modules
import table_report_pdf as trp
import table_report_pdf.config
import table_report_pdf.errors


ImageStagingError = trp.errors.ImageStagingError

STAGED_IMAGE_PREFIX = trp.config.STAGED_IMAGE_PREFIX
STAGED_IMAGE_SUFFIX = trp.config.STAGED_IMAGE_SUFFIX


#============================================
def read_fully(image_stream: typing.BinaryIO) -> bytes:
	"""
	Drain a binary stream into memory.

	Args:
		image_stream: Readable binary stream.

	Returns:
		All bytes in the stream.
	"""
	try:
		data = image_stream.read()
	except (OSError, ValueError) as error:
		# closed streams raise ValueError
		raise ImageStagingError(f"Could not read image stream: {error}") from error
	if isinstance(data, str):
		raise ImageStagingError("Image stream must be opened in binary mode.")
	if data is None:
		# non-blocking streams return None when nothing is ready
		raise ImageStagingError("Image stream returned no data.")
	return bytes(data)


#============================================
@contextlib.contextmanager
def stage_image(
	image_stream: typing.BinaryIO,
	staging_dir: str | None = None,
) -> typing.Iterator[pathlib.Path]:
	"""
	Write the image stream to a uniquely named temporary file.

	The file is removed when the context exits, whether or not the
	body raised.

	Args:
		image_stream: Readable binary stream.
		staging_dir: Directory for the staged file, or None for the system default.

	Yields:
		Path to the staged image file.
	"""
	data = read_fully(image_stream)
	try:
		handle, name = tempfile.mkstemp(
			prefix=STAGED_IMAGE_PREFIX,
			suffix=STAGED_IMAGE_SUFFIX,
			dir=staging_dir,
		)
	except OSError as error:
		raise ImageStagingError(f"Could not create staged image: {error}") from error
	path = pathlib.Path(name)
	try:
		try:
			with os.fdopen(handle, "wb") as staged:
				staged.write(data)
		except OSError as error:
			raise ImageStagingError(f"Could not write staged image {path}: {error}") from error
		yield path
	finally:
		path.unlink(missing_ok=True)
