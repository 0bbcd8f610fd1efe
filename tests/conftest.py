"""
Pytest configuration for local imports and shared test images.
"""

# Standard Library
import io
import os
import sys

# PIP3 modules
import PIL.Image
import pytest

#============================================


def _ensure_repo_on_path() -> None:
	"""
	Ensure the repository root is on sys.path.
	"""
	repo_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
	if repo_root not in sys.path:
		sys.path.insert(0, repo_root)


_ensure_repo_on_path()


#============================================
def make_png_bytes(width: int = 64, height: int = 48) -> bytes:
	"""
	Encode a solid-color PNG image.

	Args:
		width: Pixel width.
		height: Pixel height.

	Returns:
		PNG bytes.
	"""
	image = PIL.Image.new("RGB", (width, height), (200, 40, 40))
	buffer = io.BytesIO()
	image.save(buffer, format="PNG")
	return buffer.getvalue()


#============================================
@pytest.fixture
def png_bytes() -> bytes:
	"""
	Landscape PNG image bytes.
	"""
	return make_png_bytes()
