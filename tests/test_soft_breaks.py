import pytest

import table_report_pdf.config
import table_report_pdf.table


ZERO_WIDTH_SPACE = table_report_pdf.config.ZERO_WIDTH_SPACE
insert_soft_breaks = table_report_pdf.table.insert_soft_breaks


#============================================
def _marker_source_positions(text: str) -> list[int]:
	"""
	Map each marker to the index of the original character after it.

	Args:
		text: Transformed text.

	Returns:
		Original-text indices that follow a marker.
	"""
	positions: list[int] = []
	original_index = 0
	for char in text:
		if char == ZERO_WIDTH_SPACE:
			positions.append(original_index)
			continue
		original_index += 1
	return positions


#============================================
def test_short_text_unchanged() -> None:
	"""
	Text shorter than the interval is returned as is.
	"""
	assert insert_soft_breaks("short") == "short"
	assert insert_soft_breaks("x" * 19) == "x" * 19


#============================================
def test_empty_text_unchanged() -> None:
	"""
	Empty text stays empty.
	"""
	assert insert_soft_breaks("") == ""


#============================================
def test_exact_interval_has_no_marker() -> None:
	"""
	A 20 character string has no index 20, so no marker.
	"""
	assert insert_soft_breaks("a" * 20) == "a" * 20


#============================================
@pytest.mark.parametrize("length", [21, 40, 41, 97])
def test_markers_strip_back_to_original(length: int) -> None:
	"""
	Removing markers restores the original text.
	"""
	text = "".join(chr(ord("a") + index % 26) for index in range(length))
	result = insert_soft_breaks(text)
	assert result.replace(ZERO_WIDTH_SPACE, "") == text


#============================================
def test_marker_positions_are_interval_multiples() -> None:
	"""
	Markers sit before every 20th character and never at the start.
	"""
	text = "https://example.com/" + "segment" * 10
	result = insert_soft_breaks(text)
	positions = _marker_source_positions(result)
	assert positions == list(range(20, len(text), 20))
	assert not result.startswith(ZERO_WIDTH_SPACE)


#============================================
def test_custom_interval() -> None:
	"""
	The interval is configurable.
	"""
	result = insert_soft_breaks("abcdefghij", interval=4)
	assert result == f"abcd{ZERO_WIDTH_SPACE}efgh{ZERO_WIDTH_SPACE}ij"


#============================================
def test_not_idempotent() -> None:
	"""
	Applying twice inserts extra markers.
	"""
	once = insert_soft_breaks("x" * 45)
	twice = insert_soft_breaks(once)
	assert twice.count(ZERO_WIDTH_SPACE) > once.count(ZERO_WIDTH_SPACE)


#============================================
def test_invalid_interval_rejected() -> None:
	"""
	Non-positive intervals raise ValueError.
	"""
	with pytest.raises(ValueError):
		insert_soft_breaks("x" * 30, interval=0)
