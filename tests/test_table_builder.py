import pytest

import table_report_pdf.config
import table_report_pdf.table


table = table_report_pdf.table
ZERO_WIDTH_SPACE = table_report_pdf.config.ZERO_WIDTH_SPACE


#============================================
def test_every_row_has_header_column_count() -> None:
	"""
	Short and long data rows are fitted to the header.
	"""
	table_data = [["A", "B", "C"], ["1"], ["1", "2", "3", "4"], []]
	block = table.build_table_block(table_data, [2.0, 2.0, 2.0])
	assert len(block.columns) == 3
	assert len(block.rows) == 4
	for row in block.rows:
		assert len(row.cells) == 3


#============================================
def test_missing_cells_are_empty_text() -> None:
	"""
	Missing cells render as empty strings.
	"""
	block = table.build_table_block([["ID", "Name", "Email"], ["7"]], [2.0, 2.0, 2.0])
	data_row = block.rows[1]
	assert [cell.text for cell in data_row.cells] == ["7", "", ""]


#============================================
def test_heading_and_data_styles() -> None:
	"""
	The first row is a bold heading with a black rule, data rows use gray rules.
	"""
	block = table.build_table_block([["ID"], ["1"], ["2"]], [2.0])
	heading = block.rows[0]
	assert heading.heading
	assert heading.style.bold
	assert heading.style.font_size == 10.0
	assert heading.style.border_bottom_color == "#000000"
	assert block.heading_rows == 1
	for row in block.rows[1:]:
		assert not row.heading
		assert not row.style.bold
		assert row.style.font_size == 9.0
		assert row.style.border_bottom_color == "#808080"
		assert row.style.padding_top_cm < heading.style.padding_top_cm


#============================================
def test_long_cells_get_soft_breaks() -> None:
	"""
	Header and data cells both get wrap markers.
	"""
	long_text = "x" * 30
	block = table.build_table_block([[long_text], [long_text]], [6.0])
	for row in block.rows:
		assert ZERO_WIDTH_SPACE in row.cells[0].text
		assert row.cells[0].text.replace(ZERO_WIDTH_SPACE, "") == long_text


#============================================
def test_column_widths_carried() -> None:
	"""
	Column specs keep their index and width.
	"""
	block = table.build_table_block([["A", "B"], ["1", "2"]], (2.5, 4.0))
	assert [(column.index, column.width_cm) for column in block.columns] == [(0, 2.5), (1, 4.0)]


#============================================
def test_width_count_mismatch_rejected() -> None:
	"""
	A width per header column is required.
	"""
	with pytest.raises(ValueError):
		table.build_table_block([["A", "B"], ["1", "2"]], [2.0])
