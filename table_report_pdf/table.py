"""
Table construction for the data section.
"""

# local repo modules
import table_report_pdf as trp
import table_report_pdf.config
import table_report_pdf.layout
import table_report_pdf.tabular


CellStyle = trp.layout.CellStyle
CellSpec = trp.layout.CellSpec
RowSpec = trp.layout.RowSpec
ColumnSpec = trp.layout.ColumnSpec
TableBlock = trp.layout.TableBlock

SOFT_BREAK_INTERVAL = trp.config.SOFT_BREAK_INTERVAL
ZERO_WIDTH_SPACE = trp.config.ZERO_WIDTH_SPACE
TABLE_TEXT_SIZE = trp.config.TABLE_TEXT_SIZE

HEADING_CELL_STYLE = CellStyle(
	bold=True,
	font_size=trp.config.TABLE_HEADING_TEXT_SIZE,
	align="LEFT",
	valign="MIDDLE",
	padding_top_cm=0.3,
	padding_bottom_cm=0.3,
	border_bottom_width=0.5,
	border_bottom_color="#000000",
)

DATA_CELL_STYLE = CellStyle(
	bold=False,
	font_size=TABLE_TEXT_SIZE,
	align="LEFT",
	valign="MIDDLE",
	padding_top_cm=0.1,
	padding_bottom_cm=0.1,
	border_bottom_width=0.5,
	border_bottom_color="#808080",
)


#============================================
def insert_soft_breaks(text: str, interval: int = SOFT_BREAK_INTERVAL) -> str:
	"""
	Insert zero-width break opportunities into long text.

	A marker goes before every character whose index is a positive
	multiple of the interval. Text shorter than the interval is returned
	unchanged. Not idempotent: apply once per cell.

	Args:
		text: Cell text.
		interval: Characters between markers.

	Returns:
		Text with markers inserted.
	"""
	if interval <= 0:
		raise ValueError(f"Soft break interval must be positive, got {interval}")
	if not text or len(text) < interval:
		return text
	pieces: list[str] = []
	for index, char in enumerate(text):
		if index > 0 and index % interval == 0:
			pieces.append(ZERO_WIDTH_SPACE)
		pieces.append(char)
	return "".join(pieces)


#============================================
def build_row(
	values: list[str],
	style: CellStyle,
	interval: int,
	heading: bool = False,
) -> RowSpec:
	"""
	Build one table row.

	Args:
		values: Cell text, already fitted to the column count.
		style: Style for every cell in the row.
		interval: Soft break interval.
		heading: Whether the row repeats at the top of each page.

	Returns:
		RowSpec.
	"""
	cells = tuple(CellSpec(text=insert_soft_breaks(value, interval)) for value in values)
	return RowSpec(cells=cells, style=style, heading=heading)


#============================================
def build_table_block(
	table_data: list[list[str]],
	column_widths: list[float] | tuple[float, ...],
	interval: int = SOFT_BREAK_INTERVAL,
) -> TableBlock:
	"""
	Build the table description from header and data rows.

	Args:
		table_data: Rows of cell text, header row first.
		column_widths: Width per column in centimeters.
		interval: Soft break interval.

	Returns:
		TableBlock with one heading row followed by the data rows.
	"""
	count = trp.tabular.column_count(table_data)
	if len(column_widths) != count:
		raise ValueError(f"Expected {count} column widths, got {len(column_widths)}")
	columns = tuple(
		ColumnSpec(index=index, width_cm=width)
		for index, width in enumerate(column_widths)
	)
	header_values = trp.tabular.normalize_row(table_data[0], count)
	rows = [build_row(header_values, HEADING_CELL_STYLE, interval, heading=True)]
	for row in table_data[1:]:
		values = trp.tabular.normalize_row(row, count)
		rows.append(build_row(values, DATA_CELL_STYLE, interval))
	return TableBlock(columns=columns, rows=tuple(rows))
