"""
Column width estimation from text lengths.
"""

# Standard Library
import dataclasses

# local repo modules
import table_report_pdf as trp
import table_report_pdf.config
import table_report_pdf.tabular


ReportConfig = trp.config.ReportConfig

CHAR_WIDTH_CM = trp.config.CHAR_WIDTH_CM
MIN_COLUMN_WIDTH_CM = trp.config.MIN_COLUMN_WIDTH_CM
MAX_COLUMN_WIDTH_CM = trp.config.MAX_COLUMN_WIDTH_CM
TABLE_WIDTH_RESERVE_CM = trp.config.TABLE_WIDTH_RESERVE_CM
MAX_PAGE_WIDTH_CM = trp.config.MAX_PAGE_WIDTH_CM


@dataclasses.dataclass(frozen=True)
class ColumnPlan:
	column_widths_cm: tuple[float, ...]
	table_width_cm: float
	page_width_cm: float


#============================================
def clamp(value: float, lower: float, upper: float) -> float:
	"""
	Clamp a value into [lower, upper].

	Args:
		value: Input value.
		lower: Lower bound.
		upper: Upper bound.

	Returns:
		Clamped value.
	"""
	return min(max(value, lower), upper)


#============================================
def compute_max_text_length(table_data: list[list[str]], column_index: int) -> int:
	"""
	Find the longest text in a column, header included.

	Args:
		table_data: Rows of cell text, header row first.
		column_index: Column index.

	Returns:
		Longest cell length, 0 for an empty column.
	"""
	header_value = table_data[0][column_index]
	max_len = len(header_value) if header_value else 0
	for row in table_data[1:]:
		if column_index < len(row) and row[column_index] is not None:
			max_len = max(max_len, len(row[column_index]))
	return max_len


#============================================
def compute_column_widths(
	table_data: list[list[str]],
	char_width_cm: float = CHAR_WIDTH_CM,
	min_width_cm: float = MIN_COLUMN_WIDTH_CM,
	max_width_cm: float = MAX_COLUMN_WIDTH_CM,
) -> list[float]:
	"""
	Estimate column widths from text length.

	Args:
		table_data: Rows of cell text, header row first.
		char_width_cm: Width per character.
		min_width_cm: Narrowest column.
		max_width_cm: Widest column.

	Returns:
		One width per header column, in centimeters.
	"""
	widths: list[float] = []
	for index in range(trp.tabular.column_count(table_data)):
		max_len = compute_max_text_length(table_data, index)
		widths.append(clamp(max_len * char_width_cm, min_width_cm, max_width_cm))
	return widths


#============================================
def compute_page_width(
	column_widths: list[float],
	reserve_cm: float = TABLE_WIDTH_RESERVE_CM,
	max_page_width_cm: float = MAX_PAGE_WIDTH_CM,
) -> float:
	"""
	Derive the table page width from the column widths.

	Args:
		column_widths: Column widths in centimeters.
		reserve_cm: Space added for the side margins.
		max_page_width_cm: Ceiling on the page width.

	Returns:
		Page width in centimeters.
	"""
	return min(sum(column_widths) + reserve_cm, max_page_width_cm)


#============================================
def plan_columns(table_data: list[list[str]], config: ReportConfig) -> ColumnPlan:
	"""
	Compute column widths and page width for a table.

	Args:
		table_data: Rows of cell text, header row first.
		config: Report configuration.

	Returns:
		ColumnPlan.
	"""
	widths = compute_column_widths(
		table_data,
		char_width_cm=config.char_width_cm,
		min_width_cm=config.min_column_width_cm,
		max_width_cm=config.max_column_width_cm,
	)
	page_width = compute_page_width(
		widths,
		reserve_cm=config.table_width_reserve_cm,
		max_page_width_cm=config.max_page_width_cm,
	)
	return ColumnPlan(
		column_widths_cm=tuple(widths),
		table_width_cm=sum(widths),
		page_width_cm=page_width,
	)
