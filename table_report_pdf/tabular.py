"""
Table data validation and normalization.
"""

# Standard Library
import csv
import pathlib

# local repo modules
import table_report_pdf as trp
import table_report_pdf.errors


InvalidInputError = trp.errors.InvalidInputError


#============================================
def validate_table_data(table_data: list[list[str]] | None) -> None:
	"""
	Reject table data without a header row and at least one data row.

	Args:
		table_data: Rows of cell text, header row first.

	Raises:
		InvalidInputError: If the data is missing or has fewer than 2 rows.
	"""
	if table_data is None:
		raise InvalidInputError("Table data is required.")
	if len(table_data) < 2:
		raise InvalidInputError(
			"Table data must have at least one header row and one data row."
		)


#============================================
def column_count(table_data: list[list[str]]) -> int:
	"""
	Count columns, defined by the header row.

	Args:
		table_data: Rows of cell text, header row first.

	Returns:
		Number of columns.
	"""
	return len(table_data[0])


#============================================
def normalize_row(row: list[str | None], count: int) -> list[str]:
	"""
	Fit a row to the column count.

	Missing and None cells become empty strings, extra cells are dropped.

	Args:
		row: Row cells.
		count: Column count.

	Returns:
		List of exactly `count` strings.
	"""
	cells: list[str] = []
	for index in range(count):
		value = None
		if index < len(row):
			value = row[index]
		cells.append(value if value is not None else "")
	return cells


#============================================
def read_table_csv(path: pathlib.Path, delimiter: str = ",") -> list[list[str]]:
	"""
	Read table rows from a CSV file.

	Args:
		path: CSV path.
		delimiter: Field delimiter.

	Returns:
		Rows of cell text, header row first. Blank lines are skipped.
	"""
	rows: list[list[str]] = []
	with pathlib.Path(path).open("r", encoding="utf-8-sig", newline="") as handle:
		reader = csv.reader(handle, delimiter=delimiter)
		for row in reader:
			if not row:
				continue
			rows.append(row)
	return rows
