import json
import pathlib

import pytest

import conftest
import table_report_pdf.cli


cli = table_report_pdf.cli


#============================================
def _write_inputs(tmp_path: pathlib.Path) -> tuple[pathlib.Path, pathlib.Path]:
	"""
	Write an image and a CSV table.

	Args:
		tmp_path: Temporary directory.

	Returns:
		Tuple of (image_path, table_path).
	"""
	image_path = tmp_path / "chart.png"
	image_path.write_bytes(conftest.make_png_bytes())
	table_path = tmp_path / "table.csv"
	table_path.write_text("ID,Name\n1,Alice\n2,Bob\n", encoding="utf-8")
	return image_path, table_path


#============================================
def test_parse_args_defaults() -> None:
	"""
	Defaults match the library defaults.
	"""
	args = cli.parse_args(["chart.png", "table.csv", "-o", "out.pdf"])
	assert args.page_numbering == "page_of_total"
	assert args.soft_break_interval == 20
	assert args.image_width == 15.0
	assert args.show_date is False
	assert args.manifest_path is None


#============================================
def test_parse_args_rejects_unknown_numbering() -> None:
	"""
	Page numbering is limited to known modes.
	"""
	with pytest.raises(SystemExit):
		cli.parse_args(["chart.png", "table.csv", "-o", "out.pdf", "-n", "roman"])


#============================================
def test_run_pipeline_writes_pdf_and_manifest(tmp_path: pathlib.Path, capsys) -> None:
	"""
	The pipeline writes the PDF and a manifest beside it.
	"""
	image_path, table_path = _write_inputs(tmp_path)
	output_path = tmp_path / "out" / "report.pdf"
	args = cli.parse_args([
		str(image_path),
		str(table_path),
		"-o",
		str(output_path),
		"-t",
		"Staff",
		"-f",
		"Draft",
		"--staging-dir",
		str(tmp_path),
	])
	cli.run_pipeline(args)

	assert output_path.read_bytes().startswith(b"%PDF")
	manifest_path = pathlib.Path(f"{output_path}.json")
	manifest = json.loads(manifest_path.read_text(encoding="utf-8"))
	assert manifest["pages"] == 2
	assert manifest["rows"] == 3
	assert manifest["layout"]["title"] == "Staff"
	table_entry = manifest["layout"]["sections"][1]
	assert table_entry["column_widths_cm"] == [2.0, 2.0]
	assert table_entry["page_width_cm"] == 7.0

	captured = capsys.readouterr()
	assert "Pages written: 2" in captured.out
	staged = [path for path in tmp_path.iterdir() if path.name.endswith(".img")]
	assert staged == []


#============================================
def test_run_pipeline_header_only_csv(tmp_path: pathlib.Path) -> None:
	"""
	A CSV with only a header row is rejected before rendering.
	"""
	image_path, table_path = _write_inputs(tmp_path)
	table_path.write_text("ID,Name\n", encoding="utf-8")
	output_path = tmp_path / "report.pdf"
	args = cli.parse_args([str(image_path), str(table_path), "-o", str(output_path)])
	with pytest.raises(ValueError):
		cli.run_pipeline(args)
	assert not output_path.exists()
