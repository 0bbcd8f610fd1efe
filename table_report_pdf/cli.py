"""
CLI entry points for CSV to PDF table reports.
"""

# Standard Library
import argparse
import json
import pathlib
import time

# local repo modules
import table_report_pdf as trp
import table_report_pdf.compose
import table_report_pdf.config
import table_report_pdf.generator
import table_report_pdf.layout
import table_report_pdf.render
import table_report_pdf.tabular


HeaderModel = trp.config.HeaderModel
FooterModel = trp.config.FooterModel
ReportConfig = trp.config.ReportConfig
ComposedDocument = trp.layout.ComposedDocument

PAGE_NUMBERING_MODES = trp.config.PAGE_NUMBERING_MODES


#============================================
def build_report_config(args: argparse.Namespace) -> ReportConfig:
	"""
	Build report config from CLI args.

	Args:
		args: Parsed argparse namespace.

	Returns:
		ReportConfig.
	"""
	return ReportConfig(
		char_width_cm=trp.config.CHAR_WIDTH_CM,
		min_column_width_cm=trp.config.MIN_COLUMN_WIDTH_CM,
		max_column_width_cm=trp.config.MAX_COLUMN_WIDTH_CM,
		table_width_reserve_cm=trp.config.TABLE_WIDTH_RESERVE_CM,
		max_page_width_cm=trp.config.MAX_PAGE_WIDTH_CM,
		soft_break_interval=args.soft_break_interval,
		image_width_cm=args.image_width,
		staging_dir=args.staging_dir,
	)


#============================================
def build_header_model(args: argparse.Namespace) -> HeaderModel:
	"""
	Build header options from CLI args.

	Args:
		args: Parsed argparse namespace.

	Returns:
		HeaderModel.
	"""
	return HeaderModel(
		title=args.title,
		subtitle=args.subtitle,
		logo_path=args.logo_path,
		show_date=args.show_date,
		date_text=None,
		show_rule=True,
	)


#============================================
def build_footer_model(args: argparse.Namespace) -> FooterModel:
	"""
	Build footer options from CLI args.

	Args:
		args: Parsed argparse namespace.

	Returns:
		FooterModel.
	"""
	return FooterModel(
		text=args.footer_text,
		page_numbering=args.page_numbering,
		page_label=None,
		show_rule=False,
	)


#============================================
def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
	"""
	Parse command line arguments.

	Args:
		argv: Argument list, or None for sys.argv.

	Returns:
		Parsed argparse namespace.
	"""
	parser = argparse.ArgumentParser(description="Render an image and a CSV table into a PDF report.")
	parser.add_argument("image_path", help="Raster image for the first page.")
	parser.add_argument("table_path", help="CSV file, header row first.")

	output_group = parser.add_argument_group("Output")
	output_group.add_argument("-o", "--output", dest="output_path", required=True, help="Output PDF path.")
	output_group.add_argument("-m", "--manifest", dest="manifest_path", default=None, help="Output manifest JSON path.")

	header_group = parser.add_argument_group("Header and footer")
	header_group.add_argument("-t", "--title", dest="title", default="", help="Header title.")
	header_group.add_argument("-s", "--subtitle", dest="subtitle", default="", help="Header subtitle.")
	header_group.add_argument("-l", "--logo", dest="logo_path", default=None, help="Header logo image.")
	header_group.add_argument("-d", "--show-date", dest="show_date", action="store_true", help="Show today's date in the header.")
	header_group.add_argument("-D", "--no-show-date", dest="show_date", action="store_false", help="Hide the header date.")
	header_group.add_argument("-f", "--footer-text", dest="footer_text", default="", help="Footer text.")
	header_group.add_argument(
		"-n",
		"--page-numbering",
		dest="page_numbering",
		choices=PAGE_NUMBERING_MODES,
		default="page_of_total",
		help="Footer page numbering mode.",
	)

	layout_group = parser.add_argument_group("Layout")
	layout_group.add_argument("--delimiter", dest="delimiter", default=",", help="CSV delimiter.")
	layout_group.add_argument(
		"--soft-break-interval",
		dest="soft_break_interval",
		type=int,
		default=trp.config.SOFT_BREAK_INTERVAL,
		help="Characters between wrap opportunities in long cells.",
	)
	layout_group.add_argument(
		"--image-width",
		dest="image_width",
		type=float,
		default=trp.config.IMAGE_WIDTH_CM,
		help="Image width on the first page in centimeters.",
	)
	layout_group.add_argument("--staging-dir", dest="staging_dir", default=None, help="Directory for the staged image.")

	parser.set_defaults(show_date=False)

	args = parser.parse_args(argv)
	return args


#============================================
def write_manifest(
	manifest_path: pathlib.Path,
	args: argparse.Namespace,
	document: ComposedDocument,
	row_count: int,
	pages: int,
) -> None:
	"""
	Write a manifest JSON file.

	Args:
		manifest_path: Output path.
		args: Parsed argparse namespace.
		document: Composed document.
		row_count: Rows read from the CSV, header included.
		pages: Pages in the rendered PDF.
	"""
	data = {
		"inputs": {
			"image": str(args.image_path),
			"table": str(args.table_path),
		},
		"output": str(args.output_path),
		"rows": row_count,
		"pages": pages,
		"layout": trp.compose.summarize_document(document),
		"fonts": {
			"regular": trp.config.DEFAULT_FONT_REGULAR,
			"bold": trp.config.DEFAULT_FONT_BOLD,
		},
	}
	with manifest_path.open("w", encoding="utf-8") as handle:
		json.dump(data, handle, indent=2, sort_keys=True)


#============================================
def run_pipeline(args: argparse.Namespace) -> None:
	"""
	Run the full pipeline from CSV and image input to PDF output.

	Args:
		args: Parsed argparse namespace.
	"""
	print("Table report pipeline")
	print(f"Image: {args.image_path}")
	print(f"Table: {args.table_path}")
	print(f"Output PDF: {args.output_path}")
	if args.manifest_path:
		print(f"Manifest: {args.manifest_path}")
	print(f"Page numbering: {args.page_numbering}")

	start_time = time.perf_counter()
	table_data = trp.tabular.read_table_csv(pathlib.Path(args.table_path), args.delimiter)
	print(f"Rows read: {len(table_data)}")
	trp.tabular.validate_table_data(table_data)
	print(f"Columns: {trp.tabular.column_count(table_data)}")

	config = build_report_config(args)
	header_model = build_header_model(args)
	footer_model = build_footer_model(args)

	print("Rendering PDF")
	render_start = time.perf_counter()
	with open(args.image_path, "rb") as image_stream:
		document, pdf_bytes = trp.generator.compose_and_render(
			image_stream,
			table_data,
			header_model,
			footer_model,
			config,
		)
	render_end = time.perf_counter()
	table_section = document.section(trp.compose.TABLE_SECTION)
	print(f"Table page width: {table_section.geometry.width_cm:.2f} cm")

	output_path = pathlib.Path(args.output_path)
	output_path.parent.mkdir(parents=True, exist_ok=True)
	output_path.write_bytes(pdf_bytes)
	pages = trp.render.count_pages(pdf_bytes)
	print(f"Pages written: {pages}")

	manifest_path = args.manifest_path
	if manifest_path is None:
		manifest_path = f"{output_path}.json"
	write_manifest(pathlib.Path(manifest_path), args, document, len(table_data), pages)

	total_time = time.perf_counter() - start_time
	print(
		"Timing: render={:.2f}s total={:.2f}s".format(
			render_end - render_start,
			total_time,
		)
	)
	print(f"Manifest written: {manifest_path}")


#============================================
def main() -> None:
	"""
	Main entry point.
	"""
	args = parse_args()
	run_pipeline(args)
