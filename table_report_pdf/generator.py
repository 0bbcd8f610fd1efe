"""
Report generation entry point.
"""

# Standard Library
import typing

# local repo modules
import table_report_pdf as trp
import table_report_pdf.compose
import table_report_pdf.config
import table_report_pdf.errors
import table_report_pdf.layout
import table_report_pdf.render
import table_report_pdf.staging
import table_report_pdf.tabular


HeaderModel = trp.config.HeaderModel
FooterModel = trp.config.FooterModel
ReportConfig = trp.config.ReportConfig
ComposedDocument = trp.layout.ComposedDocument


#============================================
def compose_and_render(
	image_stream: typing.BinaryIO,
	table_data: list[list[str]],
	header_model: HeaderModel,
	footer_model: FooterModel,
	config: ReportConfig,
) -> tuple[ComposedDocument, bytes]:
	"""
	Stage the image, compose the document and render it.

	Args:
		image_stream: Readable binary stream with the raster image.
		table_data: Validated rows of cell text, header row first.
		header_model: Header options.
		footer_model: Footer options.
		config: Report configuration.

	Returns:
		Tuple of (composed document, PDF bytes).
	"""
	with trp.staging.stage_image(image_stream, config.staging_dir) as image_path:
		document = trp.compose.compose_document(
			image_path,
			table_data,
			header_model,
			footer_model,
			config,
		)
		pdf_bytes = trp.render.render_document(document)
	return document, pdf_bytes


#============================================
def generate(
	image_stream: typing.BinaryIO,
	table_data: list[list[str]],
	header_model: HeaderModel | None = None,
	footer_model: FooterModel | None = None,
	config: ReportConfig | None = None,
) -> bytes:
	"""
	Render a PDF with an image page followed by a table.

	Table data is validated before the image is staged. The staged image
	file is removed on every exit path.

	Args:
		image_stream: Readable binary stream with the raster image.
		table_data: Rows of cell text, header row first.
		header_model: Header options, defaults when None.
		footer_model: Footer options, defaults when None.
		config: Report configuration, defaults when None.

	Returns:
		PDF bytes.

	Raises:
		InvalidInputError: Table data has fewer than 2 rows or no image stream was given.
		ImageStagingError: The image could not be read or staged.
		RenderError: The rendering engine failed.
	"""
	trp.tabular.validate_table_data(table_data)
	if image_stream is None:
		raise trp.errors.InvalidInputError("An image stream is required.")
	header_model = header_model or HeaderModel()
	footer_model = footer_model or FooterModel()
	config = config or ReportConfig()

	_document, pdf_bytes = compose_and_render(
		image_stream,
		table_data,
		header_model,
		footer_model,
		config,
	)
	return pdf_bytes
