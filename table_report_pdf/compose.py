"""
Document composition: the image section followed by the table section.
"""

# Standard Library
import pathlib

# local repo modules
import table_report_pdf as trp
import table_report_pdf.config
import table_report_pdf.header_footer
import table_report_pdf.layout
import table_report_pdf.sizing
import table_report_pdf.table


HeaderModel = trp.config.HeaderModel
FooterModel = trp.config.FooterModel
ReportConfig = trp.config.ReportConfig
PageGeometry = trp.layout.PageGeometry
ImageBlock = trp.layout.ImageBlock
TableBlock = trp.layout.TableBlock
Section = trp.layout.Section
ComposedDocument = trp.layout.ComposedDocument

IMAGE_SECTION = "image"
TABLE_SECTION = "table"
DOCUMENT_AUTHOR = "table-report-pdf"


#============================================
def build_image_geometry() -> PageGeometry:
	"""
	Page geometry for the image section.

	Returns:
		PageGeometry with a shortened page height.
	"""
	return PageGeometry(
		width_cm=trp.config.IMAGE_PAGE_WIDTH_CM,
		height_cm=trp.config.IMAGE_PAGE_HEIGHT_CM,
		left_margin_cm=trp.config.DEFAULT_SIDE_MARGIN_CM,
		right_margin_cm=trp.config.DEFAULT_SIDE_MARGIN_CM,
		top_margin_cm=trp.config.DEFAULT_TOP_MARGIN_CM,
		bottom_margin_cm=trp.config.DEFAULT_BOTTOM_MARGIN_CM,
		header_distance_cm=trp.config.HEADER_DISTANCE_CM,
		footer_distance_cm=trp.config.FOOTER_DISTANCE_CM,
	)


#============================================
def build_table_geometry(page_width_cm: float) -> PageGeometry:
	"""
	Page geometry for the table section.

	Args:
		page_width_cm: Page width derived from the column widths.

	Returns:
		PageGeometry with fixed side margins and full page height.
	"""
	return PageGeometry(
		width_cm=page_width_cm,
		height_cm=trp.config.STANDARD_PAGE_HEIGHT_CM,
		left_margin_cm=trp.config.TABLE_SIDE_MARGIN_CM,
		right_margin_cm=trp.config.TABLE_SIDE_MARGIN_CM,
		top_margin_cm=trp.config.DEFAULT_TOP_MARGIN_CM,
		bottom_margin_cm=trp.config.DEFAULT_BOTTOM_MARGIN_CM,
		header_distance_cm=trp.config.HEADER_DISTANCE_CM,
		footer_distance_cm=trp.config.FOOTER_DISTANCE_CM,
	)


#============================================
def decorate_section(
	section: Section,
	header_model: HeaderModel,
	footer_model: FooterModel,
) -> Section:
	"""
	Attach header and footer to a section.

	Args:
		section: Undecorated section.
		header_model: Header options.
		footer_model: Footer options.

	Returns:
		Section with header and footer.
	"""
	section = trp.header_footer.build_header(section, header_model)
	section = trp.header_footer.build_footer(section, footer_model)
	return section


#============================================
def build_image_section(
	image_path: pathlib.Path | str,
	header_model: HeaderModel,
	footer_model: FooterModel,
	config: ReportConfig,
) -> Section:
	"""
	Build the title page holding the centered image.

	Args:
		image_path: Staged image file.
		header_model: Header options.
		footer_model: Footer options.
		config: Report configuration.

	Returns:
		Image section.
	"""
	image = ImageBlock(
		path=str(image_path),
		width_cm=config.image_width_cm,
		space_before_cm=trp.config.IMAGE_SPACE_BEFORE_CM,
		align="CENTER",
	)
	section = Section(
		name=IMAGE_SECTION,
		geometry=build_image_geometry(),
		content=(image,),
	)
	return decorate_section(section, header_model, footer_model)


#============================================
def build_table_section(
	table_data: list[list[str]],
	header_model: HeaderModel,
	footer_model: FooterModel,
	config: ReportConfig,
) -> Section:
	"""
	Build the table section sized to its columns.

	Args:
		table_data: Rows of cell text, header row first.
		header_model: Header options.
		footer_model: Footer options.
		config: Report configuration.

	Returns:
		Table section.
	"""
	plan = trp.sizing.plan_columns(table_data, config)
	table = trp.table.build_table_block(
		table_data,
		plan.column_widths_cm,
		interval=config.soft_break_interval,
	)
	section = Section(
		name=TABLE_SECTION,
		geometry=build_table_geometry(plan.page_width_cm),
		content=(table,),
	)
	return decorate_section(section, header_model, footer_model)


#============================================
def compose_document(
	image_path: pathlib.Path | str,
	table_data: list[list[str]],
	header_model: HeaderModel,
	footer_model: FooterModel,
	config: ReportConfig | None = None,
) -> ComposedDocument:
	"""
	Compose the full report: image section, then table section.

	Args:
		image_path: Staged image file.
		table_data: Rows of cell text, header row first.
		header_model: Header options.
		footer_model: Footer options.
		config: Report configuration, defaults when None.

	Returns:
		ComposedDocument ready for rendering.
	"""
	config = config or ReportConfig()
	image_section = build_image_section(image_path, header_model, footer_model, config)
	table_section = build_table_section(table_data, header_model, footer_model, config)
	title = header_model.title or trp.config.DEFAULT_DOCUMENT_TITLE
	return ComposedDocument(
		title=title,
		author=DOCUMENT_AUTHOR,
		sections=(image_section, table_section),
	)


#============================================
def find_table(section: Section) -> TableBlock | None:
	"""
	Find the first table in a section.

	Args:
		section: Section to search.

	Returns:
		TableBlock or None.
	"""
	for block in section.content:
		if isinstance(block, TableBlock):
			return block
	return None


#============================================
def summarize_document(document: ComposedDocument) -> dict:
	"""
	Summarize page sizes and the column plan.

	Args:
		document: Composed document.

	Returns:
		JSON-serializable dict.
	"""
	sections = []
	for section in document.sections:
		entry = {
			"name": section.name,
			"page_width_cm": round(section.geometry.width_cm, 4),
			"page_height_cm": round(section.geometry.height_cm, 4),
		}
		table = find_table(section)
		if table is not None:
			entry["column_widths_cm"] = [round(column.width_cm, 4) for column in table.columns]
			entry["data_rows"] = len(table.rows) - table.heading_rows
		sections.append(entry)
	return {
		"title": document.title,
		"sections": sections,
	}
