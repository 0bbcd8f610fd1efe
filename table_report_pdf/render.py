"""
ReportLab rendering of composed report documents.
"""

# Standard Library
import io
import re
import xml.sax.saxutils

# PIP3 modules
import PIL.Image
import pypdf
import reportlab.lib.colors
import reportlab.lib.enums
import reportlab.lib.styles
import reportlab.lib.utils
import reportlab.pdfbase.pdfmetrics
import reportlab.pdfgen.canvas
import reportlab.platypus

# local repo modules
import table_report_pdf as trp
import table_report_pdf.config
import table_report_pdf.errors
import table_report_pdf.layout


RenderError = trp.errors.RenderError
PageGeometry = trp.layout.PageGeometry
CellStyle = trp.layout.CellStyle
TableBlock = trp.layout.TableBlock
ImageBlock = trp.layout.ImageBlock
HeaderBlock = trp.layout.HeaderBlock
FooterBlock = trp.layout.FooterBlock
Section = trp.layout.Section
ComposedDocument = trp.layout.ComposedDocument

cm_to_points = trp.config.cm_to_points

DEFAULT_FONT_REGULAR = trp.config.DEFAULT_FONT_REGULAR
DEFAULT_FONT_BOLD = trp.config.DEFAULT_FONT_BOLD
LEADING_FACTOR = trp.config.LEADING_FACTOR
CELL_SIDE_PADDING_CM = trp.config.CELL_SIDE_PADDING_CM
ZERO_WIDTH_SPACE = trp.config.ZERO_WIDTH_SPACE
HEADER_TITLE_SIZE = trp.config.HEADER_TITLE_SIZE
HEADER_SUBTITLE_SIZE = trp.config.HEADER_SUBTITLE_SIZE
HEADER_LOGO_HEIGHT_CM = trp.config.HEADER_LOGO_HEIGHT_CM
FOOTER_TEXT_SIZE = trp.config.FOOTER_TEXT_SIZE
RULE_COLOR = trp.config.RULE_COLOR
RULE_WIDTH = 0.5
RULE_GAP = 4.0
LOGO_GAP = 6.0

# zero-width space is not whitespace for re, so marked words stay whole
WHITESPACE_SPLIT_RE = re.compile(r"(\s+)")

ALIGNMENTS = {
	"LEFT": reportlab.lib.enums.TA_LEFT,
	"CENTER": reportlab.lib.enums.TA_CENTER,
	"RIGHT": reportlab.lib.enums.TA_RIGHT,
}


#============================================
def page_size(geometry: PageGeometry) -> tuple[float, float]:
	"""
	Page size in points.

	Args:
		geometry: Page geometry.

	Returns:
		Tuple of (width, height).
	"""
	return (cm_to_points(geometry.width_cm), cm_to_points(geometry.height_cm))


#============================================
def format_page_label(template: str, page: int, total: int | None) -> str:
	"""
	Fill a page label template.

	Args:
		template: Template using {page} and {total}.
		page: Current page number.
		total: Total page count, or None when unknown.

	Returns:
		Label text.
	"""
	if total is None:
		total_text = "?"
	else:
		total_text = str(total)
	return template.format(page=page, total=total_text)


#============================================
def load_image_reader(path: str) -> reportlab.lib.utils.ImageReader:
	"""
	Decode an image file into a ReportLab image reader.

	Args:
		path: Image path.

	Returns:
		ImageReader instance.
	"""
	with PIL.Image.open(path) as image:
		image.load()
		decoded = image.copy()
	return reportlab.lib.utils.ImageReader(decoded)


#============================================
def build_logo_cache(document: ComposedDocument) -> dict[str, reportlab.lib.utils.ImageReader]:
	"""
	Decode every header logo once per render.

	Args:
		document: Composed document.

	Returns:
		Cache of ImageReader instances keyed by logo path.
	"""
	logo_cache: dict[str, reportlab.lib.utils.ImageReader] = {}
	for section in document.sections:
		if section.header is None or not section.header.logo_path:
			continue
		if section.header.logo_path in logo_cache:
			continue
		logo_cache[section.header.logo_path] = load_image_reader(section.header.logo_path)
	return logo_cache


#============================================
def draw_header(
	pdf: reportlab.pdfgen.canvas.Canvas,
	header: HeaderBlock,
	geometry: PageGeometry,
	logo_cache: dict[str, reportlab.lib.utils.ImageReader],
) -> None:
	"""
	Draw a section header in the top margin.

	Title and subtitle sit on the left, the logo on the right with the
	date to its left, and an optional rule above the content area.

	Args:
		pdf: ReportLab canvas.
		header: Header description.
		geometry: Page geometry.
		logo_cache: Decoded logos.
	"""
	left = cm_to_points(geometry.left_margin_cm)
	right = cm_to_points(geometry.width_cm - geometry.right_margin_cm)
	top = cm_to_points(geometry.height_cm - geometry.header_distance_cm)
	baseline = top - HEADER_TITLE_SIZE

	pdf.saveState()
	date_right = right
	if header.logo_path:
		logo = logo_cache[header.logo_path]
		pixel_width, pixel_height = logo.getSize()
		logo_height = cm_to_points(HEADER_LOGO_HEIGHT_CM)
		logo_width = logo_height * pixel_width / pixel_height
		pdf.drawImage(
			logo,
			right - logo_width,
			top - logo_height,
			width=logo_width,
			height=logo_height,
			mask="auto",
		)
		date_right = right - logo_width - LOGO_GAP

	pdf.setFillColor(reportlab.lib.colors.black)
	if header.title:
		pdf.setFont(DEFAULT_FONT_BOLD, HEADER_TITLE_SIZE)
		pdf.drawString(left, baseline, header.title)
	if header.subtitle:
		pdf.setFont(DEFAULT_FONT_REGULAR, HEADER_SUBTITLE_SIZE)
		pdf.drawString(left, baseline - HEADER_SUBTITLE_SIZE * LEADING_FACTOR, header.subtitle)
	if header.date_text:
		pdf.setFont(DEFAULT_FONT_REGULAR, HEADER_SUBTITLE_SIZE)
		pdf.drawRightString(date_right, baseline, header.date_text)

	if header.show_rule:
		rule_y = cm_to_points(geometry.height_cm - geometry.top_margin_cm) + RULE_GAP
		pdf.setStrokeColor(reportlab.lib.colors.HexColor(RULE_COLOR))
		pdf.setLineWidth(RULE_WIDTH)
		pdf.line(left, rule_y, right, rule_y)
	pdf.restoreState()


#============================================
def draw_footer(
	pdf: reportlab.pdfgen.canvas.Canvas,
	footer: FooterBlock,
	geometry: PageGeometry,
	total_pages: int | None,
) -> None:
	"""
	Draw a section footer in the bottom margin.

	Args:
		pdf: ReportLab canvas.
		footer: Footer description.
		geometry: Page geometry.
		total_pages: Page count of the whole document, or None if unknown.
	"""
	left = cm_to_points(geometry.left_margin_cm)
	right = cm_to_points(geometry.width_cm - geometry.right_margin_cm)
	baseline = cm_to_points(geometry.footer_distance_cm)

	pdf.saveState()
	pdf.setFont(DEFAULT_FONT_REGULAR, FOOTER_TEXT_SIZE)
	pdf.setFillColor(reportlab.lib.colors.HexColor("#404040"))
	if footer.show_rule:
		rule_y = baseline + FOOTER_TEXT_SIZE + RULE_GAP
		pdf.setStrokeColor(reportlab.lib.colors.HexColor(RULE_COLOR))
		pdf.setLineWidth(RULE_WIDTH)
		pdf.line(left, rule_y, right, rule_y)
	if footer.text:
		pdf.drawString(left, baseline, footer.text)
	if footer.page_label:
		label = format_page_label(footer.page_label, pdf.getPageNumber(), total_pages)
		pdf.drawRightString(right, baseline, label)
	pdf.restoreState()


class FooterCanvas(reportlab.pdfgen.canvas.Canvas):
	"""
	Canvas that holds back footers until the page count is known.
	"""

	def __init__(self, *args, **kwargs) -> None:
		super().__init__(*args, **kwargs)
		self.page_footer: tuple[FooterBlock, PageGeometry] | None = None
		self._saved_page_states: list[dict] = []

	def set_page_footer(self, footer: FooterBlock, geometry: PageGeometry) -> None:
		self.page_footer = (footer, geometry)

	def showPage(self) -> None:
		self._saved_page_states.append(dict(self.__dict__))
		self._startPage()
		self.page_footer = None

	def save(self) -> None:
		total_pages = len(self._saved_page_states)
		for state in self._saved_page_states:
			self.__dict__.update(state)
			if self.page_footer is not None:
				footer, geometry = self.page_footer
				draw_footer(self, footer, geometry, total_pages)
			super().showPage()
		super().save()


#============================================
def build_page_template(
	section: Section,
	logo_cache: dict[str, reportlab.lib.utils.ImageReader],
) -> reportlab.platypus.PageTemplate:
	"""
	Build the page template for a section.

	Args:
		section: Section description.
		logo_cache: Decoded logos.

	Returns:
		PageTemplate with the section page size and a single frame.
	"""
	geometry = section.geometry
	frame = reportlab.platypus.Frame(
		cm_to_points(geometry.left_margin_cm),
		cm_to_points(geometry.bottom_margin_cm),
		cm_to_points(geometry.content_width_cm),
		cm_to_points(geometry.content_height_cm),
		leftPadding=0,
		rightPadding=0,
		topPadding=0,
		bottomPadding=0,
		id=f"{section.name}_frame",
	)

	def on_page(pdf: reportlab.pdfgen.canvas.Canvas, doc: reportlab.platypus.BaseDocTemplate) -> None:
		if section.header is not None:
			draw_header(pdf, section.header, geometry, logo_cache)
		if section.footer is None:
			return
		if isinstance(pdf, FooterCanvas):
			pdf.set_page_footer(section.footer, geometry)
		else:
			draw_footer(pdf, section.footer, geometry, None)

	return reportlab.platypus.PageTemplate(
		id=section.name,
		frames=[frame],
		onPage=on_page,
		pagesize=page_size(geometry),
	)


#============================================
def build_image_flowables(block: ImageBlock, geometry: PageGeometry) -> list:
	"""
	Build the spacer and image for an image block.

	The height follows the image aspect ratio. If the result does not fit
	the frame, width and height shrink together.

	Args:
		block: Image description.
		geometry: Page geometry of the section.

	Returns:
		List of flowables.
	"""
	with PIL.Image.open(block.path) as image:
		image.load()
		pixel_width, pixel_height = image.size

	space_before = cm_to_points(block.space_before_cm)
	width = cm_to_points(block.width_cm)
	height = width * pixel_height / pixel_width
	available_width = cm_to_points(geometry.content_width_cm)
	available_height = cm_to_points(geometry.content_height_cm) - space_before
	scale = min(1.0, available_width / width, available_height / height)

	flowable = reportlab.platypus.Image(block.path, width=width * scale, height=height * scale)
	flowable.hAlign = block.align
	return [reportlab.platypus.Spacer(1, space_before), flowable]


#============================================
def build_paragraph_style(style: CellStyle, name: str) -> reportlab.lib.styles.ParagraphStyle:
	"""
	Map a cell style to a paragraph style.

	Args:
		style: Cell style.
		name: Style name.

	Returns:
		ParagraphStyle.
	"""
	font_name = DEFAULT_FONT_BOLD if style.bold else DEFAULT_FONT_REGULAR
	return reportlab.lib.styles.ParagraphStyle(
		name,
		fontName=font_name,
		fontSize=style.font_size,
		leading=style.font_size * LEADING_FACTOR,
		alignment=ALIGNMENTS[style.align],
	)


#============================================
def build_row_commands(row_index: int, style: CellStyle) -> list[tuple]:
	"""
	Table style commands for one row.

	Args:
		row_index: Row index in the table.
		style: Cell style of the row.

	Returns:
		List of TableStyle commands.
	"""
	start = (0, row_index)
	stop = (-1, row_index)
	return [
		("VALIGN", start, stop, style.valign),
		("TOPPADDING", start, stop, cm_to_points(style.padding_top_cm)),
		("BOTTOMPADDING", start, stop, cm_to_points(style.padding_bottom_cm)),
		(
			"LINEBELOW",
			start,
			stop,
			style.border_bottom_width,
			reportlab.lib.colors.HexColor(style.border_bottom_color),
		),
	]


#============================================
def pack_break_segments(
	segments: list[str],
	font_name: str,
	font_size: float,
	max_width: float,
) -> list[str]:
	"""
	Greedily join soft-break segments into chunks that fit a line.

	Args:
		segments: Pieces of one word, split at the soft-break markers.
		font_name: Font used to measure the text.
		font_size: Font size in points.
		max_width: Line width in points.

	Returns:
		List of chunks. A single segment wider than the line stays whole.
	"""
	chunks: list[str] = []
	current = ""
	for segment in segments:
		candidate = current + segment
		width = reportlab.pdfbase.pdfmetrics.stringWidth(candidate, font_name, font_size)
		if current and width > max_width:
			chunks.append(current)
			current = segment
		else:
			current = candidate
	if current:
		chunks.append(current)
	return chunks


#============================================
def build_cell_markup(
	text: str,
	font_name: str,
	font_size: float,
	max_width: float,
) -> str:
	"""
	Resolve soft-break markers into paragraph markup.

	Standard Type1 fonts have no glyph for the zero-width space, so the
	markers never reach the paragraph. A word that fits the line just
	loses its markers. A wider word is cut at the markers into chunks
	that each fit the line, joined by line breaks.

	Args:
		text: Cell text, possibly holding soft-break markers.
		font_name: Font used to measure the text.
		font_size: Font size in points.
		max_width: Usable cell width in points.

	Returns:
		Escaped paragraph markup without soft-break markers.
	"""
	if ZERO_WIDTH_SPACE not in text:
		return xml.sax.saxutils.escape(text)
	pieces: list[str] = []
	for token in WHITESPACE_SPLIT_RE.split(text):
		if ZERO_WIDTH_SPACE not in token:
			pieces.append(xml.sax.saxutils.escape(token))
			continue
		word = token.replace(ZERO_WIDTH_SPACE, "")
		word_width = reportlab.pdfbase.pdfmetrics.stringWidth(word, font_name, font_size)
		if word_width <= max_width:
			pieces.append(xml.sax.saxutils.escape(word))
			continue
		segments = token.split(ZERO_WIDTH_SPACE)
		chunks = pack_break_segments(segments, font_name, font_size, max_width)
		pieces.append("<br/>".join(xml.sax.saxutils.escape(chunk) for chunk in chunks))
	return "".join(pieces)


#============================================
def build_table_flowable(block: TableBlock) -> reportlab.platypus.Table:
	"""
	Build a ReportLab table from a table block.

	Cell text is escaped for paragraph markup and soft-break markers
	become line breaks where a word is wider than its column. Rows taller
	than a page are split across pages.

	Args:
		block: Table description.

	Returns:
		Table flowable with heading rows repeated on each page.
	"""
	side_padding = cm_to_points(CELL_SIDE_PADDING_CM)
	commands: list[tuple] = [
		("LEFTPADDING", (0, 0), (-1, -1), side_padding),
		("RIGHTPADDING", (0, 0), (-1, -1), side_padding),
	]
	text_widths = [
		cm_to_points(column.width_cm) - 2 * side_padding
		for column in block.columns
	]
	paragraph_styles: dict[CellStyle, reportlab.lib.styles.ParagraphStyle] = {}
	data: list[list[reportlab.platypus.Paragraph]] = []
	for row_index, row in enumerate(block.rows):
		if row.style not in paragraph_styles:
			name = f"cell_{len(paragraph_styles)}"
			paragraph_styles[row.style] = build_paragraph_style(row.style, name)
		paragraph_style = paragraph_styles[row.style]
		cells = []
		for cell, text_width in zip(row.cells, text_widths):
			markup = build_cell_markup(
				cell.text,
				paragraph_style.fontName,
				paragraph_style.fontSize,
				text_width,
			)
			cells.append(reportlab.platypus.Paragraph(markup, paragraph_style))
		data.append(cells)
		commands.extend(build_row_commands(row_index, row.style))

	table = reportlab.platypus.Table(
		data,
		colWidths=[cm_to_points(column.width_cm) for column in block.columns],
		repeatRows=block.heading_rows,
		splitInRow=1,
		hAlign="LEFT",
	)
	table.setStyle(reportlab.platypus.TableStyle(commands))
	return table


#============================================
def build_section_flowables(section: Section) -> list:
	"""
	Build the flowables for a section's content.

	Args:
		section: Section description.

	Returns:
		List of flowables.
	"""
	flowables: list = []
	for block in section.content:
		if isinstance(block, ImageBlock):
			flowables.extend(build_image_flowables(block, section.geometry))
		elif isinstance(block, TableBlock):
			flowables.append(build_table_flowable(block))
		else:
			raise TypeError(f"Unsupported block type {type(block).__name__}")
	return flowables


#============================================
def build_pdf(document: ComposedDocument) -> bytes:
	"""
	Lay out and serialize a composed document with ReportLab.

	Args:
		document: Composed document.

	Returns:
		PDF bytes.
	"""
	logo_cache = build_logo_cache(document)
	templates: list[reportlab.platypus.PageTemplate] = []
	story: list = []
	for index, section in enumerate(document.sections):
		templates.append(build_page_template(section, logo_cache))
		if index > 0:
			story.append(reportlab.platypus.NextPageTemplate(section.name))
			story.append(reportlab.platypus.PageBreak())
		story.extend(build_section_flowables(section))

	buffer = io.BytesIO()
	first_geometry = document.sections[0].geometry
	doc = reportlab.platypus.BaseDocTemplate(
		buffer,
		pagesize=page_size(first_geometry),
		title=document.title,
		author=document.author,
	)
	doc.addPageTemplates(templates)
	doc.build(story, canvasmaker=FooterCanvas)
	pdf_bytes = buffer.getvalue()
	buffer.close()
	return pdf_bytes


#============================================
def render_document(document: ComposedDocument) -> bytes:
	"""
	Render a composed document to PDF bytes.

	Args:
		document: Composed document.

	Returns:
		Complete PDF bytes.

	Raises:
		RenderError: If the engine fails for any reason.
	"""
	if not document.sections:
		raise RenderError("Document has no sections to render.")
	try:
		return build_pdf(document)
	except Exception as error:
		raise RenderError(f"Could not render {document.title!r}: {error}") from error


#============================================
def count_pages(pdf_bytes: bytes) -> int:
	"""
	Count the pages of a rendered PDF.

	Args:
		pdf_bytes: PDF bytes.

	Returns:
		Page count.
	"""
	reader = pypdf.PdfReader(io.BytesIO(pdf_bytes))
	return len(reader.pages)
