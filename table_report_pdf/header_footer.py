"""
Header and footer layout for report sections.
"""

# Standard Library
import datetime

# local repo modules
import table_report_pdf as trp
import table_report_pdf.config
import table_report_pdf.layout


HeaderModel = trp.config.HeaderModel
FooterModel = trp.config.FooterModel
Section = trp.layout.Section
HeaderBlock = trp.layout.HeaderBlock
FooterBlock = trp.layout.FooterBlock

PAGE_NUMBERING_MODES = trp.config.PAGE_NUMBERING_MODES
PAGE_LABELS = trp.config.PAGE_LABELS


#============================================
def resolve_date_text(header_model: HeaderModel) -> str:
	"""
	Pick the date shown in the header.

	Args:
		header_model: Header options.

	Returns:
		Date text, or an empty string when no date is shown.
	"""
	if not header_model.show_date:
		return ""
	if header_model.date_text:
		return header_model.date_text
	return datetime.date.today().isoformat()


#============================================
def build_header(section: Section, header_model: HeaderModel) -> Section:
	"""
	Attach a header to a section.

	Args:
		section: Section to decorate.
		header_model: Header options.

	Returns:
		Copy of the section with its header set.
	"""
	header = HeaderBlock(
		title=header_model.title or "",
		subtitle=header_model.subtitle or "",
		logo_path=header_model.logo_path,
		date_text=resolve_date_text(header_model),
		show_rule=header_model.show_rule,
	)
	return section.with_header(header)


#============================================
def resolve_page_label(footer_model: FooterModel) -> str:
	"""
	Pick the page-number label template for a footer.

	Args:
		footer_model: Footer options.

	Returns:
		Template using {page} and {total}, or an empty string.
	"""
	mode = footer_model.page_numbering
	if mode not in PAGE_NUMBERING_MODES:
		raise ValueError(
			f"Unknown page numbering mode {mode!r}, expected one of {PAGE_NUMBERING_MODES}"
		)
	if mode == "none":
		return ""
	if footer_model.page_label:
		return footer_model.page_label
	return PAGE_LABELS[mode]


#============================================
def build_footer(section: Section, footer_model: FooterModel) -> Section:
	"""
	Attach a footer to a section.

	Args:
		section: Section to decorate.
		footer_model: Footer options.

	Returns:
		Copy of the section with its footer set.
	"""
	footer = FooterBlock(
		text=footer_model.text or "",
		page_label=resolve_page_label(footer_model),
		show_rule=footer_model.show_rule,
	)
	return section.with_footer(footer)
