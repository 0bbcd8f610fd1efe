import table_report_pdf.config
import table_report_pdf.render
import table_report_pdf.table


render = table_report_pdf.render
ZERO_WIDTH_SPACE = table_report_pdf.config.ZERO_WIDTH_SPACE
FONT = table_report_pdf.config.DEFAULT_FONT_REGULAR


#============================================
def test_plain_text_is_escaped() -> None:
	"""
	Text without markers is only escaped.
	"""
	assert render.build_cell_markup("a<b & c", FONT, 9.0, 100.0) == "a&lt;b &amp; c"


#============================================
def test_markers_dropped_when_word_fits() -> None:
	"""
	Words that fit the line lose their markers and stay whole.
	"""
	text = table_report_pdf.table.insert_soft_breaks("abcdefghijklmnopqrstuvwxyz")
	assert render.build_cell_markup(text, FONT, 9.0, 500.0) == "abcdefghijklmnopqrstuvwxyz"


#============================================
def test_wide_word_breaks_at_markers() -> None:
	"""
	A word wider than the line is cut at the markers into fitting chunks.
	"""
	text = table_report_pdf.table.insert_soft_breaks("A" * 120)
	markup = render.build_cell_markup(text, FONT, 9.0, 160.0)
	assert markup == "<br/>".join(["A" * 20] * 6)
	assert ZERO_WIDTH_SPACE not in markup


#============================================
def test_chunks_pack_several_segments() -> None:
	"""
	Segments are joined while they fit the line.
	"""
	text = table_report_pdf.table.insert_soft_breaks("i" * 100)
	markup = render.build_cell_markup(text, FONT, 9.0, 100.0)
	chunks = markup.split("<br/>")
	assert "".join(chunks) == "i" * 100
	assert len(chunks[0]) == 40


#============================================
def test_surrounding_words_kept() -> None:
	"""
	Only the marked word changes; neighbours and spacing are kept.
	"""
	marked = ZERO_WIDTH_SPACE.join(["W" * 10, "W" * 20, "W" * 10])
	text = "id: " + marked + " <end>"
	markup = render.build_cell_markup(text, FONT, 9.0, 200.0)
	assert markup.startswith("id: ")
	assert markup.endswith(" &lt;end&gt;")
	assert markup.replace("<br/>", "") == "id: " + "W" * 40 + " &lt;end&gt;"
	assert ZERO_WIDTH_SPACE not in markup
