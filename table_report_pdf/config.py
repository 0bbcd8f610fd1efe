"""
Shared configuration and constants.
"""

import dataclasses


POINTS_PER_CM = 72.0 / 2.54

CHAR_WIDTH_CM = 0.2
MIN_COLUMN_WIDTH_CM = 2.0
MAX_COLUMN_WIDTH_CM = 6.0
TABLE_WIDTH_RESERVE_CM = 3.0
MAX_PAGE_WIDTH_CM = 70.0

STANDARD_PAGE_HEIGHT_CM = 29.7
IMAGE_PAGE_WIDTH_CM = 21.0
IMAGE_PAGE_HEIGHT_CM = STANDARD_PAGE_HEIGHT_CM * 3 / 4
IMAGE_WIDTH_CM = 15.0
IMAGE_SPACE_BEFORE_CM = 2.0

DEFAULT_SIDE_MARGIN_CM = 2.5
DEFAULT_TOP_MARGIN_CM = 2.5
DEFAULT_BOTTOM_MARGIN_CM = 2.5
TABLE_SIDE_MARGIN_CM = 1.5
HEADER_DISTANCE_CM = 1.25
FOOTER_DISTANCE_CM = 1.25

SOFT_BREAK_INTERVAL = 20
ZERO_WIDTH_SPACE = "\u200b"

DEFAULT_FONT_REGULAR = "Helvetica"
DEFAULT_FONT_BOLD = "Helvetica-Bold"
TABLE_TEXT_SIZE = 9.0
TABLE_HEADING_TEXT_SIZE = 10.0
CELL_SIDE_PADDING_CM = 0.12
LEADING_FACTOR = 1.2
HEADER_TITLE_SIZE = 12.0
HEADER_SUBTITLE_SIZE = 9.0
HEADER_LOGO_HEIGHT_CM = 1.0
FOOTER_TEXT_SIZE = 8.0
RULE_COLOR = "#808080"

DEFAULT_DOCUMENT_TITLE = "Table Report"
STAGED_IMAGE_PREFIX = "table_report_image_"
STAGED_IMAGE_SUFFIX = ".img"

PAGE_NUMBERING_MODES = ("none", "page", "page_of_total")
PAGE_LABELS = {
	"none": "",
	"page": "Page {page}",
	"page_of_total": "Page {page} of {total}",
}


@dataclasses.dataclass
class HeaderModel:
	title: str = ""
	subtitle: str = ""
	logo_path: str | None = None
	show_date: bool = False
	date_text: str | None = None
	show_rule: bool = True


@dataclasses.dataclass
class FooterModel:
	text: str = ""
	page_numbering: str = "page_of_total"
	page_label: str | None = None
	show_rule: bool = False


@dataclasses.dataclass
class ReportConfig:
	char_width_cm: float = CHAR_WIDTH_CM
	min_column_width_cm: float = MIN_COLUMN_WIDTH_CM
	max_column_width_cm: float = MAX_COLUMN_WIDTH_CM
	table_width_reserve_cm: float = TABLE_WIDTH_RESERVE_CM
	max_page_width_cm: float = MAX_PAGE_WIDTH_CM
	soft_break_interval: int = SOFT_BREAK_INTERVAL
	image_width_cm: float = IMAGE_WIDTH_CM
	staging_dir: str | None = None


#============================================
def cm_to_points(value: float) -> float:
	"""
	Convert centimeters to points.

	Args:
		value: Centimeters value.

	Returns:
		Points value.
	"""
	return value * POINTS_PER_CM
