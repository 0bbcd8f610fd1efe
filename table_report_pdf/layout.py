"""
Engine-neutral description of a composed report document.

The composer builds these values and the renderer consumes them once.
All sizes are centimeters except font sizes and rule widths, which are
points.
"""

# Standard Library
import dataclasses


@dataclasses.dataclass(frozen=True)
class PageGeometry:
	width_cm: float
	height_cm: float
	left_margin_cm: float
	right_margin_cm: float
	top_margin_cm: float
	bottom_margin_cm: float
	header_distance_cm: float
	footer_distance_cm: float

	@property
	def content_width_cm(self) -> float:
		return self.width_cm - self.left_margin_cm - self.right_margin_cm

	@property
	def content_height_cm(self) -> float:
		return self.height_cm - self.top_margin_cm - self.bottom_margin_cm


@dataclasses.dataclass(frozen=True)
class CellStyle:
	bold: bool
	font_size: float
	align: str
	valign: str
	padding_top_cm: float
	padding_bottom_cm: float
	border_bottom_width: float
	border_bottom_color: str


@dataclasses.dataclass(frozen=True)
class CellSpec:
	text: str


@dataclasses.dataclass(frozen=True)
class RowSpec:
	cells: tuple[CellSpec, ...]
	style: CellStyle
	heading: bool = False


@dataclasses.dataclass(frozen=True)
class ColumnSpec:
	index: int
	width_cm: float


@dataclasses.dataclass(frozen=True)
class TableBlock:
	columns: tuple[ColumnSpec, ...]
	rows: tuple[RowSpec, ...]

	@property
	def heading_rows(self) -> int:
		count = 0
		for row in self.rows:
			if not row.heading:
				break
			count += 1
		return count


@dataclasses.dataclass(frozen=True)
class ImageBlock:
	path: str
	width_cm: float
	space_before_cm: float
	align: str = "CENTER"


@dataclasses.dataclass(frozen=True)
class HeaderBlock:
	title: str
	subtitle: str
	logo_path: str | None
	date_text: str
	show_rule: bool


@dataclasses.dataclass(frozen=True)
class FooterBlock:
	text: str
	page_label: str
	show_rule: bool

	@property
	def needs_total(self) -> bool:
		return "{total}" in self.page_label


@dataclasses.dataclass(frozen=True)
class Section:
	name: str
	geometry: PageGeometry
	content: tuple[ImageBlock | TableBlock, ...]
	header: HeaderBlock | None = None
	footer: FooterBlock | None = None

	def with_header(self, header: HeaderBlock) -> "Section":
		return dataclasses.replace(self, header=header)

	def with_footer(self, footer: FooterBlock) -> "Section":
		return dataclasses.replace(self, footer=footer)


@dataclasses.dataclass(frozen=True)
class ComposedDocument:
	title: str
	author: str
	sections: tuple[Section, ...]

	def section(self, name: str) -> Section:
		for section in self.sections:
			if section.name == name:
				return section
		raise KeyError(name)
