"""
A finished drawing: just the paths the turtle's pen traced.

Coordinates are turtle coordinates: y increases upward and heading 0 is east.
Getting from there to pixels is up to whoever paints the picture, although
to_svg is provided because it is so handy.
"""
import math
from typing import NamedTuple, Sequence, Iterable, Iterator

class Point(NamedTuple):
	x: float
	y: float
	
	def distance(self, other:"Point") -> float:
		return math.hypot(self.x - other.x, self.y - other.y)
	
	def __str__(self): return "(%.2f, %.2f)"%(self.x, self.y)

RGB = tuple[float, float, float]
BLACK = (0.0, 0.0, 0.0)

class Style(NamedTuple):
	color: RGB
	width: float

class Path(NamedTuple):
	"""
	Points traced while the pen was continuously down.
	
	The path starts out in the given color and width. A change of pen while
	the path is under way goes in `restyled` as (index, style): the segments
	from that point onward use the new style.
	"""
	points: tuple[Point, ...]
	color: RGB = BLACK
	width: float = 2.0
	restyled: tuple[tuple[int, Style], ...] = ()
	
	def segments(self) -> Iterable[tuple[Point, Point]]:
		return zip(self.points, self.points[1:])
	
	def length(self) -> float:
		return sum(a.distance(b) for a, b in self.segments())
	
	def transform(self, fn) -> "Path":
		return self._replace(points=tuple(fn(p) for p in self.points))
	
	def strokes(self) -> Iterator["Path"]:
		""" The same lines as single-style pieces, which is what painters want. """
		start, style = 0, Style(self.color, self.width)
		for index, new_style in self.restyled:
			if index > start:
				yield Path(self.points[start:index+1], *style)
			start, style = index, new_style
		if len(self.points) - start > 1:
			yield Path(self.points[start:], *style)

class Bounds(NamedTuple):
	min_x: float
	min_y: float
	max_x: float
	max_y: float
	
	@property
	def width(self): return self.max_x - self.min_x
	@property
	def height(self): return self.max_y - self.min_y

class Drawing:
	def __init__(self, paths:Sequence[Path]=()):
		self.paths = tuple(paths)
	
	def __len__(self): return len(self.paths)
	
	def __iter__(self): return iter(self.paths)
	
	def segments(self) -> Iterable[tuple[Point, Point]]:
		for path in self.paths:
			yield from path.segments()
	
	def strokes(self) -> Iterator[Path]:
		for path in self.paths:
			yield from path.strokes()
	
	@property
	def bounds(self) -> Bounds:
		points = [p for path in self.paths for p in path.points]
		if not points: return Bounds(0.0, 0.0, 0.0, 0.0)
		xs = [p.x for p in points]
		ys = [p.y for p in points]
		return Bounds(min(xs), min(ys), max(xs), max(ys))
	
	@property
	def length(self) -> float:
		""" Total distance traveled with the pen down. """
		return sum(path.length() for path in self.paths)
	
	def _map(self, fn) -> "Drawing":
		return Drawing([path.transform(fn) for path in self.paths])
	
	def translate(self, dx:float, dy:float) -> "Drawing":
		return self._map(lambda p: Point(p.x + dx, p.y + dy))
	
	def scale(self, factor:float) -> "Drawing":
		return self._map(lambda p: Point(p.x * factor, p.y * factor))
	
	def rotate(self, degrees:float) -> "Drawing":
		""" Counter-clockwise about the origin. """
		radians = math.radians(degrees)
		cos, sin = math.cos(radians), math.sin(radians)
		return self._map(lambda p: Point(p.x * cos - p.y * sin, p.x * sin + p.y * cos))
	
	def to_svg(self, width:float=800, height:float=600) -> str:
		"""
		Fit the drawing to the canvas with a ten-percent margin.
		SVG's y axis points down, so the picture gets flipped on the way.
		"""
		header = '<svg width="%g" height="%g" xmlns="http://www.w3.org/2000/svg">'%(width, height)
		box = self.bounds
		if box.width == 0 and box.height == 0:
			return header + "</svg>\n"
		scale = min(width / box.width if box.width else math.inf, height / box.height if box.height else math.inf) * 0.9
		offset_x = (width - box.width * scale) / 2 - box.min_x * scale
		offset_y = (height - box.height * scale) / 2 + box.max_y * scale
		lines = [header]
		lines.append('  <g transform="translate(%.4f,%.4f) scale(%.6f,%.6f)">'%(offset_x, offset_y, scale, -scale))
		for stroke in self.strokes():
			points = " ".join("%.2f,%.2f"%(p.x, p.y) for p in stroke.points)
			color = "rgb(%d,%d,%d)"%tuple(int(c) for c in stroke.color)
			lines.append(
				'    <polyline points="%s" fill="none" stroke="%s" stroke-width="%g" '
				'vector-effect="non-scaling-stroke" />'%(points, color, stroke.width)
			)
		lines.append("  </g>")
		lines.append("</svg>")
		return "\n".join(lines) + "\n"
