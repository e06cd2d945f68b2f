"""
The turtle: a little state machine of position, heading, and pen.

Heading is in degrees, zero means east, and angles grow counter-clockwise,
so the turtle starts out facing up the page at 90.

While the pen is down there is exactly one current path, which grows by a
point with each move. Lifting the pen retires the current path to the
finished list, provided it got as far as a second point. Changing the pen's
color or size along the way restyles the path from that point on.
"""
import math
from typing import NamedTuple, Optional, Callable
from .drawing import Point, Path, Style, Drawing, RGB, BLACK

HOME = Point(0.0, 0.0)
NORTH = 90.0
DEFAULT_PEN_SIZE = 2.0

def normalize(degrees:float) -> float:
	degrees = degrees % 360.0
	return 0.0 if degrees == 360.0 else degrees  # -1e-20 % 360 rounds up to 360.

def _channel(c:float) -> float:
	return float(min(255.0, max(0.0, c)))

class TurtleState(NamedTuple):
	x: float
	y: float
	heading: float
	pen_down: bool
	pen_size: float
	pen_color: RGB
	visible: bool

class Turtle:
	"""
	The observer, if any, is called with the turtle after every change
	that sticks. Anything that wants to animate can hook in there.
	"""
	_current: Optional[list[Point]]
	
	def __init__(self, observer:Optional[Callable[["Turtle"], None]]=None):
		self.observer = observer
		self._pen_size = DEFAULT_PEN_SIZE
		self._pen_color = BLACK
		self._visible = True
		self._reset()
	
	def _reset(self):
		self._position = HOME
		self._heading = NORTH
		self._pen_down = True
		self._paths: list[Path] = []
		self._start_path()
	
	def _commit(self):
		if self.observer is not None: self.observer(self)
	
	def _path_so_far(self) -> Optional[Path]:
		if self._current is None or len(self._current) < 2: return None
		return Path(tuple(self._current), *self._opening_style, tuple(self._restyled))
	
	def _finish_path(self):
		path = self._path_so_far()
		if path is not None: self._paths.append(path)
		self._current = None
	
	def _start_path(self):
		self._current = [self._position]
		self._opening_style = Style(self._pen_color, self._pen_size)
		self._restyled = []
	
	def _move_to(self, point:Point):
		self._position = point
		if self._pen_down: self._current.append(point)
		self._commit()
	
	# Read-outs
	
	@property
	def position(self) -> Point: return self._position
	@property
	def x(self) -> float: return self._position.x
	@property
	def y(self) -> float: return self._position.y
	@property
	def heading(self) -> float: return self._heading
	@property
	def is_pen_down(self) -> bool: return self._pen_down
	@property
	def pen_size(self) -> float: return self._pen_size
	@property
	def pen_color(self) -> RGB: return self._pen_color
	@property
	def visible(self) -> bool: return self._visible
	
	@property
	def paths(self) -> list[Path]:
		""" Finished paths only. """
		return list(self._paths)
	
	@property
	def current_path(self) -> Optional[tuple[Point, ...]]:
		return None if self._current is None else tuple(self._current)
	
	def snapshot(self) -> TurtleState:
		return TurtleState(
			self.x, self.y, self._heading, self._pen_down,
			self._pen_size, self._pen_color, self._visible,
		)
	
	def drawing(self) -> Drawing:
		""" Everything drawn so far, including the path in progress. """
		paths = list(self._paths)
		path = self._path_so_far()
		if path is not None: paths.append(path)
		return Drawing(paths)
	
	def segments(self):
		""" Each straight line the pen has drawn, in the order drawn. """
		return self.drawing().segments()
	
	# Motion
	
	def forward(self, distance:float):
		radians = math.radians(self._heading)
		self._move_to(Point(self.x + math.cos(radians) * distance, self.y + math.sin(radians) * distance))
	
	def backward(self, distance:float):
		self.forward(-distance)
	
	def left(self, degrees:float):
		self._heading = normalize(self._heading + degrees)
		self._commit()
	
	def right(self, degrees:float):
		self._heading = normalize(self._heading - degrees)
		self._commit()
	
	def set_heading(self, degrees:float):
		self._heading = normalize(degrees)
		self._commit()
	
	def set_xy(self, x:float, y:float):
		self._move_to(Point(float(x), float(y)))
	
	def set_x(self, x:float): self.set_xy(x, self.y)
	
	def set_y(self, y:float): self.set_xy(self.x, y)
	
	def home(self):
		self.set_xy(0.0, 0.0)
		self.set_heading(NORTH)
	
	# Pen
	
	def pen_up(self):
		if self._pen_down:
			self._pen_down = False
			self._finish_path()
			self._commit()
	
	def pen_down(self):
		if not self._pen_down:
			self._pen_down = True
			self._start_path()
			self._commit()
	
	def set_pen_color(self, r:float, g:float, b:float):
		self._pen_color = (_channel(r), _channel(g), _channel(b))
		self._restyle()
	
	def set_pen_size(self, size:float):
		self._pen_size = float(size)
		self._restyle()
	
	def _restyle(self):
		if self._pen_down:
			style = Style(self._pen_color, self._pen_size)
			index = len(self._current) - 1
			if index == 0: self._opening_style = style
			else:
				if self._restyled and self._restyled[-1][0] == index: self._restyled.pop()
				self._restyled.append((index, style))
		self._commit()
	
	def hide(self):
		self._visible = False
		self._commit()
	
	def show(self):
		self._visible = True
		self._commit()
	
	# Shapes
	
	def circle(self, radius:float, steps:int=36):
		""" A polygon of `steps` sides, turning left as it goes. """
		edge = 2 * math.pi * radius / steps
		turn = 360.0 / steps
		for _ in range(steps):
			self.forward(edge)
			self.left(turn)
	
	def box(self, width:float, height:float):
		for _ in range(2):
			self.forward(width)
			self.right(90)
			self.forward(height)
			self.right(90)
	
	def square(self, size:float):
		self.box(size, size)
	
	def clear(self):
		""" Back to the starting pose, pen down, with nothing drawn. Pen style is kept. """
		self._reset()
		self._commit()
