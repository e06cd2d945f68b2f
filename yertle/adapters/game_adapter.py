"""
Native driver to show turtle drawings through PyGame.

Painting is kept apart from the window: paint() works on any Surface,
on-screen or not, which makes it usable without a display at all.
The window itself is a simple affair: show the picture, then wait for
the user to close it or press a key.

LiveView is a turtle observer. Hooked up before a run, it repaints after
every step at a fixed frame rate, which makes for a watchable animation.
Closing the window does not stop the program; it just stops the show.
"""
import os
import math
os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "1"
import pygame
from typing import Optional
from pygame import draw

from ..drawing import Drawing, Point, Bounds
from ..tortoise import Turtle

WHITE = (255, 255, 255)
TURTLE_GREEN = (0, 128, 0)
MARGIN = 0.9

class Viewport:
	"""
	Maps turtle coordinates (y up) onto the screen (y down).
	The turtle's origin lands at `center` and one unit becomes `scale` pixels.
	"""
	def __init__(self, size:tuple[int, int], scale:float=1.0, center:Optional[tuple[float, float]]=None):
		self.size = size
		self.scale = scale
		self.center = center or (size[0] / 2, size[1] / 2)
	
	@classmethod
	def fit(cls, size:tuple[int, int], bounds:Bounds) -> "Viewport":
		""" Just big enough to hold the bounding box, with a little margin. """
		if bounds.width == 0 and bounds.height == 0:
			return cls(size)
		scale = MARGIN * min(
			size[0] / bounds.width if bounds.width else float("inf"),
			size[1] / bounds.height if bounds.height else float("inf"),
		)
		mid_x = (bounds.min_x + bounds.max_x) / 2
		mid_y = (bounds.min_y + bounds.max_y) / 2
		return cls(size, scale, (size[0] / 2 - mid_x * scale, size[1] / 2 + mid_y * scale))
	
	def to_screen(self, p:Point) -> tuple[int, int]:
		return round(self.center[0] + p.x * self.scale), round(self.center[1] - p.y * self.scale)

def paint(surface:pygame.Surface, drawing:Drawing, viewport:Optional[Viewport]=None, *, turtle:Optional[Turtle]=None, background=WHITE):
	viewport = viewport or Viewport.fit(surface.get_size(), drawing.bounds)
	surface.fill(background)
	for stroke in drawing.strokes():
		color = tuple(int(c) for c in stroke.color)
		width = max(1, round(stroke.width * min(1.0, viewport.scale)))
		draw.lines(surface, color, False, [viewport.to_screen(p) for p in stroke.points], width)
	if turtle is not None and turtle.visible:
		draw.polygon(surface, TURTLE_GREEN, _turtle_shape(turtle, viewport))

def _turtle_shape(turtle:Turtle, viewport:Viewport):
	""" A little arrowhead pointing where the turtle faces, in pixels. """
	x, y = viewport.to_screen(turtle.position)
	heading = math.radians(turtle.heading)
	corners = []
	for angle, radius in ((0, 12), (140, 8), (220, 8)):
		a = heading + math.radians(angle)
		corners.append((x + radius * math.cos(a), y - radius * math.sin(a)))
	return corners

def show(drawing:Drawing, turtle:Optional[Turtle]=None, size=(800, 800), title="Yertle: Turtle Graphics"):
	""" Display the drawing until the user closes the window or presses a key. """
	pygame.init()
	try:
		screen = pygame.display.set_mode(size)
		pygame.display.set_caption(title)
		paint(screen, drawing, turtle=turtle)
		pygame.display.flip()
		while True:
			event = pygame.event.wait()
			if event.type in (pygame.QUIT, pygame.KEYDOWN, pygame.MOUSEBUTTONUP):
				break
	finally:
		pygame.quit()

class LiveView:
	""" Install as a turtle's observer to watch the drawing happen. """
	def __init__(self, size=(800, 800), fps:int=120, title="Yertle: Turtle Graphics"):
		pygame.init()
		self.screen = pygame.display.set_mode(size)
		pygame.display.set_caption(title)
		self.viewport = Viewport(size)
		self.clock = pygame.time.Clock()
		self.fps = fps
		self.closed = False
	
	def __call__(self, turtle:Turtle):
		if self.closed: return
		for event in pygame.event.get():
			if event.type == pygame.QUIT:
				self.closed = True
				return
		paint(self.screen, turtle.drawing(), self.viewport, turtle=turtle)
		pygame.display.flip()
		self.clock.tick(self.fps)
	
	def linger(self, drawing:Drawing, turtle:Turtle):
		""" Keep the finished picture up until dismissed. """
		if not self.closed:
			paint(self.screen, drawing, self.viewport, turtle=turtle)
			pygame.display.flip()
			while True:
				event = pygame.event.wait()
				if event.type in (pygame.QUIT, pygame.KEYDOWN, pygame.MOUSEBUTTONUP):
					break
		pygame.quit()
