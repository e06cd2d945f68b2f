import math
import unittest
from unittest import mock
from yertle.drawing import Point
from yertle.tortoise import Turtle, TurtleState, normalize

class NormalizeTests(unittest.TestCase):

	def test_range(self):
		for degrees in [0, 90, 360, 450, -90, -720.5, 1e9, -1e-20]:
			with self.subTest(degrees):
				h = normalize(degrees)
				self.assertTrue(0 <= h < 360, h)
		self.assertEqual(270.0, normalize(-90))
		self.assertEqual(90.0, normalize(450))

class MotionTests(unittest.TestCase):

	def setUp(self):
		self.turtle = Turtle()

	def assertAt(self, x, y):
		self.assertAlmostEqual(x, self.turtle.x)
		self.assertAlmostEqual(y, self.turtle.y)

	def test_initial_state(self):
		self.assertEqual(TurtleState(0.0, 0.0, 90.0, True, 2.0, (0.0, 0.0, 0.0), True), self.turtle.snapshot())
		self.assertEqual((Point(0.0, 0.0),), self.turtle.current_path)
		self.assertEqual([], self.turtle.paths)

	def test_forward_goes_up_at_first(self):
		self.turtle.forward(10)
		self.assertAt(0, 10)

	def test_forward_backward_round_trip(self):
		self.turtle.left(33)
		self.turtle.forward(57.5)
		self.turtle.backward(57.5)
		self.assertAt(0, 0)
		self.assertEqual(123.0, self.turtle.heading)

	def test_turns(self):
		self.turtle.right(90)
		self.assertEqual(0.0, self.turtle.heading)
		self.turtle.right(90)
		self.assertEqual(270.0, self.turtle.heading)
		self.turtle.left(720)
		self.assertEqual(270.0, self.turtle.heading)
		self.turtle.set_heading(-45)
		self.assertEqual(315.0, self.turtle.heading)

	def test_set_xy_draws_a_straight_line(self):
		self.turtle.set_xy(30, 40)
		self.assertEqual([(Point(0.0, 0.0), Point(30.0, 40.0))], list(self.turtle.segments()))
		self.turtle.set_x(0)
		self.turtle.set_y(0)
		self.assertEqual(3, len(list(self.turtle.segments())))

	def test_home(self):
		self.turtle.set_heading(10)
		self.turtle.forward(20)
		self.turtle.home()
		self.assertAt(0, 0)
		self.assertEqual(90.0, self.turtle.heading)

	def test_square_closes(self):
		for _ in range(4):
			self.turtle.forward(100)
			self.turtle.right(90)
		self.assertAt(0, 0)
		self.assertEqual(90.0, self.turtle.heading)
		drawing = self.turtle.drawing()
		self.assertEqual(1, len(drawing))
		self.assertEqual(5, len(drawing.paths[0].points))
		self.assertAlmostEqual(400.0, drawing.length)

class PenTests(unittest.TestCase):

	def setUp(self):
		self.turtle = Turtle()

	def test_pen_up_finishes_the_path(self):
		self.turtle.forward(10)
		self.turtle.pen_up()
		self.assertIsNone(self.turtle.current_path)
		self.assertEqual(1, len(self.turtle.paths))
		self.turtle.forward(10)
		self.turtle.pen_down()
		[start] = self.turtle.current_path
		self.assertAlmostEqual(0.0, start.x)
		self.assertAlmostEqual(20.0, start.y)
		self.turtle.forward(10)
		self.assertEqual(2, len(self.turtle.drawing()))
		self.assertEqual(2, len(list(self.turtle.segments())))

	def test_lone_point_is_not_a_path(self):
		self.turtle.pen_up()
		self.assertEqual([], self.turtle.paths)

	def test_repeated_pen_calls_are_harmless(self):
		self.turtle.pen_down()
		self.turtle.forward(5)
		self.turtle.pen_down()
		self.turtle.pen_up()
		self.turtle.pen_up()
		self.assertEqual(1, len(self.turtle.paths))

	def test_style_change_keeps_the_path(self):
		self.turtle.forward(10)
		self.turtle.set_pen_color(255, 0, 300)
		self.turtle.forward(10)
		[path] = self.turtle.drawing().paths
		self.assertEqual(3, len(path.points))
		self.assertEqual((0.0, 0.0, 0.0), path.color)
		strokes = list(path.strokes())
		self.assertEqual(2, len(strokes))
		self.assertEqual((255.0, 0.0, 255.0), strokes[1].color)
		self.assertEqual(path.points[1], strokes[1].points[0])
		self.turtle.set_pen_size(5)
		self.assertEqual(5.0, self.turtle.pen_size)

	def test_repeated_restyles_make_one_path(self):
		for _ in range(4):
			self.turtle.forward(100)
			self.turtle.set_pen_size(3)
			self.turtle.right(90)
		self.assertEqual(1, len(self.turtle.drawing()))
		self.assertAlmostEqual(400.0, self.turtle.drawing().length)

	def test_style_before_the_first_move_is_the_opening_style(self):
		self.turtle.set_pen_color(9, 9, 9)
		self.turtle.set_pen_size(4)
		self.turtle.forward(10)
		self.turtle.pen_up()
		[path] = self.turtle.paths
		self.assertEqual(((9.0, 9.0, 9.0), 4.0, ()), (path.color, path.width, path.restyled))

	def test_clear_keeps_the_pen_style(self):
		self.turtle.set_pen_color(1, 2, 3)
		self.turtle.pen_up()
		self.turtle.forward(50)
		self.turtle.hide()
		self.turtle.clear()
		self.assertEqual((0.0, 0.0), (self.turtle.x, self.turtle.y))
		self.assertTrue(self.turtle.is_pen_down)
		self.assertEqual([], self.turtle.paths)
		self.assertEqual((1.0, 2.0, 3.0), self.turtle.pen_color)
		self.assertFalse(self.turtle.visible)

class ShapeTests(unittest.TestCase):

	def test_circle(self):
		turtle = Turtle()
		turtle.circle(10)
		self.assertAlmostEqual(0, turtle.x)
		self.assertAlmostEqual(0, turtle.y)
		self.assertAlmostEqual(90.0, turtle.heading)
		self.assertEqual(36, len(list(turtle.segments())))
		self.assertAlmostEqual(2 * math.pi * 10, turtle.drawing().length)

	def test_box(self):
		turtle = Turtle()
		turtle.box(30, 20)
		self.assertAlmostEqual(0, turtle.x)
		self.assertAlmostEqual(0, turtle.y)
		self.assertEqual(4, len(list(turtle.segments())))
		self.assertAlmostEqual(100.0, turtle.drawing().length)
		bounds = turtle.drawing().bounds
		self.assertAlmostEqual(20.0, bounds.width)
		self.assertAlmostEqual(30.0, bounds.height)

	def test_square(self):
		turtle = Turtle()
		turtle.square(10)
		self.assertAlmostEqual(40.0, turtle.drawing().length)

class ObserverTests(unittest.TestCase):

	def test_called_after_each_change(self):
		observer = mock.Mock()
		turtle = Turtle(observer)
		turtle.forward(10)
		turtle.right(90)
		turtle.pen_up()
		turtle.pen_up()  # No change, so no call.
		self.assertEqual(3, observer.call_count)
		observer.assert_called_with(turtle)

	def test_sees_the_new_state(self):
		seen = []
		turtle = Turtle(lambda t: seen.append(t.snapshot()))
		turtle.forward(10)
		self.assertAlmostEqual(10.0, seen[-1].y)


if __name__ == '__main__':
	unittest.main()
