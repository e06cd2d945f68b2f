import math
import unittest
from yertle import values, primitive
from yertle.diagnostics import TypeMismatch, DivisionByZero, IndexOutOfBounds, EmptyListAccess

NUMS = (10.0, 20.0, 30.0)

class ValueTests(unittest.TestCase):

	def test_conversions(self):
		self.assertEqual(3.0, values.as_number(3.0))
		self.assertEqual(NUMS, values.as_list(NUMS))
		with self.assertRaises(TypeMismatch): values.as_number(NUMS)
		with self.assertRaises(TypeMismatch): values.as_list(3.0)

	def test_type_mismatch_is_a_type_error(self):
		with self.assertRaises(TypeError): values.as_number(())

	def test_truthiness(self):
		self.assertTrue(values.truthy(-0.5))
		self.assertFalse(values.truthy(0.0))
		with self.assertRaises(TypeMismatch): values.truthy((1.0,))

	def test_deep_equality(self):
		self.assertTrue(values.equal((1.0, (2.0, 3.0)), (1.0, (2.0, 3.0))))
		self.assertFalse(values.equal((1.0, (2.0, 3.0)), (1.0, (2.0,))))
		self.assertFalse(values.equal(1.0, (1.0,)))
		self.assertFalse(values.equal(1.0, 1.00001))

	def test_nearly_equal_numbers(self):
		self.assertTrue(values.nearly_equal(1.0, 1.00005))
		self.assertFalse(values.nearly_equal(1.0, 1.0002))
		self.assertTrue(values.nearly_equal((1.0,), (1.0,)))

	def test_render(self):
		self.assertEqual("42", values.render(42.0))
		self.assertEqual("-3", values.render(-3.0))
		self.assertEqual("2.5", values.render(2.5))
		self.assertEqual("[1 [2 3] []]", values.render((1.0, (2.0, 3.0), ())))
		self.assertEqual("nan", values.render(math.nan))
		self.assertEqual("-inf", values.render(-math.inf))

	def test_render_large_magnitudes_compactly(self):
		self.assertEqual("1e+300", values.render(1e300))
		self.assertEqual("-1e+15", values.render(-1e15))
		self.assertEqual("123456789012345", values.render(123456789012345.0))

class ArithmeticTests(unittest.TestCase):

	def test_divide(self):
		self.assertEqual(2.5, primitive.divide(5.0, 2.0))
		with self.assertRaises(DivisionByZero): primitive.divide(1.0, 0.0)
		with self.assertRaises(ZeroDivisionError): primitive.divide(1.0, 0.0)

	def test_modulo_truncates(self):
		self.assertEqual(1.0, primitive.modulo(7.0, 3.0))
		self.assertEqual(-1.0, primitive.modulo(-7.0, 3.0))
		self.assertEqual(1.0, primitive.modulo(7.0, -3.0))
		with self.assertRaises(DivisionByZero): primitive.modulo(7.0, 0.0)

	def test_power(self):
		self.assertEqual(8.0, primitive.power(2.0, 3.0))
		self.assertTrue(math.isnan(primitive.power(-8.0, 1/3)))
		self.assertEqual(math.inf, primitive.power(10.0, 1000.0))

	def test_math_in_degrees(self):
		fn = primitive.MATH_FUNCTIONS
		self.assertAlmostEqual(1.0, fn["sin"](90.0))
		self.assertAlmostEqual(-1.0, fn["cos"](180.0))
		self.assertAlmostEqual(1.0, fn["tan"](45.0))
		self.assertTrue(math.isnan(fn["sin"](math.inf)))

	def test_sqrt_of_negative(self):
		self.assertEqual(3.0, primitive.MATH_FUNCTIONS["sqrt"](9.0))
		self.assertTrue(math.isnan(primitive.MATH_FUNCTIONS["sqrt"](-1.0)))

	def test_rounding(self):
		fn = primitive.MATH_FUNCTIONS
		self.assertEqual(2.0, fn["round"](2.5))
		self.assertEqual(4.0, fn["round"](3.5))
		self.assertEqual(-3.0, fn["floor"](-2.1))
		self.assertEqual(-2.0, fn["ceiling"](-2.1))
		self.assertEqual(math.inf, fn["floor"](math.inf))

class ListTests(unittest.TestCase):

	def test_ends(self):
		self.assertEqual(10.0, primitive.first(NUMS))
		self.assertEqual(30.0, primitive.last(NUMS))
		with self.assertRaises(EmptyListAccess): primitive.first(())
		with self.assertRaises(EmptyListAccess): primitive.last(())

	def test_but_ends_of_empty_are_empty(self):
		self.assertEqual((), primitive.butfirst(()))
		self.assertEqual((), primitive.butlast(()))

	def test_item_is_one_based(self):
		self.assertEqual(10.0, primitive.item(1.0, NUMS))
		self.assertEqual(30.0, primitive.item(3.0, NUMS))
		for k in [0.0, 4.0, 1.5, -1.0]:
			with self.subTest(k):
				with self.assertRaises(IndexOutOfBounds):
					primitive.item(k, NUMS)

	def test_fput_lput_round_trip(self):
		for lst in [(), NUMS, ((1.0,), 2.0)]:
			with self.subTest(lst):
				self.assertEqual(lst, primitive.butfirst(primitive.fput(5.0, lst)))
				self.assertEqual(lst, primitive.butlast(primitive.lput(5.0, lst)))

	def test_fput_does_not_mutate(self):
		original = NUMS
		primitive.fput(1.0, original)
		self.assertEqual((10.0, 20.0, 30.0), original)

	def test_count_and_empty(self):
		self.assertEqual(3.0, primitive.count(NUMS))
		self.assertEqual(1.0, primitive.empty(()))
		self.assertEqual(0.0, primitive.empty(NUMS))

	def test_member_and_position_use_structure(self):
		lst = (1.0, (2.0, 3.0), 4.0)
		self.assertEqual(1.0, primitive.member((2.0, 3.0), lst))
		self.assertEqual(0.0, primitive.member((2.0,), lst))
		self.assertEqual(2.0, primitive.position((2.0, 3.0), lst))
		self.assertEqual(0.0, primitive.position(9.0, lst))

	def test_sentence_flattens_one_level(self):
		self.assertEqual((1.0, 2.0), primitive.sentence(1.0, 2.0))
		self.assertEqual((1.0, 2.0, 3.0), primitive.sentence((1.0, 2.0), 3.0))
		self.assertEqual((1.0, (2.0,), 3.0), primitive.sentence((1.0, (2.0,)), (3.0,)))

	def test_palette_wraps(self):
		self.assertEqual((0, 0, 255), primitive.palette(1.0))
		self.assertEqual((0, 0, 255), primitive.palette(17.0))


if __name__ == '__main__':
	unittest.main()
