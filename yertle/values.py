"""
Run-time values.

Logo data come in exactly two flavors: numbers and lists.
Basic values play themselves: a number is a Python float,
and a list is a (possibly nested) tuple of values.
Tuples cannot be mutated, so list operations always build new ones.
"""
from typing import Union
from .diagnostics import TypeMismatch

VALUE = Union[float, tuple]

TRUE = 1.0
FALSE = 0.0
EPSILON = 0.0001

def as_number(v:VALUE) -> float:
	if isinstance(v, float): return v
	raise TypeMismatch("Expected a number but got the list %s"%render(v))

def as_list(v:VALUE) -> tuple:
	if isinstance(v, tuple): return v
	raise TypeMismatch("Expected a list but got the number %s"%render(v))

def flag(condition) -> float:
	return TRUE if condition else FALSE

def truthy(v:VALUE) -> bool:
	""" Any non-zero number is true. Lists are neither. """
	return as_number(v) != 0

def equal(a:VALUE, b:VALUE) -> bool:
	""" Deep structural equality: numbers by value, lists element-wise. """
	if isinstance(a, tuple) and isinstance(b, tuple):
		return len(a) == len(b) and all(equal(x, y) for x, y in zip(a, b))
	if isinstance(a, float) and isinstance(b, float):
		return a == b
	return False

def nearly_equal(a:VALUE, b:VALUE) -> bool:
	""" The sense of `=` in the language: numbers agree within EPSILON. """
	if isinstance(a, float) and isinstance(b, float):
		return abs(a - b) < EPSILON
	return equal(a, b)

def render(v:VALUE) -> str:
	if isinstance(v, tuple):
		return "[" + " ".join(map(render, v)) + "]"
	if v != v or v in (float("inf"), float("-inf")):
		return str(v)
	if v == int(v) and abs(v) < 1e15:
		return str(int(v))
	return "%.15g" % v
