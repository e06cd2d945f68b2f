"""
The built-in vocabulary.

The parser needs to know names and arities; the run-time needs the actual
behavior. Both come from here. All keys are lower-case: Logo does not care
about the case of its words.
"""
import math
from .diagnostics import DivisionByZero, EmptyListAccess, IndexOutOfBounds
from .values import VALUE, as_number, as_list, flag, equal, render

# Words that begin a special statement form.
KEYWORDS = frozenset([
	"to", "end", "repeat", "if", "ifelse", "make", "output", "op", "stop",
	"print", "pr", "while", "for", "local",
])

COMMAND_ARITY = {
	"penup":0, "pu":0, "pendown":0, "pd":0, "home":0,
	"clear":0, "clearscreen":0, "cs":0,
	"hideturtle":0, "ht":0, "showturtle":0, "st":0,
	"forward":1, "fd":1, "backward":1, "bk":1, "back":1,
	"left":1, "lt":1, "right":1, "rt":1,
	"setheading":1, "seth":1, "setx":1, "sety":1,
	"pensize":1, "setpensize":1, "circle":1, "square":1,
	"setxy":2, "box":2,
	"setpencolor":3, "setpc":3, "setpenrgb":3,
}

QUERIES = frozenset([
	"xcor", "ycor", "heading", "pendown?", "pendownp",
	"pensize", "pencolor", "repcount", "shown?", "shownp",
])

# Argument collection for a command stops at any of these words.
# PENSIZE is both a command and a query; as an argument it is the query.
RESERVED = (KEYWORDS | frozenset(COMMAND_ARITY)) - QUERIES

# These also take a single palette index or [r g b] list.
PALETTE_COMMANDS = frozenset(["setpencolor", "setpc"])

HIGHER_ORDER = frozenset(["map", "filter", "reduce", "apply"])

###############################################################################

def _degrees(fn):
	def trig(x):
		try: return fn(math.radians(x))
		except ValueError: return math.nan  # as with infinite angles
	return trig

def _sqrt(x): return math.sqrt(x) if x >= 0 else math.nan

def _whole(fn):
	# Infinities and NaN have no whole part to speak of; they stay as they are.
	return lambda x: float(fn(x)) if math.isfinite(x) else x

MATH_FUNCTIONS = {
	"sqrt": _sqrt,
	"sin": _degrees(math.sin),
	"cos": _degrees(math.cos),
	"tan": _degrees(math.tan),
	"abs": abs,
	"round": _whole(round),
	"floor": _whole(math.floor),
	"ceiling": _whole(math.ceil),
}
# RANDOM is also a one-argument function, but it needs the interpreter's generator.
RANDOM = "random"

def power(base:VALUE, exponent:VALUE) -> float:
	try: return math.pow(as_number(base), as_number(exponent))
	except ValueError: return math.nan
	except OverflowError: return math.inf

def divide(a:float, b:float) -> float:
	if b == 0: raise DivisionByZero("Division by zero")
	return a / b

def modulo(a:float, b:float) -> float:
	""" Truncating remainder: the sign follows the dividend. """
	if b == 0: raise DivisionByZero("Division by zero (in MOD)")
	return math.fmod(a, b)

###############################################################################
#  List functions

def first(lst):
	items = as_list(lst)
	if not items: raise EmptyListAccess("FIRST of an empty list")
	return items[0]

def last(lst):
	items = as_list(lst)
	if not items: raise EmptyListAccess("LAST of an empty list")
	return items[-1]

def butfirst(lst): return as_list(lst)[1:]
def butlast(lst): return as_list(lst)[:-1]
def count(lst): return float(len(as_list(lst)))
def empty(lst): return flag(not as_list(lst))

def item(n, lst):
	items = as_list(lst)
	index = as_number(n)
	if not (1 <= index <= len(items)) or index != int(index):
		raise IndexOutOfBounds("ITEM %s is out of range for a list of %d"%(render(index), len(items)))
	return items[int(index) - 1]

def fput(x, lst): return (x,) + as_list(lst)
def lput(x, lst): return as_list(lst) + (x,)

def member(x, lst): return flag(any(equal(x, y) for y in as_list(lst)))

def position(x, lst):
	""" 1-based, or zero if absent. """
	for i, y in enumerate(as_list(lst), 1):
		if equal(x, y): return float(i)
	return 0.0

def sentence(a, b):
	def spread(v): return v if isinstance(v, tuple) else (v,)
	return spread(a) + spread(b)

def make_pair(a, b): return (a, b)

LIST_FUNCTIONS_1 = {
	"first": first, "last": last,
	"butfirst": butfirst, "bf": butfirst,
	"butlast": butlast, "bl": butlast,
	"count": count, "empty?": empty, "emptyp": empty,
}

FUNCTIONS_2 = {
	"power": power, "pow": power,
	"item": item, "fput": fput, "lput": lput,
	"member?": member, "memberp": member,
	"position": position,
	"sentence": sentence, "se": sentence,
	"list": make_pair,
}

FUNCTIONS_1 = frozenset(MATH_FUNCTIONS) | {RANDOM} | frozenset(LIST_FUNCTIONS_1)

# Anything that can only appear in value position.
VALUE_WORDS = FUNCTIONS_1 | frozenset(FUNCTIONS_2) | HIGHER_ORDER | QUERIES

###############################################################################
#  Pen colors by number, after the usual sixteen-color Logo palette.

PALETTE = (
	(0, 0, 0), (0, 0, 255), (0, 255, 0), (0, 255, 255),
	(255, 0, 0), (255, 0, 255), (255, 255, 0), (255, 255, 255),
	(155, 96, 59), (197, 136, 18), (100, 162, 64), (120, 187, 187),
	(255, 149, 119), (144, 113, 208), (255, 163, 0), (183, 183, 183),
)

def palette(index:float) -> tuple:
	if not math.isfinite(index): return PALETTE[0]
	return PALETTE[int(index) % len(PALETTE)]
