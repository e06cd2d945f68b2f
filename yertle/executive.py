"""
Overall control: from source text to a turtle that has done its drawing.
"""
import sys
import random
from contextlib import contextmanager
from functools import lru_cache
from typing import Optional
from . import syntax
from .diagnostics import Report
from .front_end import parse_text, parse_expression_text
from .runtime import Interpreter, OUTPUT_SINK
from .stacking import ExecutionContext
from .tortoise import Turtle
from .values import VALUE

# Each Logo procedure call costs about ten Python frames.
RECURSION_LIMIT = 10000

@contextmanager
def _deep_stack(limit:int):
	before = sys.getrecursionlimit()
	sys.setrecursionlimit(limit)
	try: yield
	finally: sys.setrecursionlimit(before)

@lru_cache(16)
def _parse_cached(text:str, known:tuple) -> syntax.Program:
	return parse_text(text, dict(known))

def _known_arities(context:ExecutionContext) -> tuple:
	return tuple(sorted(context.arities().items()))

def run(turtle:Turtle, text:str, output:Optional[OUTPUT_SINK]=None, *, context:Optional[ExecutionContext]=None, report:Optional[Report]=None, recursion_limit:int=RECURSION_LIMIT) -> ExecutionContext:
	"""
	Run a whole Logo program against the given turtle.
	Any LogoError aborts the run; whatever was drawn up to then stays drawn.
	Returns the execution context, for anyone curious about the variables.
	"""
	context = context or ExecutionContext()
	if report is not None: report.set_source(text)
	program = _parse_cached(text, _known_arities(context))
	with _deep_stack(recursion_limit):
		Interpreter(context, turtle, output, report=report).run(program)
	return context

class LogoRunner:
	"""
	Keeps one turtle and one execution context across several runs,
	so that procedures and variables from one run are there for the next.
	"""
	def __init__(self, turtle:Optional[Turtle]=None, output:Optional[OUTPUT_SINK]=None, *, report:Optional[Report]=None, rng:Optional[random.Random]=None, recursion_limit:int=RECURSION_LIMIT):
		if output is None:
			from .adapters.teletype_adapter import echo as output
		self.turtle = turtle or Turtle()
		self.output = output
		self.report = report
		self._rng = rng
		self.recursion_limit = recursion_limit
		self.context = ExecutionContext()
	
	def _interpreter(self) -> Interpreter:
		return Interpreter(self.context, self.turtle, self.output, report=self.report, rng=self._rng)
	
	def run(self, text:str):
		if self.report is not None: self.report.set_source(text)
		program = _parse_cached(text, _known_arities(self.context))
		with _deep_stack(self.recursion_limit):
			self._interpreter().run(program)
	
	def evaluate(self, text:str) -> VALUE:
		""" The value of one expression, in the context built up so far. """
		if self.report is not None: self.report.set_source(text)
		expr = parse_expression_text(text, self.context.arities())
		with _deep_stack(self.recursion_limit):
			return self._interpreter().evaluate(expr)
	
	def reset(self):
		""" Forget every variable and procedure, and clear the turtle. """
		self.context = ExecutionContext()
		self.turtle.clear()
