"""
The tree-walking evaluator.

Statements and expressions are handled separately. Statements go through
the Interpreter, a Visitor with one method per kind of statement; each one
returns None on normal completion or an Exit when OUTPUT or STOP wants to
leave the enclosing procedure. Loops and conditionals hand an Exit straight
back up without looking inside; only a procedure call (or the top level)
consumes it.

Expressions are evaluated by plain functions, one per kind of expression,
gathered into the EVALUATE table by their type annotations.
"""
import math
import itertools
import operator
import random
from typing import NamedTuple, Optional, Callable, Sequence
from boozetools.support.foundation import Visitor
from . import syntax, primitive
from .diagnostics import LogoError, ArityMismatch, TypeMismatch, UnknownCommand, ForLoopError, EmptyListAccess, RecursionTooDeep, Report
from .stacking import ExecutionContext, Procedure
from .tortoise import Turtle
from .values import VALUE, FALSE, as_number, as_list, flag, truthy, nearly_equal

class Exit(NamedTuple):
	""" Leaving a procedure early: with a value for OUTPUT, or with `stopped` set for STOP. """
	value: VALUE
	stopped: bool = False

STOPPED = Exit(FALSE, stopped=True)

OUTPUT_SINK = Callable[[VALUE], None]

###############################################################################

def _relation(compare):
	return lambda a, b: flag(compare(a, b))

PRIMITIVE_BINARY = {
	"+"   : operator.add,
	"-"   : operator.sub,
	"*"   : operator.mul,
	"/"   : primitive.divide,
	"mod" : primitive.modulo,
	"<"   : _relation(operator.lt),
	">"   : _relation(operator.gt),
	"<="  : _relation(operator.le),
	">="  : _relation(operator.ge),
}
PRIMITIVE_UNARY = {
	"-"   : lambda x: -as_number(x),
	"not" : lambda x: flag(not truthy(x)),
}
SHORTCUT = {
	"and" : False,
	"or"  : True,
}

QUERY = {
	"xcor"     : lambda interp: interp.turtle.x,
	"ycor"     : lambda interp: interp.turtle.y,
	"heading"  : lambda interp: interp.turtle.heading,
	"pendown?" : lambda interp: flag(interp.turtle.is_pen_down),
	"pendownp" : lambda interp: flag(interp.turtle.is_pen_down),
	"pensize"  : lambda interp: interp.turtle.pen_size,
	"pencolor" : lambda interp: tuple(interp.turtle.pen_color),
	"shown?"   : lambda interp: flag(interp.turtle.visible),
	"shownp"   : lambda interp: flag(interp.turtle.visible),
	"repcount" : lambda interp: interp.context.repcount(),
}
assert set(QUERY) == primitive.QUERIES

EVALUATE = {}

def attach_evaluation_methods(python_scope):
	for _k, _v in list(python_scope.items()):
		if _k.startswith("_eval_"):
			_t = _v.__annotations__["expr"]
			assert isinstance(_t, type), (_k, _t)
			EVALUATE[_t] = _v

###############################################################################

def _eval_number(expr:syntax.Number, interp):
	return expr.value

def _eval_list_literal(expr:syntax.ListLiteral, interp):
	return tuple(interp.evaluate(e) for e in expr.elements)

def _eval_variable(expr:syntax.Variable, interp):
	return interp.context.get_variable(expr.name)

def _eval_binary_op(expr:syntax.BinaryOp, interp):
	op = expr.op
	if op in SHORTCUT:
		lhs = truthy(interp.evaluate(expr.left))
		if lhs == SHORTCUT[op]: return flag(lhs)
		return flag(truthy(interp.evaluate(expr.right)))
	a = interp.evaluate(expr.left)
	b = interp.evaluate(expr.right)
	if op == "=": return flag(nearly_equal(a, b))
	if op == "<>": return flag(not nearly_equal(a, b))
	return PRIMITIVE_BINARY[op](as_number(a), as_number(b))

def _eval_unary_op(expr:syntax.UnaryOp, interp):
	return PRIMITIVE_UNARY[expr.op](interp.evaluate(expr.operand))

def _eval_function_call(expr:syntax.FunctionCall, interp):
	args = [interp.evaluate(a) for a in expr.args]
	name = expr.name
	if name in primitive.MATH_FUNCTIONS:
		return float(primitive.MATH_FUNCTIONS[name](as_number(args[0])))
	if name == primitive.RANDOM:
		return interp.random_below(as_number(args[0]))
	if name in primitive.LIST_FUNCTIONS_1:
		return primitive.LIST_FUNCTIONS_1[name](args[0])
	return primitive.FUNCTIONS_2[name](*args)

def _eval_higher_order(expr:syntax.HigherOrder, interp):
	procedure = interp.context.lookup_procedure(expr.procedure)
	items = as_list(interp.evaluate(expr.arg))
	return HIGHER_ORDER[expr.name](interp, procedure, items)

def _eval_query(expr:syntax.Query, interp):
	return QUERY[expr.name](interp)

def _eval_command(expr:syntax.Command, interp):
	""" A user-defined procedure used for its value. """
	procedure = interp.context.lookup_procedure(expr.name)
	return interp.invoke(procedure, [interp.evaluate(a) for a in expr.args])

attach_evaluation_methods(globals())

###############################################################################
#  Higher-order procedures take the procedure itself, not a value.

def _map(interp, procedure:Procedure, items:tuple):
	return tuple(interp.invoke(procedure, [x]) for x in items)

def _filter(interp, procedure:Procedure, items:tuple):
	return tuple(x for x in items if truthy(interp.invoke(procedure, [x])))

def _reduce(interp, procedure:Procedure, items:tuple):
	if procedure.arity() != 2:
		raise ArityMismatch("REDUCE needs a procedure of two inputs, but %s takes %d"%(procedure.name, procedure.arity()))
	if not items:
		raise EmptyListAccess("REDUCE of an empty list")
	accumulator = items[0]
	for x in items[1:]:
		accumulator = interp.invoke(procedure, [accumulator, x])
	return accumulator

def _apply(interp, procedure:Procedure, items:tuple):
	return interp.invoke(procedure, items)

HIGHER_ORDER = {
	"map": _map,
	"filter": _filter,
	"reduce": _reduce,
	"apply": _apply,
}
assert set(HIGHER_ORDER) == primitive.HIGHER_ORDER

###############################################################################
#  Built-in turtle commands

TURTLE_COMMANDS = {
	"forward": Turtle.forward, "fd": Turtle.forward,
	"backward": Turtle.backward, "bk": Turtle.backward, "back": Turtle.backward,
	"left": Turtle.left, "lt": Turtle.left,
	"right": Turtle.right, "rt": Turtle.right,
	"setheading": Turtle.set_heading, "seth": Turtle.set_heading,
	"setx": Turtle.set_x, "sety": Turtle.set_y, "setxy": Turtle.set_xy,
	"home": Turtle.home,
	"penup": Turtle.pen_up, "pu": Turtle.pen_up,
	"pendown": Turtle.pen_down, "pd": Turtle.pen_down,
	"pensize": Turtle.set_pen_size, "setpensize": Turtle.set_pen_size,
	"clear": Turtle.clear, "clearscreen": Turtle.clear, "cs": Turtle.clear,
	"hideturtle": Turtle.hide, "ht": Turtle.hide,
	"showturtle": Turtle.show, "st": Turtle.show,
	"circle": Turtle.circle, "square": Turtle.square, "box": Turtle.box,
	"setpenrgb": Turtle.set_pen_color,
}
PALETTE_COMMANDS = primitive.PALETTE_COMMANDS
assert set(TURTLE_COMMANDS) | PALETTE_COMMANDS == set(primitive.COMMAND_ARITY)

def _numbers(name:str, args:Sequence[VALUE], arity:int) -> list[float]:
	if len(args) != arity:
		raise ArityMismatch("%s needs %d input(s) but got %d"%(name.upper(), arity, len(args)))
	return [as_number(a) for a in args]

def _set_pen_color(turtle:Turtle, name:str, args:Sequence[VALUE]):
	""" Three numbers for red, green, and blue; or one palette index; or one [r g b] list. """
	if len(args) == 1:
		if isinstance(args[0], tuple):
			rgb = as_list(args[0])
			if len(rgb) != 3: raise TypeMismatch("%s needs a list of three numbers"%name.upper())
			turtle.set_pen_color(*map(as_number, rgb))
		else:
			turtle.set_pen_color(*primitive.palette(as_number(args[0])))
	else:
		turtle.set_pen_color(*_numbers(name, args, 3))

def _iterations(n:float):
	""" REPEAT runs floor(n) times. No cap: infinity means forever. """
	if math.isnan(n): return ()
	if math.isinf(n): return itertools.repeat(None) if n > 0 else ()
	return range(math.floor(n))

###############################################################################

class Interpreter(Visitor):
	"""
	One interpreter drives one turtle within one execution context.
	Both are handed in, so independent interpreters never share state.
	"""
	def __init__(self, context:ExecutionContext, turtle:Turtle, output:Optional[OUTPUT_SINK]=None, *, report:Optional[Report]=None, rng:Optional[random.Random]=None):
		self.context = context
		self.turtle = turtle
		self.output = output or (lambda value: None)
		self.report = report
		self.rng = rng or random.Random()
	
	def run(self, program:syntax.Program):
		self.execute(program)
	
	def execute(self, node:syntax.Node) -> Optional[Exit]:
		if self.report is not None: self.report.trace(node.offset, type(node).__name__)
		try:
			if isinstance(node, syntax.Expression):
				# A function or query standing alone as a statement: value discarded.
				self.evaluate(node)
				return None
			return self.visit(node)
		except LogoError as ex:
			if ex.offset is None: ex.offset = node.offset
			raise
	
	def evaluate(self, expr:syntax.Expression) -> VALUE:
		try: fn = EVALUATE[type(expr)]
		except KeyError: raise NotImplementedError(type(expr), expr)
		try: return fn(expr, self)
		except LogoError as ex:
			if ex.offset is None: ex.offset = expr.offset
			raise
	
	def run_block(self, body:Sequence[syntax.Node]) -> Optional[Exit]:
		for statement in body:
			outcome = self.execute(statement)
			if outcome is not None: return outcome
		return None
	
	def invoke(self, procedure:Procedure, args:Sequence[VALUE]) -> VALUE:
		""" Arguments are already evaluated, in the caller's context. """
		if len(args) != procedure.arity():
			raise ArityMismatch("%s needs %d input(s) but got %d"%(procedure.name.upper(), procedure.arity(), len(args)))
		mark = self.context.mark()
		try:
			with self.context.activation(procedure, args):
				outcome = self.run_block(procedure.body)
		except RecursionError:
			# At the limit, even the frame pop may not have run.
			self.context.unwind(mark)
			raise RecursionTooDeep("%s recursed too deeply"%procedure.name.upper()) from None
		return FALSE if outcome is None else outcome.value
	
	def random_below(self, n:float) -> float:
		""" RANDOM of a non-finite bound is that bound, as with the other whole-number functions. """
		if not math.isfinite(n): return n
		return float(math.floor(self.rng.random() * n))
	
	# Statements
	
	def visit_Program(self, program:syntax.Program):
		# OUTPUT or STOP at top level just ends the program.
		self.run_block(program.statements)
	
	def visit_Command(self, cmd:syntax.Command):
		if self.context.has_procedure(cmd.name):
			procedure = self.context.lookup_procedure(cmd.name)
			self.invoke(procedure, [self.evaluate(a) for a in cmd.args])
			return
		if cmd.name not in primitive.COMMAND_ARITY:
			raise UnknownCommand("I don't know how to %s"%cmd.name.upper())
		args = [self.evaluate(a) for a in cmd.args]
		if cmd.name in PALETTE_COMMANDS:
			_set_pen_color(self.turtle, cmd.name, args)
		else:
			action = TURTLE_COMMANDS[cmd.name]
			action(self.turtle, *_numbers(cmd.name, args, primitive.COMMAND_ARITY[cmd.name]))
	
	def visit_Repeat(self, stmt:syntax.Repeat):
		count = as_number(self.evaluate(stmt.count))
		with self.context.repeating() as counter:
			for _ in _iterations(count):
				counter.advance()
				outcome = self.run_block(stmt.body)
				if outcome is not None: return outcome
	
	def visit_If(self, stmt:syntax.If):
		if truthy(self.evaluate(stmt.cond)):
			return self.run_block(stmt.body)
	
	def visit_IfElse(self, stmt:syntax.IfElse):
		if truthy(self.evaluate(stmt.cond)):
			return self.run_block(stmt.true_body)
		else:
			return self.run_block(stmt.false_body)
	
	def visit_While(self, stmt:syntax.While):
		while truthy(self.evaluate(stmt.cond)):
			outcome = self.run_block(stmt.body)
			if outcome is not None: return outcome
	
	def visit_For(self, stmt:syntax.For):
		start = as_number(self.evaluate(stmt.start))
		end = as_number(self.evaluate(stmt.end))
		if stmt.step is None:
			step = 1.0 if start <= end else -1.0
		else:
			step = as_number(self.evaluate(stmt.step))
			if step == 0: raise ForLoopError("FOR loop step must not be zero")
		for i in itertools.count():
			value = start + i * step
			if (value > end) if step > 0 else (value < end): break
			self.context.set_variable(stmt.var, value)
			outcome = self.run_block(stmt.body)
			if outcome is not None: return outcome
	
	def visit_ProcedureDef(self, stmt:syntax.ProcedureDef):
		self.context.define_procedure(stmt.name, stmt.params, stmt.body)
		if self.report is not None:
			self.report.info("Defined %s %s"%(stmt.name.upper(), " ".join(":"+p for p in stmt.params)))
	
	def visit_Make(self, stmt:syntax.Make):
		self.context.set_variable(stmt.var_name, self.evaluate(stmt.expr))
	
	def visit_Output(self, stmt:syntax.Output):
		return Exit(self.evaluate(stmt.expr))
	
	def visit_Stop(self, stmt:syntax.Stop):
		return STOPPED
	
	def visit_Print(self, stmt:syntax.Print):
		self.output(self.evaluate(stmt.expr))
	
	def visit_Local(self, stmt:syntax.Local):
		self.context.declare_local(stmt.names)
