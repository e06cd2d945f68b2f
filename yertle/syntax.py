"""
The set of parse-nodes.

The parser calls these constructors as it recognizes each construct.
Every node remembers the source offset of its leading token so that
run-time errors can point back at the text that caused them.
Sequences of statements or arguments are stored as tuples, and nothing
modifies a node after construction.
"""
from typing import Optional, Sequence

class Node:
	offset: int
	def __repr__(self):
		fields = ", ".join("%s=%r"%(k, v) for k, v in vars(self).items() if k != "offset")
		return "%s(%s)"%(type(self).__name__, fields)

class Statement(Node): pass
class Expression(Node): pass

BODY = Sequence[Node]

class Program(Node):
	def __init__(self, statements:BODY):
		self.statements = tuple(statements)
		self.offset = 0

###############################################################################
#  Expressions

class Number(Expression):
	def __init__(self, value:float, offset:int):
		self.value, self.offset = value, offset

class ListLiteral(Expression):
	def __init__(self, elements:Sequence[Expression], offset:int):
		self.elements, self.offset = tuple(elements), offset

class Variable(Expression):
	def __init__(self, name:str, offset:int):
		self.name, self.offset = name, offset

class BinaryOp(Expression):
	def __init__(self, op:str, left:Expression, right:Expression, offset:int):
		self.op, self.left, self.right, self.offset = op, left, right, offset

class UnaryOp(Expression):
	def __init__(self, op:str, operand:Expression, offset:int):
		self.op, self.operand, self.offset = op, operand, offset

class FunctionCall(Expression):
	""" A built-in function with a fixed number of evaluated arguments. """
	def __init__(self, name:str, args:Sequence[Expression], offset:int):
		self.name, self.args, self.offset = name, tuple(args), offset

class HigherOrder(Expression):
	""" MAP, FILTER, REDUCE, APPLY: the procedure is named, not evaluated. """
	def __init__(self, name:str, procedure:str, arg:Expression, offset:int):
		self.name, self.procedure, self.arg, self.offset = name, procedure, arg, offset

class Query(Expression):
	""" Zero-argument questions about the state of things, like XCOR or REPCOUNT. """
	def __init__(self, name:str, offset:int):
		self.name, self.offset = name, offset

###############################################################################
#  Statements

class Command(Statement):
	"""
	A built-in turtle command or a call to a user-defined procedure.
	The latter may also appear in value position.
	"""
	def __init__(self, name:str, args:Sequence[Expression], offset:int):
		self.name, self.args, self.offset = name, tuple(args), offset

class Repeat(Statement):
	def __init__(self, count:Expression, body:BODY, offset:int):
		self.count, self.body, self.offset = count, tuple(body), offset

class If(Statement):
	def __init__(self, cond:Expression, body:BODY, offset:int):
		self.cond, self.body, self.offset = cond, tuple(body), offset

class IfElse(Statement):
	def __init__(self, cond:Expression, true_body:BODY, false_body:BODY, offset:int):
		self.cond, self.offset = cond, offset
		self.true_body, self.false_body = tuple(true_body), tuple(false_body)

class While(Statement):
	def __init__(self, cond:Expression, body:BODY, offset:int):
		self.cond, self.body, self.offset = cond, tuple(body), offset

class For(Statement):
	def __init__(self, var:str, start:Expression, end:Expression, step:Optional[Expression], body:BODY, offset:int):
		self.var, self.start, self.end, self.step = var, start, end, step
		self.body, self.offset = tuple(body), offset

class ProcedureDef(Statement):
	def __init__(self, name:str, params:Sequence[str], body:BODY, offset:int):
		self.name, self.params, self.body, self.offset = name, tuple(params), tuple(body), offset

class Make(Statement):
	def __init__(self, var_name:str, expr:Expression, offset:int):
		self.var_name, self.expr, self.offset = var_name, expr, offset

class Output(Statement):
	def __init__(self, expr:Expression, offset:int):
		self.expr, self.offset = expr, offset

class Stop(Statement):
	def __init__(self, offset:int):
		self.offset = offset

class Print(Statement):
	def __init__(self, expr:Expression, offset:int):
		self.expr, self.offset = expr, offset

class Local(Statement):
	def __init__(self, names:Sequence[str], offset:int):
		self.names, self.offset = tuple(names), offset
