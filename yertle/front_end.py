"""
Recursive-descent parser for the Logo dialect.

Statements are recognized by their first word. Expressions are parsed by
precedence climbing, one method per level, from OR at the bottom to the
primary forms at the top. Whether a `[` opens a block of statements or a
list literal depends only on where it appears: after the head of a control
form it is a block; in value position it is a list.
"""
from typing import Optional
from . import syntax
from .diagnostics import ParseError, UnknownCommand
from .lexer import Token, tokenize, WORD, NUMBER, END
from .primitive import (
	KEYWORDS, COMMAND_ARITY, RESERVED, QUERIES, HIGHER_ORDER,
	FUNCTIONS_1, FUNCTIONS_2, VALUE_WORDS, PALETTE_COMMANDS,
)

RELATIONS = frozenset(["<", ">", "=", "<=", ">=", "<>"])
VARIABLE_PREFIXES = (":", '"')

class Parser:
	"""
	One-shot: make a fresh parser for each token sequence.
	
	The arity table maps lower-case procedure names to their parameter counts.
	It starts with whatever the caller already knows about (procedures that an
	earlier run defined), plus every `TO name :params` header in the tokens,
	so calls can come before definitions. The table is updated in place.
	"""
	def __init__(self, tokens:list[Token], arities:Optional[dict[str, int]]=None):
		assert tokens and tokens[-1].kind == END, "Token sequence must end with END"
		self._tokens = tokens
		self._pos = 0
		self.arities = arities if arities is not None else {}
		self._prescan()
	
	def _prescan(self):
		tokens = self._tokens
		for i, tok in enumerate(tokens):
			if _is_word(tok, "to") and tokens[i+1].kind == WORD:
				name = tokens[i+1].text.lower()
				j, nr_params = i+2, 0
				while tokens[j].kind == ":" and tokens[j+1].kind == WORD:
					nr_params += 1
					j += 2
				self.arities[name] = nr_params
	
	# Token-stream primitives
	
	def peek(self, ahead=0) -> Token:
		return self._tokens[min(self._pos + ahead, len(self._tokens) - 1)]
	
	def advance(self) -> Token:
		tok = self.peek()
		if tok.kind != END: self._pos += 1
		return tok
	
	def at(self, kind:str) -> bool:
		return self.peek().kind == kind
	
	def at_word(self, *words) -> bool:
		tok = self.peek()
		return tok.kind == WORD and tok.text.lower() in words
	
	def expect(self, kind:str, description:str) -> Token:
		tok = self.peek()
		if tok.kind != kind:
			raise ParseError(description, tok.describe(), tok.offset, max(1, len(tok.text)))
		return self.advance()
	
	def at_boundary(self) -> bool:
		""" Where argument collection for a command must stop. """
		tok = self.peek()
		return tok.kind in ("]", END) or (tok.kind == WORD and tok.text.lower() in RESERVED)
	
	# Statements
	
	def program(self) -> syntax.Program:
		statements = []
		while not self.at(END):
			statements.append(self.statement())
		return syntax.Program(statements)
	
	def statement(self) -> syntax.Node:
		tok = self.peek()
		if tok.kind != WORD:
			raise ParseError("a command", tok.describe(), tok.offset, max(1, len(tok.text)))
		word = tok.text.lower()
		if word in _STATEMENT_FORMS:
			return _STATEMENT_FORMS[word](self)
		if word in self.arities or word in COMMAND_ARITY:
			return self.command()
		if word in VALUE_WORDS:
			return self.expression()
		raise UnknownCommand("I don't know how to %s"%tok.text, tok.offset, len(tok.text))
	
	def command(self) -> syntax.Command:
		head = self.advance()
		name = head.text.lower()
		arity = self.arities[name] if name in self.arities else COMMAND_ARITY[name]
		args = []
		while len(args) < arity and not self.at_boundary():
			# The one-input palette form ends where the next statement begins.
			if args and name in PALETTE_COMMANDS and self.at_statement_head(): break
			args.append(self.expression())
		return syntax.Command(name, args, head.offset)
	
	def at_statement_head(self) -> bool:
		tok = self.peek()
		if tok.kind != WORD: return False
		word = tok.text.lower()
		return word in self.arities or word in COMMAND_ARITY
	
	def block(self) -> list[syntax.Node]:
		self.expect("[", "'[' to begin a block")
		body = []
		while not (self.at("]") or self.at(END)):
			body.append(self.statement())
		self.expect("]", "']' to close the block")
		return body
	
	def procedure_def(self) -> syntax.ProcedureDef:
		head = self.advance()
		name_token = self.expect(WORD, "a procedure name after TO")
		name = name_token.text.lower()
		if name in KEYWORDS:
			raise ParseError("a procedure name after TO", name_token.describe(), name_token.offset, len(name_token.text))
		params = []
		while self.at(":"):
			self.advance()
			param = self.expect(WORD, "a parameter name after ':'")
			if param.text.lower() in (p.lower() for p in params):
				raise ParseError("distinct parameter names", param.describe()+" again", param.offset, len(param.text))
			params.append(param.text)
		self.arities[name] = len(params)
		if self.at("["):
			body = self.block()
			if self.at_word("end"): self.advance()
		else:
			body = []
			while not (self.at(END) or self.at_word("end")):
				body.append(self.statement())
			if self.at(END):
				tok = self.peek()
				raise ParseError("END to finish "+name_token.text.upper(), tok.describe(), tok.offset)
			self.advance()
		return syntax.ProcedureDef(name, params, body, head.offset)
	
	def repeat(self):
		head = self.advance()
		count = self.expression()
		return syntax.Repeat(count, self.block(), head.offset)
	
	def if_(self):
		head = self.advance()
		cond = self.expression()
		return syntax.If(cond, self.block(), head.offset)
	
	def if_else(self):
		head = self.advance()
		cond = self.expression()
		true_body = self.block()
		false_body = self.block()
		return syntax.IfElse(cond, true_body, false_body, head.offset)
	
	def while_(self):
		head = self.advance()
		cond = self.expression()
		return syntax.While(cond, self.block(), head.offset)
	
	def for_(self):
		head = self.advance()
		self.expect("[", "'[' to begin the FOR control list")
		var = self.variable_name("a loop variable name")
		start = self.expression()
		end = self.expression()
		step = None if self.at("]") else self.expression()
		self.expect("]", "']' to close the FOR control list")
		return syntax.For(var, start, end, step, self.block(), head.offset)
	
	def make(self):
		head = self.advance()
		self.expect('"', "a quoted variable name after MAKE")
		name = self.expect(WORD, "a variable name after MAKE").text
		return syntax.Make(name, self.expression(), head.offset)
	
	def output(self):
		head = self.advance()
		return syntax.Output(self.expression(), head.offset)
	
	def stop(self):
		return syntax.Stop(self.advance().offset)
	
	def print_(self):
		head = self.advance()
		return syntax.Print(self.expression(), head.offset)
	
	def local(self):
		head = self.advance()
		names = []
		if self.at("["):
			self.advance()
			while not (self.at("]") or self.at(END)):
				names.append(self.variable_name("a variable name in LOCAL"))
			self.expect("]", "']' to close the LOCAL list")
		else:
			names.append(self.variable_name("a variable name after LOCAL"))
		return syntax.Local(names, head.offset)
	
	def stray_end(self):
		tok = self.peek()
		raise ParseError("a command", "END without a matching TO", tok.offset, len(tok.text))
	
	def variable_name(self, description:str) -> str:
		if self.peek().kind in VARIABLE_PREFIXES: self.advance()
		return self.expect(WORD, description).text
	
	# Expressions, from lowest precedence to highest
	
	def expression(self) -> syntax.Expression:
		return self.disjunction()
	
	def disjunction(self):
		left = self.conjunction()
		while self.at_word("or"):
			op = self.advance()
			left = syntax.BinaryOp("or", left, self.conjunction(), op.offset)
		return left
	
	def conjunction(self):
		left = self.negation()
		while self.at_word("and"):
			op = self.advance()
			left = syntax.BinaryOp("and", left, self.negation(), op.offset)
		return left
	
	def negation(self):
		if self.at_word("not"):
			op = self.advance()
			return syntax.UnaryOp("not", self.negation(), op.offset)
		return self.comparison()
	
	def comparison(self):
		left = self.sum()
		if self.peek().kind in RELATIONS:
			op = self.advance()
			left = syntax.BinaryOp(op.kind, left, self.sum(), op.offset)
		return left
	
	def sum(self):
		left = self.product()
		while self.peek().kind in ("+", "-"):
			op = self.advance()
			left = syntax.BinaryOp(op.kind, left, self.product(), op.offset)
		return left
	
	def product(self):
		left = self.unary()
		while self.peek().kind in ("*", "/") or self.at_word("mod"):
			op = self.advance()
			left = syntax.BinaryOp(op.text.lower(), left, self.unary(), op.offset)
		return left
	
	def unary(self):
		tok = self.peek()
		if tok.kind == "+":
			self.advance()
			return self.unary()
		if tok.kind == "-":
			self.advance()
			return syntax.UnaryOp("-", self.unary(), tok.offset)
		return self.primary()
	
	def primary(self) -> syntax.Expression:
		tok = self.peek()
		if tok.kind == "(":
			self.advance()
			inner = self.expression()
			self.expect(")", "')' to match the '(' at offset %d"%tok.offset)
			return inner
		if tok.kind == "[":
			return self.list_literal()
		if tok.kind == ":":
			self.advance()
			return syntax.Variable(self.expect(WORD, "a variable name after ':'").text, tok.offset)
		if tok.kind == NUMBER:
			self.advance()
			return syntax.Number(float(tok.text), tok.offset)
		if tok.kind == WORD:
			return self.word_in_value_position()
		raise ParseError("an expression", tok.describe(), tok.offset, max(1, len(tok.text)))
	
	def list_literal(self) -> syntax.ListLiteral:
		head = self.advance()
		elements = []
		while not (self.at("]") or self.at(END)):
			elements.append(self.primary())
		self.expect("]", "']' to close the list that begins at offset %d"%head.offset)
		return syntax.ListLiteral(elements, head.offset)
	
	def word_in_value_position(self) -> syntax.Expression:
		tok = self.peek()
		word = tok.text.lower()
		if word in FUNCTIONS_1:
			self.advance()
			return syntax.FunctionCall(word, [self.unary()], tok.offset)
		if word in FUNCTIONS_2:
			self.advance()
			first = self.unary()
			second = self.unary()
			return syntax.FunctionCall(word, [first, second], tok.offset)
		if word in HIGHER_ORDER:
			self.advance()
			if self.at('"'): self.advance()
			procedure = self.expect(WORD, "a procedure name after "+tok.text.upper()).text
			return syntax.HigherOrder(word, procedure.lower(), self.unary(), tok.offset)
		if word in QUERIES:
			self.advance()
			return syntax.Query(word, tok.offset)
		if word in self.arities:
			return self.command()
		if word in RESERVED:
			raise ParseError("an expression", tok.describe(), tok.offset, len(tok.text))
		raise UnknownCommand("I don't know how to %s"%tok.text, tok.offset, len(tok.text))

_STATEMENT_FORMS = {
	"to": Parser.procedure_def,
	"end": Parser.stray_end,
	"repeat": Parser.repeat,
	"if": Parser.if_,
	"ifelse": Parser.if_else,
	"make": Parser.make,
	"output": Parser.output,
	"op": Parser.output,
	"stop": Parser.stop,
	"print": Parser.print_,
	"pr": Parser.print_,
	"while": Parser.while_,
	"for": Parser.for_,
	"local": Parser.local,
}
assert set(_STATEMENT_FORMS) == KEYWORDS

def _is_word(tok:Token, word:str) -> bool:
	return tok.kind == WORD and tok.text.lower() == word

def parse(tokens:list[Token], arities:Optional[dict[str, int]]=None) -> syntax.Program:
	return Parser(tokens, arities).program()

def parse_text(text:str, arities:Optional[dict[str, int]]=None) -> syntax.Program:
	return parse(tokenize(text), arities)

def parse_expression_text(text:str, arities:Optional[dict[str, int]]=None) -> syntax.Expression:
	""" For evaluating a single expression, as at a prompt. """
	parser = Parser(tokenize(text), arities)
	expr = parser.expression()
	parser.expect(END, "the end of the expression")
	return expr
