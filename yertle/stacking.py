"""
Activation records and the rest of the mutable state an interpreter carries:
global variables, the procedure table, the stack of procedure frames,
and the stack of active REPEAT counters.

Names are case-insensitive throughout, so every table is keyed by the
lower-case form of the name.

Variable lookup walks every frame on the stack, innermost first, before it
falls back to the globals. That is dynamic scope: a procedure can see the
locals of whoever called it, unless it shadows them.
"""
from contextlib import contextmanager
from typing import NamedTuple, Sequence
from . import syntax
from .diagnostics import ContextError, UndefinedName
from .values import VALUE

class Procedure(NamedTuple):
	name: str
	params: tuple[str, ...]
	body: tuple[syntax.Node, ...]
	
	def arity(self): return len(self.params)

class Activation:
	""" One procedure call's worth of local variables. """
	def __init__(self, procedure:str, bindings:dict[str, VALUE]):
		self.procedure = procedure
		self._bindings = bindings
	def __repr__(self): return "<Activation of %s: %r>"%(self.procedure, self._bindings)
	def holds(self, key:str) -> bool: return key in self._bindings
	def assign(self, key:str, value:VALUE):
		self._bindings[key] = value
		return value
	def fetch(self, key:str) -> VALUE: return self._bindings[key]

class RepeatCounter:
	""" The iteration index of one REPEAT loop, starting from 1. """
	def __init__(self):
		self.index = 0
	def advance(self):
		self.index += 1

class ExecutionContext:
	
	def __init__(self):
		self._globals: dict[str, VALUE] = {}
		self._procedures: dict[str, Procedure] = {}
		self._frames: list[Activation] = []
		self._counters: list[RepeatCounter] = []
	
	# Variables
	
	def get_variable(self, name:str) -> VALUE:
		key = name.lower()
		for frame in reversed(self._frames):
			if frame.holds(key): return frame.fetch(key)
		try: return self._globals[key]
		except KeyError: raise UndefinedName("%s has no value"%name) from None
	
	def set_variable(self, name:str, value:VALUE):
		key = name.lower()
		if self._frames: self._frames[-1].assign(key, value)
		else: self._globals[key] = value
	
	def declare_local(self, names:Sequence[str]):
		if not self._frames:
			raise ContextError("LOCAL outside a procedure")
		for name in names:
			self._frames[-1].assign(name.lower(), 0.0)
	
	def global_names(self) -> list[str]:
		return sorted(self._globals)
	
	# Procedures
	
	def define_procedure(self, name:str, params:Sequence[str], body:Sequence[syntax.Node]):
		self._procedures[name.lower()] = Procedure(name, tuple(params), tuple(body))
	
	def lookup_procedure(self, name:str) -> Procedure:
		try: return self._procedures[name.lower()]
		except KeyError: raise UndefinedName("There is no procedure called %s"%name) from None
	
	def has_procedure(self, name:str) -> bool:
		return name.lower() in self._procedures
	
	def arities(self) -> dict[str, int]:
		""" What the parser needs to know about procedures defined so far. """
		return {key:proc.arity() for key, proc in self._procedures.items()}
	
	# Frames
	
	@property
	def depth(self) -> int: return len(self._frames)
	
	@contextmanager
	def activation(self, procedure:Procedure, args:Sequence[VALUE]):
		""" The frame is popped however the body exits, error or not. """
		assert len(args) == procedure.arity()
		bindings = {param.lower():arg for param, arg in zip(procedure.params, args)}
		self._frames.append(Activation(procedure.name, bindings))
		try: yield self._frames[-1]
		finally: self._frames.pop()
	
	# REPEAT counters
	
	@contextmanager
	def repeating(self):
		self._counters.append(RepeatCounter())
		try: yield self._counters[-1]
		finally: self._counters.pop()
	
	def mark(self) -> tuple[int, int]:
		return len(self._frames), len(self._counters)
	
	def unwind(self, mark:tuple[int, int]):
		""" Drop any frames and REPEAT counters left over above the mark. """
		del self._frames[mark[0]:]
		del self._counters[mark[1]:]
	
	def repcount(self) -> float:
		if not self._counters:
			raise ContextError("REPCOUNT outside of REPEAT")
		return float(self._counters[-1].index)
