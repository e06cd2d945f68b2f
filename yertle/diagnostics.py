"""
Everything that goes wrong, and how we tell the user about it.

All the error kinds a run can end with live here, together with the Report,
which collects issues and explains them on the console with a little picture
of the offending source text.
"""
import sys, random
from typing import Optional
from boozetools.parsing.interface import ParseError as _BoozeParseError
from boozetools.support.failureprone import SourceText, illustration

class LogoError(Exception):
	"""
	Root of every error a Logo run can end with.
	The offset (into the source text) may be filled in later by
	whichever statement the error escapes from.
	"""
	def __init__(self, message:str, offset:Optional[int]=None, width:int=1):
		Exception.__init__(self, message)  # Skips the boozetools ParseError constructor, which wants a parse stack.
		self.message = message
		self.offset = offset
		self.width = width
	
	def __str__(self):
		if self.offset is None: return self.message
		return "%s (at offset %d)"%(self.message, self.offset)

class ParseError(LogoError, _BoozeParseError):
	""" Unexpected token, unmatched bracket, or a control structure in the wrong shape. """
	def __init__(self, expected:str, found:str, offset:int, width:int=1):
		super().__init__("Expected %s but found %s"%(expected, found), offset, width)
		self.expected = expected
		self.found = found

class UnknownCommand(LogoError): pass
class ArityMismatch(LogoError): pass
class TypeMismatch(LogoError, TypeError): pass
class DivisionByZero(LogoError, ZeroDivisionError): pass
class IndexOutOfBounds(LogoError, IndexError): pass
class EmptyListAccess(LogoError, IndexError): pass
class UndefinedName(LogoError, LookupError):
	""" An undefined variable, or a procedure name nobody defined. """
class ContextError(LogoError):
	""" LOCAL or REPCOUNT used outside the dynamic context they need. """
class ForLoopError(LogoError): pass
class RecursionTooDeep(LogoError):
	""" Procedure calls nested deeper than Python will go. """

###############################################################################

def _sigh():
	openers = ["Oops", "Hmm", "Uh-oh", "Whoa there", "Well, now", "Goodness"]
	closers = [
		"The turtle has stopped to think.",
		"The turtle is stuck on its back.",
		"The turtle retreats into its shell.",
		"Nothing more gets drawn today.",
	]
	return "%s! %s"%(random.choice(openers), random.choice(closers))

class Report:
	""" Collects issues from a run and explains them on the console. """
	
	def __init__(self, *, verbose:int=0, text:str="", filename:str=None):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._source = SourceText(text, filename=filename)
		self._filename = filename
	
	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)
	
	@property
	def issues(self) -> list[LogoError]: return list(self._issues)
	
	@property
	def verbosity(self) -> int: return self._verbose
	
	def set_source(self, text:str, filename:str=None):
		""" Errors refer to offsets in whatever text was most recently run. """
		self._source = SourceText(text, filename=filename)
		self._filename = filename
	
	def issue(self, error:LogoError):
		self._issues.append(error)
	
	def reset(self):
		self._issues.clear()
	
	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)
	
	def trace(self, offset:int, caption:str):
		""" Point at a spot in the source, but only when being very verbose. """
		if self._verbose > 1:
			print(self.illustrate(offset, 1, caption), file=sys.stderr)
	
	def illustrate(self, offset:int, width:int=1, caption:str="") -> str:
		row, col = self._source.find_row_col(offset)
		single_line = self._source.line_of_text(row)
		return illustration(single_line, col, width, prefix='% 6d |' % row, caption=caption)
	
	def explain(self, error:LogoError) -> str:
		lines = [type(error).__name__+": "+error.message]
		if self._filename: lines.append(self._filename)
		if error.offset is not None:
			lines.append(self.illustrate(error.offset, error.width))
		return '\n'.join(lines)
	
	def complain_to_console(self):
		""" Emit all the issues to the console. """
		if self._issues:
			print("*"*60, file=sys.stderr)
			print(_sigh(), file=sys.stderr)
		for error in self._issues:
			print("  -"*20, file=sys.stderr)
			print(self.explain(error), file=sys.stderr)
		sys.stderr.flush()
