"""
Turn Logo source text into a flat sequence of tokens.

The scanner is deliberately forgiving: characters it does not recognize are
skipped rather than reported, so tokenize() never fails. Whatever structural
trouble results is the parser's to explain.
"""
import sys
from typing import NamedTuple

WORD = "word"
NUMBER = "number"
END = "<END>"

PUNCTUATION = frozenset('[]():"+-*/=')
RELOPS = ("<=", ">=", "<>")
SIGNS = "+-"
DIGITS = frozenset("0123456789")

# After one of these, a sign is an operator even when a digit follows: `:n-1`
_OPERAND_TAIL = frozenset("_?.)]")

class Token(NamedTuple):
	kind: str
	text: str
	offset: int
	
	def describe(self):
		if self.kind == END: return "the end of the program"
		return repr(self.text)

def _is_word_start(ch:str): return ch.isalpha() or ch == '_'
def _is_word_part(ch:str): return ch.isalnum() or ch in '_?'

def _folds_sign(text:str, i:int) -> bool:
	""" Does the sign at position i belong to the number right after it? """
	if not (i+1 < len(text) and text[i+1] in DIGITS): return False
	if i == 0: return True
	before = text[i-1]
	return not (before.isalnum() or before in _OPERAND_TAIL)

def _scan_number(text:str, i:int) -> int:
	""" Return the position just past a number that starts at i (sign included). """
	if text[i] in SIGNS: i += 1
	while i < len(text) and text[i] in DIGITS: i += 1
	if i < len(text) and text[i] == '.':
		i += 1
		while i < len(text) and text[i] in DIGITS: i += 1
	return i

def tokenize(text:str) -> list[Token]:
	text = text or ""
	tokens = []
	i, size = 0, len(text)
	while i < size:
		ch = text[i]
		if ch.isspace():
			i += 1
		elif ch == ';':
			while i < size and text[i] != '\n': i += 1
		elif ch in DIGITS or ch == '.' or (ch in SIGNS and _folds_sign(text, i)):
			stop = _scan_number(text, i)
			lexeme = text[i:stop]
			if any(c in DIGITS for c in lexeme):
				tokens.append(Token(NUMBER, lexeme, i))
			i = stop
		elif _is_word_start(ch):
			stop = i+1
			while stop < size and _is_word_part(text[stop]): stop += 1
			tokens.append(Token(WORD, text[i:stop], i))
			i = stop
		elif text[i:i+2] in RELOPS:
			tokens.append(Token(sys.intern(text[i:i+2]), text[i:i+2], i))
			i += 2
		elif ch in PUNCTUATION or ch in '<>':
			tokens.append(Token(sys.intern(ch), ch, i))
			i += 1
		else:
			i += 1  # Skip anything unrecognized.
	tokens.append(Token(END, "", size))
	return tokens
