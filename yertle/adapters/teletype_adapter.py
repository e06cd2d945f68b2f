import sys
from ..values import VALUE, render

def echo(value:VALUE):
	""" The usual home for PRINT: one value per line, on standard output. """
	sys.stdout.write(render(value) + "\n")
	sys.stdout.flush()

class Transcript:
	""" A PRINT sink that just remembers, for when there is no console to speak of. """
	def __init__(self):
		self.values = []
	def __call__(self, value:VALUE):
		self.values.append(value)
	def lines(self) -> list[str]:
		return [render(v) for v in self.values]
