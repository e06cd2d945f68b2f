"""
This is a turtle-graphics interpreter for a dialect of Logo.

{0}

For example:

    yertle spiral.logo --show

will run spiral.logo and show the drawing in a window, or else explain
what went wrong.

    yertle -h

will explain all the arguments.
"""
import sys, argparse, random
from pathlib import Path
from .executive import RECURSION_LIMIT

parser = argparse.ArgumentParser(
	prog="yertle",
	description="Interpreter for Logo turtle graphics.",
)
parser.add_argument("program", help="A file of Logo source text. Use - to read standard input.")
parser.add_argument('-c', "--check", action="store_true", help="Parse the program but do not actually run it.")
parser.add_argument('-v', "--verbose", action="count", default=0, help="Say more about what is going on. Twice to trace every statement.")
parser.add_argument("--svg", metavar="PATH", help="Write the finished drawing to an SVG file.")
parser.add_argument("--show", action="store_true", help="Show the finished drawing in a window.")
parser.add_argument("--animate", action="store_true", help="Show the drawing in a window as it happens.")
parser.add_argument("--seed", type=int, help="Seed for RANDOM, for repeatable pictures.")
parser.add_argument("--recursion-limit", type=int, default=RECURSION_LIMIT, help="How deep Logo procedures may recurse (roughly).")

def _read(program:str) -> str:
	if program == "-": return sys.stdin.read()
	return (Path.cwd() / program).read_text(encoding="utf-8")

def run(args):
	from .diagnostics import Report, LogoError
	from .executive import LogoRunner
	from .front_end import parse_text
	from .tortoise import Turtle
	from .values import render
	
	try: text = _read(args.program)
	except OSError as ex:
		print("Could not read %s: %s"%(args.program, ex), file=sys.stderr)
		return 1
	
	report = Report(verbose=args.verbose, text=text, filename=args.program)
	if args.check:
		try: program = parse_text(text)
		except LogoError as ex:
			report.issue(ex)
			report.complain_to_console()
			return 1
		report.info("%d top-level statement(s)."%len(program.statements))
		print("Looks plausible to me.", file=sys.stderr)
		return 0
	
	live = None
	if args.animate:
		from .adapters.game_adapter import LiveView
		live = LiveView()
	turtle = Turtle(observer=live)
	rng = random.Random(args.seed)
	runner = LogoRunner(turtle, report=report, rng=rng, recursion_limit=args.recursion_limit)
	try:
		runner.run(text)
	except LogoError as ex:
		report.issue(ex)
	except RecursionError:
		print("The program is nested too deeply to follow.", file=sys.stderr)
		return 1
	
	drawing = turtle.drawing()
	report.info("%d path(s), %.2f units of line."%(len(drawing), drawing.length))
	report.info("Turtle at", turtle.position, "heading %g."%turtle.heading)
	for name in runner.context.global_names():
		report.info("  :%s = %s"%(name, render(runner.context.get_variable(name))))
	if args.svg:
		Path(args.svg).write_text(drawing.to_svg(), encoding="utf-8")
		report.info("Wrote", args.svg)
	if live is not None:
		live.linger(drawing, turtle)
	elif args.show:
		from .adapters.game_adapter import show
		show(drawing, turtle)
	if report.sick():
		report.complain_to_console()
		return 1
	return 0

def main():
	if len(sys.argv) > 1:
		sys.exit(run(parser.parse_args()))
	else:
		print(__doc__.strip().format(parser.format_usage()))
