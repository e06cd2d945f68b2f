import unittest
from yertle.lexer import tokenize, Token, WORD, NUMBER, END

def _kinds(text):
	return [t.kind for t in tokenize(text)]

def _texts(text):
	return [t.text for t in tokenize(text) if t.kind != END]

class TokenizerTests(unittest.TestCase):

	def test_empty_input_is_just_the_end(self):
		self.assertEqual([Token(END, "", 0)], tokenize(""))
		self.assertEqual([END], _kinds("   \n\t  "))

	def test_words_and_numbers(self):
		self.assertEqual([WORD, NUMBER, WORD, NUMBER, END], _kinds("FORWARD 100 right 90"))
		self.assertEqual(["FORWARD", "100", "right", "90"], _texts("FORWARD 100 right 90"))

	def test_offsets(self):
		tokens = tokenize("fd 10\n  rt 5")
		self.assertEqual([0, 3, 8, 11, 12], [t.offset for t in tokens])

	def test_comments_run_to_end_of_line(self):
		self.assertEqual(["fd", "10", "rt", "5"], _texts("fd 10 ; go [forward\nrt 5 ;"))

	def test_question_mark_continues_a_word(self):
		self.assertEqual(["pendown?", "empty?", "x_1"], _texts("pendown? empty? x_1"))

	def test_decimals(self):
		self.assertEqual(["3.25", ".5", "7."], _texts("3.25 .5 7."))

	def test_lone_dot_is_dropped(self):
		self.assertEqual(["fd", "3"], _texts("fd . 3"))

	def test_sign_folds_only_before_a_digit(self):
		self.assertEqual([WORD, NUMBER, END], _kinds("FORWARD -5"))
		self.assertEqual(["FORWARD", "-5"], _texts("FORWARD -5"))
		self.assertEqual([WORD, "-", NUMBER, END], _kinds("FORWARD - 5"))
		self.assertEqual(["+7"], _texts("+7"))

	def test_sign_after_an_operand_is_an_operator(self):
		self.assertEqual([":", WORD, "-", NUMBER, END], _kinds(":n-1"))
		self.assertEqual([NUMBER, "-", NUMBER, END], _kinds("3-1"))
		self.assertEqual(["(", NUMBER, ")", "-", NUMBER, END], _kinds("(2)-1"))
		self.assertEqual(["(", NUMBER, ")", END], _kinds("(-1)"))
		self.assertEqual(["[", NUMBER, NUMBER, "]", END], _kinds("[1 -2]"))

	def test_relations_prefer_two_characters(self):
		self.assertEqual([NUMBER, "<=", NUMBER, ">=", NUMBER, "<>", NUMBER, END], _kinds("1<=2>=3<>4"))
		self.assertEqual([NUMBER, "<", NUMBER, ">", NUMBER, "=", NUMBER, END], _kinds("1 < 2 > 3 = 4"))

	def test_punctuation(self):
		self.assertEqual(list('[]():"+*/') + [END], _kinds('[ ] ( ) : " + * /'))

	def test_unknown_characters_are_skipped(self):
		self.assertEqual(["fd", "10"], _texts("fd @#$ 10 !"))

	def test_unicode_digits_are_not_numbers(self):
		# Arabic-Indic digits are alphanumeric, but not digits in this language.
		self.assertEqual([NUMBER, END], _kinds("٣ 4"))
		self.assertEqual([WORD, END], _kinds("x٣"))

	def test_end_token_sits_at_the_end(self):
		tokens = tokenize("fd 1")
		self.assertEqual(Token(END, "", 4), tokens[-1])
		self.assertEqual("the end of the program", tokens[-1].describe())
		self.assertEqual("'fd'", tokens[0].describe())


if __name__ == '__main__':
	unittest.main()
