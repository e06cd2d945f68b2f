"""
Yertle: a small Logo interpreter driving a turtle-graphics state machine.
"""
