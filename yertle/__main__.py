"""
So that `python -m yertle program.logo` works just like `yertle program.logo`.
"""
from .cmdline import main

main()
