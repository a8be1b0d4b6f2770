'''
Keystroke calculator.

Takes key presses one character at a time, as a calculator keypad gives
them, and evaluates the typed expression when asked: + - * / and ^, with
the usual precedence but no brackets, and sin, cos, tan in degrees. An
expression that starts with an operator carries on from the previous
result.

Grew out of the arithmetic core of a microcontroller calculator with a 4x4
keypad and a 16x2 character LCD. The hardware side is gone; what's left is
the engine, the keymap, the input loop, and a text rendition of the screen.
'''

from .cli import CLI
from .calculator import Calculator
from .lexer import Lexer
from .evaluator import Evaluator
from .session import Session


__all__ = 'Calculator', 'Lexer', 'Evaluator', 'Session', 'CLI'
