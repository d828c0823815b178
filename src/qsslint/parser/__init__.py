from qsslint.parser.errors import StyleSheetSyntaxError
from qsslint.parser.lexer import tokenize
from qsslint.parser.parser import parse, parse_stylesheet

__all__ = ["StyleSheetSyntaxError", "tokenize", "parse", "parse_stylesheet"]
