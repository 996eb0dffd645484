# type: ignore
''' Program text grammar '''

import pyparsing as pp

# A program is a single line
BLANKS = ' \t'

value = pp.Regex('[+-]?[0-9]+').setParseAction(lambda r: int(r[0]))
value.setWhitespaceChars(BLANKS)

comma = pp.Suppress(',')
comma.setWhitespaceChars(BLANKS)

program = value + pp.ZeroOrMore(comma + value)
program.setWhitespaceChars(BLANKS)
