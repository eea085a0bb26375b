"""
Single-character escape tables.
"""

SIMPLE_ESCAPES = {
    'n'  : '\n',	# newline (line feed)
    'r'  : '\r',	# carriage return
    't'  : '\t',	# horizontal tab
    'b'  : '\x08',	# backspace
    'f'  : '\x0C',	# form feed
    '\'' : '\'',
    '"'  : '"',
    '`'  : '`',
    '\\' : '\\',
}

EXTENDED_ESCAPES = {
    'a'  : '\x07',	# alert
    'v'  : '\x0B',	# vertical tab
    'e'  : '\x1B',	# escape
}

# Markers for numeric escapes
HEX_MARKER = 'x'
UNICODE_MARKER = 'u'
BRACE_OPEN = '{'
BRACE_CLOSE = '}'

HEX_DIGIT_COUNT = 2
UNICODE_DIGIT_COUNT = 4
MAX_OCTAL_DIGITS = 3
