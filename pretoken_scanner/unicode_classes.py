# unicodedata2 tracks the latest Unicode release, the interpreter tables lag behind it
import unicodedata2

# codepoints with the Unicode White_Space property, str.isspace also accepts \x1c-\x1f which are not
whitespace_chars = frozenset(
    "\t\n\x0b\x0c\r \x85\xa0"
    "\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)

def is_letter(char: str) -> bool:
    # general category group L (Lu, Ll, Lt, Lm, Lo), marks are not letters
    return unicodedata2.category(char)[0] == "L"

def is_number(char: str) -> bool:
    # general category group N (Nd, Nl, No)
    return unicodedata2.category(char)[0] == "N"

def is_newline(char: str) -> bool:
    return char == "\n" or char == "\r"

def is_whitespace(char: str) -> bool:
    return char in whitespace_chars
