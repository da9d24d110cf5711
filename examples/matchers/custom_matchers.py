"""Plug in your own rules — char sets, literals, and plain functions as matchers."""

from cortado import MATCHERS, StringTokenizer


def arrow(buffer: str, pos: int, start: int, end: int) -> int:
    """Match '->' or '=>' as a delimiter."""
    if buffer.startswith(("->", "=>"), pos, end):
        return 2
    return 0


tok = StringTokenizer("load -> parse => render", MATCHERS.function_matcher(arrow))
tok.set_trimmer_matcher(MATCHERS.trim_matcher())
print(tok.get_token_list())

# Drop every unquoted "um" and split on either slash
tok = StringTokenizer("yes/um no\\'um, maybe'", MATCHERS.char_set_matcher("/\\"), "'")
tok.set_ignored_string("um").set_trimmer_matcher(MATCHERS.trim_matcher())
print(tok.get_token_list())

# The live view follows reconfiguration; the list copy does not
tok = StringTokenizer("a,b c")
view, snapshot = tok.tokens, tok.get_token_list()
tok.set_delimiter_char(",")
print(view, snapshot)
