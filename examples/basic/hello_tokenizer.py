"""Split a string in one line — zero config, zero deps."""

from cortado import StringTokenizer, tokenize

print(tokenize("the quick  brown\tfox"))

tok = StringTokenizer("a;'b;c';d", ";", "'")
while tok.has_next():
    print(tok.next_index(), tok.next())
