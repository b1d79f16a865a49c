"""
In this module, a token is a maximal run of non-whitespace characters in a
line oriented text stream. TokenReader pulls lines from the stream one at a
time, splits them into tokens and hands them out in stream order, converting
each one to the requested kind.

Reading is forward only: a consumed token is never pushed back, also when it
could not be converted. Running out of input or asking for a token of the
wrong kind raises an exception which is never caught inside the package, so
by default it aborts whatever the caller was doing.
"""
