"""
Helpers for reading whitespace-delimited numeric text files.
"""

import sympy as sym

def wordsGenerator(stream):
    """
    Return a generator over the whitespace-separated words of a stream.

    Anything following a '#' on a line is treated as a comment and skipped.

    Parameters
    ----------
    stream : iterable of str
        Open text file, or any iterable of lines.
    """
    for line in stream:
        line = line.split("#",1)[0]
        for word in line.split():
            yield word

def str_to_num(word):
    """
    Convert a word to an exact number.

    Integer words become int. Fractions ("1/2") and decimals ("0.25")
    become sympy.Rational, with decimals converted exactly.

    Raises
    ------
    ValueError :
        If the word is not numeric.
    """
    try:
        return int(word)
    except ValueError:
        pass
    try:
        val = sym.Rational(word)
    except (TypeError, ValueError, SyntaxError, sym.SympifyError) as err:
        raise(ValueError("Unable to read '{}' as a number.".format(word))) from err
    if not val.is_Rational:
        raise(ValueError("Unable to read '{}' as a number.".format(word)))
    return val
