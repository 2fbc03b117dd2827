"""
Module contains classes and methods for tracing group computations.
"""
from enum import IntEnum
import sys

class TraceLevel(IntEnum):
    DEBUG = 150
    DETAIL = 100
    ALL = 100
    RESULT = 80
    EVENT = 50
    READ = 25
    ECHO = 20
    NONE = 0

_indent_strings = { TraceLevel.NONE   : "{}",
                    TraceLevel.ECHO   : "ECHO   : {}",
                    TraceLevel.READ   : "READ   : {}",
                    TraceLevel.EVENT  : "EVENT  : {}",
                    TraceLevel.RESULT : "RESULT : {}",
                    TraceLevel.DETAIL : "DETAIL : {}",
                    TraceLevel.DEBUG  : "DEBUG  : {}" }

class TraceManager:
    """
    Class to manage trace output, depending on set level.

    Messages are written to a stream (standard output by default)
    when their level does not exceed the filter level.
    """

    def __init__(self, level=TraceLevel.NONE, stream=None):
        self._filter = TraceLevel(level)
        self._stream = stream

    @property
    def filterLevel(self):
        return self._filter

    @filterLevel.setter
    def filterLevel(self, val):
        self._filter = TraceLevel(val)

    @property
    def stream(self):
        """ The writable stream receiving trace output. """
        if self._stream is None:
            return sys.stdout
        return self._stream

    @stream.setter
    def stream(self, newStream):
        self._stream = newStream

    def passesFilter(self, filter_level):
        """
        Return True if a message at filter_level would be printed.
        """
        return filter_level <= self._filter

    def trace(self, message, level, *args):
        if self.passesFilter(level):
            if len(args) > 0:
                message = message.format(*args)
            formstr = _indent_strings.get(level,"\t\tOTHER: {}")
            self.stream.write(formstr.format(message) + "\n")

TRACER = TraceManager(TraceLevel.NONE)

def debug(caller_name, msg, *args):
    if TRACER.passesFilter(TraceLevel.DEBUG):
        msg = caller_name + ": " + msg
        TRACER.trace(msg, TraceLevel.DEBUG, *args)

def event(caller_name, msg, *args):
    if TRACER.passesFilter(TraceLevel.EVENT):
        msg = caller_name + ": " + msg
        TRACER.trace(msg, TraceLevel.EVENT, *args)
