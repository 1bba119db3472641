from .vmops import VmOps, wrap
from .errors import VmError, CompileError, TapeRangeError, InputError
from .compiler import parse, optimize, resolve_jumps, bf_compile, dump
from .backend import Backend
from .vm import VmBackend, execute
from .naive import NaiveBackend
from .channels import Channel, NullChannel, ConsoleChannel, BufferChannel

__all__ = [
    'VmOps',
    'wrap',
    'VmError',
    'CompileError',
    'TapeRangeError',
    'InputError',
    'parse',
    'optimize',
    'resolve_jumps',
    'bf_compile',
    'dump',
    'Backend',
    'VmBackend',
    'execute',
    'NaiveBackend',
    'Channel',
    'NullChannel',
    'ConsoleChannel',
    'BufferChannel' ]
