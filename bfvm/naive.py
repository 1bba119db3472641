import logging

from .backend import Backend
from .errors import CompileError, InputError, TapeRangeError
from .vmops import VmOps, wrap

logger = logging.getLogger(__name__)


def detect_loops(cmds):
    loops = {}
    starts = []
    for (i, d) in enumerate(cmds):
        if d == VmOps.LOOP_START:
            starts.append(i)
        elif d == VmOps.LOOP_END:
            if not starts:
                raise CompileError(CompileError.MISSING_OPEN)
            start = starts.pop()
            loops[start] = i
            loops[i] = start
    if starts:
        raise CompileError(CompileError.MISSING_CLOSE)
    return loops


class NaiveBackend(Backend):
    """Runs the command stream one character at a time, no optimizations."""

    def translate(self, cmds):
        self.code = list(cmds)
        self.loops = detect_loops(self.code)

    def run(self, channel):
        code = self.code
        loops = self.loops
        size = self.memory_size
        mem = [0] * size
        ptr = 0
        pc = 0
        logger.debug('Interpreting %s commands on %s cells', len(code), size)

        while pc < len(code):
            d = code[pc]
            if d == VmOps.INC_PTR or d == VmOps.DEC_PTR:
                ptr += 1 if d == VmOps.INC_PTR else -1
                pc += 1
                continue

            # Pointer is only checked when a cell is touched, and at the end
            if ptr < 0 or ptr >= size:
                raise TapeRangeError(ptr, size)
            if d == VmOps.INC_VAL:
                mem[ptr] = wrap(mem[ptr] + 1)
            elif d == VmOps.DEC_VAL:
                mem[ptr] = wrap(mem[ptr] - 1)
            elif d == VmOps.OUT_VAL:
                channel.write(chr(mem[ptr] & 0xff))
            elif d == VmOps.INP_VAL:
                ch = channel.read()
                if ch is None:
                    raise InputError('No input available @%s' % (pc))
                mem[ptr] = wrap(ord(ch))
            elif d == VmOps.LOOP_START:
                if mem[ptr] == 0:
                    pc = loops[pc]
            elif d == VmOps.LOOP_END:
                if mem[ptr] != 0:
                    pc = loops[pc]
            pc += 1

        if ptr < 0 or ptr >= size:
            raise TapeRangeError(ptr, size)
