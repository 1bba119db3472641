import logging

from .backend import Backend
from .compiler import bf_compile
from .errors import InputError, TapeRangeError
from .vmops import VmOps, wrap

logger = logging.getLogger(__name__)

MOVE = VmOps.MOVE
MOD = VmOps.MOD
LOOP_OPEN = VmOps.LOOP_OPEN
LOOP_CLOSE = VmOps.LOOP_CLOSE
SET_CELL = VmOps.SET_CELL
SEARCH_ZERO = VmOps.SEARCH_ZERO
PRINT = VmOps.PRINT
READ = VmOps.READ
END = VmOps.END


def execute(ops, channel, memory_size=VmOps.MEMORY_SIZE):
    mem = [0] * memory_size
    ptr = 0
    ip = 0
    logger.debug('Executing %s ops on %s cells', len(ops), memory_size)

    while True:
        (d, c) = ops[ip]
        if d == MOD:
            mem[ptr] = wrap(mem[ptr] + c)
        elif d == MOVE:
            ptr += c
            if ptr < 0 or ptr >= memory_size:
                raise TapeRangeError(ptr, memory_size)
        elif d == LOOP_OPEN:
            if mem[ptr] == 0:
                ip = c
        elif d == LOOP_CLOSE:
            if mem[ptr] != 0:
                ip = c
        elif d == SET_CELL:
            mem[ptr] = c
        elif d == SEARCH_ZERO:
            while mem[ptr] != 0:
                ptr += c
                if ptr < 0 or ptr >= memory_size:
                    raise TapeRangeError(ptr, memory_size)
        elif d == PRINT:
            channel.write(chr(mem[ptr] & 0xff))
        elif d == READ:
            ch = channel.read()
            if ch is None:
                raise InputError('No input available @%s' % (ip))
            mem[ptr] = wrap(ord(ch))
        elif d == END:
            break
        ip += 1

    logger.debug('Halted at op %s, data pointer %s', ip, ptr)


class VmBackend(Backend):
    def translate(self, cmds):
        self.code = bf_compile(cmds)

    def run(self, channel):
        execute(self.code, channel, self.memory_size)
