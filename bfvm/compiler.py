import logging

from .errors import CompileError
from .vmops import VmOps, wrap

logger = logging.getLogger(__name__)

UNIT_OPS = {
    VmOps.INC_PTR: (VmOps.MOVE, 1),
    VmOps.DEC_PTR: (VmOps.MOVE, -1),
    VmOps.INC_VAL: (VmOps.MOD, 1),
    VmOps.DEC_VAL: (VmOps.MOD, -1),
    VmOps.OUT_VAL: (VmOps.PRINT, None),
    VmOps.INP_VAL: (VmOps.READ, None),
    VmOps.LOOP_START: (VmOps.LOOP_OPEN, 0),
    VmOps.LOOP_END: (VmOps.LOOP_CLOSE, 0),
}


def parse(data):
    cmds = []
    for d in data:
        if d in VmOps.CMDS:
            cmds.append(d)
    return cmds


def translate(cmds):
    return [UNIT_OPS[d] for d in cmds]


def combine(prepre, pre, cur):
    """
    Try to fold cur into the two pending ops.

    Returns the new (prepre, pre) pair, or None when nothing matched.
    A slot of None is empty.
    """
    (d, c) = cur
    if pre is None:
        return None
    (pd, pc) = pre

    if pd == VmOps.MOVE and d == VmOps.MOVE:
        return (prepre, (VmOps.MOVE, pc + c))
    if pd == VmOps.MOD and d == VmOps.MOD:
        return (prepre, (VmOps.MOD, wrap(pc + c)))
    if pd == VmOps.SET_CELL and d == VmOps.MOD:
        return (prepre, (VmOps.SET_CELL, wrap(pc + c)))

    if prepre is not None and prepre[0] == VmOps.LOOP_OPEN and d == VmOps.LOOP_CLOSE:
        if pre == (VmOps.MOD, -1):
            return (None, (VmOps.SET_CELL, 0))
        if pd == VmOps.MOVE:
            return (None, (VmOps.SEARCH_ZERO, pc))

    return None


def is_noop(op):
    return op is not None and op[0] in (VmOps.MOVE, VmOps.MOD) and op[1] == 0


def optimize(ops):
    compiled = []
    prepre = None
    pre = None
    for cur in ops:
        res = combine(prepre, pre, cur)
        if res is None:
            if prepre is not None:
                compiled.append(prepre)
            prepre = pre
            pre = cur
            continue

        (prepre, pre) = res
        if is_noop(pre):
            # Merged to nothing, pull the older op back into the last slot
            pre = prepre
            prepre = None

    if prepre is not None:
        compiled.append(prepre)
    if pre is not None:
        compiled.append(pre)
    return compiled


def resolve_jumps(ops):
    starts = []
    for i in range(len(ops)):
        d = ops[i][0]
        if d == VmOps.LOOP_OPEN:
            starts.append(i)
        elif d == VmOps.LOOP_CLOSE:
            if not starts:
                raise CompileError(CompileError.MISSING_OPEN)
            start = starts.pop()
            ops[start] = (VmOps.LOOP_OPEN, i)
            ops[i] = (VmOps.LOOP_CLOSE, start)

    if starts:
        raise CompileError(CompileError.MISSING_CLOSE)
    return ops


def bf_compile(data):
    cmds = parse(data)
    ops = optimize(translate(cmds))
    ops = resolve_jumps(ops)
    ops.append((VmOps.END, None))
    logger.debug('Compiled %s commands into %s ops', len(cmds), len(ops))
    return ops


def dump(ops):
    lines = []
    for (i, (d, c)) in enumerate(ops):
        if c is None:
            lines.append('%5d  %s' % (i, d))
        else:
            lines.append('%5d  %s %s' % (i, d, c))
    return '\n'.join(lines)
