class VmError(Exception):
    pass


class CompileError(VmError, ValueError):
    MISSING_OPEN = 'missing [ for ]'
    MISSING_CLOSE = 'missing ] for ['


class TapeRangeError(VmError, IndexError):
    def __init__(self, pos, size):
        VmError.__init__(self, 'Data pointer out of tape! @%s (size %s)' % (pos, size))
        self.pos = pos
        self.size = size


class InputError(VmError):
    pass
