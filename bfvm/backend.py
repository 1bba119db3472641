from .vmops import VmOps


class Backend:
    """
    Base for execution backends.

    translate() receives the filtered command characters, run() executes
    whatever translate() prepared against an I/O channel.
    """

    def __init__(self, name, flags):
        self.code = None
        self.name = name
        self.flags = flags
        size = flags.get('memory_size')
        self.memory_size = VmOps.MEMORY_SIZE if size is None else int(size)
        if self.memory_size < 1:
            raise ValueError('Tape size must be at least one cell, got %s' % (size))

    def translate(self, cmds):
        raise NotImplementedError

    def run(self, channel):
        raise NotImplementedError
