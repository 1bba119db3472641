class VmOps:
    CMDS = ['<', '>', '+', '-', '.', ',', '[', ']']

    INC_PTR = '>'
    DEC_PTR = '<'
    INC_VAL = '+'
    DEC_VAL = '-'

    OUT_VAL = '.'
    INP_VAL = ','

    LOOP_START = '['
    LOOP_END = ']'

    # Compiled operation tags
    MOVE = 'move'
    MOD = 'mod'
    LOOP_OPEN = 'open'
    LOOP_CLOSE = 'close'
    SET_CELL = 'set'
    SEARCH_ZERO = 'search'
    PRINT = 'print'
    READ = 'read'
    END = 'end'

    MEMORY_SIZE = 30000


def wrap(value):
    """Fold an integer into a signed 8-bit cell value."""
    return ((value + 128) & 0xff) - 128
