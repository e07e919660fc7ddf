WORD_BITS = 32
WORD_MASK = (1 << WORD_BITS) - 1

INT_MIN = -(1 << (WORD_BITS - 1))
INT_MAX = (1 << (WORD_BITS - 1)) - 1

# Emitted by `chr` for values with no character
INVALID_CHAR = '·'
