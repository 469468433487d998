MESSAGE_BITS = 12
CODEWORD_BITS = 23
EXTENDED_BITS = 24
SYNDROME_BITS = 12

MAX_CORRECTABLE = 3

BYTE_BITS = 8
BMP_HEADER_SIZE = 54
