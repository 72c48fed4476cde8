# Memory
MEMORY_SIZE = 4096
PROGRAM_START = 256     # 0..255 reserved by convention

# Registers
REGISTER_COUNT = 16

# Words
WORD_BITS = 16
WORD_MASK = 0xFFFF
WORD_SIZE = 2           # Bytes per word in a ROM image

# Encoding
ADDRESS_MASK = 0x0FFF   # Family-0 address/literal field
REGISTER_MASK = 0x000F  # Family-1 register fields
OPCODE_REBASE = 7       # Family-1 opcode field holds opcode - 7
