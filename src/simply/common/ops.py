# Operand kinds
REG = 'reg'  # register name
VAL = 'val'  # literal or register name

# Data
SET = 'set'  # V2 -> R1
CPY = 'cpy'  # R1 -> R2
ADD = 'add'  # R1 + R2 -> R2
SUB = 'sub'  # R2 - R1 -> R2

# Flow
JMP = 'jmp'  # goto R1
JWZ = 'jwz'  # if R1 .eq 0 goto R2
JWN = 'jwn'  # if R1 .lt 0 goto R2
JWP = 'jwp'  # if R1 .gt 0 goto R2
JNZ = 'jnz'  # if R1 .ne 0 goto R2

# Compare
GTH = 'gth'  # R1 .gt R2 ? 1 : -1 -> R2
LTH = 'lth'  # R1 .lt R2 ? 1 : -1 -> R2

# Output
OUT = 'out'  # R1 -> stdout as a decimal line
CHR = 'chr'  # R1 -> stdout as a character

SHAPES: dict[str, tuple[str, ...]] = {
    SET: (REG, VAL),
    CPY: (REG, REG),
    ADD: (REG, REG),
    SUB: (REG, REG),
    JMP: (REG,),
    JWZ: (REG, REG),
    JWN: (REG, REG),
    JWP: (REG, REG),
    JNZ: (REG, REG),
    GTH: (REG, REG),
    LTH: (REG, REG),
    OUT: (REG,),
    CHR: (REG,),
}
