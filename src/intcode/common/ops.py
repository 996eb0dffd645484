# Operations
ADD = 1    # P1 + P2 -> P3
MUL = 2    # P1 * P2 -> P3
INP = 3    # input -> P1
OUT = 4    # P1 -> output
JNZ = 5    # if P1 .ne 0 jmp P2
JZE = 6    # if P1 .eq 0 jmp P2
LTH = 7    # P1 .lt P2 -> P3
EQL = 8    # P1 .eq P2 -> P3
HLT = 99

# Number of parameters following the opcode cell
ARITY = {
    ADD: 3,
    MUL: 3,
    INP: 1,
    OUT: 1,
    JNZ: 2,
    JZE: 2,
    LTH: 3,
    EQL: 3,
    HLT: 0,
}

MNEMONICS = {
    ADD: 'add',
    MUL: 'mul',
    INP: 'inp',
    OUT: 'out',
    JNZ: 'jnz',
    JZE: 'jze',
    LTH: 'lth',
    EQL: 'eql',
    HLT: 'hlt',
}

# Parameter modes
REFERENCE = 0
IMMEDIATE = 1

MODE_BASE = 100    # modes start at the hundreds digit
