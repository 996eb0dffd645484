SERIAL_PHASES = (0, 1, 2, 3, 4)       # one pass through the chain
FEEDBACK_PHASES = (5, 6, 7, 8, 9)     # chain output is looped back

INITIAL_SIGNAL = 0

EXIT_OK = 0
EXIT_LOAD_ERROR = 1
EXIT_KEYBOARD = 3
EXIT_AWAITING_INPUT = 4
EXIT_EXEC_ERROR = 100
