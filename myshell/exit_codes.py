"""Exit status values shared by the dispatcher and builtins"""

EXIT_CODE_SUCCESS = 0
EXIT_CODE_FAILURE = 1
# Misuse of a builtin or a line that could not be tokenized
EXIT_CODE_USAGE = 2
EXIT_CODE_COMMAND_NOT_FOUND = 127
# A child killed by signal N reports 128 + N
EXIT_CODE_SIGNAL_BASE = 128
