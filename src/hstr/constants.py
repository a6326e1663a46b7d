# Screen labels
LABEL_HISTORY = " HISTORY "
LABEL_HELP = "Type to filter history, use UP and DOWN arrows to navigate, ENTER to select"

# Row layout (y offsets from the top of the screen)
Y_OFFSET_PROMPT = 1
Y_OFFSET_HELP = 2
Y_OFFSET_HISTORY = 3
Y_OFFSET_ITEMS = 4
# Rows reserved below the match list
BOTTOM_MARGIN = 2

HIGHLIGHT_MARKER = ">"

# Raw key codes that are not exposed as curses.KEY_* constants
KEY_CTRL_C = 3
KEY_CTRL_G = 7
KEY_CTRL_H = 8
KEY_LF = 10
KEY_CR = 13
KEY_ESC = 27
KEY_DEL = 127

DEFAULT_HISTORY_FILE = ".bash_history"
