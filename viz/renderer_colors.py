# viz/renderer_colors.py
BG = (0x5D, 0x68, 0x8A)
HEAD = (0xF7, 0xA5, 0xA5)
BODY = (0xFF, 0xF2, 0xEF)
FOOD = (0xFF, 0xDB, 0xB6)
TEXT = (255, 255, 255)
HINT = (0xAA, 0xAA, 0xAA)
