# deck_snake/viz/renderer_colors.py
BG = (255, 255, 255)
HEAD = (0x54, 0x6e, 0x7a)
BODY = (0x78, 0x90, 0x9c)
TAIL = (0x90, 0xa4, 0xae)
DECK = (0xa1, 0x88, 0x7f)      # wooden planks on every other segment
OUTLINE = (0, 0, 0)
TEXT = (0x33, 0x33, 0x33)
OVERLAY_BG = (20, 40, 70)
OVERLAY_TEXT = (245, 245, 245)

FOOD = {
    "blue": (0x21, 0x96, 0xF3),
    "green": (0x4C, 0xAF, 0x50),
    "light_red": (0xFF, 0xCD, 0xD2),
    "treasure_chest": (0xD4, 0xA0, 0x17),   # used when the chest image is missing
}
