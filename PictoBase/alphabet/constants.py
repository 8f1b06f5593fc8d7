GROUP_BITS = 10
BYTE_BITS = 8
BLOCK_BYTES = 5
GROUPS_PER_BLOCK = 4

VARIATION_SELECTOR = "\ufe0f"

# Inclusive codepoint ranges in ascending order. Symbols take codepoints
# from this pool one after another, padding slots interleaved with the
# regular ones, so encoded strings sort like their input.
# U+1F3FB..U+1F3FF are skin-tone modifiers and fuse with the previous glyph.
SYMBOL_RANGES = (
    (0x2600, 0x26FF),
    (0x2700, 0x27BF),
    (0x1F300, 0x1F3FA),
    (0x1F400, 0x1F5FF),
    (0x1F600, 0x1F64F),
    (0x1F680, 0x1F6C5),
    (0x1F900, 0x1F9FF),
)
