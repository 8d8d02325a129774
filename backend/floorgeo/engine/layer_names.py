"""CAD layer names the generators read from and write to."""

USER_DRAWINGS = "User Drawings"
UNIT_NUMBERS = "Unit Numbers"
WALKWAYS = "Walkways"
UNIT_AREAS = "Unit Areas"
BACKGROUND_CONTOURS = "Background Contours"

# Layers populated by the editor itself rather than the imported drawing.
APP_GENERATED = frozenset({
    USER_DRAWINGS,
    UNIT_NUMBERS,
    WALKWAYS,
    UNIT_AREAS,
    BACKGROUND_CONTOURS,
})
