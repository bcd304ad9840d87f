# Border geometry passed to the renderer (pixels).
DEFAULT_BORDER_WIDTH = 1
DEFAULT_INTERNAL_BORDER_WIDTH = 2

# Auto-hide delay in seconds. Non-positive values keep the tooltip up until hidden.
DEFAULT_TIMEOUT = 5.0

# Fallback font cell used when a frame does not report its metrics.
DEFAULT_CHAR_WIDTH = 8
DEFAULT_CHAR_HEIGHT = 16
DEFAULT_LINE_SPACING = 0

# Tabs expand to the next multiple of this many columns when measuring text.
TAB_WIDTH = 8

# Frame inspector (xwininfo) invocation and report markers.
INSPECTOR_COMMAND = "xwininfo"
INSPECTOR_TIMEOUT = 2.0
ORIGIN_MARKER_X = "Absolute upper-left X:"
ORIGIN_MARKER_Y = "Absolute upper-left Y:"

# Pointer relocation offsets relative to the overlay edges.
POINTER_EDGE_MARGIN = 2
POINTER_INSIDE_THRESHOLD = -2

# Name of the style used when none is requested.
DEFAULT_STYLE_NAME = "tooltip"
DEFAULT_FOREGROUND = "black"
DEFAULT_BACKGROUND = "lightyellow"

